"""Nightly build numbering.

Nightly tags look like ``v1.2.4-nightly.3``: the version is the manifest
version with its patch bumped, and the trailing number is one past the
highest nightly already tagged for that exact version.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from relver.core.result import Err, Ok, Result
from relver.git.repository import GitError
from relver.output.console import ConsoleProtocol
from relver.release.errors import ReleaseError
from relver.release.manifest import read_manifest_version
from relver.release.model import NIGHTLY_CHANNEL
from relver.release.semver import increment_patch_version

_NIGHTLY_NUMBER_RE = re.compile(rf"{NIGHTLY_CHANNEL}\.(\d+)$")


class TagSource(Protocol):
    def list_tags(self, pattern: str) -> Result[tuple[str, ...], GitError]: ...


def nightly_tag_pattern(next_version: str) -> str:
    return f"v{next_version}-{NIGHTLY_CHANNEL}.*"


def format_nightly_tag(next_version: str, count: int) -> str:
    return f"v{next_version}-{NIGHTLY_CHANNEL}.{count}"


def nightly_count_from_tags(tags: Iterable[str]) -> int:
    """Return one past the highest nightly number in ``tags``.

    Tags without a trailing number count as 0. No tags gives 0.
    """
    highest = -1
    for tag in tags:
        m = _NIGHTLY_NUMBER_RE.search(tag)
        n = int(m.group(1)) if m else 0
        highest = max(highest, n)
    return highest + 1


def next_nightly_count(
    *,
    next_version: str,
    repo: TagSource,
    console: ConsoleProtocol,
) -> int:
    """Next unused nightly number for ``next_version``.

    A failed tag query restarts numbering at 0.
    """
    match repo.list_tags(nightly_tag_pattern(next_version)):
        case Err(e):
            console.warning(f"cannot list nightly tags ({e.kind}): {e.message}; starting at 0")
            return 0
        case Ok(tags):
            return nightly_count_from_tags(tags)


def nightly_tag_name(
    *,
    manifest_path: Path,
    repo: TagSource,
    console: ConsoleProtocol,
) -> Result[str, ReleaseError]:
    """Name the next nightly tag, e.g. ``v1.2.4-nightly.0``."""
    version = read_manifest_version(manifest_path)
    if isinstance(version, Err):
        return version

    next_version = increment_patch_version(version.value)
    if isinstance(next_version, Err):
        return next_version

    count = next_nightly_count(next_version=next_version.value, repo=repo, console=console)
    return Ok(format_nightly_tag(next_version.value, count))
