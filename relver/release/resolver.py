"""Release version resolution.

Picks the release tag (nightly or manual), normalizes the ``v`` prefix,
rejects build metadata and malformed versions, and derives the npm dist-tag
that the package is published under.
"""

from __future__ import annotations

import re

from relver.core.result import Err, Ok, Result
from relver.output.console import ConsoleProtocol
from relver.release.errors import ReleaseError
from relver.release.model import DEFAULT_CHANNEL, ReleaseInfo, ReleaseSettings
from relver.release.nightly import TagSource, nightly_tag_name

_RELEASE_TAG_RE = re.compile(r"v[0-9]+\.[0-9]+\.[0-9]+(-[a-zA-Z0-9.-]+)?")


def resolve_release(
    settings: ReleaseSettings,
    *,
    repo: TagSource,
    console: ConsoleProtocol,
) -> Result[ReleaseInfo, ReleaseError]:
    if settings.nightly:
        console.info("Calculating next nightly version...")
        tag = nightly_tag_name(manifest_path=settings.manifest_path, repo=repo, console=console)
        if isinstance(tag, Err):
            return tag
        release_tag = tag.value
    elif settings.manual_version:
        console.info(f"Using manual version: {settings.manual_version}")
        release_tag = settings.manual_version
    else:
        return Err(
            ReleaseError(
                kind="missing_version",
                message="No version specified and this is not a nightly release.",
                hint="Set IS_NIGHTLY=true or MANUAL_VERSION=vX.Y.Z",
            )
        )

    if not release_tag:
        return Err(
            ReleaseError(kind="unresolved_version", message="Version could not be determined.")
        )

    return validate_release_tag(release_tag, console=console)


def validate_release_tag(
    tag: str, *, console: ConsoleProtocol
) -> Result[ReleaseInfo, ReleaseError]:
    """Normalize and check a candidate tag, then split it into release fields."""
    if not tag.startswith("v"):
        console.warning("Version is missing 'v' prefix. Prepending it.")
        tag = f"v{tag}"

    if "+" in tag:
        return Err(
            ReleaseError(
                kind="build_metadata",
                message="Versions with build metadata (+) are not supported for releases.",
                hint="Use a pre-release version (e.g., v1.2.3-alpha.4) instead.",
            )
        )

    if _RELEASE_TAG_RE.fullmatch(tag) is None:
        return Err(
            ReleaseError(
                kind="invalid_format",
                message="Version must be in the format vX.Y.Z or vX.Y.Z-prerelease",
                hint=f"got {tag!r}",
            )
        )

    release_version = tag[1:]
    return Ok(
        ReleaseInfo(
            release_tag=tag,
            release_version=release_version,
            npm_tag=derive_npm_tag(release_version),
        )
    )


def derive_npm_tag(release_version: str) -> str:
    """Channel label: ``latest`` for stable versions, else the first pre-release identifier.

    ``1.2.3`` -> ``latest``, ``1.2.3-alpha.4`` -> ``alpha``, ``1.2.3-nightly.7`` -> ``nightly``.
    """
    if "-" not in release_version:
        return DEFAULT_CHANNEL
    prerelease = release_version.split("-", 1)[1]
    return prerelease.split(".", 1)[0]
