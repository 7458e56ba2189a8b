from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

MANIFEST_FILE_NAME = "package.json"
NIGHTLY_CHANNEL = "nightly"
DEFAULT_CHANNEL = "latest"


@dataclass(frozen=True, slots=True)
class ReleaseSettings:
    """Inputs of one release resolution.

    Attributes:
        nightly: Compute the next nightly pre-release instead of a manual version
        manual_version: Operator-supplied version, with or without the ``v`` prefix
        manifest_path: JSON manifest holding the current ``version``
        repo_root: Git checkout whose tags are scanned for nightly numbering
    """

    nightly: bool
    manual_version: str | None
    manifest_path: Path
    repo_root: Path


@dataclass(frozen=True, slots=True)
class ReleaseInfo:
    release_tag: str
    release_version: str
    npm_tag: str

    def to_dict(self) -> dict[str, str]:
        return {
            "releaseTag": self.release_tag,
            "releaseVersion": self.release_version,
            "npmTag": self.npm_tag,
        }

    def to_json(self) -> str:
        """Compact single-line JSON, as consumed by release workflows."""
        return json.dumps(self.to_dict(), separators=(",", ":"))
