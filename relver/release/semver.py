from __future__ import annotations

import re
from dataclasses import dataclass

from relver.core.result import Err, Ok, Result
from relver.release.errors import ReleaseError

_BASE_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)(?:[-+].*)?", re.DOTALL)


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def bump_patch(self) -> SemVer:
        return SemVer(self.major, self.minor, self.patch + 1)

    @classmethod
    def parse_base(cls, version: str) -> SemVer | None:
        """Parse ``X.Y.Z``, ``X.Y.Z-pre`` or ``X.Y.Z+build``, discarding any suffix.

        Exactly three dot-separated numeric fields must come before the suffix;
        ``1.2`` and ``1.2.3.4`` are rejected. Returns None if the triple cannot be read.
        """
        m = _BASE_RE.fullmatch(version.strip())
        if m is None:
            return None
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def increment_patch_version(version: str) -> Result[str, ReleaseError]:
    """Return the next patch version without any pre-release or build suffix.

    ``1.2.3-beta`` -> ``1.2.4``, ``1.2.3+build.5`` -> ``1.2.4``, ``0.0.0`` -> ``0.0.1``.
    """
    base = SemVer.parse_base(version)
    if base is None:
        return Err(
            ReleaseError(
                kind="invalid_manifest_version",
                message=f"cannot increment version: {version!r}",
                hint="Expected MAJOR.MINOR.PATCH[-prerelease][+build]",
            )
        )
    return Ok(str(base.bump_patch()))
