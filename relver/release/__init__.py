"""Release version resolution.

- manifest: read the package manifest version
- semver: parse and bump the numeric version triple
- nightly: count existing nightly tags and name the next one
- resolver: select nightly/manual mode, validate, derive the npm dist-tag
- config: settings from the process environment
"""

from __future__ import annotations

from relver.release.errors import ReleaseError
from relver.release.model import ReleaseInfo, ReleaseSettings
from relver.release.nightly import nightly_tag_name, next_nightly_count
from relver.release.resolver import resolve_release

__all__ = [
    "ReleaseError",
    "ReleaseInfo",
    "ReleaseSettings",
    "next_nightly_count",
    "nightly_tag_name",
    "resolve_release",
]
