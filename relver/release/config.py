from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from relver.release.model import MANIFEST_FILE_NAME, ReleaseSettings

ENV_NIGHTLY = "IS_NIGHTLY"
ENV_MANUAL_VERSION = "MANUAL_VERSION"
ENV_MANIFEST = "RELVER_MANIFEST"


def settings_from_env(environ: Mapping[str, str], *, cwd: Path) -> ReleaseSettings:
    """Build settings from process environment variables.

    ``IS_NIGHTLY`` enables nightly mode only when set to exactly ``true``.
    An empty ``MANUAL_VERSION`` counts as unset.
    """
    manifest = environ.get(ENV_MANIFEST) or MANIFEST_FILE_NAME
    manifest_path = Path(manifest)
    if not manifest_path.is_absolute():
        manifest_path = cwd / manifest_path

    return ReleaseSettings(
        nightly=environ.get(ENV_NIGHTLY) == "true",
        manual_version=environ.get(ENV_MANUAL_VERSION) or None,
        manifest_path=manifest_path,
        repo_root=cwd,
    )
