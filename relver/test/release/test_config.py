from __future__ import annotations

from pathlib import Path

from relver.release.config import settings_from_env


def test_defaults(tmp_path: Path) -> None:
    settings = settings_from_env({}, cwd=tmp_path)

    assert settings.nightly is False
    assert settings.manual_version is None
    assert settings.manifest_path == tmp_path / "package.json"
    assert settings.repo_root == tmp_path


def test_nightly_requires_exact_true(tmp_path: Path) -> None:
    assert settings_from_env({"IS_NIGHTLY": "true"}, cwd=tmp_path).nightly is True
    assert settings_from_env({"IS_NIGHTLY": "True"}, cwd=tmp_path).nightly is False
    assert settings_from_env({"IS_NIGHTLY": "1"}, cwd=tmp_path).nightly is False


def test_manual_version(tmp_path: Path) -> None:
    settings = settings_from_env({"MANUAL_VERSION": "v1.2.3"}, cwd=tmp_path)
    assert settings.manual_version == "v1.2.3"


def test_empty_manual_version_is_unset(tmp_path: Path) -> None:
    assert settings_from_env({"MANUAL_VERSION": ""}, cwd=tmp_path).manual_version is None


def test_manifest_override(tmp_path: Path) -> None:
    relative = settings_from_env({"RELVER_MANIFEST": "packages/cli/package.json"}, cwd=tmp_path)
    assert relative.manifest_path == tmp_path / "packages" / "cli" / "package.json"

    absolute = tmp_path / "elsewhere.json"
    settings = settings_from_env({"RELVER_MANIFEST": str(absolute)}, cwd=tmp_path)
    assert settings.manifest_path == absolute
