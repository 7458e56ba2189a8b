from __future__ import annotations

from pathlib import Path

import pytest

from relver.core.result import Err, Ok
from relver.git.repository import GitError
from relver.output.console import MockConsole
from relver.release.model import ReleaseInfo, ReleaseSettings
from relver.release.resolver import derive_npm_tag, resolve_release, validate_release_tag
from relver.test.release.fakes import FakeTags, write_manifest


def _settings(
    root: Path,
    *,
    nightly: bool = False,
    manual_version: str | None = None,
) -> ReleaseSettings:
    return ReleaseSettings(
        nightly=nightly,
        manual_version=manual_version,
        manifest_path=root / "package.json",
        repo_root=root,
    )


class TestManualMode:
    def test_stable_version_without_prefix(self, tmp_path: Path) -> None:
        console = MockConsole()

        result = resolve_release(
            _settings(tmp_path, manual_version="1.2.3"), repo=FakeTags(), console=console
        )

        assert result == Ok(ReleaseInfo("v1.2.3", "1.2.3", "latest"))
        assert console.find("Using manual version: 1.2.3")
        assert console.find("missing 'v' prefix")

    def test_prerelease_version(self, tmp_path: Path) -> None:
        console = MockConsole()

        result = resolve_release(
            _settings(tmp_path, manual_version="v1.2.3-alpha.4"), repo=FakeTags(), console=console
        )

        assert result == Ok(ReleaseInfo("v1.2.3-alpha.4", "1.2.3-alpha.4", "alpha"))
        assert not console.has_warning()

    def test_manifest_not_read(self, tmp_path: Path) -> None:
        """Manual mode never touches the manifest or the tags."""
        repo = FakeTags()

        result = resolve_release(
            _settings(tmp_path, manual_version="v2.0.0"), repo=repo, console=MockConsole()
        )

        assert isinstance(result, Ok)
        assert repo.patterns == []

    def test_build_metadata_rejected(self, tmp_path: Path) -> None:
        result = resolve_release(
            _settings(tmp_path, manual_version="v1.2.3+build5"),
            repo=FakeTags(),
            console=MockConsole(),
        )

        assert isinstance(result, Err)
        assert result.error.kind == "build_metadata"

    @pytest.mark.parametrize(
        "version", ["v1.2", "1.2", "v1.2.3-", "v1.2.3-beta_1", "vv1.2.3", "v1.2.3\n"]
    )
    def test_malformed_version_rejected(self, tmp_path: Path, version: str) -> None:
        result = resolve_release(
            _settings(tmp_path, manual_version=version), repo=FakeTags(), console=MockConsole()
        )

        assert isinstance(result, Err)
        assert result.error.kind == "invalid_format"
        assert result.error.message == "Version must be in the format vX.Y.Z or vX.Y.Z-prerelease"


class TestNightlyMode:
    def test_first_nightly(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "0.5.0")
        console = MockConsole()

        result = resolve_release(
            _settings(tmp_path, nightly=True), repo=FakeTags(), console=console
        )

        assert result == Ok(ReleaseInfo("v0.5.1-nightly.0", "0.5.1-nightly.0", "nightly"))
        assert console.find("Calculating next nightly version...")

    def test_continues_numbering(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "1.2.3")
        repo = FakeTags(tags=("v1.2.4-nightly.0", "v1.2.4-nightly.2", "v1.2.3-nightly.9"))

        result = resolve_release(
            _settings(tmp_path, nightly=True), repo=repo, console=MockConsole()
        )

        assert result == Ok(ReleaseInfo("v1.2.4-nightly.3", "1.2.4-nightly.3", "nightly"))

    def test_nightly_wins_over_manual_version(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "1.0.0")

        result = resolve_release(
            _settings(tmp_path, nightly=True, manual_version="v9.9.9"),
            repo=FakeTags(),
            console=MockConsole(),
        )

        assert isinstance(result, Ok)
        assert result.value.release_tag == "v1.0.1-nightly.0"

    def test_tag_query_failure_is_not_fatal(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "1.0.0")
        repo = FakeTags(error=GitError(kind="git_missing", command="tag -l", message="no git"))

        result = resolve_release(
            _settings(tmp_path, nightly=True), repo=repo, console=MockConsole()
        )

        assert isinstance(result, Ok)
        assert result.value.release_tag == "v1.0.1-nightly.0"

    def test_missing_manifest_is_fatal(self, tmp_path: Path) -> None:
        result = resolve_release(
            _settings(tmp_path, nightly=True), repo=FakeTags(), console=MockConsole()
        )

        assert isinstance(result, Err)
        assert result.error.kind == "manifest_unreadable"

    def test_prerelease_manifest_version(self, tmp_path: Path) -> None:
        """The manifest pre-release suffix is dropped by the patch bump."""
        write_manifest(tmp_path, "1.0.0-rc.1")

        result = resolve_release(
            _settings(tmp_path, nightly=True), repo=FakeTags(), console=MockConsole()
        )

        assert isinstance(result, Ok)
        assert result.value.release_version == "1.0.1-nightly.0"

    def test_idempotent(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, "3.1.4")
        repo = FakeTags(tags=("v3.1.5-nightly.1",))
        settings = _settings(tmp_path, nightly=True)

        first = resolve_release(settings, repo=repo, console=MockConsole())
        second = resolve_release(settings, repo=repo, console=MockConsole())

        assert first == second == Ok(ReleaseInfo("v3.1.5-nightly.2", "3.1.5-nightly.2", "nightly"))


def test_neither_mode_is_a_configuration_error(tmp_path: Path) -> None:
    repo = FakeTags()

    result = resolve_release(_settings(tmp_path), repo=repo, console=MockConsole())

    assert isinstance(result, Err)
    assert result.error.kind == "missing_version"
    assert repo.patterns == []


def test_empty_manual_version_is_a_configuration_error(tmp_path: Path) -> None:
    result = resolve_release(
        _settings(tmp_path, manual_version=""), repo=FakeTags(), console=MockConsole()
    )

    assert isinstance(result, Err)
    assert result.error.kind == "missing_version"


def test_build_metadata_checked_before_grammar() -> None:
    result = validate_release_tag("1.2+x", console=MockConsole())

    assert isinstance(result, Err)
    assert result.error.kind == "build_metadata"


@pytest.mark.parametrize(
    ("version", "npm_tag"),
    [
        ("1.2.3", "latest"),
        ("1.2.3-alpha.4", "alpha"),
        ("1.2.3-nightly.7", "nightly"),
        ("1.2.3-beta", "beta"),
        ("1.2.3-rc-1.2", "rc-1"),
    ],
)
def test_derive_npm_tag(version: str, npm_tag: str) -> None:
    assert derive_npm_tag(version) == npm_tag


def test_release_info_json() -> None:
    info = ReleaseInfo("v1.2.3-alpha.4", "1.2.3-alpha.4", "alpha")
    assert info.to_json() == (
        '{"releaseTag":"v1.2.3-alpha.4","releaseVersion":"1.2.3-alpha.4","npmTag":"alpha"}'
    )


def test_empty_nightly_tag_is_unresolved(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import relver.release.resolver as resolver

    def fake_nightly_tag_name(**_kwargs: object) -> Ok[str]:
        return Ok("")

    monkeypatch.setattr(resolver, "nightly_tag_name", fake_nightly_tag_name)

    result = resolve_release(
        _settings(tmp_path, nightly=True), repo=FakeTags(), console=MockConsole()
    )

    assert isinstance(result, Err)
    assert result.error.kind == "unresolved_version"
    assert result.error.message == "Version could not be determined."
