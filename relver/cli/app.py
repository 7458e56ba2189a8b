from __future__ import annotations

import os
from pathlib import Path
from typing import NoReturn

import typer

from relver import __version__
from relver.core.errors import ErrorCode
from relver.core.result import Err, Ok
from relver.git.repository import Repository
from relver.output.console import ConsoleProtocol, RichConsole
from relver.output.errors import print_release_error, release_error_exit_code
from relver.release.config import settings_from_env
from relver.release.errors import ReleaseError
from relver.release.model import ReleaseSettings
from relver.release.nightly import nightly_tag_name
from relver.release.resolver import resolve_release


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Compute the release tag, version and npm dist-tag for a package.",
)


def _fail(error: ReleaseError, console: ConsoleProtocol) -> NoReturn:
    print_release_error(error, console)
    raise typer.Exit(code=release_error_exit_code(error))


def _settings(
    *,
    nightly: bool | None,
    manual_version: str | None,
    manifest: Path | None,
    repo: Path | None,
) -> ReleaseSettings:
    cwd = Path.cwd()
    base = settings_from_env(os.environ, cwd=cwd)
    return ReleaseSettings(
        nightly=base.nightly if nightly is None else nightly,
        manual_version=(
            base.manual_version if manual_version is None else (manual_version or None)
        ),
        manifest_path=base.manifest_path if manifest is None else manifest,
        repo_root=base.repo_root if repo is None else repo,
    )


NIGHTLY_OPTION = typer.Option(
    None, "--nightly/--no-nightly", help="Override IS_NIGHTLY.", show_default=False
)
MANUAL_VERSION_OPTION = typer.Option(
    None, "--manual-version", help="Override MANUAL_VERSION (e.g. v1.2.3-alpha.4)."
)
MANIFEST_OPTION = typer.Option(
    None, "--manifest", help="Manifest path (default: ./package.json)."
)
REPO_OPTION = typer.Option(
    None, "--repo", help="Git checkout to scan for nightly tags (default: cwd)."
)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))
    if ctx.invoked_subcommand is None:
        resolve(nightly=None, manual_version=None, manifest=None, repo=None)


@app.command()
def resolve(
    nightly: bool | None = NIGHTLY_OPTION,
    manual_version: str | None = MANUAL_VERSION_OPTION,
    manifest: Path | None = MANIFEST_OPTION,
    repo: Path | None = REPO_OPTION,
) -> None:
    """Print {"releaseTag", "releaseVersion", "npmTag"} as one JSON line."""
    console = RichConsole()
    settings = _settings(
        nightly=nightly,
        manual_version=manual_version,
        manifest=manifest,
        repo=repo,
    )
    match resolve_release(settings, repo=Repository(settings.repo_root), console=console):
        case Err(e):
            _fail(e, console)
        case Ok(info):
            typer.echo(info.to_json())


@app.command("nightly-tag")
def nightly_tag(
    manifest: Path | None = MANIFEST_OPTION,
    repo: Path | None = REPO_OPTION,
) -> None:
    """Print the next nightly tag name, e.g. v1.2.4-nightly.0."""
    console = RichConsole()
    settings = _settings(nightly=True, manual_version=None, manifest=manifest, repo=repo)
    match nightly_tag_name(
        manifest_path=settings.manifest_path,
        repo=Repository(settings.repo_root),
        console=console,
    ):
        case Err(e):
            _fail(e, console)
        case Ok(tag):
            typer.echo(tag)


def main() -> None:
    app()
