"""Git repository abstraction.

Only the tag lookup needed for nightly numbering lives here. Every query
returns a Result so that "no matching tags" (an empty Ok) can never be
confused with "git could not answer" (an Err).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeAlias

from relver.core.result import Err, Ok, Result
from relver.platform.process import ProcessError
from relver.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "GitError",
    "GitErrorKind",
    "Repository",
]

GitErrorKind: TypeAlias = Literal["not_a_repository", "git_missing", "failed"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        kind: Failure category
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    kind: GitErrorKind
    command: str
    message: str
    returncode: int = 1


class Repository:
    """Git repository rooted at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def list_tags(self, pattern: str) -> Result[tuple[str, ...], GitError]:
        """List tags matching a glob pattern.

        Runs `git tag -l <pattern>`.

        Returns:
            Ok(tags) on success, possibly empty
            Err(GitError) when git is missing or the query fails
        """
        command = f"tag -l {pattern}"
        if not self.path.is_dir():
            return Err(
                GitError(
                    kind="not_a_repository",
                    command=command,
                    message=f"no such directory: {self.path}",
                )
            )
        result = self._run(["tag", "-l", pattern])
        match result:
            case Err(e):
                return Err(_classify(command, e))
            case Ok(stdout):
                tags = tuple(ln.strip() for ln in stdout.splitlines() if ln.strip())
                return Ok(tags)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(
            ["git", "-C", str(self.path), *args],
            cwd=self.path,
            timeout=_GIT_TIMEOUT_SECONDS,
        )


def _classify(command: str, error: ProcessError) -> GitError:
    stderr = error.stderr.strip()
    kind: GitErrorKind = "failed"
    if error.did_not_start and "timed out" not in stderr:
        kind = "git_missing"
    elif "not a git repository" in stderr.lower():
        kind = "not_a_repository"
    return GitError(
        kind=kind,
        command=command,
        message=stderr or f"git {command} failed",
        returncode=error.returncode,
    )
