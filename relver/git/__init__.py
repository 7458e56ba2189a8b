"""Read-only git queries.

Usage:
    from relver.git import Repository

    repo = Repository(Path("."))
    match repo.list_tags("v1.2.4-nightly.*"):
        case Ok(tags):
            print(tags)
        case Err(e):
            print(e.message)
"""

from relver.git.repository import GitError, GitErrorKind, Repository

__all__ = [
    "GitError",
    "GitErrorKind",
    "Repository",
]
