"""Error presentation utilities.

Centralized error formatting and exit code mapping for the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relver.core.errors import ErrorCode
from relver.output.console import Style
from relver.release.errors import ReleaseError

if TYPE_CHECKING:
    from relver.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    match error.kind:
        case "missing_version" | "unresolved_version":
            return int(ErrorCode.CONFIG_ERROR)
        case "build_metadata" | "invalid_format" | "invalid_manifest_version":
            return int(ErrorCode.FORMAT_ERROR)
        case "manifest_unreadable" | "manifest_invalid":
            return int(ErrorCode.IO_ERROR)
