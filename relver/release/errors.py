"""Error types for release resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

ReleaseErrorKind: TypeAlias = Literal[
    "missing_version",
    "unresolved_version",
    "build_metadata",
    "invalid_format",
    "invalid_manifest_version",
    "manifest_unreadable",
    "manifest_invalid",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Release error payload.

    Rendered by the CLI; library callers match on ``kind``.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
