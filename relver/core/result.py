"""Result type for explicit error handling.

Operations that can fail for expected reasons (a missing manifest, a tag
that does not parse, a git query outside a repository) return either
``Ok(value)`` or ``Err(error)`` instead of raising. Callers branch with
pattern matching or ``isinstance``:

    match read_manifest_version(path):
        case Ok(version):
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
