"""Core types shared across relver."""

from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    "ErrorCode",
    "Err",
    "Ok",
    "Result",
]
