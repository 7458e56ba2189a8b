"""Process exit codes.

Each failure category of a release resolution maps to one exit status so
that calling workflows can tell a misconfigured job from a bad version string
or a broken checkout.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the relver CLI.

    - 0: Success
    - 1: Configuration error (no version requested, nothing resolvable)
    - 2: Format error (build metadata, malformed version)
    - 3: I/O error (manifest missing or unparsable)
    """

    OK = 0
    CONFIG_ERROR = 1
    FORMAT_ERROR = 2
    IO_ERROR = 3

