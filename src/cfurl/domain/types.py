"""Argument arity and error classification enums."""

from __future__ import annotations

from enum import StrEnum


class Arity(StrEnum):
    """Whether a command takes a given argument."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    NONE = "none"


class ErrorCode(StrEnum):
    """Failure kinds surfaced by the resolver and launcher."""

    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    MISSING_REQUIRED_ARGUMENT = "MISSING_REQUIRED_ARGUMENT"
    INVALID_FLAG_VALUE = "INVALID_FLAG_VALUE"
    UNEXPECTED_ARGUMENT = "UNEXPECTED_ARGUMENT"
    AMBIGUOUS_ARGUMENTS = "AMBIGUOUS_ARGUMENTS"
    LAUNCHER_FAILURE = "LAUNCHER_FAILURE"


# Process exit status per error code. 1 is reserved for unexpected errors
# and 2 for click usage errors.
EXIT_CODES: dict[str, int] = {
    ErrorCode.UNKNOWN_COMMAND: 3,
    ErrorCode.MISSING_REQUIRED_ARGUMENT: 4,
    ErrorCode.INVALID_FLAG_VALUE: 5,
    ErrorCode.UNEXPECTED_ARGUMENT: 6,
    ErrorCode.AMBIGUOUS_ARGUMENTS: 7,
    ErrorCode.LAUNCHER_FAILURE: 8,
}


def exit_code_for(code: str | None) -> int:
    """Return the exit status for an error code (1 if unrecognised)."""
    if code is None:
        return 1
    return EXIT_CODES.get(code, 1)
