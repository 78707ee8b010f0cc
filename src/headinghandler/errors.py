from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    ROW_OUT_OF_RANGE = "ROW_OUT_OF_RANGE"
    INVALID_EDIT = "INVALID_EDIT"
    INVALID_INPUT = "INVALID_INPUT"


class HeadingHandlerError(Exception):
    """Raised at the package edges for expected failure conditions.

    The line model itself never raises: unusual input parses to zero values
    and ineligible edits are no-ops. This error comes from the host buffer,
    the command registry and the CLI, which serialises it to stderr.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }
