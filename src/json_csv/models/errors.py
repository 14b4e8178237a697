"""Errors raised by the converter.

Every error carries the process exit status the CLI should use for it.
"""

from __future__ import annotations


class JsonCsvError(Exception):
    """Base class for fatal conversion errors."""

    exit_code: int = 1


class InvalidJsonLine(JsonCsvError):
    """Malformed JSON on one input line."""

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Invalid JSON on line {line_number}: {reason}")


class UnsupportedConversionDirection(JsonCsvError):
    """Requested conversion direction is not implemented."""

    exit_code = 99

    def __init__(self, direction: str):
        self.direction = direction
        super().__init__(
            f"{direction.upper()}-to-JSON conversion is not yet implemented."
        )


class IOFailure(JsonCsvError):
    """A file could not be opened, read or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InvalidConfiguration(JsonCsvError):
    """Configuration rejected before any processing starts."""

    pass


__all__ = [
    "IOFailure",
    "InvalidConfiguration",
    "InvalidJsonLine",
    "JsonCsvError",
    "UnsupportedConversionDirection",
]
