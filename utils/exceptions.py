"""Error types raised by the report pipeline.

Every stage raises a TopUpError subclass; only the entry point in main.py turns
one into a diagnostic line and an exit code.
"""
from typing import Any, Optional


class TopUpError(Exception):
    """Base error for a run that must stop without producing a report.

    Args:
        message: Description of what went wrong
        record: The offending user or company record, if there is one
    """

    def __init__(self, message: str, record: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.record = record

    def __str__(self) -> str:
        if self.record is None:
            return self.message
        return f"{self.message} - {self.record}"


class InputNotFoundError(TopUpError):
    """An input file does not exist."""


class InputReadError(TopUpError):
    """An input file exists but could not be read."""


class MalformedInputError(TopUpError):
    """An input file is not valid JSON or not an array of objects."""


class MissingFieldError(TopUpError):
    """A record lacks a field required where it is used."""


class InvalidValueError(TopUpError):
    """A field holds a value outside its allowed range or type."""


class UnknownCompanyError(TopUpError):
    """An active user references a company id that was not loaded."""


class OutputWriteError(TopUpError):
    """The report could not be written."""
