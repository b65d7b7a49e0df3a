"""Custom exceptions for ics-decode."""

from typing import Optional


class IcsDecodeError(Exception):
    """Base exception for iCalendar decode errors."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class StructuralError(IcsDecodeError):
    """Raised when a BEGIN/END envelope is missing, mismatched or truncated."""


class LineFormatError(IcsDecodeError):
    """Raised when a physical or logical line is malformed."""


class ValueFormatError(IcsDecodeError):
    """Raised when a property value cannot be parsed."""


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""
