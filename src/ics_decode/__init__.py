"""Decoder for Apple iCalendar (VCALENDAR/VEVENT) data."""

from .decoder import decode, decode_file, decode_string
from .models import Calendar, Event
from .utils.exceptions import (
    ConfigurationError,
    IcsDecodeError,
    LineFormatError,
    StructuralError,
    ValueFormatError,
)

__version__ = "0.1.0"

__all__ = [
    "Calendar",
    "ConfigurationError",
    "Event",
    "IcsDecodeError",
    "LineFormatError",
    "StructuralError",
    "ValueFormatError",
    "decode",
    "decode_file",
    "decode_string",
]
