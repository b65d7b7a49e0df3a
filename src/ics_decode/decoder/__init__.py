"""iCalendar decoding entry points."""

import io
from pathlib import Path
from typing import IO, AnyStr, Optional, Union

from ..config import Settings
from ..models.calendar import Calendar
from .calendar_decoder import CalendarDecoder, CalendarState, sort_events
from .event_decoder import decode_event
from .line_reader import LineReader, LogicalLine

__all__ = [
    "CalendarDecoder",
    "CalendarState",
    "LineReader",
    "LogicalLine",
    "decode",
    "decode_event",
    "decode_file",
    "decode_string",
    "sort_events",
]


def decode(stream: IO[AnyStr], settings: Optional[Settings] = None) -> Calendar:
    """
    Decode a VCALENDAR from a binary or text stream.

    Args:
        stream: Readable stream positioned at the start of the calendar
        settings: Decoder settings (defaults from the environment)

    Returns:
        Calendar with events ordered by start time

    Raises:
        IcsDecodeError: If the input is malformed or truncated
    """
    settings = settings or Settings()
    reader = LineReader(
        stream,
        max_line_length=settings.max_line_length,
        encoding=settings.encoding,
    )
    return CalendarDecoder(reader).decode()


def decode_string(text: str, settings: Optional[Settings] = None) -> Calendar:
    """Decode a VCALENDAR held in a string."""
    return decode(io.StringIO(text), settings)


def decode_file(path: Union[str, Path], settings: Optional[Settings] = None) -> Calendar:
    """Decode a VCALENDAR file."""
    with open(path, "rb") as f:
        return decode(f, settings)
