"""VEVENT block decoder."""

import logging
from typing import Any, Callable

from ..models.event import Event
from ..utils.date_utils import parse_utc_timestamp
from ..utils.exceptions import StructuralError
from .line_reader import LineReader, LogicalLine

logger = logging.getLogger(__name__)

PropertyHandler = Callable[[dict[str, Any], LogicalLine], None]


def _text_property(field: str) -> PropertyHandler:
    def handle(fields: dict[str, Any], line: LogicalLine) -> None:
        fields[field] = line.value

    return handle


def _timestamp_property(field: str) -> PropertyHandler:
    def handle(fields: dict[str, Any], line: LogicalLine) -> None:
        fields[field] = parse_utc_timestamp(line.value, line.line_number)

    return handle


# Properties not listed here are skipped
PROPERTY_HANDLERS: dict[str, PropertyHandler] = {
    "UID": _text_property("uid"),
    "DTSTART": _timestamp_property("start"),
    "DTEND": _timestamp_property("end"),
    "SUMMARY": _text_property("summary"),
    "LOCATION": _text_property("location"),
    "DESCRIPTION": _text_property("description"),
}


def decode_event(reader: LineReader) -> Event:
    """
    Decode one VEVENT block.

    The reader must be positioned just after the BEGIN:VEVENT line.

    Args:
        reader: Line reader shared with the calendar decoder

    Returns:
        The completed Event

    Raises:
        StructuralError: If the block is closed by another END value or the
            input ends before END:VEVENT
        LineFormatError: If a line inside the block is malformed
        ValueFormatError: If DTSTART or DTEND is not a UTC timestamp
    """
    fields: dict[str, Any] = {}
    while True:
        line = reader.read_line()
        if line.key == "END":
            if line.value != "VEVENT":
                raise StructuralError(
                    f"unexpected END value {line.value!r} inside VEVENT",
                    line.line_number,
                )
            event = Event(**fields)
            logger.debug(f"Decoded event uid={event.uid!r} ending at line {line.line_number}")
            return event

        handler = PROPERTY_HANDLERS.get(line.key)
        if handler is not None:
            handler(fields, line)
