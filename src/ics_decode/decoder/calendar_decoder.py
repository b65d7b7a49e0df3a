"""VCALENDAR block decoder and event ordering."""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, Optional

from ..models.calendar import Calendar
from ..models.event import Event
from ..utils.exceptions import StructuralError
from .event_decoder import decode_event
from .line_reader import LineReader, LogicalLine

logger = logging.getLogger(__name__)


class CalendarState(str, Enum):
    """Calendar-level decoder states."""

    START = "start"
    IN_CALENDAR = "in_calendar"
    DONE = "done"


def _start_key(event: Event) -> tuple[bool, Optional[datetime]]:
    # (False, None) sorts before any (True, start)
    return (event.start is not None, event.start)


def sort_events(events: Iterable[Event]) -> list[Event]:
    """
    Order events by start time.

    Events without a start come first, the rest chronologically.

    Args:
        events: Events to order

    Returns:
        New sorted list
    """
    return sorted(events, key=_start_key)


class CalendarDecoder:
    """Drive decoding of a top-level VCALENDAR block."""

    def __init__(self, reader: LineReader):
        """
        Initialize calendar decoder.

        Args:
            reader: Source of logical lines
        """
        self.reader = reader
        self.state = CalendarState.START
        self._events: list[Event] = []
        self._transitions: dict[CalendarState, Callable[[LogicalLine], CalendarState]] = {
            CalendarState.START: self._on_start,
            CalendarState.IN_CALENDAR: self._on_calendar_line,
        }

    def decode(self) -> Calendar:
        """
        Consume lines until END:VCALENDAR and assemble the Calendar.

        Returns:
            Calendar with its events ordered by start time

        Raises:
            IcsDecodeError: On any structural, line or value error
        """
        while self.state is not CalendarState.DONE:
            line = self.reader.read_line()
            self.state = self._transitions[self.state](line)

        calendar = Calendar(events=tuple(sort_events(self._events)))
        logger.info(f"Decoded {len(calendar.events)} event(s) from {self.reader.line_number} line(s)")
        return calendar

    def _on_start(self, line: LogicalLine) -> CalendarState:
        if line.key == "BEGIN":
            if line.value != "VCALENDAR":
                raise StructuralError(
                    f"missing BEGIN:VCALENDAR, found BEGIN:{line.value}", line.line_number
                )
            logger.debug(f"Entered VCALENDAR at line {line.line_number}")
            return CalendarState.IN_CALENDAR
        if line.key == "END":
            raise StructuralError(
                f"missing BEGIN:VCALENDAR, found END:{line.value}", line.line_number
            )
        return CalendarState.START

    def _on_calendar_line(self, line: LogicalLine) -> CalendarState:
        if line.key == "BEGIN" and line.value == "VEVENT":
            self._events.append(decode_event(self.reader))
        elif line.key == "END" and line.value == "VCALENDAR":
            logger.debug(f"Left VCALENDAR at line {line.line_number}")
            return CalendarState.DONE
        return CalendarState.IN_CALENDAR
