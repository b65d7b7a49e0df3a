"""Date and time utilities for ics-decode."""

import re
from datetime import datetime
from typing import Optional

import pytz

from .exceptions import ValueFormatError

# YYYYMMDDThhmmssZ
UTC_TIMESTAMP_RE = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})T([0-9]{2})([0-9]{2})([0-9]{2})Z")


def parse_utc_timestamp(value: str, line_number: Optional[int] = None) -> datetime:
    """
    Parse an iCalendar UTC date-time value.

    Only the ``YYYYMMDDThhmmssZ`` form is accepted; floating times and
    offsets are rejected.

    Args:
        value: Raw property value
        line_number: Line the value was read from, for error reporting

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueFormatError: If the value does not match the layout or is not a
            valid calendar date
    """
    match = UTC_TIMESTAMP_RE.fullmatch(value)
    if match is None:
        raise ValueFormatError(f"bad timestamp {value!r}", line_number)
    try:
        naive = datetime(*(int(part) for part in match.groups()))
    except ValueError as e:
        raise ValueFormatError(f"bad timestamp {value!r}: {e}", line_number) from e
    return pytz.utc.localize(naive)


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensure datetime is in UTC.

    Args:
        dt: Datetime to convert

    Returns:
        UTC datetime
    """
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)
