"""Shared fixtures for ics-decode tests."""

import io

import pytest

from ics_decode.decoder.line_reader import LineReader


def build_ics(*lines: str, newline: str = "\r\n") -> str:
    """Join physical lines into ICS text with a trailing terminator."""
    return newline.join(lines) + newline


@pytest.fixture
def make_reader():
    """Factory building a LineReader over in-memory bytes."""

    def _make(*lines: str, newline: str = "\r\n", **kwargs) -> LineReader:
        data = build_ics(*lines, newline=newline).encode("utf-8")
        return LineReader(io.BytesIO(data), **kwargs)

    return _make


@pytest.fixture
def two_event_ics() -> str:
    """Calendar with two dated events listed out of order."""
    return build_ics(
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Apple Inc.//iCal 4.0.4//EN",
        "BEGIN:VEVENT",
        "UID:event-2@example.com",
        "DTSTART:20110601T100000Z",
        "DTEND:20110601T110000Z",
        "SUMMARY:Team sync",
        "LOCATION:Room 4, Level 2",
        "DESCRIPTION:Agenda: roadmap",
        "END:VEVENT",
        "BEGIN:VEVENT",
        "UID:event-1@example.com",
        "DTSTART:20110501T100000Z",
        "DTEND:20110501T113000Z",
        "SUMMARY:Kickoff",
        "LOCATION:Main hall",
        "DESCRIPTION:Project kickoff",
        "END:VEVENT",
        "END:VCALENDAR",
    )
