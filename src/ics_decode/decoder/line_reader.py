"""Logical line reader for iCalendar streams."""

from typing import IO, AnyStr, NamedTuple, Optional

from ..utils.exceptions import LineFormatError, StructuralError

DEFAULT_MAX_LINE_LENGTH = 4096
DEFAULT_ENCODING = "utf-8"


class LogicalLine(NamedTuple):
    """One unfolded KEY:VALUE record."""

    key: str
    value: str
    line_number: int


class LineReader:
    """Read unfolded ``KEY:VALUE`` lines from a byte or text stream.

    A physical line starting with a single space continues the previous one;
    the space is dropped and the remainder appended. The reader keeps one
    physical line of lookahead to detect continuations.
    """

    def __init__(
        self,
        stream: IO[AnyStr],
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
        encoding: str = DEFAULT_ENCODING,
    ):
        """
        Initialize line reader.

        Args:
            stream: Binary or text stream positioned at the start of a line
            max_line_length: Longest accepted physical line, terminator excluded
            encoding: Encoding used to decode binary streams
        """
        self.stream = stream
        self.max_line_length = max_line_length
        self.encoding = encoding
        self.line_number = 0

        # Raw lookahead line, validated only once consumed; None at end of input
        self._lookahead: Optional[AnyStr] = None
        self._has_lookahead = False

    def read_line(self) -> LogicalLine:
        """
        Read the next logical line.

        Returns:
            The unfolded line split on its first colon

        Raises:
            StructuralError: If the input ends where a line was expected
            LineFormatError: If a line is blank, too long, undecodable or
                has no colon
        """
        first_line = self.line_number + 1
        parts = []
        while True:
            physical = self._next_physical()
            if physical is None:
                raise StructuralError(
                    f"unexpected end of input after line {self.line_number}"
                )
            if not physical:
                raise LineFormatError("unexpected blank line", self.line_number)
            if physical.startswith(" "):
                physical = physical[1:]
            parts.append(physical)

            if not self._continues():
                break

        text = "".join(parts)
        key, sep, value = text.partition(":")
        if not sep:
            raise LineFormatError(
                f"malformed line {text!r}, couldn't find key:value", first_line
            )
        return LogicalLine(key, value, first_line)

    def _next_physical(self) -> Optional[str]:
        if self._has_lookahead:
            raw, self._lookahead = self._lookahead, None
            self._has_lookahead = False
        else:
            raw = self._fetch()
        if raw is None:
            return None
        self.line_number += 1
        return self._validate(raw)

    def _continues(self) -> bool:
        """Whether the next physical line is a continuation, without consuming it."""
        # Only the first character is inspected, so a bad line after
        # END:VCALENDAR is never reported unless it is folded in.
        if not self._has_lookahead:
            self._lookahead = self._fetch()
            self._has_lookahead = True
        raw = self._lookahead
        return raw is not None and raw[:1] in (" ", b" ")

    def _fetch(self) -> Optional[AnyStr]:
        """Read one raw physical line without its terminator, None at end of input."""
        # Room for the content plus a CRLF terminator
        raw = self.stream.readline(self.max_line_length + 2)
        if not raw:
            return None

        newline, carriage_return = ("\n", "\r") if isinstance(raw, str) else (b"\n", b"\r")
        if raw.endswith(newline):
            raw = raw[:-1]
            if raw.endswith(carriage_return):
                raw = raw[:-1]
        return raw

    def _validate(self, raw: AnyStr) -> str:
        if len(raw) > self.max_line_length:
            raise LineFormatError("unexpected long line", self.line_number)

        if isinstance(raw, bytes):
            try:
                return raw.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise LineFormatError(
                    f"cannot decode line as {self.encoding}: {e.reason}",
                    self.line_number,
                ) from e
        return raw
