"""Unit tests for the logical line reader."""

import io

import pytest

from ics_decode.decoder.line_reader import LineReader
from ics_decode.utils.exceptions import LineFormatError, StructuralError

pytestmark = pytest.mark.unit


class TestLineReader:
    """Tests for LineReader.read_line."""

    def test_reads_key_value(self, make_reader):
        """Test a plain line splits into key and value."""
        reader = make_reader("SUMMARY:Hello")

        line = reader.read_line()

        assert line.key == "SUMMARY"
        assert line.value == "Hello"
        assert line.line_number == 1

    def test_splits_on_first_colon_only(self, make_reader):
        """Test colons inside the value are preserved."""
        reader = make_reader("DESCRIPTION:Call at 10:30: bring notes")

        line = reader.read_line()

        assert line.key == "DESCRIPTION"
        assert line.value == "Call at 10:30: bring notes"

    def test_empty_value(self, make_reader):
        """Test a line ending in a colon has an empty value."""
        line = make_reader("LOCATION:").read_line()

        assert line.key == "LOCATION"
        assert line.value == ""

    def test_unfolds_continuation_line(self, make_reader):
        """Test a leading-space continuation is joined without the space."""
        reader = make_reader("SUMMARY:Hello", "  World", "UID:1")

        line = reader.read_line()

        assert line.value == "Hello World"
        assert reader.read_line().key == "UID"

    def test_folded_matches_unfolded(self, make_reader):
        """Test folded and unfolded forms decode identically."""
        folded = make_reader("DESCRIPTION:Long de", " scription", "  text").read_line()
        unfolded = make_reader("DESCRIPTION:Long description text").read_line()

        assert folded.key == unfolded.key
        assert folded.value == unfolded.value

    def test_fold_inside_key(self, make_reader):
        """Test a fold before the colon is joined into the key."""
        line = make_reader("SUMM", " ARY:x").read_line()

        assert line.key == "SUMMARY"
        assert line.value == "x"

    def test_line_numbers_count_physical_lines(self, make_reader):
        """Test line numbers refer to the first physical line of each logical line."""
        reader = make_reader("A:1", " 2", " 3", "B:4")

        assert reader.read_line().line_number == 1
        assert reader.read_line().line_number == 4
        assert reader.line_number == 4

    def test_lf_line_endings(self, make_reader):
        """Test bare LF terminators are accepted."""
        reader = make_reader("A:1", " x", "B:2", newline="\n")

        assert reader.read_line().value == "1x"
        assert reader.read_line().value == "2"

    def test_text_stream(self):
        """Test the reader accepts text streams."""
        reader = LineReader(io.StringIO("SUMMARY:Café\r\n"))

        assert reader.read_line().value == "Café"

    def test_last_line_without_terminator(self):
        """Test a final line without a newline is still read."""
        reader = LineReader(io.BytesIO(b"END:VCALENDAR"))

        line = reader.read_line()

        assert (line.key, line.value) == ("END", "VCALENDAR")

    def test_end_of_input_is_structural_error(self, make_reader):
        """Test exhausted input raises instead of returning quietly."""
        reader = make_reader("A:1")
        reader.read_line()

        with pytest.raises(StructuralError, match="unexpected end of input"):
            reader.read_line()

    def test_empty_stream(self):
        """Test an empty stream raises StructuralError."""
        with pytest.raises(StructuralError):
            LineReader(io.BytesIO(b"")).read_line()

    def test_blank_line(self, make_reader):
        """Test a blank physical line raises LineFormatError."""
        reader = make_reader("A:1", "", "B:2")
        reader.read_line()

        with pytest.raises(LineFormatError, match="blank line") as exc_info:
            reader.read_line()
        assert exc_info.value.line_number == 2

    def test_missing_colon(self, make_reader):
        """Test a line without a colon raises LineFormatError."""
        with pytest.raises(LineFormatError, match="GARBAGE"):
            make_reader("GARBAGE").read_line()

    def test_long_line(self, make_reader):
        """Test a physical line over the limit raises LineFormatError."""
        reader = make_reader("SUMMARY:" + "x" * 20, max_line_length=16)

        with pytest.raises(LineFormatError, match="long line"):
            reader.read_line()

    def test_line_at_limit_is_accepted(self, make_reader):
        """Test a line exactly at the limit is accepted with a CRLF terminator."""
        text = "SUMMARY:" + "x" * 8
        reader = make_reader(text, max_line_length=len(text))

        assert reader.read_line().value == "x" * 8

    def test_long_line_after_last_line_is_deferred(self):
        """Test an oversized line is only reported once it is consumed."""
        data = b"END:VCALENDAR\r\n" + b"x" * 64 + b"\r\n"
        reader = LineReader(io.BytesIO(data), max_line_length=32)

        assert reader.read_line().value == "VCALENDAR"
        with pytest.raises(LineFormatError):
            reader.read_line()

    def test_undecodable_bytes(self):
        """Test invalid UTF-8 raises LineFormatError."""
        reader = LineReader(io.BytesIO(b"SUMMARY:\xff\xfe\r\n"))

        with pytest.raises(LineFormatError, match="decode"):
            reader.read_line()

    def test_custom_encoding(self):
        """Test binary input is decoded with the configured encoding."""
        reader = LineReader(io.BytesIO("SUMMARY:Café\n".encode("latin-1")), encoding="latin-1")

        assert reader.read_line().value == "Café"

    def test_bad_continuation_after_last_line(self):
        """Test an oversized continuation line is folded in and reported."""
        data = b"END:VCALENDAR\r\n " + b"x" * 64 + b"\r\n"
        reader = LineReader(io.BytesIO(data), max_line_length=32)

        with pytest.raises(LineFormatError, match="long line") as exc_info:
            reader.read_line()
        assert exc_info.value.line_number == 2

    def test_undecodable_continuation_after_last_line(self):
        """Test an undecodable continuation line is folded in and reported."""
        reader = LineReader(io.BytesIO(b"END:VCALENDAR\r\n \xff\xfe\r\n"))

        with pytest.raises(LineFormatError, match="decode"):
            reader.read_line()

    def test_undecodable_line_after_last_line_is_deferred(self):
        """Test an undecodable non-continuation line is left unread."""
        reader = LineReader(io.BytesIO(b"END:VCALENDAR\r\n\xff\xfe\r\n"))

        assert reader.read_line().value == "VCALENDAR"
