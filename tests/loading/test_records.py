"""
Unit tests for the CSV record source.
"""

from pathlib import Path

import pytest

from timed_quiz.core.errors import (
    ErrorKind,
    RecordFileNotFoundError,
    RecordParseError,
    RecordSourceError,
)
from timed_quiz.loading.records import read_records


class TestReadRecords:
    """Tests for read_records()."""

    def test_read_when_valid_csv_then_returns_all_rows(self, write_csv):
        """Rows written with csv.writer should be read back unchanged."""
        # Arrange
        rows = [["5+5", "10"], ["1+1", "2"], ["8+3", "11"], ["1+2", "3"]]
        path = write_csv(rows)

        # Act
        records = read_records(path)

        # Assert
        assert records == rows

    def test_read_when_path_is_string_then_accepts_it(self, write_csv):
        """A plain string path should work like a Path."""
        path = write_csv([["a", "b"]])

        assert read_records(str(path)) == [["a", "b"]]

    def test_read_when_quoted_fields_then_keeps_commas_and_newlines(self, write_text):
        """Quoted fields may contain delimiters and line breaks."""
        # Arrange
        path = write_text('"what is 1,000 + 1?",1001\n"two\nlines",ok\n')

        # Act
        records = read_records(path)

        # Assert
        assert records == [["what is 1,000 + 1?", "1001"], ["two\nlines", "ok"]]

    def test_read_when_blank_lines_then_skips_them(self, write_text):
        """Blank lines should not produce rows."""
        path = write_text("5+5,10\n\n1+1,2\n\n")

        assert read_records(path) == [["5+5", "10"], ["1+1", "2"]]

    def test_read_when_crlf_line_endings_then_strips_them(self, write_text):
        """Windows line endings should not leak into the last field."""
        path = write_text("5+5,10\r\n1+1,2\r\n")

        assert read_records(path) == [["5+5", "10"], ["1+1", "2"]]

    def test_read_when_empty_file_then_returns_empty_list(self, write_text):
        """An empty file is valid and has no rows."""
        path = write_text("")

        assert read_records(path) == []

    def test_read_when_every_row_has_one_field_then_returns_rows(self, write_text):
        """Consistent field counts are accepted even if not two."""
        path = write_text("alpha\nbeta\n")

        assert read_records(path) == [["alpha"], ["beta"]]

    def test_read_when_file_missing_then_raises_file_not_found(self, tmp_path: Path):
        """A nonexistent path should raise the file-not-found kind."""
        # Act & Assert
        with pytest.raises(RecordFileNotFoundError) as exc_info:
            read_records(tmp_path / "unknown_file.csv")

        assert exc_info.value.kind is ErrorKind.FILE_NOT_FOUND
        assert exc_info.value.path == tmp_path / "unknown_file.csv"
        assert isinstance(exc_info.value, RecordSourceError)

    def test_read_when_path_is_directory_then_raises_file_not_found(self, tmp_path: Path):
        """A directory cannot be opened as a problems file."""
        with pytest.raises(RecordFileNotFoundError):
            read_records(tmp_path)

    def test_read_when_field_count_differs_then_raises_parse_error(self, write_csv):
        """A short row after two-field rows should be a parse error."""
        # Arrange
        path = write_csv([["5+5", "10"], ["1+1", "2"], ["8+3", "11"], ["1+2"]])

        # Act & Assert
        with pytest.raises(RecordParseError) as exc_info:
            read_records(path)

        assert exc_info.value.kind is ErrorKind.PARSE_ERROR
        assert exc_info.value.line == 4
        assert "wrong number of fields" in str(exc_info.value)

    def test_read_when_extra_field_then_raises_parse_error(self, write_text):
        """A longer row should also be rejected."""
        path = write_text("5+5,10\n1+1,2,extra\n")

        with pytest.raises(RecordParseError) as exc_info:
            read_records(path)

        assert exc_info.value.line == 2

    def test_read_when_text_after_closing_quote_then_raises_parse_error(self, write_text):
        """Characters between a closing quote and the delimiter are malformed."""
        path = write_text('"5+5"x,10\n')

        with pytest.raises(RecordParseError):
            read_records(path)

    def test_read_when_bare_quote_in_plain_field_then_raises_parse_error(self, write_text):
        """A quote inside a field that is not quoted is malformed."""
        # Arrange
        path = write_text('1+1,2\n5"+5,10\n')

        # Act & Assert
        with pytest.raises(RecordParseError) as exc_info:
            read_records(path)

        assert exc_info.value.line == 2
        assert "bare quote" in str(exc_info.value)

    def test_read_when_bare_quote_in_last_field_then_raises_parse_error(self, write_text):
        """The check applies to every field, not just the first."""
        path = write_text('5+5,1"0\n')

        with pytest.raises(RecordParseError, match="bare quote"):
            read_records(path)

    def test_read_when_doubled_quotes_inside_quoted_field_then_accepts_them(self, write_text):
        """Escaped quotes in quoted fields, multi-line ones included, are valid."""
        # Arrange
        path = write_text('"say ""hi""",hi\n"",empty\n"a\n""b""",c\n')

        # Act
        records = read_records(path)

        # Assert
        assert records == [['say "hi"', "hi"], ["", "empty"], ['a\n"b"', "c"]]

    def test_read_when_quote_never_closed_then_raises_parse_error(self, write_text):
        """An unterminated quoted field should not be silently accepted."""
        path = write_text('"5+5,10\n1+1,2\n')

        with pytest.raises(RecordParseError):
            read_records(path)

    def test_read_when_not_utf8_then_raises_parse_error(self, tmp_path: Path):
        """Undecodable bytes should surface as a parse error."""
        # Arrange
        path = tmp_path / "latin.csv"
        path.write_bytes(b"caf\xe9,coffee\n")

        # Act & Assert
        with pytest.raises(RecordParseError, match="UTF-8"):
            read_records(path)
