"""
Module: loading.records

Purpose:
    Read a comma-separated problems file into raw rows of text fields.
    The whole file is materialized; inputs are expected to be small.

Key Functions:
    - read_records(): Open and parse a CSV file

Dependencies:
    - csv (std): Strict-mode reader for quoting errors
    - timed_quiz.core.errors: RecordFileNotFoundError, RecordParseError

Used By:
    - loading.problems.load_problems
    - cli: First pipeline stage
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from timed_quiz.core.errors import RecordFileNotFoundError, RecordParseError

logger = logging.getLogger(__name__)

RawRecord = List[str]

QUOTE = '"'
DELIMITER = ","


class _LineRecorder:
    """Iterator over a text handle that remembers the raw lines it served."""

    def __init__(self, handle: Iterator[str]) -> None:
        self._handle = handle
        self._lines: List[str] = []

    def __iter__(self) -> "_LineRecorder":
        return self

    def __next__(self) -> str:
        line = next(self._handle)
        self._lines.append(line)
        return line

    def take(self) -> str:
        """Return and forget the raw text served since the last call."""
        text = "".join(self._lines)
        self._lines.clear()
        return text


def _has_bare_quote(raw: str) -> bool:
    """
    True if a field that does not start with a quote contains one.

    The csv module accepts 'a"b' as a plain field; such quotes are
    rejected here. Quoted fields are skipped, honouring doubled quotes.
    """
    text = raw.rstrip("\r\n")
    i, n = 0, len(text)
    while i <= n:
        if i < n and text[i] == QUOTE:
            i += 1
            while i < n:
                if text[i] == QUOTE:
                    if i + 1 < n and text[i + 1] == QUOTE:
                        i += 2
                        continue
                    break
                i += 1
            i += 1  # closing quote; strict mode guarantees a delimiter follows
        else:
            end = text.find(DELIMITER, i)
            if end == -1:
                end = n
            if QUOTE in text[i:end]:
                return True
            i = end
        i += 1
    return False


def read_records(path: Union[str, Path]) -> List[RawRecord]:
    """
    Read every row of a CSV file.

    Rules:
    1. No header row; blank lines are skipped
    2. Standard quoting (quoted fields may hold commas and newlines);
       a quote inside a field that is not itself quoted is an error
    3. Every row must have as many fields as the first row

    Args:
        path: Path to the CSV file

    Returns:
        List of rows, each a list of field strings, in file order

    Raises:
        RecordFileNotFoundError: If the path cannot be opened
        RecordParseError: If quoting is malformed, field counts differ,
            or the file is not valid UTF-8

    Example:
        >>> read_records(Path("problems.csv"))
        [['5+5', '10'], ['1+1', '2']]
    """
    path = Path(path)

    try:
        handle = path.open("r", encoding="utf-8", newline="")
    except OSError as e:
        raise RecordFileNotFoundError(path, detail=e.strerror or str(e)) from e

    records: List[RawRecord] = []
    expected_fields: Optional[int] = None

    with handle:
        lines = _LineRecorder(handle)
        reader = csv.reader(lines, strict=True)
        try:
            for row in reader:
                raw = lines.take()
                if not row:
                    continue
                if _has_bare_quote(raw):
                    raise RecordParseError(
                        path,
                        line=reader.line_num,
                        detail="bare quote in non-quoted field",
                    )
                if expected_fields is None:
                    expected_fields = len(row)
                elif len(row) != expected_fields:
                    raise RecordParseError(
                        path,
                        line=reader.line_num,
                        detail=f"wrong number of fields: expected {expected_fields}, got {len(row)}",
                    )
                records.append(row)
        except csv.Error as e:
            raise RecordParseError(path, line=reader.line_num, detail=str(e)) from e
        except UnicodeDecodeError as e:
            raise RecordParseError(path, detail="file is not valid UTF-8") from e

    logger.debug(f"Read {len(records)} records from {path}")
    return records
