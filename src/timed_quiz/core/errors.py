"""
Module: core.errors

Purpose:
    Closed taxonomy of fatal input failures. Each error carries its kind
    together with the offending path and, where known, the line number.

Key Classes:
    - ErrorKind: FILE_NOT_FOUND or PARSE_ERROR
    - RecordSourceError: Base exception with kind/path/line context
    - RecordFileNotFoundError: Input path missing or unreadable
    - RecordParseError: Input is not well-formed CSV

Used By:
    - loading.records: Raises on open/parse failure
    - cli: Reports the kind and exits non-zero
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(str, Enum):
    """Kinds of fatal record source failure."""

    FILE_NOT_FOUND = "file-not-found"
    PARSE_ERROR = "parse-error"

    @property
    def description(self) -> str:
        if self is ErrorKind.FILE_NOT_FOUND:
            return "cannot read file, file doesn't exist"
        return "unable to parse csv file"


class RecordSourceError(Exception):
    """Error reading problems from the input file."""

    def __init__(
        self,
        kind: ErrorKind,
        path: Union[str, Path],
        line: Optional[int] = None,
        detail: str = "",
    ) -> None:
        self.kind = kind
        self.path = Path(path)
        self.line = line
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        location = str(self.path)
        if self.line is not None:
            location = f"{location}:{self.line}"
        message = f"{self.kind.value}: {self.kind.description} ({location})"
        if self.detail:
            message = f"{message}: {self.detail}"
        return message


class RecordFileNotFoundError(RecordSourceError):
    """Input path could not be opened."""

    def __init__(self, path: Union[str, Path], detail: str = "") -> None:
        super().__init__(ErrorKind.FILE_NOT_FOUND, path, detail=detail)


class RecordParseError(RecordSourceError):
    """Input content is not well-formed comma-delimited text."""

    def __init__(
        self,
        path: Union[str, Path],
        line: Optional[int] = None,
        detail: str = "",
    ) -> None:
        super().__init__(ErrorKind.PARSE_ERROR, path, line=line, detail=detail)
