"""
Module: loading.problems

Purpose:
    Convert raw CSV rows into Problem objects. Rows that do not hold
    exactly a question and an answer are dropped and logged; the
    remaining problems keep their input order.

Key Functions:
    - build_problems(): Rows -> Problems
    - load_problems(): Path -> Problems (read_records + build_problems)

Used By:
    - cli: Second pipeline stage
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from timed_quiz.core.models import Problem

from .records import read_records

logger = logging.getLogger(__name__)

FIELDS_PER_PROBLEM = 2


def build_problems(records: Iterable[Sequence[str]]) -> List[Problem]:
    """
    Build problems from raw rows, skipping malformed ones.

    Question and answer text are kept exactly as read; only the user's
    response is trimmed later.

    Args:
        records: Rows as returned by read_records()

    Returns:
        Problems for every row with exactly two fields, in order
    """
    problems: List[Problem] = []
    skipped = 0

    for row_number, record in enumerate(records, start=1):
        if len(record) != FIELDS_PER_PROBLEM:
            skipped += 1
            logger.warning(
                f"Skipping row {row_number}: expected {FIELDS_PER_PROBLEM} fields, got {len(record)}"
            )
            continue
        problems.append(Problem(question=record[0], answer=record[1]))

    if skipped:
        logger.info(f"Built {len(problems)} problems ({skipped} malformed rows skipped)")
    return problems


def load_problems(path: Union[str, Path]) -> List[Problem]:
    """
    Read a problems CSV and build the problem set.

    Raises:
        RecordFileNotFoundError: If the path cannot be opened
        RecordParseError: If the file is not well-formed CSV
    """
    return build_problems(read_records(path))
