"""
Module: session.reader

Purpose:
    Best-effort line reading for the prompt loop. A read can run on a
    daemon thread so the session can stop waiting when the deadline
    passes; an abandoned read is never joined and its line is dropped.

Key Functions:
    - read_answer_line(): Blocking read, errors become an empty line
    - read_line_in_background(): Start a read on a daemon thread
"""

from __future__ import annotations

import logging
import threading
from queue import Queue
from typing import TextIO

logger = logging.getLogger(__name__)


def read_answer_line(reader: TextIO) -> str:
    """
    Read one line from reader.

    Returns "" at end of input or when the read fails.
    """
    try:
        return reader.readline()
    except (OSError, ValueError) as e:
        logger.debug(f"Input read failed, using empty answer: {e}")
        return ""


def read_line_in_background(reader: TextIO) -> "Queue[str]":
    """
    Read one line from reader on a daemon thread.

    Returns:
        Queue that receives exactly one line once the read finishes.
    """
    result: "Queue[str]" = Queue(maxsize=1)

    def _read() -> None:
        result.put(read_answer_line(reader))

    thread = threading.Thread(target=_read, name="quiz-answer-reader", daemon=True)
    thread.start()
    return result
