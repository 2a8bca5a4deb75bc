"""
Module: session.deadline

Purpose:
    Single overall deadline for a quiz session, measured on a monotonic
    clock. The clock is injectable for tests.
"""

from __future__ import annotations

import time
from typing import Callable


class Deadline:
    """
    Point in time after which the session stops asking questions.

    Usage:
        deadline = Deadline(30)
        ...
        line = pending.get(timeout=deadline.remaining())

    Attributes:
        seconds: Length of the budget the deadline was created with.
    """

    def __init__(
        self,
        seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if seconds < 0:
            raise ValueError(f"seconds must be non-negative: {seconds}")
        self.seconds = seconds
        self._clock = clock
        self._expires_at = clock() + seconds

    def remaining(self) -> float:
        """Seconds left, never negative."""
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0

    def __repr__(self) -> str:
        return f"Deadline(seconds={self.seconds}, remaining={self.remaining():.3f})"
