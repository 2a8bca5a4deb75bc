"""
Module: core.models

Purpose:
    Frozen dataclasses for a quiz problem and for the outcome of scoring
    a session. Both are built once and never mutated.

Key Classes:
    - Problem: One question with its expected answer
    - Evaluation: Per-answer correctness plus aggregate counts

Used By:
    - loading.problems: Builds Problem objects from CSV rows
    - session.runner: Prompts with Problem.question
    - scoring.scorer: Produces Evaluation
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Problem:
    """
    A single question/answer pair (immutable).

    Attributes:
        question: Text shown to the user, e.g. "5+5"
        answer: Expected response, compared exactly and case-sensitively

    Example:
        >>> p = Problem(question="5+5", answer="10")
        >>> p.is_correct("10")
        True
    """

    question: str
    answer: str

    def is_correct(self, response: str) -> bool:
        """Exact, case-sensitive comparison against the expected answer."""
        return response == self.answer


@dataclass(frozen=True)
class Evaluation:
    """
    Result of scoring a session (immutable).

    Attributes:
        results: One flag per submitted answer, in problem order
        total: Size of the full problem set, answered or not

    Invariants:
        - len(results) <= total
        - correct == number of True entries in results
    """

    results: Tuple[bool, ...]
    total: int

    @property
    def correct(self) -> int:
        return sum(1 for result in self.results if result)

    @property
    def answered(self) -> int:
        return len(self.results)

    @property
    def complete(self) -> bool:
        """True when every problem received an answer."""
        return self.answered == self.total

    def summary(self) -> str:
        return f"Total correct: {self.correct} out of {self.total}"
