"""
Module: scoring.scorer

Purpose:
    Compare submitted answers with expected answers by position and
    report the total. The answer list may be shorter than the problem
    list when the session timed out; unanswered problems still count
    towards the total.

Key Functions:
    - score_answers(): Pure comparison -> Evaluation
    - evaluate_answers(): score_answers() plus the summary line

Used By:
    - cli: Last pipeline stage
"""

from __future__ import annotations

import logging
from typing import Sequence, TextIO

from timed_quiz.core.models import Evaluation, Problem

logger = logging.getLogger(__name__)


def score_answers(problems: Sequence[Problem], answers: Sequence[str]) -> Evaluation:
    """
    Score answers against problems.

    Answers beyond the number of problems are ignored.

    Example:
        >>> problems = [Problem("5+5", "10"), Problem("7+3", "10")]
        >>> score_answers(problems, ["10"]).results
        (True,)
    """
    results = tuple(
        problem.is_correct(answer) for problem, answer in zip(problems, answers)
    )
    return Evaluation(results=results, total=len(problems))


def evaluate_answers(
    writer: TextIO,
    problems: Sequence[Problem],
    answers: Sequence[str],
) -> Evaluation:
    """
    Score answers and write "Total correct: <correct> out of <total>".

    Returns:
        Evaluation with one flag per submitted answer
    """
    evaluation = score_answers(problems, answers)
    writer.write(evaluation.summary() + "\n")
    writer.flush()

    if not evaluation.complete:
        logger.debug(f"{evaluation.total - evaluation.answered} problems left unanswered")
    return evaluation
