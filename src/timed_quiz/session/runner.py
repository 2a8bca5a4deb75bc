"""
Module: session.runner

Purpose:
    The interactive prompt loop. Writes one prompt per problem, reads one
    line per problem and stops early when the session deadline passes.

Key Functions:
    - ask_questions(): Run the loop and return the collected answers
    - format_prompt(): "Problem #<n>: <question> = "

Algorithm:
    For each problem:
    1. Write the prompt (no newline) and flush
    2. Without a deadline, block on the read
    3. With a deadline, read on a daemon thread and wait on its queue
       for at most deadline.remaining() seconds
    4. On timeout write a newline and return the answers so far
    5. Otherwise store the stripped line

Used By:
    - cli: Fourth pipeline stage
"""

from __future__ import annotations

import logging
from queue import Empty
from typing import List, Optional, Sequence, TextIO

from timed_quiz.core.models import Problem

from .deadline import Deadline
from .reader import read_answer_line, read_line_in_background

logger = logging.getLogger(__name__)


def format_prompt(number: int, problem: Problem) -> str:
    return f"Problem #{number}: {problem.question} = "


def ask_questions(
    writer: TextIO,
    reader: TextIO,
    problems: Sequence[Problem],
    deadline: Optional[Deadline] = None,
) -> List[str]:
    """
    Ask every problem in order and collect the answers.

    Args:
        writer: Output stream for prompts
        reader: Input stream, one answer per line
        problems: Problems in the order they should be asked
        deadline: Overall session deadline; None asks every problem

    Returns:
        Stripped answers aligned with problems. Shorter than problems
        when the deadline passed first.

    Invariants:
        - len(result) == len(problems) when deadline is None
        - Returns within deadline.remaining() plus scheduling overhead
          even if reader never produces a line
    """
    answers: List[str] = []

    for number, problem in enumerate(problems, start=1):
        writer.write(format_prompt(number, problem))
        writer.flush()

        if deadline is None:
            line = read_answer_line(reader)
        else:
            pending = read_line_in_background(reader)
            try:
                line = pending.get(timeout=deadline.remaining())
            except Empty:
                writer.write("\n")
                writer.flush()
                logger.info(
                    f"Time limit of {deadline.seconds}s reached after "
                    f"{len(answers)} of {len(problems)} answers"
                )
                return answers

        answers.append(line.strip())

    return answers
