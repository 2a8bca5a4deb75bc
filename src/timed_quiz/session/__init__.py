"""
Session Package

Everything that happens between loading the problems and scoring them:
optional reordering, the overall deadline and the prompt/answer loop.

Key Functions:
    - shuffle_problems(): Uniform Fisher–Yates permutation
    - create_rng(): Per-process random generator
    - ask_questions(): Prompt loop with optional deadline

Key Classes:
    - Deadline: Monotonic-clock session deadline
"""

from .deadline import Deadline
from .ordering import create_rng, shuffle_problems
from .runner import ask_questions, format_prompt

__all__ = [
    "Deadline",
    "ask_questions",
    "create_rng",
    "format_prompt",
    "shuffle_problems",
]
