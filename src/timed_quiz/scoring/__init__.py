"""Scoring of collected answers."""

from .scorer import evaluate_answers, score_answers

__all__ = [
    "evaluate_answers",
    "score_answers",
]
