"""
Module: config

Purpose:
    Immutable run configuration for the quiz, validated on construction
    and built from parsed command-line arguments.

Key Classes:
    - QuizConfig: Input path, time limit, shuffle and seed settings

Used By:
    - cli: Built from argparse namespace
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_PROBLEMS_FILE = "problems.csv"
DEFAULT_TIME_LIMIT = 30


@dataclass(frozen=True)
class QuizConfig:
    """
    Configuration for one quiz run (immutable).

    Attributes:
        problems_path: CSV file with question,answer rows
        time_limit: Overall session limit in seconds; 0 disables it
        shuffle: Randomize problem order before asking
        seed: Fixed shuffle seed; None seeds from the clock
        verbose: Enable debug logging

    Invariants:
        - time_limit >= 0

    Example:
        >>> config = QuizConfig(time_limit=0)
        >>> config.has_time_limit
        False
    """

    problems_path: Path = Path(DEFAULT_PROBLEMS_FILE)
    time_limit: int = DEFAULT_TIME_LIMIT
    shuffle: bool = False
    seed: Optional[int] = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.time_limit < 0:
            raise ValueError(f"time_limit must be non-negative: {self.time_limit}")

    @property
    def has_time_limit(self) -> bool:
        return self.time_limit > 0

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "QuizConfig":
        return cls(
            problems_path=Path(args.file),
            time_limit=args.time,
            shuffle=args.shuffle,
            seed=args.seed,
            verbose=args.verbose,
        )
