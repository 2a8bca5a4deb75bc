"""
Module: session.ordering

Purpose:
    Optional randomization of the problem order. The random generator is
    created once per process and passed in explicitly so tests can use a
    fixed seed.

Key Functions:
    - create_rng(): Build the process-wide generator
    - shuffle_problems(): Durstenfeld shuffle returning a new list

Used By:
    - cli: Applied when --shuffle is given
"""

from __future__ import annotations

import logging
import random
import time
from typing import List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_rng(seed: Optional[int] = None) -> random.Random:
    """
    Create the generator used for shuffling.

    Args:
        seed: Fixed seed for reproducible order. None seeds from the
              current time in nanoseconds.
    """
    if seed is None:
        seed = time.time_ns()
    logger.debug(f"Shuffle seed: {seed}")
    return random.Random(seed)


def shuffle_problems(problems: Sequence[T], rng: random.Random) -> List[T]:
    """
    Return a uniformly random permutation of problems.

    Algorithm (Durstenfeld):
        for i in 0..n-2: pick j uniformly in [i, n-1], swap i and j

    The input sequence is left untouched.

    Example:
        >>> sorted(shuffle_problems([3, 1, 2], random.Random(7)))
        [1, 2, 3]
    """
    shuffled = list(problems)
    for i in range(len(shuffled) - 1):
        j = rng.randrange(i, len(shuffled))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
