"""
Loading Package

Reads the problems CSV and turns its rows into Problem objects.

Key Functions:
    - read_records(): Parse a CSV file into raw rows
    - build_problems(): Convert raw rows into Problem objects
    - load_problems(): Both steps in one call
"""

from .problems import build_problems, load_problems
from .records import read_records

__all__ = [
    "build_problems",
    "load_problems",
    "read_records",
]
