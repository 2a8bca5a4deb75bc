"""
Core Models Package

Immutable data models shared by the loading, session and scoring stages,
plus the closed error taxonomy for fatal input failures.
"""

from .errors import ErrorKind, RecordFileNotFoundError, RecordParseError, RecordSourceError
from .models import Evaluation, Problem

__all__ = [
    "ErrorKind",
    "Evaluation",
    "Problem",
    "RecordFileNotFoundError",
    "RecordParseError",
    "RecordSourceError",
]
