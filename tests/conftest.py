import csv
import sys
from pathlib import Path
from typing import Callable, List, Sequence

import pytest

# Add src to sys.path so we can import timed_quiz
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from timed_quiz.core.models import Problem


# Common test fixtures
@pytest.fixture
def sample_problems() -> List[Problem]:
    """The three arithmetic problems used across session and scoring tests."""
    return [
        Problem(question="5+5", answer="10"),
        Problem(question="7+3", answer="10"),
        Problem(question="1+1", answer="2"),
    ]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes rows with csv.writer and returns the path."""
    def _write(rows: Sequence[Sequence[str]], name: str = "test_data.csv") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8", newline="") as handle:
            csv.writer(handle).writerows(rows)
        return path
    return _write


@pytest.fixture
def write_text(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes raw file content and returns the path."""
    def _write(content: str, name: str = "problems.csv") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        return path
    return _write
