"""Allow ``python -m timed_quiz``."""

from timed_quiz.cli import run

if __name__ == "__main__":
    run()
