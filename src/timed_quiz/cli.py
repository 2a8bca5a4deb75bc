"""
Module: cli

Purpose:
    Command-line entry point. Parses flags, configures logging and runs
    the pipeline: read file -> build problems -> optional shuffle ->
    prompt loop -> score.

Key Functions:
    - main(): Run one quiz, returning the process exit code
    - run(): Console-script wrapper around main()
    - build_parser(): Argument parser (also used for --help output)

Exit Codes:
    0: Quiz finished and summary printed
    1: Problems file missing or not parseable
    2: Invalid command-line usage
    130: Interrupted with Ctrl-C
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from timed_quiz import __version__
from timed_quiz.config import DEFAULT_PROBLEMS_FILE, DEFAULT_TIME_LIMIT, QuizConfig
from timed_quiz.core.errors import RecordSourceError
from timed_quiz.loading import load_problems
from timed_quiz.scoring import evaluate_answers
from timed_quiz.session import Deadline, ask_questions, create_rng, shuffle_problems

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {number}")
    return number


_TRUE_VALUES = {"1", "t", "true"}
_FALSE_VALUES = {"0", "f", "false"}


def _boolean(value: str) -> bool:
    """Parse -shuffle=<value>: 1/t/true or 0/f/false, any case."""
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timed-quiz",
        description="Ask the questions in a question,answer CSV file and report the score.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-file", "-f", "--file",
        dest="file",
        default=DEFAULT_PROBLEMS_FILE,
        help="a csv file in the format of 'question,answer' (default: %(default)s)",
    )
    parser.add_argument(
        "-time", "--time",
        dest="time",
        type=_non_negative_int,
        default=DEFAULT_TIME_LIMIT,
        help="the time limit for the quiz in seconds, 0 for none (default: %(default)s)",
    )
    parser.add_argument(
        "-shuffle", "--shuffle",
        dest="shuffle",
        nargs="?",
        type=_boolean,
        const=True,
        default=False,
        metavar="BOOL",
        help="change the order of the questions (also -shuffle=true / -shuffle=false)",
    )
    parser.add_argument(
        "-seed", "--seed",
        dest="seed",
        type=int,
        default=None,
        help="seed for --shuffle, for a repeatable order",
    )
    parser.add_argument(
        "-v", "--verbose",
        dest="verbose",
        action="store_true",
        help="enable debug logging on stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout only carries the quiz."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Run one quiz.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        stdin: Answer source (defaults to sys.stdin)
        stdout: Prompt and summary sink (defaults to sys.stdout)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    config = QuizConfig.from_args(args)
    configure_logging(config.verbose)

    reader = stdin if stdin is not None else sys.stdin
    writer = stdout if stdout is not None else sys.stdout

    try:
        problems = load_problems(config.problems_path)
    except RecordSourceError as e:
        logger.error(f"Fatal: {e}")
        return EXIT_FATAL

    logger.debug(f"Loaded {len(problems)} problems from {config.problems_path}")

    if config.shuffle:
        problems = shuffle_problems(problems, create_rng(config.seed))

    deadline = Deadline(config.time_limit) if config.has_time_limit else None
    answers = ask_questions(writer, reader, problems, deadline)
    evaluate_answers(writer, problems, answers)
    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    try:
        code = main()
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        code = EXIT_INTERRUPTED
    raise SystemExit(code)
