"""Top-level package for the timed quiz runner.

Provides subpackages:
- timed_quiz.loading – CSV record source and problem builder
- timed_quiz.session – ordering, deadline and the interactive prompt loop
- timed_quiz.scoring – answer evaluation and summary line
- timed_quiz.cli – command-line entry point
"""

def _get_version() -> str:
    """Get version from installed package metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("timed_quiz")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
