"""Utility functions."""

import logging

from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Setup logging with RichHandler for console output.

    Args:
        verbose: If True, sets logging to DEBUG level and shows file paths.
                If False, sets logging to INFO level and keeps query tracing quiet.
    """
    level = logging.DEBUG if verbose else logging.INFO

    handler = RichHandler(
        rich_tracebacks=True,
        markup=True,
        show_time=True,
        show_path=verbose,
    )

    formatter = logging.Formatter(
        "%(message)s",
        datefmt="[%X]",
    )
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    if not verbose:
        logging.getLogger("skrape.selects").setLevel(logging.WARNING)


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and strip the ends.

    Examples:
        >>> normalize_whitespace("  foo \\n\\t bar ")
        'foo bar'
    """
    return " ".join(text.split())
