"""Logging configuration for folder-select."""

import sys

from loguru import logger


def _level(*, verbose: bool, quiet: bool) -> str:
    if verbose:
        return "DEBUG"
    if quiet:
        return "ERROR"
    return "INFO"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send loguru output to stderr.

    ``verbose`` shows debug messages; ``quiet`` hides everything below
    errors, such as warnings about ids missing from the tree. ``verbose``
    wins when both are set.
    """
    logger.remove()
    level = _level(verbose=verbose, quiet=quiet)
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")
