"""
Opt-in console logging for the ``moge`` logger hierarchy.

Library modules only create loggers; handlers are attached here, and only by
entry points such as the CLI.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "moge"
_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def level_for_verbosity(verbose: int) -> int:
    """Map a ``-v`` count to a level: 0 warning, 1 info, 2 or more debug."""
    if verbose < 0:
        raise ValueError("verbose must be a non-negative count.")
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_moge_logging(*, level: int | None = None, verbose: int = 0) -> logging.Logger:
    """
    Configure a console handler for MOGE and return the ``moge`` logger.

    ``level`` wins over ``verbose``. If the root logger or the ``moge`` logger
    already has handlers, only the level is set. Calling this again never adds
    a second handler.
    """
    if level is None:
        level = level_for_verbosity(verbose)
    root = logging.getLogger()
    moge_logger = logging.getLogger(LOGGER_NAME)
    moge_logger.setLevel(level)

    if root.handlers or moge_logger.handlers:
        return moge_logger

    handler = logging.StreamHandler()
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s" if level > logging.DEBUG else "%(levelname)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    moge_logger.addHandler(handler)
    moge_logger.propagate = False
    return moge_logger


__all__ = ["LOGGER_NAME", "configure_moge_logging", "level_for_verbosity"]
