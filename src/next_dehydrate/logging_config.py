"""
Logging for next-dehydrate.

Every module logs under the ``next_dehydrate`` logger. Records go to stderr
through rich so that stdout stays clean for reports such as ``--json``.
Per-page detail (classifications, removed scripts, unresolved imports) is
logged at DEBUG and only shows with ``--verbose``.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "next_dehydrate"

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Logging level for the CLI verbosity flags. Quiet wins over verbose."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Attach handlers to the ``next_dehydrate`` logger and return it.

    Calling it again replaces the previous handlers, so the CLI can
    re-configure once the config file has been read.

    Args:
        verbose: Show DEBUG records, timestamps and source locations
        quiet: Show errors only
        log_file: Also append plain-text records to this file
    """
    level = level_for(verbose, quiet)

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)

    logger.setLevel(level)
    # the root logger may carry handlers of an embedding application
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``next_dehydrate`` hierarchy.

    Module ``__name__`` values already qualify; other names are prefixed.
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
