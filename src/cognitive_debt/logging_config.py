"""Logging setup for Cognitive Debt.

All package loggers live under the ``cognitive_debt`` namespace. The CLI
calls ``setup_logging`` once per command; library code only ever calls
``get_logger(__name__)`` and never configures handlers itself.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "cognitive_debt"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """Attach a rich stderr handler (and optionally a file handler).

    Handlers from a previous call are replaced, so repeated invocations in
    one process (tests, embedding) do not duplicate output.

    Args:
        verbose: DEBUG level, with source paths and traceback locals
        quiet: ERROR level only; wins over ``verbose``
        log_file: Also append plain-text records to this file

    Returns:
        The ``cognitive_debt`` package logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # stdout carries reports (and JSON), so logs stay on stderr
    rich_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, namespaced under ``cognitive_debt``.

    ``get_logger(__name__)`` inside the package returns the module's own
    logger; a bare name such as ``"scanner"`` becomes ``cognitive_debt.scanner``.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
