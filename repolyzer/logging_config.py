"""Logging configuration for repolyzer.

Log records go to stderr through rich so they never mix with the report
printed on stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from repolyzer.config import LOG_FILE, LOG_LEVEL


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Configure logging with a rich handler.

    Args:
        verbose: Enable DEBUG level logging
        log_file: Optional file path to append logs to (defaults to
                  REPOLYZER_LOG_FILE)

    Returns:
        The configured "repolyzer" logger
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]
    handlers[0].setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    log_file = log_file or LOG_FILE
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(file_handler)

    logger = logging.getLogger("repolyzer")
    logger.handlers.clear()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the "repolyzer" namespace.

    Args:
        name: Module name (e.g. "repolyzer.git.repository")

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("repolyzer")

    if not name.startswith("repolyzer"):
        name = f"repolyzer.{name}"

    return logging.getLogger(name)
