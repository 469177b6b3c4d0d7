"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the console and rotating file handlers of the shared ``musicmeta`` logger.
Why: Library modules only import ``logger``; the CLI alone decides verbosity and the log file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

from musicmeta.config.paths import default_log_file


DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOGGER_NAME: Final[str] = "musicmeta"

LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5
FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s [%(module)s] %(message)s"


def console_level_for(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a console log level; ``quiet`` wins."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def _console_handler(level: int) -> logging.Handler:
    # stderr only; stdout carries ``parse --json`` output.
    handler = RichHandler(console=Console(stderr=True, soft_wrap=True), show_path=False)
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the shared logger.

    Existing handlers are closed and replaced, so calling this twice never
    duplicates output.

    Args:
        log_file: Rotating log file; ``None`` logs to the console only.
        console_level: Threshold for the console handler.
        file_level: Threshold for the file handler.

    Returns:
        logging.Logger: The ``musicmeta`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))

    return logger


# Importing the package must not create files; the CLI adds the log file later.
logger: Final[logging.Logger] = setup_logger(console_level=logging.WARNING)


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "console_level_for",
    "logger",
    "setup_logger",
]
