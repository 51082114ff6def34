"""Logging setup for the portfolio content layer.

Library modules only ask for a logger with ``get_logger(__name__)``; the CLI
decides where records go by calling ``setup_logging`` once per command.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "portfolio_content"

# Verbosity count (-v, -vv, -vvv) to console level
VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
    3: logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbosity: int = 1,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Route the package's log records to stderr and, optionally, a file.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2=DEBUG, 3=DEBUG with locals in tracebacks.
        log_file: File that receives every record at DEBUG, whatever the
            console level.

    Returns:
        The package root logger.
    """
    console_level = VERBOSITY_LEVELS.get(verbosity, logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(verbosity, console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file))

    # The file handler wants DEBUG even when the console is quieter
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the package namespace.

    Module names (``portfolio_content.content.repository``) pass through;
    short names (``"cli"``) are prefixed with the package name.
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def _console_handler(verbosity: int, level: int) -> RichHandler:
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbosity >= 2,
        show_path=verbosity >= 2,
        rich_tracebacks=True,
        tracebacks_show_locals=verbosity >= 3,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(log_file: Path) -> logging.FileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler
