"""Logging for mtrtrace: one package logger, rich output on stderr."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


logger = logging.getLogger("mtrtrace")

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Route mtrtrace logs to stderr (warnings, or everything with debug) and optionally a file."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    console = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    console.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logger.getChild(name)
