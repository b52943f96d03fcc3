"""
Logging setup for the data quality framework.

Every module obtains its logger through get_logger(__name__), so all output
hangs off the ``quality_framework`` logger and can be configured in one place.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from quality_framework.core.constants import LOG_FORMAT, LOG_DATE_FORMAT

ROOT_LOGGER_NAME = "quality_framework"


def setup_logging(
    level: Union[str, int] = "WARNING",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Replaces any handlers installed by a previous call so repeated CLI
    invocations in one process do not duplicate output.

    Args:
        level: Logging level name or number
        log_file: Optional path for a file handler (parent dirs are created)

    Returns:
        The configured package root logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``."""
    return logging.getLogger(name)
