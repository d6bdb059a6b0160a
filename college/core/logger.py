"""
Centralized logging for the college roster.

Every module asks for its logger through ``get_logger(__name__)``. Library
code never installs output handlers; the CLI calls ``configure_logging``
once to attach a stderr handler to the ``college`` package logger.
"""

import logging
import sys
from typing import Union

PACKAGE_LOGGER = "college"
LOG_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for ``name``.

    Args:
        name (str): The calling module's name (usually __name__).

    Returns:
        logging.Logger: The logger instance.
    """
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Attach the console handler (once) and set package verbosity."""
    root = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)
