import logging

from . import configure_logging as _logging_state
from .configure_logging import configure_logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _logging_state._CONFIGURED:
        configure_logging()

    return logging.getLogger(f"mcpreg.{name}")
