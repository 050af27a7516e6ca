"""Logging configuration for hosting applications."""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logging for an application hosting the scheduler.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
