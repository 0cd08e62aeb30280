"""
Logging setup for Study Tracker
"""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "study_tracker.console"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach one stderr handler to the package logger.

    Safe to call repeatedly: an existing handler is reused and only its
    level is updated.

    Args:
        level: Logging level as int or name ("DEBUG", "INFO", ...)

    Returns:
        The package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    package_logger = logging.getLogger("study_tracker")
    package_logger.setLevel(level)

    handler = next((h for h in package_logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)
    handler.setLevel(level)

    return package_logger
