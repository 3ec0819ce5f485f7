"""
Logging configuration for the element_list_editor package.

Library modules only create ``logging.getLogger(__name__)`` loggers. An
application embedding the package calls ``setup_logging`` once to get
output from them.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "element_list_editor"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
    propagate: bool = False,
) -> logging.Logger:
    """
    Attach handlers to the 'element_list_editor' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write logs to.
        stream: Console stream, stdout by default.
        propagate: Whether records also reach the root logger's handlers.
            Off by default so a configured root logger does not print
            every record a second time.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = propagate

    # Calling again replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %d handler(s) at level %s", len(handlers), logging.getLevelName(level))
    return logger
