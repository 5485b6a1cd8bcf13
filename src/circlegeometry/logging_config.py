"""
Logging Configuration
=====================
circlegeometry is a library: on import it only attaches a NullHandler to its
package logger, so nothing is printed unless the host application asks for it.

`setup_logging` is the opt-in switch for scripts and notebooks that want to see
the DEBUG records the Circle mutators emit (radius writes, pi changes, moves).
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "circlegeometry"

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Handlers attached by setup_logging, so a second call replaces them
_INSTALLED_HANDLERS: list[logging.Handler] = []


def install_null_handler() -> None:
    """Attach a NullHandler to the package logger once."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def setup_logging(level: int = logging.DEBUG, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send circlegeometry records to stderr and, optionally, to a file.

    Args:
        level: Threshold for the package logger and the new handlers.
        log_file: Optional path; records are appended to it.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    while _INSTALLED_HANDLERS:
        old = _INSTALLED_HANDLERS.pop()
        logger.removeHandler(old)
        old.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _INSTALLED_HANDLERS.append(handler)

    logger.setLevel(level)
    logger.debug(f"circlegeometry logging enabled at {logging.getLevelName(level)}")
    return logger
