import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "meeting_report"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logger(log_level: str = "INFO", name: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger and return it, or one of its children.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Module name (usually __name__); children share the package
            handler

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper())

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    # One stdout handler for the whole package, however many modules call this
    if not any(isinstance(h, logging.StreamHandler) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(handler)

    if not name or name == PACKAGE_LOGGER:
        return package_logger
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
