"""
Centralized logging configuration for profanity_validation.

Library modules only create module loggers; handlers are attached here,
by the command line entry point or by an embedding application.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


# Global flag to prevent duplicate initialization
_logging_initialized = False

LOGGER_NAMESPACE = "profanity_validation"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    force: bool = False,
    debug_mode: bool = False,
) -> logging.Logger:
    """
    Configure logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path, rotated at 5MB
        console: Whether to log to console/stderr
        force: Force reconfiguration even if already initialized
        debug_mode: Log everything at DEBUG level

    Returns:
        The package logger
    """
    global _logging_initialized

    root_logger = logging.getLogger(LOGGER_NAMESPACE)

    if _logging_initialized and not force:
        return root_logger

    # Determine log level
    if debug_mode:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, str(level).upper(), logging.INFO)

    root_logger.setLevel(log_level)

    # Clear any existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Rotating file handler: 5MB max, keep 3 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_initialized = True

    root_logger.debug(f"Logging initialized: level={logging.getLevelName(log_level)}, file={log_file}")

    return root_logger

