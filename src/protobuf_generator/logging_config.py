"""
Logging Configuration
=====================

Centralized logging setup for protobuf-generator.

Usage:
    from protobuf_generator.logging_config import setup_logging, get_logger

    # At application startup
    setup_logging()

    # In modules
    logger = get_logger(__name__)
    logger.info("Message")
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Default configuration
DEFAULT_LOG_FILE = "protobuf-generator.log"
DEFAULT_LOG_LEVEL = logging.DEBUG
DEFAULT_FILE_LOG_LEVEL = logging.DEBUG
DEFAULT_CONSOLE_LOG_LEVEL = logging.INFO
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

# Custom log format
CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"

# Track if logging has been configured
_logging_configured = False


def setup_logging(
    log_dir: Optional[Path] = None,
    log_file: str = DEFAULT_LOG_FILE,
    console_level: int = DEFAULT_CONSOLE_LOG_LEVEL,
    file_level: int = DEFAULT_FILE_LOG_LEVEL,
    root_level: int = DEFAULT_LOG_LEVEL,
) -> None:
    """
    Configure logging for protobuf-generator.

    Sets up:
    - StreamHandler for console output (INFO level by default)
    - RotatingFileHandler for detailed logs (DEBUG level), only when log_dir is given

    Args:
        log_dir: Directory for log files (no file logging when None)
        log_file: Name of the log file
        console_level: Log level for console output
        file_level: Log level for file output
        root_level: Root logger level
    """
    global _logging_configured

    if _logging_configured:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    log_path: Optional[Path] = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / log_file

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(DEBUG_FILE_FORMAT))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    _logging_configured = True

    logger = logging.getLogger(__name__)
    if log_path is not None:
        logger.debug(f"Logging initialized. Log file: {log_path}")
    else:
        logger.debug("Logging initialized (console only)")


def reset_logging() -> None:
    """Drop installed handlers so the next setup_logging() call reconfigures."""
    global _logging_configured

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _logging_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    This is a convenience wrapper around logging.getLogger() that ensures
    consistent naming across the application.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
