"""
Logging setup for talkrow.

Console output plus a rotating main log file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler

from .paths import get_paths


# Log format
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Maximum log file size before rotation (10 MB)
MAX_LOG_SIZE = 10 * 1024 * 1024

# Number of backup files to keep
BACKUP_COUNT = 5


def setup_main_logger(log_level: str = 'INFO', log_path: Optional[Path] = None) -> logging.Logger:
    """
    Setup the main application logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_path: Optional log file path (defaults to main.log in the log dir)

    Returns:
        Main logger instance
    """
    level = getattr(logging, log_level.upper())

    logger = logging.getLogger('talkrow')
    logger.setLevel(level)
    logger.handlers.clear()  # Clear existing handlers

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (rotating)
    main_log_path = Path(log_path) if log_path else get_paths().main_log_path()
    main_log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        main_log_path,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logger.info(f"Main logger initialized (level: {log_level}, log: {main_log_path})")

    # Configure global exception hook to log uncaught exceptions
    def exception_hook(exc_type, exc_value, exc_traceback):
        """Log uncaught exceptions to file instead of just stderr."""
        if issubclass(exc_type, KeyboardInterrupt):
            # Don't log KeyboardInterrupt (Ctrl+C)
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical("Uncaught exception:", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = exception_hook
    logger.debug("Global exception hook configured (uncaught exceptions → main.log)")

    return logger


def set_log_level(logger_name: str, level: str):
    """
    Change log level for a specific logger.

    Args:
        logger_name: Logger name (e.g., 'talkrow.content_fetcher')
        level: New log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper()))
    for handler in logger.handlers:
        handler.setLevel(getattr(logging, level.upper()))
    logger.info(f"Log level changed to {level.upper()}")
