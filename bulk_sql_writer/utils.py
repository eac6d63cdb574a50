"""
Utility functions for bulk SQL export.
"""
import logging
import sys
from typing import Optional

from bulk_sql_writer import config


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        verbose: Log DEBUG messages to the console
        log_file: Optional path of a file receiving DEBUG messages,
            defaults to config.LOG_FILE

    Returns:
        Logger instance
    """
    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Avoid stacking handlers when called more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Statements may go to stdout, so logs stay on stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter(config.CONSOLE_LOG_FORMAT))
    logger.addHandler(console_handler)

    log_file = log_file or config.LOG_FILE
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def parse_column_list(value: Optional[str]):
    """Split a comma-separated column option into names."""
    if not value:
        return []
    return [col.strip() for col in value.split(",") if col.strip()]
