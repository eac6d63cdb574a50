"""
Configuration settings for bulk SQL export.

This module contains default settings used by the writers and the
command line tool. A few of them can be overridden through environment
variables.
"""
import os

# Writer defaults
DEFAULT_BULK_SIZE = int(os.getenv("BULK_SQL_WRITER_BULK_SIZE", "1000"))

# Default CSV settings
DEFAULT_DELIMITER = ","
DEFAULT_QUOTE_CHAR = '"'
DEFAULT_ENCODING = "utf8"
NULL_VALUES = ["NULL", "null", "\\N"]

# Logging
LOGGER_NAME = "bulk_sql_writer"
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = os.getenv("BULK_SQL_WRITER_LOG_FILE", "")
