"""
Exception hierarchy for bulk SQL writers.
"""
from typing import Optional


class BulkSqlWriterError(Exception):
    """Base class for all errors raised by bulk_sql_writer."""


class ConfigurationError(BulkSqlWriterError):
    """
    Raised when a table or writer is set up inconsistently.

    These are programmer or schema mistakes, not runtime conditions, so the
    current batch is stopped instead of continuing with bad data.
    """


class ColumnNotFoundError(ConfigurationError, LookupError):
    """Raised when a column name is not part of the table schema."""

    def __init__(self, column: str, table: Optional[str] = None):
        self.column = column
        self.table = table
        if table is None:
            message = f"Column '{column}' not found"
        else:
            message = f"Column '{column}' not found in table '{table}'"
        super().__init__(message)
