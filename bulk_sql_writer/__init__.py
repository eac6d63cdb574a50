"""
Bulk SQL Writer - batch table rows into SQL INSERT and UPDATE statements

This package provides writers that turn rows of SQL literal values into
multi-row INSERT statements or per-row UPDATE statements, for bulk
export of table data into a SQL dump.
"""

from bulk_sql_writer.collector import StatementCollector
from bulk_sql_writer.exceptions import BulkSqlWriterError, ColumnNotFoundError, ConfigurationError
from bulk_sql_writer.table import Table
from bulk_sql_writer.writers import BaseWriter, InsertWriter, UpdateWriter, create_writer

__version__ = "0.1.0"
__all__ = [
    "BaseWriter",
    "BulkSqlWriterError",
    "ColumnNotFoundError",
    "ConfigurationError",
    "InsertWriter",
    "StatementCollector",
    "Table",
    "UpdateWriter",
    "create_writer",
]
