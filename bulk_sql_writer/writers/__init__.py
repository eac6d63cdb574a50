"""
SQL statement writers.

This package provides the buffered INSERT writer and the row-at-a-time
UPDATE writer, both sharing the BaseWriter helpers.
"""
from typing import Optional, Sequence, TextIO

from bulk_sql_writer.table import Table
from bulk_sql_writer.writers.base import BaseWriter
from bulk_sql_writer.writers.insert import InsertWriter
from bulk_sql_writer.writers.update import UpdateWriter

WRITER_MODES = ("insert", "update")


def new_insert_writer(table: Table, out: TextIO, bulk_size: int) -> BaseWriter:
    """Create an InsertWriter with the given bulk size."""
    return InsertWriter(table, out, bulk_size)


def new_update_writer(table: Table, out: TextIO, columns: Optional[Sequence[str]] = None) -> BaseWriter:
    """Create an UpdateWriter for the given column subset."""
    return UpdateWriter(table, out, columns)


def create_writer(
    mode: str,
    table: Table,
    out: TextIO,
    bulk_size: int = 1,
    columns: Optional[Sequence[str]] = None,
) -> BaseWriter:
    """
    Create a writer by mode name.

    Args:
        mode: Either 'insert' or 'update'
        table: Target table
        out: Output sink
        bulk_size: Rows per INSERT statement (insert mode only)
        columns: Columns to update (update mode only, empty means all)

    Returns:
        The writer for the requested mode
    """
    if mode == "insert":
        return new_insert_writer(table, out, bulk_size)
    if mode == "update":
        return new_update_writer(table, out, columns)
    raise ValueError(f"Unknown writer mode: {mode}. Expected one of {', '.join(WRITER_MODES)}")


__all__ = [
    "BaseWriter",
    "InsertWriter",
    "UpdateWriter",
    "WRITER_MODES",
    "create_writer",
    "new_insert_writer",
    "new_update_writer",
]
