"""
Base writer interface for bulk SQL export.

This module defines the shared state and helpers that the INSERT and
UPDATE writers build their statements with.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, TextIO

from bulk_sql_writer.exceptions import ColumnNotFoundError
from bulk_sql_writer.table import Table


class BaseWriter(ABC):
    """
    Base class for writers that turn table rows into SQL statements.

    A writer is bound to one output sink and one table for its whole life.
    The sink is anything with a ``write(str)`` method; the writer never
    closes it.

    Writers are not thread-safe.

    Attributes:
        out: Output sink receiving the statements
        table: Table the rows belong to
        statements_written: Number of statements written to the sink
        rows_written: Number of rows contained in those statements
    """

    def __init__(self, table: Table, out: TextIO):
        self.out = out
        self.table = table
        self.statements_written = 0
        self.rows_written = 0

    @abstractmethod
    def write(self, row: Sequence[str]) -> None:
        """
        Write a single row.

        Args:
            row: Values in the table's column order, already SQL literals
        """
        pass

    def flush(self) -> None:
        """
        Flush any buffered rows.

        Default implementation does nothing, override as needed.
        """
        pass

    def quote(self, identifier: str) -> str:
        return f"`{identifier}`"

    def find_column_value(self, row: Sequence[str], column: str) -> str:
        """
        Look up the value of a column within a row.

        Args:
            row: Values in the table's column order
            column: Column name to look up

        Returns:
            The row value at the column's position

        Raises:
            ColumnNotFoundError: If the table has no such column
        """
        for i, name in enumerate(self.table.columns):
            if name == column:
                return row[i]
        raise ColumnNotFoundError(column, self.table.name)

    def _emit(self, statement: str, row_count: int) -> None:
        self.out.write(statement)
        self.statements_written += 1
        self.rows_written += row_count

    def __enter__(self) -> "BaseWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        # Rows are only flushed on a clean exit.
        if exc_type is None:
            self.flush()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} table='{self.table.name}'>"
