"""
Row-at-a-time UPDATE writer.
"""
import logging
from typing import List, Optional, Sequence, TextIO

from bulk_sql_writer.table import Table
from bulk_sql_writer.writers.base import BaseWriter

logger = logging.getLogger(__name__)


class UpdateWriter(BaseWriter):
    """
    Writer that emits one UPDATE statement per row, without buffering.

    Rows are matched on the table's primary key. Only the configured
    columns are updated; when none are configured every table column is.

    Note:
        The primary key in the WHERE clause is written unquoted while the
        SET columns are backtick-quoted. Existing dumps rely on this
        output, so it is kept as is.
    """

    def __init__(self, table: Table, out: TextIO, columns: Optional[Sequence[str]] = None):
        super().__init__(table, out)
        self._columns: List[str] = list(columns or [])

        logger.debug(f"Initialized UpdateWriter for {table.name} with columns={self.columns()}")

    def columns(self) -> List[str]:
        """
        Get the columns to update.

        Returns:
            The configured columns, or all table columns if none are configured
        """
        if not self._columns:
            return self.table.columns
        return self._columns

    def quoted_columns(self) -> List[str]:
        return [self.quote(column) for column in self.columns()]

    def write(self, row: Sequence[str]) -> None:
        """
        Write an UPDATE statement for a row.

        Args:
            row: Values in the table's column order, already SQL literals

        Raises:
            ColumnNotFoundError: If the primary key or an update column is
                not part of the table
        """
        primary_key = self.table.primary_key
        primary_key_value = self.find_column_value(row, primary_key)

        assignments = [
            f"{self.quote(column)} = {self.find_column_value(row, column)}"
            for column in self.columns()
        ]

        statement = "".join([
            "UPDATE `",
            self.table.name,
            "` SET ",
            " , ".join(assignments),
            " WHERE ",
            f"{primary_key} = {primary_key_value}",
            ";\n",
        ])
        self._emit(statement, 1)
