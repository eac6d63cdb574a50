"""
Buffered multi-row INSERT writer.
"""
import logging
from typing import List, Sequence, TextIO

from bulk_sql_writer.table import Table
from bulk_sql_writer.writers.base import BaseWriter

logger = logging.getLogger(__name__)


class InsertWriter(BaseWriter):
    """
    Writer that batches rows into multi-row INSERT statements.

    Rows are buffered until ``bulk_size`` of them have been written, then
    emitted as one statement. The caller must call ``flush()`` at the end
    of the stream to emit the final partial batch.

    Example:
        >>> import io
        >>> from bulk_sql_writer import InsertWriter, Table
        >>>
        >>> out = io.StringIO()
        >>> writer = InsertWriter(Table("t", ["id", "name"], "id"), out, bulk_size=2)
        >>> writer.write(["1", "'Alice'"])
        >>> writer.write(["2", "'Bob'"])
        >>> out.getvalue()
        "INSERT INTO `t` (`id`, `name`) VALUES (1, 'Alice'), (2, 'Bob');\\n"

    Attributes:
        bulk_size: Number of buffered rows that triggers a flush. Zero
            flushes after every row.
    """

    def __init__(self, table: Table, out: TextIO, bulk_size: int):
        if bulk_size < 0:
            raise ValueError(f"bulk_size must be non-negative, got {bulk_size}")
        super().__init__(table, out)
        self.bulk_size = bulk_size
        self.buffer: List[Sequence[str]] = []

        logger.debug(f"Initialized InsertWriter for {table.name} with bulk_size={bulk_size}")

    def write(self, row: Sequence[str]) -> None:
        """
        Add a row to the buffer, flushing it once it is full.

        Args:
            row: Values in the table's column order, already SQL literals
        """
        self.buffer.append(row)
        if len(self.buffer) >= self.bulk_size:
            self.flush()

    def flush(self) -> None:
        """Write all buffered rows as a single INSERT statement."""
        if not self.buffer:
            return

        row_count = len(self.buffer)
        self._emit(self.build_statement(), row_count)

        # Cleared only once the sink accepted the statement
        self.buffer.clear()
        logger.debug(f"Flushed {row_count} rows into `{self.table.name}`")

    def build_statement(self) -> str:
        """
        Build the INSERT statement for the current buffer.

        Returns:
            The statement, terminated by ";\\n"
        """
        parts = [
            "INSERT INTO `",
            self.table.name,
            "` (",
            self.table.quoted_column_list(),
            ") VALUES ",
            ", ".join(f"({', '.join(row)})" for row in self.buffer),
            ";\n",
        ]
        return "".join(parts)
