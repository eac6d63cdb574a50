"""
Statement collector for dry runs.

This module provides a StatementCollector class that can stand in for an
output file, storing and summarising the statements a writer produces.
"""
import logging
import re
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

_STATEMENT_RE = re.compile(r"^\s*(INSERT\s+INTO|UPDATE)\s+`([^`]*)`", re.IGNORECASE)


class StatementCollector:
    """
    Collects SQL statements written by a writer.

    The collector has a ``write()`` method, so it can be passed to a writer
    in place of a file. Every call to ``write()`` is recorded as one
    statement.

    Example:
        >>> from bulk_sql_writer import InsertWriter, StatementCollector, Table
        >>>
        >>> collector = StatementCollector()
        >>> writer = InsertWriter(Table("users", ["id", "name"], "id"), collector, bulk_size=2)
        >>> writer.write(["1", "'Alice'"])
        >>> writer.write(["2", "'Bob'"])
        >>> collector.get_stats()["total_statements"]
        1
    """

    def __init__(self):
        """Initialize a new statement collector."""
        self.statements: List[Dict[str, Any]] = []
        self.total_bytes = 0

    def write(self, text: str) -> int:
        """
        Record a statement written by a writer.

        Args:
            text: Statement text

        Returns:
            Number of characters written, like a text file
        """
        statement_type, table_name = self._classify(text)
        self.add_statement(text, statement_type, table_name)
        return len(text)

    def add_statement(self, statement: str, statement_type: str = "OTHER",
                      table_name: str = "unknown") -> None:
        """
        Add a statement to the collector.

        Args:
            statement: SQL statement
            statement_type: INSERT, UPDATE or OTHER
            table_name: Target table name
        """
        size = len(statement.encode("utf-8"))
        self.statements.append({
            "statement": statement,
            "type": statement_type,
            "table_name": table_name,
            "bytes": size,
        })
        self.total_bytes += size
        logger.debug(f"Collected {statement_type} statement on {table_name} ({size} bytes)")

    def clear(self) -> None:
        """Clear all collected statements."""
        self.statements = []
        self.total_bytes = 0

    def getvalue(self) -> str:
        """Return all collected statements as one string."""
        return "".join(s["statement"] for s in self.statements)

    def get_statements_by_table(self, table_name: str) -> List[Dict[str, Any]]:
        return [s for s in self.statements if s["table_name"] == table_name]

    def get_statements_by_type(self, statement_type: str) -> List[Dict[str, Any]]:
        return [s for s in self.statements if s["type"] == statement_type]

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the collected statements.

        Returns:
            Dictionary with statement and byte totals and counts by table and type
        """
        tables = set(s["table_name"] for s in self.statements)
        types = set(s["type"] for s in self.statements)

        return {
            "total_statements": len(self.statements),
            "total_bytes": self.total_bytes,
            "tables": {
                table: len(self.get_statements_by_table(table))
                for table in tables
            },
            "statement_types": {
                stype: len(self.get_statements_by_type(stype))
                for stype in types
            },
        }

    @staticmethod
    def _classify(text: str):
        match = _STATEMENT_RE.match(text)
        if not match:
            return "OTHER", "unknown"
        keyword = match.group(1).split()[0].upper()
        return keyword, match.group(2)

    def __len__(self) -> int:
        return len(self.statements)
