"""
Table definition used by the writers.
"""
from typing import Any, Dict, List, Sequence

from bulk_sql_writer.exceptions import ConfigurationError


class Table:
    """
    Name, ordered column list and primary key of an export target.

    Attributes:
        name: Table name
        columns: Column names in schema order
        primary_key: Name of the column identifying a row
    """

    def __init__(self, name: str, columns: Sequence[str], primary_key: str = ""):
        self.name = name
        self.columns: List[str] = list(columns)
        self.primary_key = primary_key

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Table":
        """
        Build a table from a mapping.

        Args:
            data: Mapping with 'name', 'columns' and an optional 'primary_key'

        Returns:
            Table instance
        """
        try:
            name = data["name"]
            columns = data["columns"]
        except KeyError as e:
            raise ConfigurationError(f"Table definition is missing {e}") from e

        if isinstance(columns, str):
            columns = [col.strip() for col in columns.split(",")]

        return cls(name, columns, data.get("primary_key", ""))

    def has_column(self, column: str) -> bool:
        return column in self.columns

    def quoted_column_list(self) -> str:
        """Return the columns as a backtick-quoted, comma-separated list."""
        return ", ".join(f"`{column}`" for column in self.columns)

    def __repr__(self) -> str:
        return f"<Table name='{self.name}' columns={self.columns} primary_key='{self.primary_key}'>"
