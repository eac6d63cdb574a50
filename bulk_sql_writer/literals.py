"""
Conversion of raw values into SQL literals.

Writers pass values through verbatim, so values read from CSV files are
turned into MySQL literals here before they reach a writer.
"""
from typing import Any, Iterable, List


def sql_literal(value: Any) -> str:
    """
    Convert a Python value into a SQL literal.

    Args:
        value: Value to convert

    Returns:
        NULL for None, TRUE/FALSE for booleans, the plain number for ints
        and floats, otherwise a single-quoted, escaped string
    """
    if value is None:
        return "NULL"
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return str(value)

    val_str = str(value).replace("\\", "\\\\").replace("'", "''")
    return f"'{val_str}'"


def row_literals(values: Iterable[Any]) -> List[str]:
    return [sql_literal(value) for value in values]
