"""
Unit tests for SQL literal conversion.
"""
import unittest

import pytest

from bulk_sql_writer.literals import row_literals, sql_literal

pytestmark = pytest.mark.core


class TestSqlLiteral(unittest.TestCase):
    """Test cases for sql_literal()."""

    def test_null(self):
        self.assertEqual(sql_literal(None), "NULL")

    def test_booleans(self):
        self.assertEqual(sql_literal(True), "TRUE")
        self.assertEqual(sql_literal(False), "FALSE")

    def test_numbers(self):
        self.assertEqual(sql_literal(42), "42")
        self.assertEqual(sql_literal(1.5), "1.5")

    def test_strings_are_quoted(self):
        self.assertEqual(sql_literal("Alice"), "'Alice'")
        self.assertEqual(sql_literal("30"), "'30'")
        self.assertEqual(sql_literal(""), "''")

    def test_escaping(self):
        self.assertEqual(sql_literal("O'Brien"), "'O''Brien'")
        self.assertEqual(sql_literal("C:\\tmp"), "'C:\\\\tmp'")

    def test_row_literals(self):
        self.assertEqual(row_literals(["1", None, "x"]), ["'1'", "NULL", "'x'"])


if __name__ == '__main__':
    unittest.main()
