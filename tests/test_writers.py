"""
Unit tests for the shared writer behavior.
"""
import io
import unittest
from unittest.mock import MagicMock

import pytest

from bulk_sql_writer import BaseWriter, ColumnNotFoundError, ConfigurationError, Table
from bulk_sql_writer.writers import (
    InsertWriter,
    UpdateWriter,
    create_writer,
    new_insert_writer,
    new_update_writer,
)

pytestmark = pytest.mark.core


class RecordingWriter(BaseWriter):
    """Minimal writer emitting each row verbatim."""

    def write(self, row):
        self._emit(",".join(row) + "\n", 1)


class TestBaseWriter(unittest.TestCase):
    """Test cases for the BaseWriter helpers."""

    def setUp(self):
        """Set up test fixtures."""
        self.table = Table("people", ["id", "name", "age"], "id")
        self.out = io.StringIO()
        self.writer = RecordingWriter(self.table, self.out)

    def test_abstract_methods(self):
        """BaseWriter cannot be instantiated without write()."""
        with self.assertRaises(TypeError):
            BaseWriter(self.table, self.out)

    def test_quote(self):
        self.assertEqual(self.writer.quote("name"), "`name`")
        # No escaping of embedded backticks
        self.assertEqual(self.writer.quote("we`ird"), "`we`ird`")

    def test_find_column_value(self):
        row = ["7", "Carol", "41"]
        self.assertEqual(self.writer.find_column_value(row, "id"), "7")
        self.assertEqual(self.writer.find_column_value(row, "age"), "41")

    def test_find_column_value_missing_column(self):
        """A column outside the schema is a configuration error."""
        with self.assertRaises(ColumnNotFoundError) as ctx:
            self.writer.find_column_value(["1", "x", "2"], "email")

        self.assertEqual(ctx.exception.column, "email")
        self.assertEqual(ctx.exception.table, "people")
        self.assertIsInstance(ctx.exception, ConfigurationError)
        self.assertIsInstance(ctx.exception, LookupError)
        self.assertIn("email", str(ctx.exception))

    def test_default_flush_is_noop(self):
        self.writer.flush()
        self.assertEqual(self.out.getvalue(), "")

    def test_counters(self):
        self.writer.write(["1", "a", "2"])
        self.writer.write(["2", "b", "3"])
        self.assertEqual(self.writer.statements_written, 2)
        self.assertEqual(self.writer.rows_written, 2)

    def test_sink_is_not_closed(self):
        sink = MagicMock()
        with RecordingWriter(self.table, sink) as writer:
            writer.write(["1", "a", "2"])
        sink.close.assert_not_called()


class TestWriterContextManager(unittest.TestCase):
    """Test cases for flushing on context exit."""

    def setUp(self):
        """Set up test fixtures."""
        self.table = Table("t", ["id", "v"], "id")
        self.out = io.StringIO()

    def test_flush_on_clean_exit(self):
        with InsertWriter(self.table, self.out, bulk_size=10) as writer:
            writer.write(["1", "a"])
            self.assertEqual(self.out.getvalue(), "")

        self.assertEqual(self.out.getvalue(), "INSERT INTO `t` (`id`, `v`) VALUES (1, a);\n")

    def test_no_flush_on_error(self):
        with self.assertRaises(RuntimeError):
            with InsertWriter(self.table, self.out, bulk_size=10) as writer:
                writer.write(["1", "a"])
                raise RuntimeError("boom")

        self.assertEqual(self.out.getvalue(), "")
        self.assertEqual(len(writer.buffer), 1)


class TestWriterFactory(unittest.TestCase):
    """Test cases for the writer constructors."""

    def setUp(self):
        """Set up test fixtures."""
        self.table = Table("t", ["id", "v"], "id")
        self.out = io.StringIO()

    def test_new_insert_writer(self):
        writer = new_insert_writer(self.table, self.out, 5)
        self.assertIsInstance(writer, InsertWriter)
        self.assertEqual(writer.bulk_size, 5)
        self.assertIs(writer.out, self.out)
        self.assertIs(writer.table, self.table)

    def test_new_update_writer(self):
        writer = new_update_writer(self.table, self.out, ["v"])
        self.assertIsInstance(writer, UpdateWriter)
        self.assertEqual(writer.columns(), ["v"])

    def test_create_writer_by_mode(self):
        self.assertIsInstance(create_writer("insert", self.table, self.out, bulk_size=2), InsertWriter)
        self.assertIsInstance(create_writer("update", self.table, self.out), UpdateWriter)

    def test_create_writer_unknown_mode(self):
        with self.assertRaises(ValueError):
            create_writer("upsert", self.table, self.out)


if __name__ == '__main__':
    unittest.main()
