"""
Pytest configuration and fixtures for Bulk SQL Writer tests.
"""
import io

import pytest

from bulk_sql_writer import Table


# Define test markers
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "core: tests of the writers that need no files"
    )
    config.addinivalue_line(
        "markers", "cli: tests that run the command line tool"
    )


@pytest.fixture
def people_table():
    """Table with an id primary key."""
    return Table("people", ["id", "name", "age"], "id")


@pytest.fixture
def out():
    """In-memory output sink."""
    return io.StringIO()


@pytest.fixture
def people_csv(tmp_path):
    """Small CSV file matching people_table."""
    path = tmp_path / "people.csv"
    path.write_text(
        "id,name,age\n"
        "1,Alice,30\n"
        "2,Bob,25\n"
        "3,O'Brien,\n",
        encoding="utf-8",
    )
    return path
