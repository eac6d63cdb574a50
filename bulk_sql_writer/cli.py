#!/usr/bin/env python3
"""
Bulk SQL Writer - CLI tool for exporting CSV rows as SQL statements.

The insert command batches rows into multi-row INSERT statements, the
update command writes one UPDATE statement per row.
"""
import logging
import sys
from typing import Iterator, List, Optional

import click
import polars as pl
from rich.console import Console
from rich.table import Table as RichTable

from bulk_sql_writer import __version__, config
from bulk_sql_writer.collector import StatementCollector
from bulk_sql_writer.exceptions import BulkSqlWriterError
from bulk_sql_writer.literals import row_literals
from bulk_sql_writer.table import Table
from bulk_sql_writer.utils import parse_column_list, setup_logging
from bulk_sql_writer.writers import BaseWriter, create_writer

# Statements may be written to stdout, so console output goes to stderr
console = Console(stderr=True)

logger = logging.getLogger(__name__)


def read_csv_rows(csv_file: str, delimiter: str, quote_char: str, raw: bool):
    """
    Read a CSV file into column names and SQL-ready rows.

    Args:
        csv_file: Path to the CSV file
        delimiter: CSV delimiter character
        quote_char: CSV quote character
        raw: Values are already SQL literals and are passed through

    Returns:
        Tuple of (column names, row iterator)
    """
    logger.info(f"Reading CSV file: {csv_file}")

    # infer_schema_length=0 keeps every column as a string
    df = pl.read_csv(
        csv_file,
        separator=delimiter,
        quote_char=quote_char or None,
        has_header=True,
        infer_schema_length=0,
        null_values=config.NULL_VALUES,
        encoding=config.DEFAULT_ENCODING,
    )
    logger.info(f"CSV file has {df.height} rows and {df.width} columns")

    def rows() -> Iterator[List[str]]:
        for values in df.iter_rows():
            if raw:
                yield ["NULL" if value is None else value for value in values]
            else:
                yield row_literals(values)

    return df.columns, rows()


def export_rows(writer: BaseWriter, rows: Iterator[List[str]]) -> None:
    """Write every row and flush the writer."""
    with writer:
        for row in rows:
            writer.write(row)


def print_summary(writer: BaseWriter, collector: Optional[StatementCollector] = None) -> None:
    """Print what was written, with per-type counts in dry run mode."""
    console.print(
        f"[bold green]✓[/bold green] Wrote {writer.rows_written} rows "
        f"in {writer.statements_written} statements to `{writer.table.name}`"
    )
    if collector is None:
        return

    stats = collector.get_stats()
    summary = RichTable(title="Dry run summary")
    summary.add_column("Statement type")
    summary.add_column("Count", justify="right")
    for statement_type, count in sorted(stats["statement_types"].items()):
        summary.add_row(statement_type, str(count))
    console.print(summary)
    console.print(f"Total size: {stats['total_bytes']} bytes")


def run_export(
    mode: str,
    csv_file: str,
    table_name: str,
    primary_key: Optional[str],
    output: str,
    delimiter: str,
    quote_char: str,
    raw: bool,
    dry_run: bool,
    verbose: bool,
    bulk_size: int = config.DEFAULT_BULK_SIZE,
    columns: Optional[str] = None,
) -> None:
    """Shared implementation of the insert and update commands."""
    setup_logging(verbose)

    try:
        column_names, rows = read_csv_rows(csv_file, delimiter, quote_char, raw)
        table = Table(table_name, column_names, primary_key or "")
        update_columns = parse_column_list(columns)

        if dry_run:
            console.print("[bold blue]Running in DRY RUN mode - collecting statements without writing them[/bold blue]")
            collector = StatementCollector()
            writer = create_writer(mode, table, collector, bulk_size=bulk_size, columns=update_columns)
            with console.status(f"[bold blue]Building {mode.upper()} statements...[/bold blue]"):
                export_rows(writer, rows)
            print_summary(writer, collector)
            return

        with click.open_file(output, "w", encoding="utf-8") as out:
            writer = create_writer(mode, table, out, bulk_size=bulk_size, columns=update_columns)
            with console.status(f"[bold blue]Writing {mode.upper()} statements...[/bold blue]"):
                export_rows(writer, rows)
        print_summary(writer)

    except BulkSqlWriterError as e:
        logger.error(f"Configuration error: {str(e)}")
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error exporting rows: {str(e)}", exc_info=verbose)
        console.print(f"[bold red]Error:[/bold red] Failed to export {csv_file}: {str(e)}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    Bulk SQL Writer - export CSV rows as SQL INSERT or UPDATE statements.

    The first CSV row holds the column names of the target table. Values are
    quoted as SQL literals unless --raw is given.
    """
    pass


def common_options(func):
    """Options shared by the insert and update commands."""
    options = [
        click.argument('csv_file', type=click.Path(exists=True, dir_okay=False)),
        click.option('--table', '-t', 'table_name', required=True, help='Target table name'),
        click.option('--output', '-o', default='-', help='Output SQL file (default: stdout)'),
        click.option('--delimiter', '-d', default=config.DEFAULT_DELIMITER, help='CSV delimiter (default: comma)'),
        click.option('--quote-char', '-q', default=config.DEFAULT_QUOTE_CHAR,
                     help='CSV quote character (default: double quote)'),
        click.option('--raw', is_flag=True, help='CSV values are already SQL literals, write them verbatim'),
        click.option('--dry-run', is_flag=True, help='Collect statements and report statistics without writing them'),
        click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@cli.command()
@common_options
@click.option('--primary-key', '-k', default=None, help='Primary key column')
@click.option('--bulk-size', '-b', default=config.DEFAULT_BULK_SIZE, type=click.IntRange(min=0),
              show_default=True, help='Rows per INSERT statement')
def insert(csv_file, table_name, output, delimiter, quote_char, raw, dry_run, verbose, primary_key, bulk_size):
    """Write the CSV rows as multi-row INSERT statements."""
    run_export(
        "insert", csv_file, table_name, primary_key, output, delimiter, quote_char,
        raw, dry_run, verbose, bulk_size=bulk_size,
    )


@cli.command()
@common_options
@click.option('--primary-key', '-k', required=True, help='Primary key column used in the WHERE clause')
@click.option('--columns', '-c', default=None, help='Comma-separated list of columns to update (default: all)')
def update(csv_file, table_name, output, delimiter, quote_char, raw, dry_run, verbose, primary_key, columns):
    """Write one UPDATE statement per CSV row."""
    run_export(
        "update", csv_file, table_name, primary_key, output, delimiter, quote_char,
        raw, dry_run, verbose, columns=columns,
    )


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
