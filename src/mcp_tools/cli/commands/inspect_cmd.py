"""Inspection commands: schema, files, query.

These open a database directly, without an MCP server, for quick checks
from the shell.
"""

import sys
from pathlib import Path

import click
from rich.table import Table

from mcp_tools.cli.utils import console, err_console
from mcp_tools.db.duckdb_client import DuckDBClient
from mcp_tools.db.files import list_supported_files
from mcp_tools.db.kuzu_client import KuzuClient
from mcp_tools.errors import DatabaseError


@click.command()
@click.argument("db_path")
@click.option("--output", "-o", help="Output file path (default: stdout)")
def schema(db_path: str, output: str | None):
    """Print the schema of a Kuzu database as JSON.

    DB_PATH must be an existing Kuzu database; it is opened read-only.
    """
    try:
        with KuzuClient.open(db_path, read_only=True) as client:
            output_str = client.get_schema().to_json()
    except DatabaseError as e:
        err_console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if output:
        Path(output).parent.mkdir(parents=True, exist_ok=True)
        Path(output).write_text(output_str)
        err_console.print(f"[green]Schema written to {output}[/green]")
    else:
        click.echo(output_str)


@click.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
def files(directory: str):
    """List the database and data files DuckDB can read in DIRECTORY."""
    try:
        catalog = list_supported_files(directory)
    except DatabaseError as e:
        err_console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if not catalog.total:
        console.print(f"[dim]No supported files in {directory}[/dim]")
        return

    table = Table(title=f"Files in {directory}", show_header=True)
    table.add_column("Category", style="cyan")
    table.add_column("File")

    for category, names in catalog.files.items():
        for name in names:
            table.add_row(category, name)

    console.print(table)
    console.print(f"\n{catalog.total} supported files")


@click.command()
@click.argument("db_path")
@click.argument("sql")
@click.option("--read-only", is_flag=True, help="Open the database read-only.")
def query(db_path: str, sql: str, read_only: bool):
    """Run one SQL statement against DB_PATH and print the result table.

    Use ':memory:' as DB_PATH for a scratch database.
    """
    try:
        with DuckDBClient.open(db_path, read_only=read_only) as client:
            results = client.query(sql)
    except DatabaseError as e:
        err_console.print(f"[red]{e}[/red]")
        sys.exit(1)

    click.echo(results, nl=False)


def register_commands(main_group: click.Group) -> None:
    """Register the inspection commands with the main group."""
    main_group.add_command(schema)
    main_group.add_command(files)
    main_group.add_command(query)
