"""Click command group and the server commands for mcp-tools.

Commands stay thin and delegate to mcp_tools.server and the
database adapters.
"""

import sys

import click

from mcp_tools.cli.commands import inspect_cmd
from mcp_tools.cli.utils import _get_cli_version, err_console
from mcp_tools.config import get_settings
from mcp_tools.errors import DatabaseError

TRANSPORT_CHOICE = click.Choice(["stdio", "http"])


@click.group()
@click.version_option(version=_get_cli_version())
def main():
    """mcp-tools - MCP servers for DuckDB and Kuzu databases."""
    pass


@main.command()
@click.option("--db-path", default="", help="Database file to open at startup, or ':memory:'.")
@click.option(
    "--home-dir",
    default=None,
    type=click.Path(exists=True, file_okay=False),
    help="Directory to scan for database and data files.",
)
@click.option("--read-only", is_flag=True, help="Open the database read-only.")
@click.option("--transport", type=TRANSPORT_CHOICE, default=None, help="Override MCP_TRANSPORT.")
def duckdb(db_path: str, home_dir: str | None, read_only: bool, transport: str | None):
    """Start the DuckDB MCP server.

    Without --db-path or --home-dir the server starts unconfigured and
    clients call the 'configure' tool.
    """
    from mcp_tools.server import run_duckdb_server

    settings = get_settings()
    try:
        run_duckdb_server(
            db_path=db_path,
            home_dir=home_dir or "",
            read_only=read_only or settings.duckdb_read_only,
            transport=transport,
        )
    except DatabaseError as e:
        err_console.print(f"[red]Failed to start DuckDB server: {e}[/red]")
        sys.exit(1)


@main.command()
@click.argument("db_path", required=False)
@click.option("--read-only", is_flag=True, help="Open the database read-only.")
@click.option("--transport", type=TRANSPORT_CHOICE, default=None, help="Override MCP_TRANSPORT.")
def kuzu(db_path: str | None, read_only: bool, transport: str | None):
    """Start the Kuzu MCP server.

    DB_PATH falls back to KUZU_DB_PATH. A missing database is created
    unless the server runs read-only.
    """
    settings = get_settings()
    db_path = db_path or settings.kuzu_db_path
    if not db_path:
        err_console.print(
            "[red]Please provide a path to kuzu database as a command line argument[/red]"
        )
        sys.exit(1)

    from mcp_tools.server import run_kuzu_server

    try:
        run_kuzu_server(
            db_path=db_path,
            read_only=read_only or settings.kuzu_read_only,
            transport=transport,
        )
    except DatabaseError as e:
        err_console.print(f"[red]Failed to start Kuzu server: {e}[/red]")
        sys.exit(1)


inspect_cmd.register_commands(main)


if __name__ == "__main__":
    main()
