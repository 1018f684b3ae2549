"""DuckDB MCP tools: configure, query, list_files and the home directory resource."""

import logging
from pathlib import Path

from fastmcp.exceptions import ResourceError, ToolError

from mcp_tools.db.client import validate_db_path
from mcp_tools.db.duckdb_client import DuckDBClient
from mcp_tools.db.files import FileCatalog, list_supported_files
from mcp_tools.db.session import SessionStore
from mcp_tools.errors import ConfigurationError, DatabaseError, QueryError
from mcp_tools.tools.utils import parse_request
from mcp_tools_models import (
    ConfigureRequest,
    ConfigureResponse,
    HomeDirectoryListing,
    ListFilesResponse,
    QueryResponse,
    SqlQueryRequest,
)

logger = logging.getLogger(__name__)

NO_HOME_DIR_MESSAGE = (
    "No home directory configured. Use the 'configure' tool to set a home directory first."
)


def _check_home_dir(home_dir: str) -> None:
    if not home_dir:
        return
    path = Path(home_dir)
    try:
        path.stat()
    except FileNotFoundError:
        raise ConfigurationError(f"Home directory does not exist: {home_dir}") from None
    except OSError as e:
        raise ConfigurationError(f"Cannot access home directory: {e}") from e
    if not path.is_dir():
        raise ConfigurationError(f"Home path is not a directory: {home_dir}")


def _scan_home_dir(home_dir: str) -> FileCatalog:
    try:
        return list_supported_files(home_dir)
    except ConfigurationError as e:
        raise ToolError(f"Failed to list files in home directory: {e}") from e


async def _configure(
    session: SessionStore[DuckDBClient],
    db_path: str = "",
    home_dir: str = "",
    read_only: bool = False,
) -> dict:
    """Configure DuckDB database connection and/or working directory.

    Args:
        db_path: Path to database file or ':memory:' for in-memory database.
        home_dir: Directory to scan for available database and data files.
        read_only: Connect in read-only mode (default: false).

    Returns:
        Connection status and, when a home directory is given, the
        supported files found in it.
    """
    try:
        request = parse_request(
            ConfigureRequest, db_path=db_path, home_dir=home_dir, read_only=read_only
        )
        if request.db_path:
            validate_db_path(request.db_path)
        _check_home_dir(request.home_dir)
    except DatabaseError as e:
        raise ToolError(str(e)) from e

    try:
        snapshot = session.configure(request.db_path, request.home_dir, request.read_only)
    except DatabaseError as e:
        logger.warning(f"Configuration failed: {e}")
        raise ToolError(f"Configuration failed: {e}") from e

    response = ConfigureResponse(success=True, read_only=request.read_only)
    if snapshot.connected:
        response.connected = True
        response.db_path = snapshot.db_path

    if request.db_path:
        response.message = f"Successfully connected to database: {request.db_path}"
        if request.read_only:
            response.message += " (read-only mode)"

    if request.home_dir:
        catalog = _scan_home_dir(request.home_dir)
        response.home_dir = request.home_dir
        response.available_files = catalog.to_dict()
        response.total_files = catalog.total
        if request.db_path:
            response.message += f" | Home directory: {request.home_dir}"
        else:
            response.message = (
                f"Home directory set to: {request.home_dir} "
                f"(found {catalog.total} supported files)"
            )

    return response.to_dict()


async def _query(session: SessionStore[DuckDBClient], sql: str) -> dict:
    """Execute a SQL query on the configured DuckDB database.

    Execution errors are reported in the ``error`` field with
    ``success=false``; a missing connection is a tool error.

    Args:
        sql: SQL query to execute (DuckDB dialect).

    Returns:
        Rendered result table and the database path.
    """
    try:
        with session.connection() as client:
            request = parse_request(SqlQueryRequest, sql=sql)
            try:
                results = client.query(request.sql)
            except QueryError as e:
                logger.info(f"Query failed on {client.db_path}: {e}")
                return QueryResponse(success=False, error=str(e), db_path=client.db_path).to_dict()
            return QueryResponse(success=True, results=results, db_path=client.db_path).to_dict()
    except DatabaseError as e:
        raise ToolError(str(e)) from e


async def _list_files(session: SessionStore[DuckDBClient]) -> dict:
    """List available database and data files in the configured home directory."""
    home_dir = session.home_dir
    if not home_dir:
        raise ToolError(NO_HOME_DIR_MESSAGE)

    catalog = _scan_home_dir(home_dir)
    return ListFilesResponse(
        home_dir=home_dir,
        available_files=catalog.to_dict(),
        total_files=catalog.total,
        message=f"Found {catalog.total} supported files in {home_dir}",
    ).to_dict()


def _home_directory_listing(session: SessionStore[DuckDBClient]) -> str:
    """JSON listing of the home directory for the ``duckdb://home-directory`` resource."""
    home_dir = session.home_dir
    if not home_dir:
        raise ResourceError(NO_HOME_DIR_MESSAGE)

    try:
        catalog = list_supported_files(home_dir)
    except ConfigurationError as e:
        raise ResourceError(f"Failed to list files in home directory: {e}") from e

    listing = HomeDirectoryListing(
        home_dir=home_dir,
        available_files=catalog.to_dict(),
        total_files=catalog.total,
    )
    return listing.model_dump_json(indent=2)
