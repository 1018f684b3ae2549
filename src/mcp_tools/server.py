"""FastMCP servers for DuckDB and Kuzu."""

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import PromptError
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_tools.config import get_settings
from mcp_tools.db.duckdb_client import DuckDBClient
from mcp_tools.db.kuzu_client import KuzuClient
from mcp_tools.db.session import SessionStore
from mcp_tools.errors import ConfigurationError, DatabaseError
from mcp_tools.prompts import DUCKDB_INITIAL_PROMPT, generate_cypher_prompt
from mcp_tools.tools import graph as graph_tools
from mcp_tools.tools import sql as sql_tools
from mcp_tools.tools.utils import parse_request
from mcp_tools_models import CypherPromptRequest

DUCKDB_SERVER_NAME = "duckdb-server"
KUZU_SERVER_NAME = "kuzu-memory-server"
HOME_DIRECTORY_URI = "duckdb://home-directory"

DUCKDB_INSTRUCTIONS = """
DuckDB query server.

1. configure(db_path=..., home_dir=...) to connect and/or pick a data directory
2. list_files() to see database, CSV, Parquet, JSON and Excel files
3. query(sql=...) to run DuckDB SQL; results come back as a text table
"""

KUZU_INSTRUCTIONS = """
Kuzu graph database server.

1. getSchema() to read node tables, relationship tables and their properties
2. query(cypher=...) to run Kuzu Cypher; rows come back as JSON
"""


def _add_health_route(server: FastMCP, service: str, session: SessionStore) -> None:
    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        """Health check endpoint for load balancers and k8s probes."""
        return JSONResponse(
            {
                "status": "healthy",
                "service": service,
                "connected": session.has_connection,
            }
        )


# =============================================================================
# Server Creation
# =============================================================================


def create_duckdb_server(session: SessionStore[DuckDBClient]) -> FastMCP:
    """Create the DuckDB MCP server bound to a session."""
    server = FastMCP(name=DUCKDB_SERVER_NAME, instructions=DUCKDB_INSTRUCTIONS)

    # =========================================================================
    # Resources and prompts
    # =========================================================================

    @server.resource(
        HOME_DIRECTORY_URI,
        name="Home Directory Listing",
        description="Lists available database and data files in the configured home directory",
        mime_type="application/json",
    )
    def home_directory() -> str:
        return sql_tools._home_directory_listing(session)

    @server.prompt(
        name="duckdb-initial-prompt",
        description=(
            "Comprehensive guidance for working with DuckDB databases "
            "through dynamic configuration"
        ),
    )
    def duckdb_initial_prompt() -> str:
        return DUCKDB_INITIAL_PROMPT

    _add_health_route(server, DUCKDB_SERVER_NAME, session)

    # =========================================================================
    # Tools
    # =========================================================================

    async def configure(db_path: str = "", home_dir: str = "", read_only: bool = False) -> dict:
        """Configure DuckDB database connection and/or working directory.

        Args:
            db_path: Path to database file or ':memory:' for in-memory database
            home_dir: Directory to scan for available database and data files
            read_only: Connect in read-only mode (default: false)
        """
        return await sql_tools._configure(session, db_path, home_dir, read_only)

    async def query(sql: str) -> dict:
        """Execute a SQL query on the configured DuckDB database.

        Args:
            sql: SQL query to execute (DuckDB dialect)
        """
        return await sql_tools._query(session, sql)

    async def list_files() -> dict:
        """List available database and data files in the configured home directory."""
        return await sql_tools._list_files(session)

    server.tool(name="configure")(configure)
    server.tool(name="query")(query)
    server.tool(name="list_files")(list_files)

    return server


def create_kuzu_server(session: SessionStore[KuzuClient]) -> FastMCP:
    """Create the Kuzu MCP server bound to an already configured session."""
    server = FastMCP(name=KUZU_SERVER_NAME, instructions=KUZU_INSTRUCTIONS)

    @server.prompt(name="generateKuzuCypher", description="Generate a Cypher query for Kuzu")
    def generate_kuzu_cypher(question: str) -> str:
        """Generate a Cypher query for Kuzu.

        Args:
            question: The question in natural language to generate the Cypher query for
        """
        try:
            request = parse_request(CypherPromptRequest, question=question)
            with session.connection() as client:
                schema = client.get_schema()
        except DatabaseError as e:
            raise PromptError(f"failed to get schema: {e}") from e
        return generate_cypher_prompt(request.question, schema)

    _add_health_route(server, KUZU_SERVER_NAME, session)

    async def get_schema() -> str:
        """Get the schema of the Kuzu database."""
        return await graph_tools._get_schema(session)

    async def query(cypher: str) -> str:
        """Run a Cypher query on the Kuzu database.

        Args:
            cypher: The Cypher query to run
        """
        return await graph_tools._query(session, cypher)

    server.tool(name="getSchema")(get_schema)
    server.tool(name="query")(query)

    return server


# =============================================================================
# Entry points
# =============================================================================


def _configure_logging():
    """Configure logging before anything else (stderr, safe for stdio)."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_observability(service_name: str):
    """Configure Logfire when a token is set."""
    settings = get_settings()
    if not settings.logfire_token:
        return

    import logfire

    logfire.configure(token=settings.logfire_token, service_name=service_name)
    # Instrument MCP server (all tool calls)
    logfire.instrument_mcp()
    logging.getLogger(__name__).info("Logfire observability enabled")


def _run(server: FastMCP, transport: str | None = None) -> None:
    settings = get_settings()
    transport = transport or settings.mcp_transport
    if transport == "http":
        server.run(
            transport="http",
            host=settings.mcp_host,
            port=settings.mcp_port,
            path=settings.mcp_path,
        )
    else:
        # Default: stdio for local clients
        server.run()


def run_duckdb_server(
    db_path: str = "",
    home_dir: str = "",
    read_only: bool | None = None,
    transport: str | None = None,
) -> None:
    """Run the DuckDB MCP server until the transport closes.

    Arguments override the ``DUCKDB_*`` settings used for the optional
    startup configuration.

    Raises:
        DatabaseError: If the startup configuration fails.
    """
    _configure_logging()
    _configure_observability(DUCKDB_SERVER_NAME)

    settings = get_settings()
    logger = logging.getLogger(__name__)

    db_path = db_path or settings.duckdb_path
    home_dir = home_dir or settings.duckdb_home_dir
    if read_only is None:
        read_only = settings.duckdb_read_only

    session: SessionStore[DuckDBClient] = SessionStore(DuckDBClient.open)
    try:
        if db_path or home_dir:
            session.configure(db_path, home_dir, read_only)

        logger.info("Starting DuckDB MCP server")
        _run(create_duckdb_server(session), transport)
    finally:
        session.close()


def run_kuzu_server(
    db_path: str = "",
    read_only: bool | None = None,
    transport: str | None = None,
) -> None:
    """Open the Kuzu database and run the Kuzu MCP server.

    Raises:
        ConfigurationError: If no database path is given or configured.
        DatabaseError: If the database cannot be opened.
    """
    _configure_logging()
    _configure_observability(KUZU_SERVER_NAME)

    settings = get_settings()
    logger = logging.getLogger(__name__)

    db_path = db_path or settings.kuzu_db_path
    if not db_path:
        raise ConfigurationError("no Kuzu database path given")
    if read_only is None:
        read_only = settings.kuzu_read_only

    session: SessionStore[KuzuClient] = SessionStore(KuzuClient.open)
    try:
        session.configure(db_path=db_path, read_only=read_only)

        logger.info(f"Starting Kuzu MCP server (database: {db_path}, read-only: {read_only})")
        _run(create_kuzu_server(session), transport)
    finally:
        session.close()
