"""Kuzu MCP tools: getSchema and query."""

from fastmcp.exceptions import ToolError

from mcp_tools.db.kuzu_client import KuzuClient
from mcp_tools.db.session import SessionStore
from mcp_tools.errors import DatabaseError
from mcp_tools.tools.utils import parse_request
from mcp_tools_models import CypherQueryRequest


async def _get_schema(session: SessionStore[KuzuClient]) -> str:
    """Get the schema of the Kuzu database.

    Returns:
        JSON document with ``nodeTables`` and ``relTables``, each sorted by name.
    """
    try:
        with session.connection() as client:
            return client.get_schema().to_json()
    except DatabaseError as e:
        raise ToolError(str(e)) from e


async def _query(session: SessionStore[KuzuClient], cypher: str) -> str:
    """Run a Cypher query on the Kuzu database.

    Failures are raised as tool errors; the result has no error field.

    Args:
        cypher: The Cypher query to run.

    Returns:
        JSON array of row objects, two-space indented.
    """
    try:
        request = parse_request(CypherQueryRequest, cypher=cypher)
        with session.connection() as client:
            return client.query(request.cypher)
    except DatabaseError as e:
        raise ToolError(str(e)) from e
