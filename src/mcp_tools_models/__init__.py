"""Shared Pydantic models for mcp-tools."""

from mcp_tools_models.requests import (
    ConfigureRequest,
    CypherPromptRequest,
    CypherQueryRequest,
    SqlQueryRequest,
)
from mcp_tools_models.responses import (
    ConfigureResponse,
    HomeDirectoryListing,
    ListFilesResponse,
    QueryResponse,
)
from mcp_tools_models.schema import (
    Connectivity,
    GraphSchema,
    GraphTable,
    NodeProperty,
    NodeTable,
    Property,
    RelTable,
    TableKind,
)

__version__ = "0.1.0"

__all__ = [
    # Requests
    "ConfigureRequest",
    "SqlQueryRequest",
    "CypherQueryRequest",
    "CypherPromptRequest",
    # Responses
    "ConfigureResponse",
    "QueryResponse",
    "ListFilesResponse",
    "HomeDirectoryListing",
    # Graph schema
    "GraphSchema",
    "GraphTable",
    "NodeTable",
    "RelTable",
    "Property",
    "NodeProperty",
    "Connectivity",
    "TableKind",
]
