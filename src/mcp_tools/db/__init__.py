"""Database clients, session state and file discovery."""

from mcp_tools.db.client import MEMORY_PATH, ConnectionClient, validate_db_path
from mcp_tools.db.duckdb_client import DuckDBClient
from mcp_tools.db.files import FileCatalog, FileCategory, list_supported_files
from mcp_tools.db.kuzu_client import KuzuClient
from mcp_tools.db.session import SessionSnapshot, SessionState, SessionStore

__all__ = [
    "MEMORY_PATH",
    "ConnectionClient",
    "DuckDBClient",
    "KuzuClient",
    "FileCatalog",
    "FileCategory",
    "SessionSnapshot",
    "SessionState",
    "SessionStore",
    "list_supported_files",
    "validate_db_path",
]
