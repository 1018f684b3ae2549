"""MCP servers for DuckDB and Kuzu databases."""

__version__ = "0.1.0"
