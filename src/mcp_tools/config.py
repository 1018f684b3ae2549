"""Configuration for mcp-tools."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_files() -> list[Path]:
    """Get list of .env files to load (current directory only)."""
    cwd_env = Path(".env")
    return [cwd_env] if cwd_env.exists() else []


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Kuzu server
    # ==========================================================================

    kuzu_db_path: str = Field(
        default="",
        description="Path to the Kuzu database (used when no CLI argument is given)",
    )
    kuzu_read_only: bool = Field(
        default=False,
        description="Open the Kuzu database in read-only mode",
    )

    # ==========================================================================
    # DuckDB server (optional startup configuration)
    # ==========================================================================

    duckdb_path: str = Field(
        default="",
        description="DuckDB database opened at startup (file path or ':memory:')",
    )
    duckdb_home_dir: str = Field(
        default="",
        description="Home directory scanned for data files at startup",
    )
    duckdb_read_only: bool = Field(
        default=False,
        description="Open the startup DuckDB database in read-only mode",
    )

    # ==========================================================================
    # MCP server
    # ==========================================================================

    mcp_transport: Literal["stdio", "http"] = Field(
        default="stdio",
        description="MCP transport: 'stdio' for local, 'http' for remote",
    )
    mcp_host: str = Field(
        default="0.0.0.0",
        description="Host to bind MCP HTTP server",
    )
    mcp_port: int = Field(
        default=8000,
        description="Port for MCP HTTP server",
    )
    mcp_path: str = Field(
        default="/mcp",
        description="Path for MCP HTTP endpoint",
    )

    # Logging and observability
    log_level: str = Field(default="INFO", description="Root logging level")
    logfire_token: str = Field(
        default="",
        description="Pydantic Logfire token for observability (optional)",
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset cached settings (useful for testing)."""
    global _settings
    _settings = None
