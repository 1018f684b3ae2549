"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from mcp_tools.config import Settings, get_settings, reset_settings


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.kuzu_db_path == ""
        assert settings.kuzu_read_only is False
        assert settings.mcp_transport == "stdio"
        assert settings.mcp_port == 8000
        assert settings.mcp_path == "/mcp"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("KUZU_DB_PATH", "/data/graph.kuzu")
        monkeypatch.setenv("KUZU_READ_ONLY", "true")
        monkeypatch.setenv("MCP_TRANSPORT", "http")
        monkeypatch.setenv("MCP_PORT", "9000")
        settings = Settings()
        assert settings.kuzu_db_path == "/data/graph.kuzu"
        assert settings.kuzu_read_only is True
        assert settings.mcp_transport == "http"
        assert settings.mcp_port == 9000

    def test_invalid_transport(self, monkeypatch):
        monkeypatch.setenv("MCP_TRANSPORT", "carrier-pigeon")
        with pytest.raises(ValidationError):
            Settings()

    def test_cached_until_reset(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("DUCKDB_HOME_DIR", "/data")
        assert get_settings() is first

        reset_settings()
        assert get_settings().duckdb_home_dir == "/data"
