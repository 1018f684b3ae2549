"""Tests for the DuckDB MCP tools."""

import json
from unittest.mock import MagicMock

import pytest
from fastmcp.exceptions import ResourceError, ToolError

from mcp_tools.db.client import MEMORY_PATH
from mcp_tools.db.duckdb_client import DuckDBClient
from mcp_tools.db.session import SessionSnapshot, SessionState, SessionStore
from mcp_tools.tools.sql import _configure, _home_directory_listing, _list_files, _query


@pytest.fixture
def session():
    store = SessionStore(DuckDBClient.open)
    yield store
    store.close()


class TestConfigure:
    @pytest.mark.asyncio
    async def test_memory_database(self, session):
        result = await _configure(session, db_path=MEMORY_PATH)
        assert result == {
            "success": True,
            "message": "Successfully connected to database: :memory:",
            "connected": True,
            "db_path": MEMORY_PATH,
            "read_only": False,
        }

    @pytest.mark.asyncio
    async def test_read_only_message(self, session, duckdb_file):
        result = await _configure(session, db_path=str(duckdb_file), read_only=True)
        assert result["message"].endswith(" (read-only mode)")
        assert result["read_only"] is True

    @pytest.mark.asyncio
    async def test_empty_home_dir(self, session, tmp_path):
        result = await _configure(session, home_dir=str(tmp_path))
        assert result["success"] is True
        assert result["connected"] is False
        assert result["available_files"] == {}
        assert result["total_files"] == 0
        assert result["message"] == f"Home directory set to: {tmp_path} (found 0 supported files)"
        assert "db_path" not in result

    @pytest.mark.asyncio
    async def test_database_and_home_dir(self, session, duckdb_file, data_dir):
        result = await _configure(session, db_path=str(duckdb_file), home_dir=str(data_dir))
        assert result["connected"] is True
        assert result["home_dir"] == str(data_dir)
        assert result["total_files"] == 7
        assert result["message"] == (
            f"Successfully connected to database: {duckdb_file} | Home directory: {data_dir}"
        )

    @pytest.mark.asyncio
    async def test_requires_a_target(self, session):
        with pytest.raises(ToolError, match="Either 'db_path' or 'home_dir' must be provided"):
            await _configure(session)

    @pytest.mark.asyncio
    async def test_missing_database(self, session, tmp_path):
        missing = tmp_path / "missing.duckdb"
        with pytest.raises(ToolError, match="database file does not exist"):
            await _configure(session, db_path=str(missing))
        assert not session.has_connection

    @pytest.mark.asyncio
    async def test_home_dir_not_a_directory(self, session, tmp_path):
        path = tmp_path / "file.csv"
        path.write_text("")
        with pytest.raises(ToolError, match="Home path is not a directory"):
            await _configure(session, home_dir=str(path))

    @pytest.mark.asyncio
    async def test_missing_home_dir(self, session, tmp_path):
        with pytest.raises(ToolError, match="Home directory does not exist"):
            await _configure(session, home_dir=str(tmp_path / "missing"))

    @pytest.mark.asyncio
    async def test_reconfigure_switches_database(self, session, duckdb_file):
        await _configure(session, db_path=MEMORY_PATH)
        result = await _configure(session, db_path=str(duckdb_file))
        assert result["db_path"] == str(duckdb_file)
        query = await _query(session, "SELECT count(*) AS n FROM orders")
        assert query["success"] is True


class TestQuery:
    @pytest.mark.asyncio
    async def test_without_configure(self, session):
        with pytest.raises(ToolError, match="No database connection"):
            await _query(session, "SELECT 1")

    @pytest.mark.asyncio
    async def test_select(self, session):
        await _configure(session, db_path=MEMORY_PATH)
        result = await _query(session, "SELECT 1")
        assert result["success"] is True
        assert result["db_path"] == MEMORY_PATH
        assert "│ INTEGER │" in result["results"]
        assert result["results"].endswith("\n(1 row)\n")
        assert "error" not in result

    @pytest.mark.asyncio
    async def test_execution_error_is_embedded(self, session):
        await _configure(session, db_path=MEMORY_PATH)
        result = await _query(session, "SELECT * FROM missing_table")
        assert result["success"] is False
        assert result["error"].startswith("query execution failed")
        assert result["db_path"] == MEMORY_PATH
        assert "results" not in result

    @pytest.mark.asyncio
    async def test_empty_sql(self, session):
        await _configure(session, db_path=MEMORY_PATH)
        with pytest.raises(ToolError, match="Parameter 'sql' cannot be empty"):
            await _query(session, "")


class TestListFiles:
    @pytest.mark.asyncio
    async def test_without_home_dir(self, session):
        with pytest.raises(ToolError, match="No home directory configured"):
            await _list_files(session)

    @pytest.mark.asyncio
    async def test_lists_files(self, session, data_dir):
        await _configure(session, home_dir=str(data_dir))
        result = await _list_files(session)
        assert result["success"] is True
        assert result["home_dir"] == str(data_dir)
        assert result["total_files"] == 7
        assert result["available_files"]["CSV Files"] == ["a.csv", "b.csv"]
        assert result["message"] == f"Found 7 supported files in {data_dir}"

    @pytest.mark.asyncio
    async def test_rescans_on_each_call(self, session, tmp_path):
        await _configure(session, home_dir=str(tmp_path))
        (tmp_path / "new.parquet").write_text("")
        result = await _list_files(session)
        assert result["available_files"] == {"Parquet Files": ["new.parquet"]}


class TestHomeDirectoryResource:
    def test_without_home_dir(self, session):
        with pytest.raises(ResourceError, match="No home directory configured"):
            _home_directory_listing(session)

    @pytest.mark.asyncio
    async def test_listing(self, session, data_dir):
        await _configure(session, home_dir=str(data_dir))
        listing = _home_directory_listing(session)
        assert listing.startswith('{\n  "home_dir"')
        document = json.loads(listing)
        assert document["total_files"] == 7
        assert set(document) == {"home_dir", "available_files", "total_files"}


class TestConfigureResponseConsistency:
    @pytest.mark.asyncio
    async def test_connection_fields_come_from_one_snapshot(self):
        session = MagicMock()
        session.configure.return_value = SessionSnapshot(
            db_path=MEMORY_PATH,
            home_dir="",
            read_only=False,
            configured=True,
            connected=True,
            state=SessionState.CONFIGURED,
        )
        # Simulate another configure landing after this one
        session.has_connection = False
        session.db_path = ""

        result = await _configure(session, db_path=MEMORY_PATH)

        assert result["connected"] is True
        assert result["db_path"] == MEMORY_PATH
