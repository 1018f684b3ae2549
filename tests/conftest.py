"""Shared fixtures for mcp-tools tests."""

import duckdb
import pytest

from mcp_tools.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Keep environment-derived settings from leaking between tests."""
    for name in (
        "KUZU_DB_PATH",
        "KUZU_READ_ONLY",
        "DUCKDB_PATH",
        "DUCKDB_HOME_DIR",
        "DUCKDB_READ_ONLY",
        "MCP_TRANSPORT",
        "LOGFIRE_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def duckdb_file(tmp_path):
    """Create a small DuckDB database file with one table."""
    path = tmp_path / "sales.duckdb"
    conn = duckdb.connect(str(path))
    conn.execute("CREATE TABLE orders (id INTEGER, product VARCHAR, amount DOUBLE)")
    conn.execute("INSERT INTO orders VALUES (1, 'Widget', 9.99), (2, 'Gadget', NULL)")
    conn.close()
    return path


@pytest.fixture
def data_dir(tmp_path):
    """A home directory with one file of every supported kind plus noise."""
    home = tmp_path / "home"
    home.mkdir()
    for name in [
        "b.csv",
        "a.csv",
        "events.parquet",
        "refunds.json",
        "budget.xlsx",
        "warehouse.duckdb",
        "legacy.db",
        "notes.txt",
    ]:
        (home / name).write_text("")
    (home / "nested.csv").mkdir()
    return home
