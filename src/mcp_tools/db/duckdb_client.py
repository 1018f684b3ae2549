"""DuckDB client."""

from collections.abc import Iterator

import duckdb

from mcp_tools.db.client import ConnectionClient
from mcp_tools.errors import QueryError
from mcp_tools.rendering import QueryResult, render_table

_FETCH_SIZE = 1024


def _iter_rows(relation: duckdb.DuckDBPyRelation) -> Iterator[tuple]:
    while True:
        batch = relation.fetchmany(_FETCH_SIZE)
        if not batch:
            return
        yield from batch


class DuckDBClient(ConnectionClient):
    """Wraps one DuckDB connection and renders query results as tables."""

    dialect = "duckdb"
    driver_errors = (duckdb.Error,)

    def __init__(self, db_path: str, read_only: bool = False) -> None:
        super().__init__(db_path, read_only)
        self._conn: duckdb.DuckDBPyConnection | None = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def _connect(self) -> None:
        self._conn = duckdb.connect(database=self.db_path, read_only=self.open_read_only)

    def _ping(self) -> None:
        self._conn.execute("SELECT 1").fetchone()

    def _disconnect(self) -> None:
        if self._conn is not None:
            conn, self._conn = self._conn, None
            conn.close()

    def execute(self, sql: str) -> QueryResult:
        """Run SQL and return a lazily fetched result.

        Statements that produce no result set yield an empty, column-less
        result.
        """
        if self._conn is None:
            raise QueryError("database connection is not established")
        relation = self._conn.sql(sql)
        if relation is None:
            return QueryResult(columns=[], column_types=[])
        return QueryResult(
            columns=list(relation.columns),
            column_types=[str(t) for t in relation.types],
            rows=_iter_rows(relation),
        )

    def query(self, sql: str) -> str:
        """Execute SQL and return the fully rendered result table.

        Raises:
            QueryError: If there is no connection or execution fails.
        """
        if self._conn is None:
            raise QueryError("database connection is not established")
        try:
            return render_table(self.execute(sql))
        except duckdb.Error as e:
            raise QueryError(f"query execution failed: {e}") from e
