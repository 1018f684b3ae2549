"""Kuzu graph database client."""

from collections.abc import Iterator
from typing import Any

import kuzu

from mcp_tools.db.client import ConnectionClient
from mcp_tools.errors import QueryError
from mcp_tools.introspection import GraphSchemaIntrospector
from mcp_tools.rendering import QueryResult, render_json, rows_as_mappings
from mcp_tools_models.schema import GraphSchema


def _iter_rows(results: list[kuzu.QueryResult]) -> Iterator[list[Any]]:
    """Yield the rows of the last result, then close every result.

    Results of a multi-statement query are chained to the first one, so none
    of them may be closed while the last is still being read.
    """
    result = results[-1]
    try:
        while result.has_next():
            yield result.get_next()
    finally:
        for chained in reversed(results):
            chained.close()


class KuzuClient(ConnectionClient):
    """Wraps one Kuzu database and connection.

    Kuzu creates a database when the path does not exist yet, so the path
    only has to exist when opening read-only.
    """

    dialect = "kuzu"
    driver_errors = (RuntimeError,)
    creates_missing = True

    def __init__(self, db_path: str, read_only: bool = False) -> None:
        super().__init__(db_path, read_only)
        self._database: kuzu.Database | None = None
        self._conn: kuzu.Connection | None = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def _connect(self) -> None:
        database = kuzu.Database(self.db_path, read_only=self.open_read_only)
        try:
            self._conn = kuzu.Connection(database)
        except RuntimeError:
            database.close()
            raise
        self._database = database

    def _ping(self) -> None:
        self._conn.execute("RETURN 1").close()

    def _disconnect(self) -> None:
        conn, self._conn = self._conn, None
        database, self._database = self._database, None
        if conn is not None:
            conn.close()
        if database is not None:
            database.close()

    def execute(self, cypher: str) -> QueryResult:
        """Run Cypher and return a lazily fetched result.

        When the text holds several statements, the result of the last one is
        returned.
        """
        if self._conn is None:
            raise QueryError("database connection is not established")
        results = self._conn.execute(cypher)
        if not isinstance(results, list):
            results = [results]
        last = results[-1]
        return QueryResult(
            columns=last.get_column_names(),
            column_types=[str(t) for t in last.get_column_data_types()],
            rows=_iter_rows(results),
        )

    def query_rows(self, cypher: str) -> list[dict[str, Any]]:
        """Execute Cypher and return every row as a bigint-normalized mapping.

        Raises:
            QueryError: If there is no connection or execution fails.
        """
        try:
            return list(rows_as_mappings(self.execute(cypher)))
        except RuntimeError as e:
            raise QueryError(f"query execution failed: {e}") from e

    def query(self, cypher: str) -> str:
        """Execute Cypher and render the rows as two-space-indented JSON."""
        return render_json(self.query_rows(cypher))

    def get_schema(self) -> GraphSchema:
        """Introspect node and relationship tables."""
        return GraphSchemaIntrospector(self.query_rows).get_schema()
