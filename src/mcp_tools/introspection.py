"""Graph schema introspection.

Builds a ``GraphSchema`` from three Kuzu catalog calls:

- ``CALL show_tables()`` lists every table with its kind and comment
- ``CALL TABLE_INFO(name)`` lists the properties of one table
- ``CALL SHOW_CONNECTION(name)`` lists the FROM/TO pairs of a relationship table

Node tables keep the primary-key flag of each property; relationship tables
never carry one. Both lists are sorted by name so the output does not depend
on catalog order.
"""

import logging
from collections.abc import Callable
from typing import Any

from mcp_tools.errors import QueryError
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

logger = logging.getLogger(__name__)

RowFetcher = Callable[[str], list[dict[str, Any]]]

SHOW_TABLES_QUERY = "CALL show_tables() RETURN *"


def _quote(name: str) -> str:
    """Quote a table name as a Cypher string literal."""
    escaped = name.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def table_info_query(table_name: str) -> str:
    return f"CALL TABLE_INFO({_quote(table_name)}) RETURN *"


def show_connection_query(table_name: str) -> str:
    return f"CALL SHOW_CONNECTION({_quote(table_name)}) RETURN *"


def parse_primary_key(value: Any) -> bool:
    """Normalize a primary-key flag reported as a bool or a 'true'/'false' string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _text(row: dict[str, Any], key: str) -> str:
    value = row.get(key)
    return value if isinstance(value, str) else ""


class GraphSchemaIntrospector:
    """Assembles a normalized graph schema from catalog rows.

    Args:
        fetch_rows: Runs a catalog query and returns its rows as
            bigint-normalized mappings.
    """

    def __init__(self, fetch_rows: RowFetcher) -> None:
        self._fetch_rows = fetch_rows

    def get_schema(self) -> GraphSchema:
        """Introspect every node and relationship table.

        Raises:
            QueryError: If any catalog call fails.
        """
        try:
            table_rows = self._fetch_rows(SHOW_TABLES_QUERY)
        except QueryError as e:
            raise QueryError(f"failed to get tables: {e}") from e

        tables: list[GraphTable] = []
        for row in table_rows:
            name = row.get("name")
            kind = row.get("type")
            if not isinstance(name, str) or not isinstance(kind, str):
                continue

            table = self._describe_table(name, kind, _text(row, "comment"))
            if table is not None:
                tables.append(table)

        schema = GraphSchema.from_tables(tables)
        logger.debug(
            f"Introspected {len(schema.node_tables)} node tables "
            f"and {len(schema.rel_tables)} relationship tables"
        )
        return schema

    def _describe_table(self, name: str, kind: str, comment: str) -> GraphTable | None:
        if kind not in (TableKind.NODE.value, TableKind.REL.value):
            logger.debug(f"Skipping table {name} of kind {kind}")
            return None

        properties = self.get_properties(name)

        if kind == TableKind.NODE.value:
            return NodeTable(name=name, comment=comment, properties=properties)

        return RelTable(
            name=name,
            comment=comment,
            properties=[Property(name=p.name, type=p.type) for p in properties],
            connectivity=self.get_connectivity(name),
        )

    def get_properties(self, table_name: str) -> list[NodeProperty]:
        try:
            rows = self._fetch_rows(table_info_query(table_name))
        except QueryError as e:
            raise QueryError(f"failed to get properties for table {table_name}: {e}") from e

        return [
            NodeProperty(
                name=_text(row, "name"),
                type=_text(row, "type"),
                is_primary_key=parse_primary_key(row.get("primary key")),
            )
            for row in rows
        ]

    def get_connectivity(self, table_name: str) -> list[Connectivity]:
        try:
            rows = self._fetch_rows(show_connection_query(table_name))
        except QueryError as e:
            raise QueryError(f"failed to get connectivity for table {table_name}: {e}") from e

        return [
            Connectivity(
                src=_text(row, "source table name"),
                dst=_text(row, "destination table name"),
            )
            for row in rows
        ]
