"""Result rendering: box-drawn tables and two-space-indented JSON.

Both backends hand their results over as a ``QueryResult`` (column names,
backend type names and a lazy row iterable). DuckDB results are rendered as
a fixed-width table, Kuzu results as a JSON array of row mappings.

Values of 64-bit and wider integer columns are converted to their exact
decimal string before they are serialized as JSON. JSON consumers that parse
numbers as doubles would otherwise silently round values past 2**53. Narrower
integer columns stay numeric.
"""

import json
import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from mcp_tools.errors import SerializationError

NULL_TEXT = "NULL"

# Backend type names whose values may not fit in a double
WIDE_INTEGER_TYPES = frozenset(
    {
        "INT64",
        "UINT64",
        "SERIAL",
        "INT128",
        "UINT128",
        "BIGINT",
        "UBIGINT",
        "HUGEINT",
        "UHUGEINT",
    }
)

# Graph values whose property types are not part of the column type
_UNTYPED_GRAPH_TYPES = frozenset({"NODE", "REL", "RECURSIVE_REL"})

_TYPE_TOKEN = re.compile(r"[A-Z0-9_]+")


@dataclass
class QueryResult:
    """Column metadata plus a lazily consumed row iterable."""

    columns: list[str]
    column_types: list[str]
    rows: Iterable[Sequence[Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.columns) != len(self.column_types):
            raise ValueError(
                f"{len(self.columns)} columns but {len(self.column_types)} column types"
            )


def holds_wide_integers(type_name: str) -> bool:
    """Whether values of a column type may contain 64-bit or wider integers.

    Nested types such as ``INT64[]`` or ``STRUCT(a INT64)`` count, and so do
    node and relationship values, whose property types are unknown here.
    """
    tokens = set(_TYPE_TOKEN.findall(type_name.upper()))
    return bool(tokens & (WIDE_INTEGER_TYPES | _UNTYPED_GRAPH_TYPES))


def normalize_value(value: Any) -> Any:
    """Convert integers to exact decimal strings, recursing into containers."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Mapping):
        return {key: normalize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]
    return value


def format_cell(value: Any) -> str:
    """Text form of a single table cell."""
    if value is None:
        return NULL_TEXT
    return str(value)


def _row_count_line(count: int) -> str:
    return f"({count} row{'' if count == 1 else 's'})"


def render_table(result: QueryResult) -> str:
    """Render a result as a box-drawn table followed by the row count.

    Column widths come from the header and type name only. Cells longer than
    that are written in full and push the right border out of line.
    """
    widths = [
        max(len(name), len(type_name))
        for name, type_name in zip(result.columns, result.column_types)
    ]

    def border(left: str, junction: str, right: str) -> str:
        return left + junction.join("─" * (width + 2) for width in widths) + right + "\n"

    def line(cells: Sequence[str]) -> str:
        return "│" + "│".join(f" {cell:<{width}} " for cell, width in zip(cells, widths)) + "│\n"

    parts = [
        border("┌", "┬", "┐"),
        line(result.columns),
        line(result.column_types),
        border("├", "┼", "┤"),
    ]

    count = 0
    for row in result.rows:
        count += 1
        parts.append(line([format_cell(value) for value in row]))

    parts.append(border("└", "┴", "┘"))
    parts.append(f"\n{_row_count_line(count)}\n")
    return "".join(parts)


def rows_as_mappings(result: QueryResult) -> Iterator[dict[str, Any]]:
    """Yield each row as a column-name keyed mapping.

    Only columns whose type holds wide integers are normalized.
    """
    wide = [holds_wide_integers(type_name) for type_name in result.column_types]
    for row in result.rows:
        yield {
            name: normalize_value(value) if is_wide else value
            for name, value, is_wide in zip(result.columns, row, wide)
        }


def render_json(rows: QueryResult | Iterable[Mapping[str, Any]]) -> str:
    """Render rows as a JSON array with two-space indentation.

    Accepts either a ``QueryResult`` or an iterable of row mappings that
    were already produced by ``rows_as_mappings``. Key order follows the
    column order of each row.
    """
    if isinstance(rows, QueryResult):
        documents = list(rows_as_mappings(rows))
    else:
        documents = [dict(row) for row in rows]
    return dump_json(documents)


def dump_json(document: Any) -> str:
    """Serialize with two-space indentation; dates, decimals etc. via ``str``."""
    try:
        return json.dumps(document, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to serialize query result: {e}") from e
