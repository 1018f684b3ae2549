"""Graph schema models."""

import json
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class TableKind(str, Enum):
    """Kind of a graph table as reported by the catalog."""

    NODE = "NODE"
    REL = "REL"


class Property(BaseModel):
    """A property of a relationship table."""

    name: str = Field(default="", description="Property name")
    type: str = Field(default="", description="Property data type")


class NodeProperty(Property):
    """A property of a node table."""

    model_config = ConfigDict(populate_by_name=True)

    is_primary_key: bool = Field(
        default=False, alias="isPrimaryKey", description="Whether this is the primary key"
    )


class Connectivity(BaseModel):
    """One FROM/TO pair of a relationship table."""

    src: str = Field(default="", description="Source node table name")
    dst: str = Field(default="", description="Destination node table name")


class NodeTable(BaseModel):
    """Node table descriptor."""

    kind: Literal[TableKind.NODE] = Field(default=TableKind.NODE, exclude=True)
    name: str
    comment: str = ""
    properties: list[NodeProperty] = Field(default_factory=list)


class RelTable(BaseModel):
    """Relationship table descriptor.

    Relationship tables have no primary key, so their properties are plain
    ``Property`` instances.
    """

    kind: Literal[TableKind.REL] = Field(default=TableKind.REL, exclude=True)
    name: str
    comment: str = ""
    properties: list[Property] = Field(default_factory=list)
    connectivity: list[Connectivity] = Field(default_factory=list)


GraphTable = Annotated[NodeTable | RelTable, Field(discriminator="kind")]


class GraphSchema(BaseModel):
    """Complete graph schema, node and relationship tables sorted by name."""

    model_config = ConfigDict(populate_by_name=True)

    node_tables: list[NodeTable] = Field(default_factory=list, alias="nodeTables")
    rel_tables: list[RelTable] = Field(default_factory=list, alias="relTables")

    @classmethod
    def from_tables(cls, tables: list[GraphTable]) -> "GraphSchema":
        """Split tables by kind and sort each list by name."""
        node_tables = sorted(
            (t for t in tables if isinstance(t, NodeTable)), key=lambda t: t.name
        )
        rel_tables = sorted((t for t in tables if isinstance(t, RelTable)), key=lambda t: t.name)
        return cls(node_tables=node_tables, rel_tables=rel_tables)

    def to_dict(self) -> dict:
        """Convert to the camelCase wire dictionary."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Serialize with two-space indentation."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
