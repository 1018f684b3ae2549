"""Typed tool request models, validated once at the tool boundary."""

from pydantic import BaseModel, Field, model_validator
from pydantic_core import PydanticCustomError


class ConfigureRequest(BaseModel):
    """Arguments of the DuckDB ``configure`` tool."""

    db_path: str = Field(
        default="", description="Path to database file or ':memory:' for in-memory database"
    )
    home_dir: str = Field(
        default="", description="Directory to scan for available database and data files"
    )
    read_only: bool = Field(default=False, description="Connect in read-only mode")

    @model_validator(mode="after")
    def require_target(self) -> "ConfigureRequest":
        if not self.db_path and not self.home_dir:
            raise PydanticCustomError(
                "missing_target", "Either 'db_path' or 'home_dir' must be provided"
            )
        return self


class SqlQueryRequest(BaseModel):
    """Arguments of the DuckDB ``query`` tool."""

    sql: str = Field(..., description="SQL query to execute (DuckDB dialect)")

    @model_validator(mode="after")
    def require_sql(self) -> "SqlQueryRequest":
        if not self.sql:
            raise PydanticCustomError("empty_sql", "Parameter 'sql' cannot be empty")
        return self


class CypherQueryRequest(BaseModel):
    """Arguments of the Kuzu ``query`` tool."""

    cypher: str = Field(..., description="The Cypher query to run")


class CypherPromptRequest(BaseModel):
    """Arguments of the ``generateKuzuCypher`` prompt."""

    question: str = Field(
        ..., description="The question in natural language to generate the Cypher query for"
    )

    @model_validator(mode="after")
    def require_question(self) -> "CypherPromptRequest":
        if not self.question:
            raise PydanticCustomError("empty_question", "question parameter cannot be empty")
        return self
