"""Tests for request, response and schema models."""

import pytest
from pydantic import ValidationError

from mcp_tools.errors import RequestValidationError
from mcp_tools.tools.utils import parse_request
from mcp_tools_models import (
    ConfigureRequest,
    ConfigureResponse,
    CypherPromptRequest,
    GraphSchema,
    NodeProperty,
    NodeTable,
    QueryResponse,
    RelTable,
    SqlQueryRequest,
)


class TestRequests:
    def test_configure_needs_a_target(self):
        with pytest.raises(ValidationError):
            ConfigureRequest()

    def test_configure_home_dir_only(self):
        request = ConfigureRequest(home_dir="/data")
        assert request.db_path == ""
        assert request.read_only is False

    def test_parse_request_joins_messages(self):
        with pytest.raises(RequestValidationError, match="Parameter 'sql' cannot be empty"):
            parse_request(SqlQueryRequest, sql="")

    def test_parse_request_missing_field(self):
        with pytest.raises(RequestValidationError):
            parse_request(CypherPromptRequest)

    def test_empty_question(self):
        with pytest.raises(RequestValidationError, match="question parameter cannot be empty"):
            parse_request(CypherPromptRequest, question="")


class TestResponses:
    def test_configure_drops_unset_fields(self):
        response = ConfigureResponse(success=True, message="ok")
        assert response.to_dict() == {
            "success": True,
            "message": "ok",
            "connected": False,
            "read_only": False,
        }

    def test_query_failure(self):
        response = QueryResponse(success=False, error="boom", db_path=":memory:")
        assert response.to_dict() == {"success": False, "error": "boom", "db_path": ":memory:"}


class TestGraphSchema:
    def test_from_tables_splits_and_sorts(self):
        schema = GraphSchema.from_tables(
            [
                RelTable(name="Knows"),
                NodeTable(name="Person"),
                NodeTable(name="City"),
                RelTable(name="Follows"),
            ]
        )
        assert [t.name for t in schema.node_tables] == ["City", "Person"]
        assert [t.name for t in schema.rel_tables] == ["Follows", "Knows"]

    def test_wire_format(self):
        schema = GraphSchema.from_tables(
            [
                NodeTable(
                    name="Person",
                    properties=[NodeProperty(name="name", type="STRING", is_primary_key=True)],
                )
            ]
        )
        assert schema.to_dict() == {
            "nodeTables": [
                {
                    "name": "Person",
                    "comment": "",
                    "properties": [{"name": "name", "type": "STRING", "isPrimaryKey": True}],
                }
            ],
            "relTables": [],
        }

    def test_round_trip_by_alias(self):
        schema = GraphSchema.model_validate(
            {"nodeTables": [{"name": "City", "properties": [{"name": "id", "isPrimaryKey": True}]}]}
        )
        assert schema.node_tables[0].properties[0].is_primary_key is True
