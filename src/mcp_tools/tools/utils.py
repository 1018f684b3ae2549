"""Shared utilities for MCP tools."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from mcp_tools.errors import RequestValidationError

RequestT = TypeVar("RequestT", bound=BaseModel)


def parse_request(model: type[RequestT], **arguments: Any) -> RequestT:
    """Validate tool arguments against a request model.

    Raises:
        RequestValidationError: With the validation messages joined by '; '.
    """
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        raise RequestValidationError(messages) from e
