"""
Response helpers shared by the MCP tool handlers.

Tools answer with a list of content blocks plus, on success, a ``data``
payload holding the structured result. Failures set ``isError`` so that the
client can tell a refused request from a successful one.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..models.item import Item

T = TypeVar("T", bound=BaseModel)


def text_response(text: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
    response: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if data is not None:
        response["data"] = data
    return response


def error_response(text: str) -> dict[str, Any]:
    return {"isError": True, "content": [{"type": "text", "text": text}]}


def validate_arguments(
    schema: type[T], arguments: dict[str, Any], tool_name: str
) -> T | dict[str, Any]:
    """
    Validate raw tool arguments against ``schema``.

    Returns the parsed model, or an error response describing what was wrong.
    """
    try:
        return schema.model_validate(arguments)
    except ValidationError as e:
        return error_response(f"Invalid {tool_name} parameters: {e}")


def item_payload(item: Item) -> dict[str, Any]:
    """JSON-ready view of an item, as the web front end showed it."""
    return {
        "id": item.id,
        "title": item.title,
        "creator": item.creator,
        "category": item.category,
        "location": item.location,
        "status": "Available" if item.available else "Borrowed",
        "waiting": len(item.waiting_list),
    }
