"""
Routing tools for the Shelfwise MCP server.

1. add_path: connect two storage locations
2. shortest_route: fastest walk between two locations

An unknown or disconnected location is not an error: the route tool answers
found=false, exactly as it does for a real dead end.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from ..library.session import LibrarySession
from ..observability import trace_tool
from .responses import error_response, text_response, validate_arguments

logger = logging.getLogger(__name__)


class AddPathInput(BaseModel):
    """Input schema for the add_path tool."""

    a: str = Field(..., min_length=1, description="First location", examples=["Shelf-5"])
    b: str = Field(..., min_length=1, description="Second location", examples=["Shelf-6"])
    weight: int = Field(..., ge=0, description="Distance in meters", examples=[6])


@trace_tool("add_path")
async def add_path_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """Add or re-weight the path between two locations."""
    params = validate_arguments(AddPathInput, arguments, "add path")
    if isinstance(params, dict):
        return params

    try:
        library.add_path(params.a, params.b, params.weight)
    except ValueError as e:
        return error_response(str(e))

    return text_response(
        f"Connected {params.a} and {params.b} ({params.weight} meters)",
        {"a": params.a, "b": params.b, "weight": params.weight},
    )


class ShortestRouteInput(BaseModel):
    """Input schema for the shortest_route tool."""

    start: str = Field(..., min_length=1, examples=["Shelf-1"])
    end: str = Field(..., min_length=1, examples=["Shelf-5"])


@trace_tool("shortest_route")
async def shortest_route_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """Shortest walk between two storage locations."""
    params = validate_arguments(ShortestRouteInput, arguments, "route")
    if isinstance(params, dict):
        return params

    route = library.shortest_path(params.start, params.end)
    if not route.found:
        return text_response(route.describe(), {"found": False})

    return text_response(
        route.describe(),
        {"found": True, "distance": route.distance, "path": route.path},
    )


add_path = {
    "name": "add_path",
    "description": (
        "Connect two storage locations with a walking distance in meters. "
        "Paths are two-way; re-adding a pair replaces its distance."
    ),
    "inputSchema": AddPathInput.model_json_schema(),
    "handler": add_path_handler,
}

shortest_route = {
    "name": "shortest_route",
    "description": (
        "Find the shortest walk between two storage locations, with total "
        "distance and the locations passed on the way."
    ),
    "inputSchema": ShortestRouteInput.model_json_schema(),
    "handler": shortest_route_handler,
}
