"""
Catalogue tools for the Shelfwise MCP server.

1. add_item: add or update a catalogue entry
2. add_patron: register or update a patron
3. search_title: exact, case-insensitive title lookup
4. list_items: the catalogue ordered by title
5. library_stats: headline numbers
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..library.repository import NotFoundError
from ..library.session import LibrarySession
from ..observability import trace_tool
from .responses import item_payload, text_response, validate_arguments

logger = logging.getLogger(__name__)


# =============================================================================
# ADD ITEM / ADD PATRON
# =============================================================================


class AddItemInput(BaseModel):
    """Input schema for the add_item tool."""

    model_config = ConfigDict(str_strip_whitespace=True)

    item_id: str = Field(..., min_length=1, max_length=64, examples=["INB011"])
    title: str = Field(..., min_length=1, max_length=500, examples=["Graph Theory"])
    creator: str = Field(default="", max_length=200, examples=["Narsingh Deo"])
    category: str = Field(default="", max_length=100, examples=["Math"])
    location: str = Field(default="", max_length=100, examples=["Shelf-2"])


@trace_tool("add_item")
async def add_item_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """Add an item to the catalogue, or update an existing entry."""
    params = validate_arguments(AddItemInput, arguments, "add item")
    if isinstance(params, dict):
        return params

    item = library.add_item(
        params.item_id, params.title, params.creator, params.category, params.location
    )
    logger.info("Catalogued %s (%s)", item.id, item.title)
    return text_response(f"Catalogued {item.title} as {item.id}", {"item": item_payload(item)})


class AddPatronInput(BaseModel):
    """Input schema for the add_patron tool."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200, examples=["Neha Verma"])
    contact: str = Field(default="", max_length=200, examples=["9900112233"])


@trace_tool("add_patron")
async def add_patron_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """Register a patron, or update the contact of an existing one."""
    params = validate_arguments(AddPatronInput, arguments, "add patron")
    if isinstance(params, dict):
        return params

    patron = library.add_patron(params.name, params.contact)
    return text_response(
        f"Registered patron {patron.name}",
        {"patron": {"name": patron.name, "contact": patron.contact}},
    )


# =============================================================================
# SEARCH
# =============================================================================


class SearchTitleInput(BaseModel):
    """Input schema for the search_title tool."""

    title: str = Field(
        ...,
        description="Complete title to look up; case is ignored, partial titles do not match",
        min_length=1,
        max_length=500,
        examples=["data structures in java"],
    )


@trace_tool("search_title")
async def search_title_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """Find the item with exactly this title, ignoring case."""
    params = validate_arguments(SearchTitleInput, arguments, "search")
    if isinstance(params, dict):
        return params

    try:
        item = library.search_by_title(params.title)
    except NotFoundError:
        return text_response(f"No item titled '{params.title}'", {"found": False})

    return text_response(
        f"Found -> {item} | Shelf: {item.location}",
        {"found": True, "item": item_payload(item)},
    )


# =============================================================================
# LISTING AND STATS
# =============================================================================


class ListItemsInput(BaseModel):
    """Input schema for the list_items tool."""

    available_only: bool = Field(
        default=False,
        description="Only list items that are on their shelves",
    )


@trace_tool("list_items")
async def list_items_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """List the catalogue ordered by title."""
    params = validate_arguments(ListItemsInput, arguments, "list")
    if isinstance(params, dict):
        return params

    items = library.list_available_items() if params.available_only else library.list_items()
    heading = "Available Items" if params.available_only else "All Items"
    lines = "\n".join(str(item) for item in items) or "(none)"
    return text_response(
        f"=== {heading} ===\n{lines}",
        {"items": [item_payload(item) for item in items], "count": len(items)},
    )


@trace_tool("library_stats")
async def library_stats_handler(
    library: LibrarySession, arguments: dict[str, Any]  # noqa: ARG001
) -> dict[str, Any]:
    """Counts of items, loans, patrons and locations."""
    stats = library.stats()
    return text_response(
        f"{stats.total_items} items ({stats.available_items} available, "
        f"{stats.borrowed_items} borrowed), {stats.total_patrons} patrons",
        stats.model_dump(),
    )


# =============================================================================
# TOOL DEFINITIONS
# =============================================================================

add_item = {
    "name": "add_item",
    "description": (
        "Add an item to the catalogue. Re-adding an existing id updates its "
        "details without affecting loans or waiting lists."
    ),
    "inputSchema": AddItemInput.model_json_schema(),
    "handler": add_item_handler,
}

add_patron = {
    "name": "add_patron",
    "description": "Register a patron by unique name. Re-registering updates the contact.",
    "inputSchema": AddPatronInput.model_json_schema(),
    "handler": add_patron_handler,
}

search_title = {
    "name": "search_title",
    "description": (
        "Look up an item by its complete title, ignoring case. Returns the item "
        "with its shelf, or found=false."
    ),
    "inputSchema": SearchTitleInput.model_json_schema(),
    "handler": search_title_handler,
}

list_items = {
    "name": "list_items",
    "description": "List all catalogue items, or only the available ones, ordered by title.",
    "inputSchema": ListItemsInput.model_json_schema(),
    "handler": list_items_handler,
}

library_stats = {
    "name": "library_stats",
    "description": "Total, available and borrowed item counts, patrons and locations.",
    "inputSchema": {"type": "object", "properties": {}},
    "handler": library_stats_handler,
}
