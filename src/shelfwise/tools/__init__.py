"""
MCP Tools for the Shelfwise server.

Every tool is a dictionary with ``name``, ``description``, ``inputSchema``
and an async ``handler(library, arguments)``. Handlers take the library
session explicitly; ``bind_tools`` closes them over one session so the
server can register them as plain ``handler(arguments)`` callables.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from ..library.session import LibrarySession
from .catalog import add_item, add_patron, library_stats, list_items, search_title
from .circulation import borrow_item, return_item, waiting_list
from .recommendations import recommend_items
from .routing import add_path, shortest_route

all_tools = [
    add_item,
    add_patron,
    search_title,
    list_items,
    library_stats,
    borrow_item,
    return_item,
    waiting_list,
    add_path,
    shortest_route,
    recommend_items,
]


def _bind(tool: dict[str, Any], library: LibrarySession) -> Callable[..., Awaitable[dict]]:
    handler = tool["handler"]

    async def bound(arguments: dict[str, Any]) -> dict[str, Any]:
        return await handler(library, arguments)

    bound.__name__ = tool["name"]
    bound.__doc__ = tool["description"]
    return bound


def bind_tools(library: LibrarySession) -> list[dict[str, Any]]:
    """Copies of ``all_tools`` whose handlers are bound to ``library``."""
    return [{**tool, "handler": _bind(tool, library)} for tool in all_tools]


__all__ = [
    "add_item",
    "add_path",
    "add_patron",
    "all_tools",
    "bind_tools",
    "borrow_item",
    "library_stats",
    "list_items",
    "recommend_items",
    "return_item",
    "search_title",
    "shortest_route",
    "waiting_list",
]
