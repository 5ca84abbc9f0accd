"""
Circulation tools for the Shelfwise MCP server.

1. borrow_item: issue an item, or queue the patron if it is on loan
2. return_item: return an item, reissuing it to the next patron in line
3. waiting_list: show who is queued for an item

Contested items are never refused: a patron asking for an item that is out
joins its waiting list, and asking again is a harmless no-op. Only unknown
patrons and items are reported as errors.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from ..library.repository import NotFoundError
from ..library.session import LibrarySession
from ..observability import trace_tool
from .responses import error_response, text_response, validate_arguments

logger = logging.getLogger(__name__)


# =============================================================================
# BORROW TOOL
# =============================================================================


class BorrowItemInput(BaseModel):
    """Input schema for the borrow_item tool."""

    patron_name: str = Field(
        ...,
        description="Registered name of the borrowing patron",
        min_length=1,
        examples=["Amit Sharma"],
    )

    item_id: str = Field(
        ...,
        description="Identifier of the item to borrow",
        min_length=1,
        examples=["INB001"],
    )


@trace_tool("borrow_item")
async def borrow_item_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """Issue an item to a patron or place the patron in its waiting list."""
    params = validate_arguments(BorrowItemInput, arguments, "borrow")
    if isinstance(params, dict):
        return params

    try:
        result = library.borrow(params.patron_name, params.item_id)
    except NotFoundError as e:
        logger.info("Borrow failed - %s", e)
        return error_response(str(e))

    return text_response(
        result.message,
        {
            "outcome": result.outcome.value,
            "item_id": result.item_id,
            "title": result.title,
            "patron": result.patron,
            "queue_position": result.queue_position,
        },
    )


# =============================================================================
# RETURN TOOL
# =============================================================================


class ReturnItemInput(BaseModel):
    """Input schema for the return_item tool."""

    item_id: str = Field(
        ...,
        description="Identifier of the item being returned",
        min_length=1,
        examples=["INB001"],
    )


@trace_tool("return_item")
async def return_item_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """Return an item; if patrons are waiting, the first one receives it."""
    params = validate_arguments(ReturnItemInput, arguments, "return")
    if isinstance(params, dict):
        return params

    try:
        result = library.return_item(params.item_id)
    except NotFoundError as e:
        logger.info("Return failed - %s", e)
        return error_response(str(e))

    return text_response(
        result.message,
        {
            "outcome": result.outcome.value,
            "item_id": result.item_id,
            "title": result.title,
            "reissued_to": result.reissued_to,
            "skipped": result.skipped,
        },
    )


# =============================================================================
# WAITING LIST TOOL
# =============================================================================


class WaitingListInput(BaseModel):
    """Input schema for the waiting_list tool."""

    item_id: str = Field(..., description="Identifier of the item", min_length=1)


@trace_tool("waiting_list")
async def waiting_list_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """List the patrons waiting for an item, first in line first."""
    params = validate_arguments(WaitingListInput, arguments, "waiting list")
    if isinstance(params, dict):
        return params

    try:
        with library.transaction():
            item = library.get_item(params.item_id)
            waiting = library.waiting_list_for(params.item_id)
    except NotFoundError as e:
        return error_response(str(e))

    if waiting:
        lines = "\n".join(f"{index}. {name}" for index, name in enumerate(waiting, start=1))
        text = f"Waiting list for {item.title}:\n{lines}"
    else:
        text = f"Waiting list for {item.title}: No one waiting"
    return text_response(text, {"item_id": item.id, "waiting": waiting})


# =============================================================================
# TOOL DEFINITIONS
# =============================================================================

borrow_item = {
    "name": "borrow_item",
    "description": (
        "Borrow an item for a patron. If the item is on its shelf it is issued "
        "immediately; otherwise the patron joins the item's first-come-first-served "
        "waiting list. Asking again while queued is a no-op."
    ),
    "inputSchema": BorrowItemInput.model_json_schema(),
    "handler": borrow_item_handler,
}

return_item = {
    "name": "return_item",
    "description": (
        "Return an item. If patrons are waiting, it is reissued to the first of "
        "them and stays on loan; otherwise it goes back on its shelf."
    ),
    "inputSchema": ReturnItemInput.model_json_schema(),
    "handler": return_item_handler,
}

waiting_list = {
    "name": "waiting_list",
    "description": "Show the patrons waiting for an item, in the order they will receive it.",
    "inputSchema": WaitingListInput.model_json_schema(),
    "handler": waiting_list_handler,
}
