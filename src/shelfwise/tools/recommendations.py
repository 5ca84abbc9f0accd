"""
Recommendation tool for the Shelfwise MCP server.

Suggests items whose titles are closest, by edit distance, to the title the
patron borrowed most recently.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from ..config import get_config
from ..library.session import LibrarySession
from ..observability import trace_tool
from .responses import item_payload, text_response, validate_arguments

logger = logging.getLogger(__name__)


class RecommendItemsInput(BaseModel):
    """Input schema for the recommend_items tool."""

    patron_name: str = Field(..., min_length=1, examples=["Amit Sharma"])
    limit: int | None = Field(
        default=None,
        description="Maximum number of recommendations; defaults to the server setting",
        ge=1,
        le=50,
    )


@trace_tool("recommend_items")
async def recommend_items_handler(
    library: LibrarySession, arguments: dict[str, Any]
) -> dict[str, Any]:
    """Recommend items similar to the patron's last borrow."""
    params = validate_arguments(RecommendItemsInput, arguments, "recommendation")
    if isinstance(params, dict):
        return params

    limit = params.limit or get_config().recommendation_limit
    items = library.recommend(params.patron_name, limit)
    if not items:
        text = "No recommendations (no history or not enough items)"
    else:
        text = "Recommendations:\n" + "\n".join(str(item) for item in items)

    return text_response(
        text,
        {"patron": params.patron_name, "items": [item_payload(item) for item in items]},
    )


recommend_items = {
    "name": "recommend_items",
    "description": (
        "Recommend items for a patron, ranked by how closely their titles match "
        "the title the patron borrowed last."
    ),
    "inputSchema": RecommendItemsInput.model_json_schema(),
    "handler": recommend_items_handler,
}
