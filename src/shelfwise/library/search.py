"""
Title lookup by binary search.

``TitleIndex`` keeps a view of the catalogue sorted by lowercased title and
answers exact, case-insensitive title queries with a binary search over it.
The sorted view is rebuilt lazily whenever the catalogue version changes, so
repeated lookups against an unchanged catalogue cost O(log n).

Only whole titles match. "data structures" finds "Data Structures in Java"
only if that is the entire title.
"""

import logging
from bisect import bisect_left

from ..models.item import Item
from .item_repository import ItemRepository
from .repository import NotFoundError

logger = logging.getLogger(__name__)


class TitleIndex:
    """Sorted title view over an ``ItemRepository``."""

    def __init__(self, items: ItemRepository) -> None:
        self.items = items
        self._sorted: list[Item] = []
        self._keys: list[str] = []
        self._built_at: int | None = None

    def _refresh(self) -> None:
        if self._built_at == self.items.version:
            return
        self._sorted = self.items.sorted_by_title()
        self._keys = [item.title.lower() for item in self._sorted]
        self._built_at = self.items.version
        logger.debug("Rebuilt title index with %d entries", len(self._keys))

    def search_by_title(self, query: str) -> Item:
        """
        Find the item whose title equals ``query``, ignoring case.

        When several items share a title, the one added to the catalogue
        first is returned.

        Raises:
            NotFoundError: If no title matches
        """
        self._refresh()
        needle = query.strip().lower()
        position = bisect_left(self._keys, needle)
        if position < len(self._keys) and self._keys[position] == needle:
            return self._sorted[position]
        raise NotFoundError("item", query)
