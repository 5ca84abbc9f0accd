"""
Item catalogue for the Shelfwise library core.

Owns the item records. Availability and waiting lists live on the items
themselves and are changed only by the circulation service; this repository
offers the catalogue-level views over them.
"""

import logging

from ..models.item import Item
from .repository import BaseRepository

logger = logging.getLogger(__name__)


class ItemRepository(BaseRepository[Item]):
    """Catalogue of items keyed by item id."""

    @property
    def entity_name(self) -> str:
        return "item"

    def key_of(self, record: Item) -> str:
        return record.id

    def add_item(
        self,
        item_id: str,
        title: str,
        creator: str = "",
        category: str = "",
        location: str = "",
    ) -> Item:
        """
        Add an item, or update the descriptive fields of an existing one.

        Updating an item keeps its availability and its waiting list, so a
        catalogue correction never releases or drops a loan.
        """
        item = Item(
            id=item_id,
            title=title,
            creator=creator,
            category=category,
            location=location,
        )
        existing = self.get_by_id(item.id)
        if existing is not None:
            item.available = existing.available
            item.waiting_list = existing.waiting_list
            logger.debug("Updating catalogue entry %s", item.id)
        return self.upsert(item)

    def list_available(self) -> list[Item]:
        return [item for item in self if item.available]

    def mark_available(self, item_id: str, available: bool = True) -> Item:
        """
        Set the availability flag of an item.

        Raises:
            NotFoundError: If the item is unknown
        """
        item = self.get_or_raise(item_id)
        item.available = available
        return item

    def sorted_by_title(self) -> list[Item]:
        """Items ordered by lowercased title; equal titles keep catalogue order."""
        return sorted(self, key=lambda item: item.title.lower())
