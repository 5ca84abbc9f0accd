"""Patron registry for the Shelfwise library core."""

import logging

from ..models.patron import Patron
from .repository import BaseRepository

logger = logging.getLogger(__name__)


class PatronRepository(BaseRepository[Patron]):
    """Registry of patrons keyed by name."""

    @property
    def entity_name(self) -> str:
        return "patron"

    def key_of(self, record: Patron) -> str:
        return record.name

    def add_patron(self, name: str, contact: str = "") -> Patron:
        """Register a patron, or update the contact of an existing one."""
        existing = self.get_by_id(name)
        if existing is not None:
            existing.contact = contact.strip()
            logger.debug("Updated contact for patron %s", existing.name)
            return existing
        return self.upsert(Patron(name=name, contact=contact))

    def remove(self, name: str) -> bool:
        """
        Drop a patron from the registry.

        Waiting lists may still name a removed patron; the circulation
        service skips such entries when the item is returned.
        """
        if self._records.pop(self.normalize_key(name), None) is None:
            return False
        self._version += 1
        return True

    def names(self) -> list[str]:
        return self.keys()
