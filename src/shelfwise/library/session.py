"""
Library session: the single owner of catalogue, registry and location graph.

A ``LibrarySession`` is created at startup (empty, seeded, or imported from a
snapshot), passed explicitly to whatever serves requests, and exported at
shutdown. Every public operation runs inside ``transaction()``, which holds
one re-entrant lock for the whole session:

1. Mutations (borrow, return, add item/patron/path) never interleave
2. Reads (search, routing, recommendations, listings) never see a mutation
   half applied
3. Each call runs to completion once it has the lock; nothing blocks on I/O
   while holding it

Callers never reach into the repositories; the methods below are the whole
interface of the core.
"""

import logging
import threading
from collections.abc import Generator, Iterable
from contextlib import contextmanager

from pydantic import ValidationError

from ..models.circulation import BorrowResult, ReturnResult
from ..models.item import Item
from ..models.patron import Patron
from ..models.route import Route
from ..models.snapshot import LibrarySnapshot, LibraryStats
from .circulation import CirculationService
from .item_repository import ItemRepository
from .location_graph import LocationGraph
from .patron_repository import PatronRepository
from .recommendation import RecommendationService
from .repository import CorruptStateError
from .search import TitleIndex

logger = logging.getLogger(__name__)


def _detached(items: Iterable[Item]) -> list[Item]:
    """Copies handed to callers so they never hold live state."""
    return [item.model_copy(deep=True) for item in items]


class LibrarySession:
    """Process-wide library state behind a single lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.items = ItemRepository()
        self.patrons = PatronRepository()
        self.graph = LocationGraph()

        self._circulation = CirculationService(self.items, self.patrons)
        self._titles = TitleIndex(self.items)
        self._recommender = RecommendationService(self.items, self.patrons)

    @contextmanager
    def transaction(self) -> Generator["LibrarySession", None, None]:
        """
        Hold the session lock for the duration of the block.

        Use this to group several operations into one atomic step:

        ```python
        with library.transaction():
            library.add_item("INB011", "Graph Theory", "N. Rao", "Math", "Shelf-2")
            library.borrow("Amit Sharma", "INB011")
        ```
        """
        with self._lock:
            yield self

    # ---- catalogue and registry

    def add_item(
        self,
        item_id: str,
        title: str,
        creator: str = "",
        category: str = "",
        location: str = "",
    ) -> Item:
        with self.transaction():
            item = self.items.add_item(item_id, title, creator, category, location)
            return item.model_copy(deep=True)

    def add_patron(self, name: str, contact: str = "") -> Patron:
        with self.transaction():
            return self.patrons.add_patron(name, contact).model_copy(deep=True)

    def remove_patron(self, name: str) -> bool:
        with self.transaction():
            return self.patrons.remove(name)

    def get_item(self, item_id: str) -> Item:
        with self.transaction():
            return self.items.get_or_raise(item_id).model_copy(deep=True)

    def get_patron(self, name: str) -> Patron:
        with self.transaction():
            return self.patrons.get_or_raise(name).model_copy(deep=True)

    def list_items(self) -> list[Item]:
        """All items, ordered by title."""
        with self.transaction():
            return _detached(self.items.sorted_by_title())

    def list_available_items(self) -> list[Item]:
        """Items on their shelves, ordered by title."""
        with self.transaction():
            return _detached(item for item in self.items.sorted_by_title() if item.available)

    def list_patron_names(self) -> list[str]:
        with self.transaction():
            return self.patrons.names()

    # ---- circulation

    def borrow(self, patron_name: str, item_id: str) -> BorrowResult:
        with self.transaction():
            return self._circulation.borrow(patron_name, item_id)

    def return_item(self, item_id: str) -> ReturnResult:
        with self.transaction():
            return self._circulation.return_item(item_id)

    def waiting_list_for(self, item_id: str) -> list[str]:
        with self.transaction():
            return self._circulation.waiting_list_for(item_id)

    # ---- lookup and recommendations

    def search_by_title(self, title: str) -> Item:
        with self.transaction():
            return self._titles.search_by_title(title).model_copy(deep=True)

    def recommend(self, patron_name: str, k: int = 5) -> list[Item]:
        with self.transaction():
            return _detached(self._recommender.recommend(patron_name, k))

    # ---- routing

    def add_location(self, tag: str) -> None:
        with self.transaction():
            self.graph.add_location(tag)

    def add_path(self, a: str, b: str, weight: int) -> None:
        with self.transaction():
            self.graph.add_path(a, b, weight)

    def shortest_path(self, start: str, end: str) -> Route:
        with self.transaction():
            return self.graph.shortest_path(start, end)

    # ---- reporting

    def stats(self) -> LibraryStats:
        with self.transaction():
            total = len(self.items)
            available = len(self.items.list_available())
            return LibraryStats(
                total_items=total,
                available_items=available,
                borrowed_items=total - available,
                total_patrons=len(self.patrons),
                total_locations=len(self.graph.locations()),
            )

    # ---- snapshots

    def snapshot(self) -> LibrarySnapshot:
        """Deep copy of the whole state as a pydantic model."""
        with self.transaction():
            return LibrarySnapshot(
                items=[item.model_copy(deep=True) for item in self.items],
                patrons=[patron.model_copy(deep=True) for patron in self.patrons],
                locations=self.graph.locations(),
                edges=self.graph.edges(),
            )

    @classmethod
    def from_snapshot(cls, snapshot: LibrarySnapshot) -> "LibrarySession":
        """Build a new session holding a copy of ``snapshot``."""
        library = cls()
        for item in snapshot.items:
            library.items.upsert(item.model_copy(deep=True))
        for patron in snapshot.patrons:
            library.patrons.upsert(patron.model_copy(deep=True))
        for tag in snapshot.locations:
            library.graph.add_location(tag)
        for edge in snapshot.edges:
            library.graph.add_path(edge.a, edge.b, edge.weight)
        logger.info(
            "Restored library: %d items, %d patrons, %d locations",
            len(library.items),
            len(library.patrons),
            len(snapshot.locations),
        )
        return library

    def export_state(self) -> bytes:
        """Serialize the whole state to an opaque blob."""
        return self.snapshot().model_dump_json().encode("utf-8")

    @classmethod
    def import_state(cls, blob: bytes | str) -> "LibrarySession":
        """
        Build a session from a blob produced by ``export_state``.

        Raises:
            CorruptStateError: If the blob is malformed or inconsistent
        """
        try:
            snapshot = LibrarySnapshot.model_validate_json(blob)
        except ValidationError as e:
            raise CorruptStateError(f"Invalid library snapshot: {e}") from e
        return cls.from_snapshot(snapshot)
