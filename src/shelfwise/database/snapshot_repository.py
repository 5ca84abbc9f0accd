"""
Snapshot repository: saves and loads a whole ``LibrarySnapshot``.

Saving replaces whatever was stored before; there is only ever one saved
library per database. Loading rebuilds the pydantic snapshot from the rows
and runs the same validation as ``LibrarySession.import_state``, so a
hand-edited or half-written database is reported as ``CorruptStateError``
rather than producing an inconsistent library.
"""

import logging

from pydantic import ValidationError
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..library.repository import CorruptStateError, LibraryError
from ..models.item import Item
from ..models.patron import Patron
from ..models.route import PathEdge
from ..models.snapshot import LibrarySnapshot
from .schema import HistoryEntryRow, ItemRow, LocationRow, PathRow, PatronRow, WaitingEntryRow

logger = logging.getLogger(__name__)


class SnapshotRepository:
    """Reads and writes the saved library in one database session."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, snapshot: LibrarySnapshot) -> None:
        """
        Replace the stored library with ``snapshot``.

        Raises:
            LibraryError: On database errors
        """
        try:
            self._clear()

            for position, tag in enumerate(snapshot.locations):
                self.session.add(LocationRow(tag=tag, position=position))
            self.session.flush()
            for edge in snapshot.edges:
                self.session.add(PathRow(location_a=edge.a, location_b=edge.b, weight=edge.weight))

            for position, item in enumerate(snapshot.items):
                row = ItemRow(
                    id=item.id,
                    title=item.title,
                    creator=item.creator,
                    category=item.category,
                    location=item.location,
                    available=item.available,
                    position=position,
                )
                row.waiting_entries = [
                    WaitingEntryRow(patron_name=name, position=index)
                    for index, name in enumerate(item.waiting_list)
                ]
                self.session.add(row)

            for position, patron in enumerate(snapshot.patrons):
                row = PatronRow(name=patron.name, contact=patron.contact, position=position)
                row.history_entries = [
                    HistoryEntryRow(title=title, position=index)
                    for index, title in enumerate(patron.history)
                ]
                self.session.add(row)

            self.session.flush()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise LibraryError(f"Saving library snapshot failed: {e!s}") from e

        logger.info(
            "Saved snapshot: %d items, %d patrons, %d locations, %d paths",
            len(snapshot.items),
            len(snapshot.patrons),
            len(snapshot.locations),
            len(snapshot.edges),
        )

    def load(self) -> LibrarySnapshot | None:
        """
        Load the stored library.

        Returns:
            The snapshot, or None if nothing has been saved yet

        Raises:
            CorruptStateError: If the stored rows do not form a valid library
        """
        if self.is_empty():
            return None

        items = self.session.execute(select(ItemRow).order_by(ItemRow.position)).scalars().all()
        patrons = (
            self.session.execute(select(PatronRow).order_by(PatronRow.position)).scalars().all()
        )
        locations = (
            self.session.execute(select(LocationRow).order_by(LocationRow.position))
            .scalars()
            .all()
        )
        paths = self.session.execute(select(PathRow).order_by(PathRow.id)).scalars().all()

        try:
            return LibrarySnapshot(
                items=[
                    Item(
                        id=row.id,
                        title=row.title,
                        creator=row.creator,
                        category=row.category,
                        location=row.location,
                        available=row.available,
                        waiting_list=[entry.patron_name for entry in row.waiting_entries],
                    )
                    for row in items
                ],
                patrons=[
                    Patron(
                        name=row.name,
                        contact=row.contact,
                        history=[entry.title for entry in row.history_entries],
                    )
                    for row in patrons
                ],
                locations=[row.tag for row in locations],
                edges=[
                    PathEdge(a=row.location_a, b=row.location_b, weight=row.weight)
                    for row in paths
                ],
            )
        except ValidationError as e:
            raise CorruptStateError(f"Stored library snapshot is invalid: {e}") from e

    def is_empty(self) -> bool:
        for model in (ItemRow, PatronRow, LocationRow):
            count = self.session.execute(select(func.count()).select_from(model)).scalar()
            if count:
                return False
        return True

    def _clear(self) -> None:
        # Children first so foreign keys hold throughout
        for model in (WaitingEntryRow, HistoryEntryRow, PathRow, ItemRow, PatronRow, LocationRow):
            self.session.execute(delete(model).execution_options(synchronize_session=False))
        # Rows loaded earlier in this session no longer exist
        self.session.expunge_all()
