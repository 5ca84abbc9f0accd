"""
Lending coordinator for the Shelfwise library core.

Each item is in one of two states:

- Available: on its shelf, nobody waiting
- Unavailable: on loan, with a FIFO waiting list (possibly empty)

``borrow`` issues an available item or queues the patron for an unavailable
one. ``return_item`` hands the item straight to the head of the waiting list
when there is one, so a contested item never becomes available in between.

The service does no locking; ``LibrarySession`` runs each call inside its
transaction.
"""

import logging

from ..models.circulation import BorrowOutcome, BorrowResult, ReturnOutcome, ReturnResult
from .item_repository import ItemRepository
from .patron_repository import PatronRepository

logger = logging.getLogger(__name__)


class CirculationService:
    """Borrow/return state machine over the catalogue and the registry."""

    def __init__(self, items: ItemRepository, patrons: PatronRepository) -> None:
        self.items = items
        self.patrons = patrons

    def borrow(self, patron_name: str, item_id: str) -> BorrowResult:
        """
        Borrow an item, or join its waiting list if it is on loan.

        Raises:
            NotFoundError: If the patron or the item is unknown
        """
        patron = self.patrons.get_or_raise(patron_name)
        item = self.items.get_or_raise(item_id)

        if item.available:
            self.items.mark_available(item.id, False)
            patron.record_borrow(item.title)
            logger.info("Issued %s to %s", item.id, patron.name)
            return BorrowResult(
                outcome=BorrowOutcome.ISSUED,
                item_id=item.id,
                title=item.title,
                patron=patron.name,
            )

        if patron.name in item.waiting_list:
            return BorrowResult(
                outcome=BorrowOutcome.ALREADY_QUEUED,
                item_id=item.id,
                title=item.title,
                patron=patron.name,
                queue_position=item.waiting_list.index(patron.name) + 1,
            )

        item.waiting_list.append(patron.name)
        logger.info(
            "Queued %s for %s at position %d", patron.name, item.id, len(item.waiting_list)
        )
        return BorrowResult(
            outcome=BorrowOutcome.QUEUED,
            item_id=item.id,
            title=item.title,
            patron=patron.name,
            queue_position=len(item.waiting_list),
        )

    def return_item(self, item_id: str) -> ReturnResult:
        """
        Return an item, reissuing it to the first queued patron if any.

        Queued names that are no longer registered are dropped and the next
        patron in line is tried instead.

        Raises:
            NotFoundError: If the item is unknown
        """
        item = self.items.get_or_raise(item_id)
        skipped: list[str] = []

        while item.waiting_list:
            next_name = item.waiting_list.popleft()
            patron = self.patrons.get_by_id(next_name)
            if patron is None:
                logger.warning("Skipping unregistered patron %s queued for %s", next_name, item.id)
                skipped.append(next_name)
                continue

            patron.record_borrow(item.title)
            self.items.mark_available(item.id, False)
            logger.info("Returned %s and reissued it to %s", item.id, patron.name)
            return ReturnResult(
                outcome=ReturnOutcome.REISSUED,
                item_id=item.id,
                title=item.title,
                reissued_to=patron.name,
                skipped=skipped,
            )

        self.items.mark_available(item.id)
        logger.info("Returned %s, now available", item.id)
        return ReturnResult(
            outcome=ReturnOutcome.RETURNED_AVAILABLE,
            item_id=item.id,
            title=item.title,
            skipped=skipped,
        )

    def waiting_list_for(self, item_id: str) -> list[str]:
        """
        Names queued for an item, head first.

        Raises:
            NotFoundError: If the item is unknown
        """
        return list(self.items.get_or_raise(item_id).waiting_list)
