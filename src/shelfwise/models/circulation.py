"""
Circulation result models for the Shelfwise library core.

Borrowing and returning never fail for reasons of item state: a contested
item queues the patron instead, and a returned item with a queue is handed to
the next patron. These models describe which of those outcomes happened:

- BorrowResult: ISSUED, QUEUED or ALREADY_QUEUED
- ReturnResult: RETURNED_AVAILABLE or REISSUED

Unknown patrons and items are not outcomes; they raise NotFoundError.
"""

from enum import Enum

from pydantic import BaseModel, Field


class BorrowOutcome(str, Enum):
    """What a borrow request did."""

    ISSUED = "issued"
    QUEUED = "queued"
    ALREADY_QUEUED = "already_queued"


class ReturnOutcome(str, Enum):
    """What a return did."""

    RETURNED_AVAILABLE = "returned_available"
    REISSUED = "reissued"


class BorrowResult(BaseModel):
    """
    Outcome of ``borrow``.

    ``queue_position`` is the 1-based position in the waiting list for the
    queued outcomes and None when the item was issued.
    """

    outcome: BorrowOutcome
    item_id: str
    title: str
    patron: str
    queue_position: int | None = Field(default=None, ge=1)

    @property
    def message(self) -> str:
        if self.outcome == BorrowOutcome.ISSUED:
            return f"SUCCESS: {self.title} issued to {self.patron}"
        if self.outcome == BorrowOutcome.QUEUED:
            return f"Placed {self.patron} in waiting list for {self.title}"
        return f"{self.patron} is already in the waiting list for {self.title}"


class ReturnResult(BaseModel):
    """Outcome of ``return_item``."""

    outcome: ReturnOutcome
    item_id: str
    title: str
    reissued_to: str | None = None
    skipped: list[str] = Field(
        default_factory=list,
        description="Queued names that were dropped because they are no longer registered",
    )

    @property
    def message(self) -> str:
        if self.outcome == ReturnOutcome.REISSUED:
            return f"Book {self.title} returned and issued to {self.reissued_to}"
        return f"Book {self.title} returned and now available"
