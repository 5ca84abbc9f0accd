"""
Shelfwise Models.

This package contains the Pydantic models for the core entities and results
of the Shelfwise library:

- Item: catalogue entries with availability and waiting list
- Patron: borrowers and their borrowing history
- PathEdge / Route: location graph edges and shortest-path results
- BorrowResult / ReturnResult: circulation outcomes
- LibrarySnapshot / LibraryStats: whole-state export and summary
"""

from .circulation import BorrowOutcome, BorrowResult, ReturnOutcome, ReturnResult
from .item import Item
from .patron import Patron
from .route import UNREACHABLE_DISTANCE, PathEdge, Route
from .snapshot import LibrarySnapshot, LibraryStats

__all__ = [
    "UNREACHABLE_DISTANCE",
    "BorrowOutcome",
    "BorrowResult",
    "Item",
    "LibrarySnapshot",
    "LibraryStats",
    "PathEdge",
    "Patron",
    "ReturnOutcome",
    "ReturnResult",
    "Route",
]
