"""
Database package for Shelfwise.

Persists the in-memory library between server runs:
- SQLAlchemy schema definitions (schema.py)
- Engine and session management (session.py)
- Whole-library save/load (snapshot_repository.py)
"""

from .schema import (
    Base,
    HistoryEntryRow,
    ItemRow,
    LocationRow,
    PathRow,
    PatronRow,
    WaitingEntryRow,
)
from .session import DatabaseManager
from .snapshot_repository import SnapshotRepository

__all__ = [
    "Base",
    "DatabaseManager",
    "HistoryEntryRow",
    "ItemRow",
    "LocationRow",
    "PathRow",
    "PatronRow",
    "SnapshotRepository",
    "WaitingEntryRow",
]
