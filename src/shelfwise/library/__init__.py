"""
Library core for Shelfwise.

This package holds the in-memory state and algorithms:
- repositories for items (catalogue) and patrons (registry)
- the location graph with Dijkstra routing (location_graph.py)
- the borrow/return state machine (circulation.py)
- binary-search title lookup (search.py)
- edit-distance recommendations (recommendation.py)
- ``LibrarySession``, the single entry point that owns all of the above
"""

from .circulation import CirculationService
from .item_repository import ItemRepository
from .location_graph import LocationGraph
from .patron_repository import PatronRepository
from .recommendation import RecommendationService, levenshtein
from .repository import BaseRepository, CorruptStateError, LibraryError, NotFoundError
from .sample_data import seed_sample_data
from .search import TitleIndex
from .session import LibrarySession

__all__ = [
    "BaseRepository",
    "CirculationService",
    "CorruptStateError",
    "ItemRepository",
    "LibraryError",
    "LibrarySession",
    "LocationGraph",
    "NotFoundError",
    "PatronRepository",
    "RecommendationService",
    "TitleIndex",
    "levenshtein",
    "seed_sample_data",
]
