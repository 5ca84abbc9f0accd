"""
Title-similarity recommendations.

A patron's most recently borrowed title is compared against every other title
in the catalogue by Levenshtein edit distance; the closest titles are
recommended. Distances are recomputed on every call.
"""

import heapq
import logging

from ..models.item import Item
from .item_repository import ItemRepository
from .patron_repository import PatronRepository

logger = logging.getLogger(__name__)


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions that turn ``a`` into ``b``.

    >>> levenshtein("kitten", "sitting")
    3
    """
    n, m = len(a), len(b)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = i
    for j in range(m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])
    return dp[n][m]


class RecommendationService:
    """Ranks catalogue items by similarity to a patron's last borrow."""

    def __init__(self, items: ItemRepository, patrons: PatronRepository) -> None:
        self.items = items
        self.patrons = patrons

    def recommend(self, patron_name: str, k: int) -> list[Item]:
        """
        Up to ``k`` items whose titles are closest to the patron's last borrow.

        The last borrowed title itself is excluded. Ties keep catalogue order.
        An unknown patron or one with no history gets no recommendations.
        """
        patron = self.patrons.get_by_id(patron_name)
        if patron is None or patron.last_borrowed is None or k <= 0:
            return []

        reference = patron.last_borrowed.lower()
        ranked = [
            (levenshtein(reference, item.title.lower()), position, item)
            for position, item in enumerate(self.items)
            if item.title.lower() != reference
        ]
        best = heapq.nsmallest(k, ranked, key=lambda entry: entry[:2])
        logger.debug("Recommended %d items for %s", len(best), patron_name)
        return [item for _, _, item in best]
