"""
Location graph and shortest-path routing.

Storage locations (shelves, stacks, desks) are nodes of a weighted undirected
graph whose edge weights are physical distances. ``shortest_path`` answers
"how do I walk from here to the shelf holding this item" with Dijkstra's
algorithm.

Weights must be non-negative for Dijkstra to be correct; ``add_path``
rejects negative weights outright.
"""

import heapq
import logging
import math

from ..models.route import PathEdge, Route

logger = logging.getLogger(__name__)


class LocationGraph:
    """Weighted undirected graph of storage-location tags."""

    def __init__(self) -> None:
        self._adjacency: dict[str, dict[str, int]] = {}

    @staticmethod
    def _check_tag(tag: str) -> None:
        if not tag.strip():
            raise ValueError("Location tag must not be empty")

    def add_location(self, tag: str) -> None:
        """
        Add a location. Adding a known location is a no-op.

        Raises:
            ValueError: If the tag is empty
        """
        self._check_tag(tag)
        self._adjacency.setdefault(tag, {})

    def add_path(self, a: str, b: str, weight: int) -> None:
        """
        Connect two locations, adding either endpoint if it is new.

        The weight is stored in both directions; connecting the same pair
        again overwrites the previous weight.

        Raises:
            ValueError: If the weight is negative or either tag is empty
        """
        self._check_tag(a)
        self._check_tag(b)
        if weight < 0:
            raise ValueError(f"Path weight must be non-negative, got {weight}")
        self.add_location(a)
        self.add_location(b)
        self._adjacency[a][b] = weight
        self._adjacency[b][a] = weight

    def has_location(self, tag: str) -> bool:
        return tag in self._adjacency

    def locations(self) -> list[str]:
        return list(self._adjacency)

    def neighbors(self, tag: str) -> dict[str, int]:
        return dict(self._adjacency.get(tag, {}))

    def edges(self) -> list[PathEdge]:
        """Every undirected edge once, in insertion order of its first endpoint."""
        seen: set[frozenset[str]] = set()
        result: list[PathEdge] = []
        for a, neighbors in self._adjacency.items():
            for b, weight in neighbors.items():
                pair = frozenset((a, b))
                if pair in seen:
                    continue
                seen.add(pair)
                result.append(PathEdge(a=a, b=b, weight=weight))
        return result

    def shortest_path(self, start: str, end: str) -> Route:
        """
        Find the shortest route from ``start`` to ``end``.

        Returns:
            The route with its total distance and the visited tags, or
            ``Route.unreachable()`` if either tag is unknown or no path exists
        """
        if start not in self._adjacency or end not in self._adjacency:
            logger.debug("Route %s -> %s: unknown location", start, end)
            return Route.unreachable()

        dist: dict[str, float] = dict.fromkeys(self._adjacency, math.inf)
        parent: dict[str, str] = {}
        dist[start] = 0
        finalized: set[str] = set()
        heap: list[tuple[float, str]] = [(0, start)]

        while heap:
            d, node = heapq.heappop(heap)
            if node in finalized:
                continue
            finalized.add(node)
            if node == end:
                break

            for neighbor, weight in self._adjacency[node].items():
                candidate = d + weight
                if candidate < dist[neighbor]:
                    dist[neighbor] = candidate
                    parent[neighbor] = node
                    heapq.heappush(heap, (candidate, neighbor))

        if math.isinf(dist[end]):
            logger.debug("Route %s -> %s: disconnected", start, end)
            return Route.unreachable()

        path = [end]
        while path[-1] != start:
            path.append(parent[path[-1]])
        path.reverse()
        return Route(distance=int(dist[end]), path=path)
