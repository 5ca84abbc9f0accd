"""Tests for the location graph and Dijkstra routing."""

import pytest

from shelfwise.library import LibrarySession, LocationGraph
from shelfwise.models import UNREACHABLE_DISTANCE


@pytest.fixture
def graph() -> LocationGraph:
    """S1 -5- S2 -4- S3 -3- S5, with S4 hanging off S2 at 7."""
    g = LocationGraph()
    g.add_path("S1", "S2", 5)
    g.add_path("S2", "S3", 4)
    g.add_path("S2", "S4", 7)
    g.add_path("S3", "S5", 3)
    return g


class TestShortestPath:
    def test_multi_hop_route(self, graph: LocationGraph):
        route = graph.shortest_path("S1", "S5")
        assert route.distance == 12
        assert route.path == ["S1", "S2", "S3", "S5"]

    def test_route_is_symmetric(self, graph: LocationGraph):
        forward = graph.shortest_path("S1", "S5")
        backward = graph.shortest_path("S5", "S1")
        assert backward.distance == forward.distance
        assert backward.path == list(reversed(forward.path))

    def test_same_start_and_end(self, graph: LocationGraph):
        route = graph.shortest_path("S3", "S3")
        assert route.distance == 0
        assert route.path == ["S3"]

    def test_prefers_cheaper_detour(self, graph: LocationGraph):
        graph.add_path("S1", "S5", 20)
        assert graph.shortest_path("S1", "S5").distance == 12

        graph.add_path("S1", "S5", 2)
        route = graph.shortest_path("S1", "S5")
        assert route.distance == 2
        assert route.path == ["S1", "S5"]

    def test_unknown_location(self, graph: LocationGraph):
        route = graph.shortest_path("S1", "Basement")
        assert route.distance == UNREACHABLE_DISTANCE
        assert route.path == []
        assert not route.found

    def test_disconnected_location(self, graph: LocationGraph):
        graph.add_location("Annex")
        route = graph.shortest_path("S1", "Annex")
        assert not route.found
        assert route.path == []

    def test_zero_weight_path(self):
        g = LocationGraph()
        g.add_path("A", "B", 0)
        route = g.shortest_path("A", "B")
        assert route.distance == 0
        assert route.path == ["A", "B"]


class TestGraphStructure:
    def test_add_path_creates_locations(self):
        g = LocationGraph()
        g.add_path("A", "B", 3)
        assert g.has_location("A")
        assert g.has_location("B")
        assert g.locations() == ["A", "B"]

    def test_add_location_is_idempotent(self, graph: LocationGraph):
        graph.add_location("S1")
        assert graph.neighbors("S1") == {"S2": 5}

    def test_edges_listed_once(self, graph: LocationGraph):
        edges = graph.edges()
        assert len(edges) == 4
        assert {(e.a, e.b, e.weight) for e in edges} == {
            ("S1", "S2", 5),
            ("S2", "S3", 4),
            ("S2", "S4", 7),
            ("S3", "S5", 3),
        }

    def test_overwrite_keeps_one_edge(self, graph: LocationGraph):
        graph.add_path("S2", "S1", 9)
        assert graph.neighbors("S1") == {"S2": 9}
        assert graph.neighbors("S2")["S1"] == 9
        assert len(graph.edges()) == 4

    def test_negative_weight_rejected(self, graph: LocationGraph):
        with pytest.raises(ValueError, match="non-negative"):
            graph.add_path("S1", "S9", -1)
        assert not graph.has_location("S9")

    @pytest.mark.parametrize(("a", "b"), [("", "S1"), ("S1", "   ")])
    def test_blank_tag_rejected(self, graph: LocationGraph, a: str, b: str):
        with pytest.raises(ValueError, match="must not be empty"):
            graph.add_path(a, b, 2)
        assert len(graph.locations()) == 5

    def test_blank_location_rejected(self):
        g = LocationGraph()
        with pytest.raises(ValueError, match="must not be empty"):
            g.add_location(" ")
        assert g.locations() == []


class TestSessionRouting:
    def test_sample_shelves(self, library: LibrarySession):
        route = library.shortest_path("Shelf-1", "Shelf-5")
        assert route.distance == 12
        assert route.path == ["Shelf-1", "Shelf-2", "Shelf-3", "Shelf-5"]

    def test_sample_shelf_four(self, library: LibrarySession):
        route = library.shortest_path("Shelf-5", "Shelf-4")
        assert route.distance == 14
        assert route.path == ["Shelf-5", "Shelf-3", "Shelf-2", "Shelf-4"]

    def test_export_after_rejected_blank_tag(self, library: LibrarySession):
        with pytest.raises(ValueError):
            library.add_path("Shelf-1", "", 1)

        restored = LibrarySession.import_state(library.export_state())
        assert restored.snapshot() == library.snapshot()
