"""Tests for the Shelfwise pydantic models."""

from collections import deque

import pytest
from pydantic import ValidationError

from shelfwise.models import (
    UNREACHABLE_DISTANCE,
    BorrowOutcome,
    BorrowResult,
    Item,
    LibrarySnapshot,
    PathEdge,
    Patron,
    ReturnOutcome,
    ReturnResult,
    Route,
)


class TestItemModel:
    def test_defaults(self):
        item = Item(id="INB001", title="Data Structures in Java")
        assert item.available is True
        assert item.waiting_list == deque()
        assert item.creator == ""
        assert item.status_label == "Available"

    def test_whitespace_is_stripped(self):
        item = Item(id="  INB001 ", title="  Compiler Design  ")
        assert item.id == "INB001"
        assert item.title == "Compiler Design"

    def test_waiting_list_from_list(self):
        item = Item(id="X1", title="T", available=False, waiting_list=["Bob", "Carol"])
        assert isinstance(item.waiting_list, deque)
        assert item.waiting_list.popleft() == "Bob"

    def test_duplicate_waiter_rejected(self):
        with pytest.raises(ValidationError, match="only once"):
            Item(id="X1", title="T", available=False, waiting_list=["Bob", "Bob"])

    def test_available_item_with_waiters_rejected(self):
        with pytest.raises(ValidationError, match="cannot have a waiting list"):
            Item(id="X1", title="T", available=True, waiting_list=["Bob"])

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            Item(id="X1", title="")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            Item(id="X1", title="T", isbn="123")

    def test_str(self):
        item = Item(id="INB009", title="Compiler Design", creator="Anita Singh", category="CS")
        item.available = False
        assert str(item) == "INB009 | Compiler Design | Anita Singh | CS | Issued"


class TestPatronModel:
    def test_last_borrowed(self):
        patron = Patron(name="Amit Sharma")
        assert patron.last_borrowed is None

        patron.record_borrow("Data Structures in Java")
        patron.record_borrow("Compiler Design")
        assert patron.last_borrowed == "Compiler Design"
        assert patron.history == ["Data Structures in Java", "Compiler Design"]

    def test_str(self):
        assert str(Patron(name="Neha Verma", contact="9900112233")) == "Neha Verma (9900112233)"


class TestRouteModels:
    def test_negative_edge_rejected(self):
        with pytest.raises(ValidationError):
            PathEdge(a="S1", b="S2", weight=-1)

    def test_unreachable(self):
        route = Route.unreachable()
        assert route.distance == UNREACHABLE_DISTANCE
        assert route.path == []
        assert not route.found
        assert route.describe() == "No path"

    def test_describe(self):
        route = Route(distance=12, path=["S1", "S2", "S3", "S5"])
        assert route.found
        assert route.describe() == "Distance: 12 meters. Path: S1 -> S2 -> S3 -> S5"


class TestCirculationResults:
    @pytest.mark.parametrize(
        ("outcome", "expected"),
        [
            (BorrowOutcome.ISSUED, "SUCCESS: Test Item issued to Alice"),
            (BorrowOutcome.QUEUED, "Placed Alice in waiting list for Test Item"),
            (BorrowOutcome.ALREADY_QUEUED, "Alice is already in the waiting list for Test Item"),
        ],
    )
    def test_borrow_messages(self, outcome, expected):
        result = BorrowResult(outcome=outcome, item_id="X1", title="Test Item", patron="Alice")
        assert result.message == expected

    def test_return_messages(self):
        reissued = ReturnResult(
            outcome=ReturnOutcome.REISSUED, item_id="X1", title="Test Item", reissued_to="Bob"
        )
        assert reissued.message == "Book Test Item returned and issued to Bob"

        shelved = ReturnResult(
            outcome=ReturnOutcome.RETURNED_AVAILABLE, item_id="X1", title="Test Item"
        )
        assert shelved.message == "Book Test Item returned and now available"
        assert shelved.skipped == []


class TestLibrarySnapshot:
    def test_empty_snapshot_is_valid(self):
        snapshot = LibrarySnapshot()
        assert snapshot.items == []
        assert snapshot.edges == []

    def test_duplicate_item_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate item ids"):
            LibrarySnapshot(items=[Item(id="X1", title="A"), Item(id="X1", title="B")])

    def test_duplicate_patrons_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate patron names"):
            LibrarySnapshot(patrons=[Patron(name="Alice"), Patron(name="Alice")])

    def test_edge_to_unknown_location_rejected(self):
        with pytest.raises(ValidationError, match="unknown location"):
            LibrarySnapshot(locations=["S1"], edges=[PathEdge(a="S1", b="S9", weight=3)])

    def test_blank_location_rejected(self):
        with pytest.raises(ValidationError, match="Empty location tag"):
            LibrarySnapshot(locations=["S1", " "])
