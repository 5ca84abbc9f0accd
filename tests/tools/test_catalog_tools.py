"""Tests for the catalogue tools."""

from shelfwise.library import LibrarySession
from shelfwise.tools.catalog import (
    add_item_handler,
    add_patron_handler,
    library_stats_handler,
    list_items_handler,
    search_title_handler,
)


class TestAddItemTool:
    async def test_add_new_item(self, library: LibrarySession):
        result = await add_item_handler(
            library,
            {
                "item_id": "INB011",
                "title": "Graph Theory",
                "creator": "Narsingh Deo",
                "category": "Math",
                "location": "Shelf-2",
            },
        )

        assert "isError" not in result
        assert result["data"]["item"]["status"] == "Available"
        assert library.search_by_title("graph theory").id == "INB011"

    async def test_update_keeps_loan(self, library: LibrarySession):
        result = await add_item_handler(
            library, {"item_id": "INB001", "title": "Data Structures in Java"}
        )

        assert result["data"]["item"]["status"] == "Borrowed"
        assert result["data"]["item"]["waiting"] == 1

    async def test_padded_id_updates_existing_entry(self, library: LibrarySession):
        result = await add_item_handler(
            library, {"item_id": " INB001 ", "title": "Data Structures in Java"}
        )

        assert result["data"]["item"]["id"] == "INB001"
        assert result["data"]["item"]["status"] == "Borrowed"
        assert result["data"]["item"]["waiting"] == 1
        assert library.waiting_list_for("INB001") == ["Rohan Kumar"]
        assert library.stats().total_items == 10

    async def test_blank_title_rejected(self, library: LibrarySession):
        result = await add_item_handler(library, {"item_id": "INB011", "title": "   "})
        assert result["isError"] is True
        assert library.stats().total_items == 10

    async def test_title_required(self, library: LibrarySession):
        result = await add_item_handler(library, {"item_id": "INB011", "title": ""})
        assert result["isError"] is True
        assert "Invalid add item parameters" in result["content"][0]["text"]


class TestAddPatronTool:
    async def test_register(self, empty_library: LibrarySession):
        result = await add_patron_handler(empty_library, {"name": "Neha", "contact": "123"})

        assert result["data"]["patron"] == {"name": "Neha", "contact": "123"}
        assert empty_library.list_patron_names() == ["Neha"]

    async def test_padded_name_keeps_history(self, library: LibrarySession):
        result = await add_patron_handler(library, {"name": "  Amit Sharma ", "contact": "555"})

        assert result["data"]["patron"] == {"name": "Amit Sharma", "contact": "555"}
        assert library.get_patron("Amit Sharma").history == ["Data Structures in Java"]
        assert library.stats().total_patrons == 5

    async def test_name_required(self, empty_library: LibrarySession):
        result = await add_patron_handler(empty_library, {"contact": "123"})
        assert result["isError"] is True


class TestSearchTitleTool:
    async def test_found(self, library: LibrarySession):
        result = await search_title_handler(library, {"title": "compiler design"})

        assert result["data"]["found"] is True
        assert result["data"]["item"]["id"] == "INB009"
        assert result["content"][0]["text"] == (
            "Found -> INB009 | Compiler Design | Anita Singh | CS | Available | Shelf: Shelf-5"
        )

    async def test_not_found_is_not_an_error(self, library: LibrarySession):
        result = await search_title_handler(library, {"title": "compiler"})

        assert "isError" not in result
        assert result["data"] == {"found": False}


class TestListItemsTool:
    async def test_all_items(self, library: LibrarySession):
        result = await list_items_handler(library, {})

        assert result["data"]["count"] == 10
        titles = [item["title"] for item in result["data"]["items"]]
        assert titles[0] == "Algorithms Unlocked"
        assert result["content"][0]["text"].startswith("=== All Items ===")

    async def test_available_only(self, library: LibrarySession):
        result = await list_items_handler(library, {"available_only": True})

        assert result["data"]["count"] == 7
        assert all(item["status"] == "Available" for item in result["data"]["items"])

    async def test_empty_catalogue(self, empty_library: LibrarySession):
        result = await list_items_handler(empty_library, {})
        assert result["data"]["count"] == 0
        assert "(none)" in result["content"][0]["text"]


class TestLibraryStatsTool:
    async def test_stats(self, library: LibrarySession):
        result = await library_stats_handler(library, {})

        assert result["data"]["total_items"] == 10
        assert result["data"]["borrowed_items"] == 3
        assert result["content"][0]["text"] == (
            "10 items (7 available, 3 borrowed), 5 patrons"
        )
