"""
Sample library used when no saved state exists.

Five shelves, ten computer-science titles, five patrons, and a few loans so
that circulation, waiting lists and recommendations all have something to
show on first start.
"""

import logging

from .session import LibrarySession

logger = logging.getLogger(__name__)

SHELF_PATHS = [
    ("Shelf-1", "Shelf-2", 5),
    ("Shelf-2", "Shelf-3", 4),
    ("Shelf-2", "Shelf-4", 7),
    ("Shelf-3", "Shelf-5", 3),
]

SAMPLE_ITEMS = [
    ("INB001", "Data Structures in Java", "Prof. Rajesh Kumar", "CS", "Shelf-3"),
    ("INB002", "Algorithms Unlocked", "Dr. Suresh Verma", "CS", "Shelf-2"),
    ("INB003", "Operating System Concepts", "Amitabh Tiwari", "CS", "Shelf-4"),
    ("INB004", "Computer Networks", "Neha Gupta", "CS", "Shelf-3"),
    ("INB005", "Database System Concepts", "Deepak Joshi", "CS", "Shelf-5"),
    ("INB006", "Introduction to AI", "Priya Reddy", "CS", "Shelf-1"),
    ("INB007", "Discrete Mathematics", "Sanjay Yadav", "Math", "Shelf-2"),
    ("INB008", "Design Patterns in Java", "Rohit Malhotra", "CS", "Shelf-4"),
    ("INB009", "Compiler Design", "Anita Singh", "CS", "Shelf-5"),
    ("INB010", "Machine Learning Basics", "Vikram Patel", "CS", "Shelf-1"),
]

SAMPLE_PATRONS = [
    ("Amit Sharma", "9876543210"),
    ("Priya Singh", "9876501234"),
    ("Rohan Kumar", "9812345678"),
    ("Neha Verma", "9900112233"),
    ("Sandeep Joshi", "9887766554"),
]

SAMPLE_BORROWS = [
    ("Amit Sharma", "INB001"),
    ("Priya Singh", "INB002"),
    ("Rohan Kumar", "INB004"),
    # INB001 is already with Amit, so Rohan joins its waiting list
    ("Rohan Kumar", "INB001"),
]


def seed_sample_data(library: LibrarySession) -> LibrarySession:
    """Populate ``library`` with the sample shelves, items, patrons and loans."""
    with library.transaction():
        for a, b, weight in SHELF_PATHS:
            library.add_path(a, b, weight)
        for item in SAMPLE_ITEMS:
            library.add_item(*item)
        for name, contact in SAMPLE_PATRONS:
            library.add_patron(name, contact)
        for name, item_id in SAMPLE_BORROWS:
            library.borrow(name, item_id)

    logger.info(
        "Seeded sample library: %d items, %d patrons, %d shelves",
        len(SAMPLE_ITEMS),
        len(SAMPLE_PATRONS),
        len({tag for a, b, _ in SHELF_PATHS for tag in (a, b)}),
    )
    return library
