"""
Manage the Shelfwise snapshot database.

Commands:
    init     create the tables, optionally seeding the sample library
    stats    print headline numbers of the saved library
    export   write the saved library to a JSON file
    import   replace the saved library with a JSON file from ``export``

Usage:
    shelfwise-db init [--drop-existing] [--sample-data] [--database-url URL]
    shelfwise-db export library.json
"""

import argparse
import logging
import sys
from pathlib import Path

from .database.session import DatabaseManager
from .database.snapshot_repository import SnapshotRepository
from .library.repository import LibraryError
from .library.sample_data import seed_sample_data
from .library.session import LibrarySession

logger = logging.getLogger(__name__)


def _load(db_manager: DatabaseManager) -> LibrarySession | None:
    db_manager.init_database()
    with db_manager.session_scope() as session:
        snapshot = SnapshotRepository(session).load()
    return LibrarySession.from_snapshot(snapshot) if snapshot is not None else None


def _save(db_manager: DatabaseManager, library: LibrarySession) -> None:
    with db_manager.session_scope() as session:
        SnapshotRepository(session).save(library.snapshot())


def cmd_init(db_manager: DatabaseManager, args: argparse.Namespace) -> int:
    logger.info("Creating database schema...")
    db_manager.init_database(drop_existing=args.drop_existing)

    if args.sample_data:
        logger.info("Loading sample data...")
        _save(db_manager, seed_sample_data(LibrarySession()))

    logger.info("Database initialization complete")
    return 0


def cmd_stats(db_manager: DatabaseManager, args: argparse.Namespace) -> int:  # noqa: ARG001
    library = _load(db_manager)
    if library is None:
        print("No saved library")
        return 1

    stats = library.stats()
    print(f"Items:     {stats.total_items}")
    print(f"Available: {stats.available_items}")
    print(f"Borrowed:  {stats.borrowed_items}")
    print(f"Patrons:   {stats.total_patrons}")
    print(f"Locations: {stats.total_locations}")
    return 0


def cmd_export(db_manager: DatabaseManager, args: argparse.Namespace) -> int:
    library = _load(db_manager)
    if library is None:
        logger.error("No saved library to export")
        return 1

    args.path.write_bytes(library.export_state())
    logger.info("Exported library to %s", args.path)
    return 0


def cmd_import(db_manager: DatabaseManager, args: argparse.Namespace) -> int:
    library = LibrarySession.import_state(args.path.read_bytes())
    db_manager.init_database()
    _save(db_manager, library)
    logger.info("Imported library from %s", args.path)
    return 0


COMMANDS = {
    "init": cmd_init,
    "stats": cmd_stats,
    "export": cmd_export,
    "import": cmd_import,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage the Shelfwise snapshot database")
    parser.add_argument(
        "--database-url",
        help="Override the configured database URL",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init = subparsers.add_parser("init", help="Create the snapshot tables")
    init.add_argument(
        "--drop-existing",
        action="store_true",
        help="Drop existing tables before creating new ones",
    )
    init.add_argument(
        "--sample-data",
        action="store_true",
        help="Save the sample library after creating tables",
    )

    subparsers.add_parser("stats", help="Show counts for the saved library")

    export = subparsers.add_parser("export", help="Write the saved library to a file")
    export.add_argument("path", type=Path)

    import_ = subparsers.add_parser("import", help="Replace the saved library from a file")
    import_.add_argument("path", type=Path)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    args = build_parser().parse_args(argv)
    db_manager = DatabaseManager(args.database_url)

    if not db_manager.verify_connection():
        logger.error("Failed to connect to database")
        return 1

    try:
        return COMMANDS[args.command](db_manager, args)
    except (LibraryError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    finally:
        db_manager.close()


if __name__ == "__main__":
    sys.exit(main())
