"""Shelfwise MCP server.

Startup sequence:
1. Load configuration and set up logging (stderr, so stdio stays clean)
2. Load the saved library from the snapshot database, or seed the sample one
3. Build a FastMCP server whose tools are bound to that library session
4. Serve until interrupted, then save the library back to the database

The library session is created here and handed to the tools explicitly; no
other module holds library state.
"""

import logging
import signal
import sys
from typing import Any

from fastmcp import FastMCP

from .config import ServerConfig, get_config
from .database.session import DatabaseManager
from .database.snapshot_repository import SnapshotRepository
from .library.sample_data import seed_sample_data
from .library.session import LibrarySession
from .observability import initialize_observability
from .tools import bind_tools

logger = logging.getLogger(__name__)


def configure_logging(config: ServerConfig) -> None:
    logging.basicConfig(
        level=logging.DEBUG if config.is_development else getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if not config.is_development:
        logging.getLogger("fastmcp").setLevel(logging.WARNING)


def load_library(db_manager: DatabaseManager, config: ServerConfig) -> LibrarySession:
    """
    Restore the saved library, or start a fresh one.

    A fresh library is seeded with sample data unless
    ``config.seed_sample_data`` is off.

    Raises:
        CorruptStateError: If the saved library cannot be restored
    """
    db_manager.init_database()
    with db_manager.session_scope() as session:
        snapshot = SnapshotRepository(session).load()

    if snapshot is not None:
        logger.info("Loaded saved library state")
        return LibrarySession.from_snapshot(snapshot)

    library = LibrarySession()
    if config.seed_sample_data:
        seed_sample_data(library)
        logger.info("Initialized new library with sample data")
    return library


def save_library(db_manager: DatabaseManager, library: LibrarySession) -> None:
    with db_manager.session_scope() as session:
        SnapshotRepository(session).save(library.snapshot())
    logger.info("Library state saved")


def create_server(library: LibrarySession, config: ServerConfig | None = None) -> FastMCP:
    """Build a FastMCP server exposing every tool over ``library``."""
    config = config or get_config()
    mcp = FastMCP(
        name=config.server_name,
        version=config.server_version,
        instructions=(
            "Shelfwise library server. Borrow and return items with fair "
            "first-come-first-served waiting lists, look items up by exact title, "
            "find the shortest walk between shelves, and get recommendations "
            "based on a patron's last borrow."
        ),
    )

    tools = bind_tools(library)
    for tool in tools:
        logger.debug("Registering tool: %s", tool["name"])
        try:
            mcp.tool(
                name=tool["name"],
                description=tool["description"],
            )(tool["handler"])
        except Exception:
            logger.exception("Failed to register tool %s", tool["name"])
            raise

    logger.info("Registered %d tools", len(tools))
    return mcp


def run_server(mcp: FastMCP, config: ServerConfig) -> None:
    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    logger.info(
        "Starting %s v%s on %s transport",
        config.server_name,
        config.server_version,
        config.transport,
    )
    if config.transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="streamable-http", host=config.http_host, port=config.http_port)


def main() -> None:
    """Entry point for the ``shelfwise-server`` command."""
    config = get_config()
    configure_logging(config)
    initialize_observability(config)

    logger.info("=" * 60)
    logger.info("Shelfwise Server")
    logger.info("Version: %s", config.server_version)
    logger.info("Transport: %s", config.transport)
    logger.info("=" * 60)

    db_manager = DatabaseManager(config.get_database_url())
    library = load_library(db_manager, config)
    try:
        run_server(create_server(library, config), config)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    finally:
        save_library(db_manager, library)
        db_manager.close()


if __name__ == "__main__":
    main()
