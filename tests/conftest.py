"""Test configuration and fixtures for Shelfwise.

1. Library fixtures - a fresh empty library and a seeded sample library
2. Database fixtures - an isolated SQLite snapshot store per test
3. Configuration fixtures - settings that never touch the real data directory
"""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy.orm import Session

from shelfwise.config import ServerConfig, reset_config
from shelfwise.database import DatabaseManager
from shelfwise.library import LibrarySession, seed_sample_data

# === Library Fixtures ===


@pytest.fixture
def empty_library() -> LibrarySession:
    """A library with no items, patrons or locations."""
    return LibrarySession()


@pytest.fixture
def library() -> LibrarySession:
    """The sample library: five shelves, ten items, five patrons, some loans.

    After seeding:
    - INB001 is with Amit Sharma and Rohan Kumar is waiting for it
    - INB002 is with Priya Singh
    - INB004 is with Rohan Kumar
    """
    return seed_sample_data(LibrarySession())


@pytest.fixture
def alice_and_bob(empty_library: LibrarySession) -> LibrarySession:
    """One item, X1, and two patrons who both want it."""
    empty_library.add_item("X1", "Test Item", "Tester", "CS", "S1")
    empty_library.add_patron("Alice", "111")
    empty_library.add_patron("Bob", "222")
    return empty_library


# === Test Database Fixtures ===


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Each test gets its own database file."""
    return tmp_path / "test_shelfwise.db"


@pytest.fixture
def test_database_url(test_db_path: Path) -> str:
    return f"sqlite:///{test_db_path}"


@pytest.fixture
def db_manager(test_database_url: str) -> Generator[DatabaseManager, None, None]:
    """A database manager with the snapshot tables already created."""
    manager = DatabaseManager(test_database_url)
    manager.init_database()
    yield manager
    manager.close()


@pytest.fixture
def test_db_session(db_manager: DatabaseManager) -> Generator[Session, None, None]:
    """A SQLAlchemy session on the isolated snapshot store."""
    session = Session(db_manager.engine, autoflush=False, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


# === Configuration Fixtures ===


@pytest.fixture
def test_config(test_db_path: Path) -> Generator[ServerConfig, None, None]:
    """Test-specific server configuration."""
    reset_config()

    config = ServerConfig(
        server_name="test-shelfwise",
        server_version="0.0.1-test",
        snapshot_path=test_db_path,
        debug=True,
        log_level="DEBUG",
    )

    yield config

    reset_config()


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Run without any SHELFWISE_* variables from the outer environment."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("SHELFWISE_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def cleanup_after_test():
    """Reset the cached configuration after every test."""
    yield
    reset_config()
