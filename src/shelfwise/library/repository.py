"""
Repository pattern implementation for the Shelfwise library core.

The catalogue and the patron registry are both keyed collections of pydantic
models. This module provides the shared base for them together with the
error taxonomy used throughout the core:

1. ``NotFoundError`` for unknown item ids or patron names
2. ``CorruptStateError`` for snapshots that cannot be imported

Repositories are plain in-memory stores. They do no locking of their own;
``LibrarySession`` serializes access to them.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)


class LibraryError(Exception):
    """Base exception for library operations."""


class NotFoundError(LibraryError):
    """Raised when an item or patron is not known."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.capitalize()} not found: {key}")


class CorruptStateError(LibraryError):
    """Raised when a snapshot is malformed or inconsistent."""


class BaseRepository(ABC, Generic[ModelType]):
    """
    Abstract keyed store providing the common lookup operations.

    Records are kept in insertion order, which is the catalogue iteration
    order used wherever a deterministic order is needed. ``version`` is bumped
    on every upsert so that derived views can tell when they are stale.
    """

    def __init__(self) -> None:
        self._records: dict[str, ModelType] = {}
        self._version = 0

    @property
    @abstractmethod
    def entity_name(self) -> str:
        """Name used in NotFoundError messages."""

    @abstractmethod
    def key_of(self, record: ModelType) -> str:
        """Return the unique key of a record."""

    @property
    def version(self) -> int:
        return self._version

    @staticmethod
    def normalize_key(key: str) -> str:
        """Keys are stored stripped, matching the models' whitespace handling."""
        return key.strip()

    def get_by_id(self, key: str) -> ModelType | None:
        return self._records.get(self.normalize_key(key))

    def get_or_raise(self, key: str) -> ModelType:
        """
        Get a record by key.

        Raises:
            NotFoundError: If no record has this key
        """
        record = self.get_by_id(key)
        if record is None:
            raise NotFoundError(self.entity_name, key)
        return record

    def upsert(self, record: ModelType) -> ModelType:
        """Insert or replace a record. A replaced record keeps its position."""
        self._records[self.key_of(record)] = record
        self._version += 1
        return record

    def keys(self) -> list[str]:
        return list(self._records)

    def __iter__(self) -> Iterator[ModelType]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)
