"""Shelfwise - a library lending system served over MCP."""

__version__ = "0.1.0"

from .library import CorruptStateError, LibraryError, LibrarySession, NotFoundError

__all__ = [
    "CorruptStateError",
    "LibraryError",
    "LibrarySession",
    "NotFoundError",
    "__version__",
]
