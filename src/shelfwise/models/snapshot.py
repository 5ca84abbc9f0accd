"""
Whole-library snapshot and summary models.

``LibrarySnapshot`` is the exchange format between a live ``LibrarySession``
and anything that stores it: the opaque blob returned by ``export_state`` is
this model serialized to JSON, and the SQLite snapshot store reads and writes
the same model. Validation here is what turns a malformed or inconsistent
blob into a ``CorruptStateError`` on import.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .item import Item
from .patron import Patron
from .route import PathEdge


class LibrarySnapshot(BaseModel):
    """Complete state of a library: catalogue, registry and location graph."""

    items: list[Item] = Field(default_factory=list)
    patrons: list[Patron] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    edges: list[PathEdge] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_consistency(self) -> "LibrarySnapshot":
        """Reject duplicate keys and edges whose endpoints are not locations."""
        item_ids = [item.id for item in self.items]
        if len(set(item_ids)) != len(item_ids):
            raise ValueError("Duplicate item ids in snapshot")

        names = [patron.name for patron in self.patrons]
        if len(set(names)) != len(names):
            raise ValueError("Duplicate patron names in snapshot")

        if len(set(self.locations)) != len(self.locations):
            raise ValueError("Duplicate locations in snapshot")
        if any(not tag.strip() for tag in self.locations):
            raise ValueError("Empty location tag in snapshot")

        known = set(self.locations)
        for edge in self.edges:
            if edge.a not in known or edge.b not in known:
                raise ValueError(f"Edge {edge.a}-{edge.b} references an unknown location")
        return self

    model_config = ConfigDict(extra="forbid")


class LibraryStats(BaseModel):
    """Headline numbers for the library."""

    total_items: int = Field(..., ge=0)
    available_items: int = Field(..., ge=0)
    borrowed_items: int = Field(..., ge=0)
    total_patrons: int = Field(..., ge=0)
    total_locations: int = Field(..., ge=0)
