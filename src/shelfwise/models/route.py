"""
Routing models: graph edges and shortest-path results.

A route between two storage locations is either found, with a distance and an
ordered list of location tags, or unreachable. Unreachable routes are ordinary
results carrying ``UNREACHABLE_DISTANCE`` and an empty path; they are never
raised as errors.
"""

import sys

from pydantic import BaseModel, ConfigDict, Field

# Sentinel distance for unknown or disconnected locations
UNREACHABLE_DISTANCE = sys.maxsize


class PathEdge(BaseModel):
    """An undirected, weighted edge between two storage locations."""

    a: str = Field(..., min_length=1, description="First endpoint", examples=["Shelf-1"])
    b: str = Field(..., min_length=1, description="Second endpoint", examples=["Shelf-2"])
    weight: int = Field(
        ...,
        ge=0,
        description="Physical distance between the endpoints, in meters",
        examples=[5, 7],
    )

    model_config = ConfigDict(extra="forbid")


class Route(BaseModel):
    """Result of a shortest-path query."""

    distance: int = Field(..., ge=0, description="Total path weight")
    path: list[str] = Field(
        default_factory=list,
        description="Location tags from start to end, inclusive",
    )

    @property
    def found(self) -> bool:
        """Whether a path exists."""
        return self.distance != UNREACHABLE_DISTANCE

    @classmethod
    def unreachable(cls) -> "Route":
        """The distinguished result for a missing or disconnected location."""
        return cls(distance=UNREACHABLE_DISTANCE, path=[])

    def describe(self) -> str:
        if not self.found:
            return "No path"
        return f"Distance: {self.distance} meters. Path: {' -> '.join(self.path)}"
