"""
Item model for the Shelfwise library core.

An item is a single lendable unit in the catalogue. Besides its descriptive
fields it carries the two pieces of circulation state that the lending
coordinator mutates:

- ``available``: whether the item is on its shelf
- ``waiting_list``: patrons queued for the item, in arrival order

Items are exposed through MCP tools such as ``search_title`` and
``list_items`` and are serialized with pydantic for state snapshots.
"""

from collections import deque

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Item(BaseModel):
    """
    Represents a lendable item in the catalogue.

    The waiting list is a FIFO queue of patron names. A patron appears in it
    at most once, and only an unavailable item has anyone waiting for it.
    """

    id: str = Field(
        ...,
        description="Unique identifier for the item",
        min_length=1,
        max_length=64,
        examples=["INB001", "INB010"],
    )

    title: str = Field(
        ...,
        description="Title of the item",
        min_length=1,
        max_length=500,
        examples=["Data Structures in Java", "Compiler Design"],
    )

    creator: str = Field(
        default="",
        description="Author or creator of the item",
        max_length=200,
        examples=["Prof. Rajesh Kumar", "Anita Singh"],
    )

    category: str = Field(
        default="",
        description="Category the item is filed under",
        max_length=100,
        examples=["CS", "Math"],
    )

    location: str = Field(
        default="",
        description="Storage location tag, matching a node of the location graph",
        max_length=100,
        examples=["Shelf-3", "Shelf-5"],
    )

    available: bool = Field(
        default=True,
        description="Whether the item is currently on its shelf",
    )

    waiting_list: deque[str] = Field(
        default_factory=deque,
        description="Names of patrons waiting for the item, head first",
    )

    @field_validator("waiting_list")
    @classmethod
    def validate_unique_waiters(cls, v: deque[str]) -> deque[str]:
        """Reject a waiting list that names the same patron twice."""
        if len(set(v)) != len(v):
            raise ValueError("A patron may appear only once in a waiting list")
        return v

    @model_validator(mode="after")
    def validate_queue_state(self) -> "Item":
        """An available item has nobody waiting for it."""
        if self.available and self.waiting_list:
            raise ValueError("An available item cannot have a waiting list")
        return self

    @property
    def status_label(self) -> str:
        """Human readable availability."""
        return "Available" if self.available else "Issued"

    def __str__(self) -> str:
        return f"{self.id} | {self.title} | {self.creator} | {self.category} | {self.status_label}"

    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "id": "INB001",
                "title": "Data Structures in Java",
                "creator": "Prof. Rajesh Kumar",
                "category": "CS",
                "location": "Shelf-3",
                "available": False,
                "waiting_list": ["Rohan Kumar"],
            }
        },
    )
