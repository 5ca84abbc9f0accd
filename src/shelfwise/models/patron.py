"""
Patron model for the Shelfwise library core.

A patron is a registered borrower identified by a unique name. The patron's
borrowing history drives the recommendation engine: the most recently
borrowed title is the reference point for similarity ranking.
"""

from pydantic import BaseModel, ConfigDict, Field


class Patron(BaseModel):
    """
    Represents a registered borrower.

    ``history`` is append-only and chronological, so the last entry is always
    the title borrowed most recently (including re-issues from a waiting list).
    """

    name: str = Field(
        ...,
        description="Unique name of the patron",
        min_length=1,
        max_length=200,
        examples=["Amit Sharma", "Priya Singh"],
    )

    contact: str = Field(
        default="",
        description="Contact details, usually a phone number",
        max_length=200,
        examples=["9876543210"],
    )

    history: list[str] = Field(
        default_factory=list,
        description="Titles borrowed by the patron, most recent last",
    )

    @property
    def last_borrowed(self) -> str | None:
        """Title of the most recent borrow, or None for a new patron."""
        return self.history[-1] if self.history else None

    def record_borrow(self, title: str) -> None:
        """Append a borrowed title to the history."""
        self.history.append(title)

    def __str__(self) -> str:
        return f"{self.name} ({self.contact})"

    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Amit Sharma",
                "contact": "9876543210",
                "history": ["Data Structures in Java"],
            }
        },
    )
