"""
SQLAlchemy schema for persisted library state.

The live library is held in memory by ``LibrarySession``; these tables store
a snapshot of it between server runs. Every ordered collection (catalogue
order, waiting lists, borrowing histories) carries an explicit ``position``
column so that loading a snapshot reproduces the exact order it was saved in.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class ItemRow(Base):
    """
    Items table - one row per catalogue entry.

    ``position`` is the catalogue insertion order, which the recommender uses
    to break ties.
    """

    __tablename__ = "items"

    id = Column(String(64), primary_key=True)
    title = Column(String(500), nullable=False, index=True)
    creator = Column(String(200), nullable=False, default="")
    category = Column(String(100), nullable=False, default="")
    location = Column(String(100), nullable=False, default="")
    available = Column(Boolean, nullable=False, default=True)
    position = Column(Integer, nullable=False)

    waiting_entries = relationship(
        "WaitingEntryRow",
        back_populates="item",
        cascade="all, delete-orphan",
        order_by="WaitingEntryRow.position",
    )

    __table_args__ = (Index("idx_item_position", "position"),)


class WaitingEntryRow(Base):
    """Waiting lists - one row per queued patron, head at position 0."""

    __tablename__ = "waiting_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_id = Column(String(64), ForeignKey("items.id", ondelete="CASCADE"), nullable=False)
    # Not a foreign key: a queued patron may have left the registry
    patron_name = Column(String(200), nullable=False)
    position = Column(Integer, nullable=False)

    item = relationship("ItemRow", back_populates="waiting_entries")

    __table_args__ = (
        UniqueConstraint("item_id", "position", name="unique_waiting_position"),
        UniqueConstraint("item_id", "patron_name", name="unique_waiting_patron"),
        CheckConstraint("position >= 0", name="check_waiting_position_non_negative"),
    )


class PatronRow(Base):
    """Patrons table - one row per registered borrower."""

    __tablename__ = "patrons"

    name = Column(String(200), primary_key=True)
    contact = Column(String(200), nullable=False, default="")
    position = Column(Integer, nullable=False)

    history_entries = relationship(
        "HistoryEntryRow",
        back_populates="patron",
        cascade="all, delete-orphan",
        order_by="HistoryEntryRow.position",
    )


class HistoryEntryRow(Base):
    """Borrowing histories - one row per borrowed title, oldest first."""

    __tablename__ = "history_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    patron_name = Column(
        String(200), ForeignKey("patrons.name", ondelete="CASCADE"), nullable=False
    )
    title = Column(String(500), nullable=False)
    position = Column(Integer, nullable=False)

    patron = relationship("PatronRow", back_populates="history_entries")

    __table_args__ = (
        UniqueConstraint("patron_name", "position", name="unique_history_position"),
    )


class LocationRow(Base):
    """Storage locations - the nodes of the location graph."""

    __tablename__ = "locations"

    tag = Column(String(100), primary_key=True)
    position = Column(Integer, nullable=False)


class PathRow(Base):
    """Undirected paths between locations, stored once per pair."""

    __tablename__ = "paths"

    id = Column(Integer, primary_key=True, autoincrement=True)
    location_a = Column(String(100), ForeignKey("locations.tag"), nullable=False)
    location_b = Column(String(100), ForeignKey("locations.tag"), nullable=False)
    weight = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("location_a", "location_b", name="unique_path"),
        CheckConstraint("weight >= 0", name="check_weight_non_negative"),
    )
