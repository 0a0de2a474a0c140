"""Participant ORM — one row per item of the Participants collection.

Invariants:
    - email is the primary key: put() on an existing email replaces the row
    - active is stored as a boolean (ParticipantStatus.to_storage())
    - work/home are opaque JSON objects, persisted as-is

Design Decisions:
    - JSON columns for work/home: the service never queries inside them,
      projections are applied after the read (core/projection.py)
"""

from typing import Any

from sqlalchemy import JSON, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from participant_api.core.domain_types import PARTICIPANT_FIELDS
from participant_api.db.base import Base


class Participant(Base):
    """Participant record — identity, contact, employment and location."""
    __tablename__ = "participants"

    email: Mapped[str] = mapped_column(String(320), primary_key=True)
    firstname: Mapped[str] = mapped_column(String(255), nullable=False)
    lastname: Mapped[str] = mapped_column(String(255), nullable=False)
    dob: Mapped[str] = mapped_column(String(10), nullable=False)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, index=True,
    )
    work: Mapped[dict] = mapped_column(JSON, nullable=False)
    home: Mapped[dict] = mapped_column(JSON, nullable=False)

    def to_item(self) -> dict[str, Any]:
        """Row → collection item (plain dict, JSON-ready)."""
        return {name: getattr(self, name) for name in PARTICIPANT_FIELDS}
