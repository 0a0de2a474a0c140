"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ParticipantEmail wraps str — the collection's primary key
    - Visibility is a two-state enum; bool/0-1 ambiguity lives only in
      from_active() and to_storage()
    - Projection paths are tuples of attribute paths (dotted for nested keys)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ParticipantEmail = NewType("ParticipantEmail", str)


# ─── Enums ───────────────────────────────────────────────────────

class ParticipantStatus(str, Enum):
    """Soft-delete lifecycle — maps to the stored `active` attribute."""
    VISIBLE = "visible"
    SOFT_DELETED = "soft_deleted"

    @classmethod
    def from_active(cls, value: object) -> "ParticipantStatus":
        """Interpret a request/storage `active` value (bool or 0/1)."""
        return cls.VISIBLE if bool(value) else cls.SOFT_DELETED

    def to_storage(self) -> bool:
        return self is ParticipantStatus.VISIBLE


class ReturnValues(str, Enum):
    """What update_fields hands back after a write."""
    UPDATED_NEW = "UPDATED_NEW"   # only the attributes that were written
    ALL_NEW = "ALL_NEW"           # the whole record after the write


# ─── Attribute Sets ──────────────────────────────────────────────

PARTICIPANT_FIELDS: tuple[str, ...] = (
    "email", "firstname", "lastname", "dob", "active", "work", "home",
)
UPDATABLE_FIELDS: tuple[str, ...] = PARTICIPANT_FIELDS[1:]

DELETED_LISTING_FIELDS: tuple[str, ...] = ("firstname", "lastname", "email")
WORK_FIELDS: tuple[str, ...] = (
    "work.companyname", "work.salary", "work.currency",
)
HOME_FIELDS: tuple[str, ...] = ("home.country", "home.city")

VISIBLE_FILTER: dict[str, object] = {
    "active": ParticipantStatus.VISIBLE.to_storage(),
}
SOFT_DELETED_FILTER: dict[str, object] = {
    "active": ParticipantStatus.SOFT_DELETED.to_storage(),
}
