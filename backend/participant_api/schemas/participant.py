"""Participant Schemas — explicit request/response shapes per endpoint.

Invariants:
    - ParticipantCreate: all 7 fields required; strings non-empty; work/home JSON objects
    - ParticipantUpdate: same minus email (email comes from the path)
    - active accepts JSON true/false or the integers 1/0 only (no "yes", "off", 1.0);
      normalised to bool before it reaches the service
    - Unknown request fields are ignored, never stored
    - ParticipantRecord carries no input constraints: reads return what is stored

Design Decisions:
    - work/home kept as open dicts: their substructure is opaque to the service
    - Response field updatedAttributes keeps the camelCase wire name clients already use
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParticipantUpdate(BaseModel):
    """Full replacement of a participant's non-key attributes."""
    model_config = ConfigDict(extra="ignore")

    firstname: str = Field(min_length=1)
    lastname: str = Field(min_length=1)
    dob: str = Field(min_length=1, examples=["1990/04/23"])
    active: bool
    work: dict[str, Any] = Field(
        examples=[{"companyname": "Acme", "salary": 50000, "currency": "EUR"}],
    )
    home: dict[str, Any] = Field(examples=[{"country": "Ireland", "city": "Cork"}])

    @field_validator("active", mode="before")
    @classmethod
    def _active_flag(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if type(value) is int and value in (0, 1):
            return bool(value)
        raise ValueError("active must be true/false or 1/0")


class ParticipantCreate(ParticipantUpdate):
    """New participant — email is the collection key."""
    email: str = Field(min_length=1, examples=["jane.doe@example.com"])


class ParticipantRecord(BaseModel):
    """A stored participant as returned by reads."""
    model_config = ConfigDict(extra="allow")

    email: str
    firstname: str | None = None
    lastname: str | None = None
    dob: str | None = None
    active: bool | None = None
    work: dict[str, Any] | None = None
    home: dict[str, Any] | None = None


class DeletedParticipant(BaseModel):
    """Projection returned by the soft-deleted listing."""
    firstname: str | None = None
    lastname: str | None = None
    email: str


class MessageResponse(BaseModel):
    message: str


class UpdateResponse(BaseModel):
    message: str
    updatedAttributes: dict[str, Any]


class ErrorResponse(BaseModel):
    """Error envelope — details only present where the endpoint exposes it."""
    error: str
    details: Any | None = None
