"""Participant Service — validation + exactly one collection operation per request.

Invariants:
    - Validation runs before any write: a rejected request never touches the store
    - Visible reads (details/work/home) filter on active = VISIBLE
    - Soft delete only flips active to SOFT_DELETED; nothing is physically removed
    - CollectionOperationError is converted to StoreFailureError with the endpoint's
      public message; details (stringified cause) only for add and list-all
    - Delete/update on an absent email are not detected: the store writes nothing
      and updatedAttributes comes back empty

Design Decisions:
    - update validates dob format like add does; the path email is only a lookup key
      and is not format-checked
"""

import logging
from typing import Any

from participant_api.core.domain_types import (
    DELETED_LISTING_FIELDS, HOME_FIELDS, SOFT_DELETED_FILTER, VISIBLE_FILTER,
    WORK_FIELDS, ParticipantEmail, ParticipantStatus, ReturnValues,
)
from participant_api.core.errors import (
    CollectionOperationError, ParticipantNotFoundError,
    ParticipantValidationError, StoreFailureError,
)
from participant_api.core.repository_protocols import ParticipantCollection
from participant_api.core.validators import validate_dob, validate_email
from participant_api.schemas.participant import (
    ParticipantCreate, ParticipantUpdate,
)

logger = logging.getLogger(__name__)

INVALID_EMAIL_MESSAGE = "Invalid email format"
INVALID_DOB_MESSAGE = "Invalid DOB format, expected YYYY/MM/DD"


def _check_dob(dob: str) -> None:
    if not validate_dob(dob):
        logger.warning("Validation failed: invalid DOB format")
        raise ParticipantValidationError(INVALID_DOB_MESSAGE, field="dob")


def _to_storage(body: ParticipantUpdate) -> dict[str, Any]:
    """Request body → stored attributes. active crosses the boundary here only."""
    return {
        "firstname": body.firstname,
        "lastname": body.lastname,
        "dob": body.dob,
        "active": ParticipantStatus.from_active(body.active).to_storage(),
        "work": body.work,
        "home": body.home,
    }


async def _get_visible(
    collection: ParticipantCollection,
    email: str,
    failure_message: str,
    projection: tuple[str, ...] | None = None,
) -> dict:
    try:
        item = await collection.get_by_key(
            ParticipantEmail(email), VISIBLE_FILTER, projection,
        )
    except CollectionOperationError as e:
        logger.error(f"{failure_message}: {e}", exc_info=True, extra={"email": email})
        raise StoreFailureError(failure_message) from e
    if item is None:
        raise ParticipantNotFoundError(email)
    return item


# ─── Writes ──────────────────────────────────────────────────────

async def add_participant(
    collection: ParticipantCollection, body: ParticipantCreate,
) -> dict:
    """Validate formats, then insert-or-replace the full record."""
    logger.info("Processing add request", extra={"email": body.email})
    if not validate_email(body.email):
        logger.warning("Validation failed: invalid email format")
        raise ParticipantValidationError(INVALID_EMAIL_MESSAGE, field="email")
    _check_dob(body.dob)

    item = {"email": body.email, **_to_storage(body)}
    try:
        await collection.put(item)
    except CollectionOperationError as e:
        logger.error(
            f"Error adding participant to database: {e}",
            exc_info=True, extra={"email": body.email},
        )
        raise StoreFailureError(
            "Failed to add participant to the database", details=str(e),
        ) from e
    logger.info("Participant added", extra={"email": body.email})
    return {"message": "Participant added successfully"}


async def soft_delete_participant(
    collection: ParticipantCollection, email: str,
) -> dict:
    """Flip active to SOFT_DELETED; returns only the written attribute."""
    try:
        updated = await collection.update_fields(
            ParticipantEmail(email),
            {"active": ParticipantStatus.SOFT_DELETED.to_storage()},
            ReturnValues.UPDATED_NEW,
        )
    except CollectionOperationError as e:
        logger.error(f"Error deleting participant: {e}", exc_info=True, extra={"email": email})
        raise StoreFailureError("Failed to delete participant") from e
    logger.info("Participant soft-deleted", extra={"email": email})
    return {
        "message": "Participant successfully deleted",
        "updatedAttributes": updated,
    }


async def update_participant(
    collection: ParticipantCollection, email: str, body: ParticipantUpdate,
) -> dict:
    """Replace every non-key attribute; returns the whole record after the write."""
    _check_dob(body.dob)
    try:
        updated = await collection.update_fields(
            ParticipantEmail(email), _to_storage(body), ReturnValues.ALL_NEW,
        )
    except CollectionOperationError as e:
        logger.error(f"Error updating participant: {e}", exc_info=True, extra={"email": email})
        raise StoreFailureError("Failed to update participant") from e
    logger.info("Participant updated", extra={"email": email})
    return {
        "message": "Participant updated successfully",
        "updatedAttributes": updated,
    }


# ─── Reads ───────────────────────────────────────────────────────

async def get_participant_details(
    collection: ParticipantCollection, email: str,
) -> dict:
    return await _get_visible(
        collection, email, "Failed to retrieve participant details",
    )


async def get_work_details(collection: ParticipantCollection, email: str) -> dict:
    item = await _get_visible(
        collection, email, "Failed to retrieve work details", WORK_FIELDS,
    )
    return item.get("work", {})


async def get_home_details(collection: ParticipantCollection, email: str) -> dict:
    item = await _get_visible(
        collection, email, "Failed to retrieve home details", HOME_FIELDS,
    )
    return item.get("home", {})


async def list_deleted_participants(collection: ParticipantCollection) -> list[dict]:
    """Soft-deleted participants, projected to firstname/lastname/email."""
    try:
        return await collection.scan(SOFT_DELETED_FILTER, DELETED_LISTING_FIELDS)
    except CollectionOperationError as e:
        logger.error(f"Error retrieving deleted participants: {e}", exc_info=True)
        raise StoreFailureError("Failed to retrieve deleted participants") from e


async def list_all_participants(collection: ParticipantCollection) -> list[dict]:
    """Every record, visible or soft-deleted."""
    try:
        return await collection.scan()
    except CollectionOperationError as e:
        logger.error(f"Error retrieving participants: {e}", exc_info=True)
        raise StoreFailureError(
            "Failed to retrieve participants", details=str(e),
        ) from e
