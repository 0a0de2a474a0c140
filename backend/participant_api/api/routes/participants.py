"""Participant Routes — the eight CRUD endpoints over the Participants collection.

Invariants:
    - Every route depends on require_admin: unauthorized requests never reach a handler
    - /details/deleted is registered before /details/{email} so it is not
      captured as an email
    - Routes are thin: parse input, call one service coroutine, return its result
"""

from fastapi import APIRouter, Depends

from participant_api.api.dependencies import get_collection
from participant_api.api.security import require_admin
from participant_api.core.repository_protocols import ParticipantCollection
from participant_api.schemas.participant import (
    DeletedParticipant, ErrorResponse, MessageResponse, ParticipantCreate,
    ParticipantRecord, ParticipantUpdate, UpdateResponse,
)
from participant_api.services import participant_service as service

router = APIRouter(tags=["participants"], dependencies=[Depends(require_admin)])

_errors = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
_read_errors = {
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/add", response_model=MessageResponse, responses=_errors)
async def add_participant(
    body: ParticipantCreate,
    collection: ParticipantCollection = Depends(get_collection),
):
    """Create a participant (insert-or-replace by email)."""
    return await service.add_participant(collection, body)


@router.get(
    "/details/deleted",
    response_model=list[DeletedParticipant],
    responses={500: {"model": ErrorResponse}},
)
async def list_deleted_participants(
    collection: ParticipantCollection = Depends(get_collection),
):
    """Soft-deleted participants: firstname, lastname, email."""
    return await service.list_deleted_participants(collection)


@router.get(
    "/details/{email}", response_model=ParticipantRecord, responses=_read_errors,
)
async def get_participant_details(
    email: str, collection: ParticipantCollection = Depends(get_collection),
):
    return await service.get_participant_details(collection, email)


@router.get("/work/{email}", responses=_read_errors)
async def get_work_details(
    email: str, collection: ParticipantCollection = Depends(get_collection),
):
    return await service.get_work_details(collection, email)


@router.get("/home/{email}", responses=_read_errors)
async def get_home_details(
    email: str, collection: ParticipantCollection = Depends(get_collection),
):
    return await service.get_home_details(collection, email)


@router.get(
    "/", response_model=list[ParticipantRecord],
    responses={500: {"model": ErrorResponse}},
)
async def list_participants(
    collection: ParticipantCollection = Depends(get_collection),
):
    """All participants, including soft-deleted ones."""
    return await service.list_all_participants(collection)


@router.delete(
    "/participants/{email}", response_model=UpdateResponse,
    responses={500: {"model": ErrorResponse}},
)
async def delete_participant(
    email: str, collection: ParticipantCollection = Depends(get_collection),
):
    """Soft delete: active → false. The record stays in the collection."""
    return await service.soft_delete_participant(collection, email)


@router.put(
    "/participants/{email}", response_model=UpdateResponse, responses=_errors,
)
async def update_participant(
    email: str,
    body: ParticipantUpdate,
    collection: ParticipantCollection = Depends(get_collection),
):
    """Replace firstname, lastname, dob, active, work and home."""
    return await service.update_participant(collection, email, body)
