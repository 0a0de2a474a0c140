"""Request dependencies — hand the startup-built collection to each route."""

from fastapi import Request

from participant_api.core.repository_protocols import ParticipantCollection


async def get_collection(request: Request) -> ParticipantCollection:
    """FastAPI dependency for the shared Participants collection handle."""
    collection = getattr(request.app.state, "collection", None)
    if collection is None:
        raise RuntimeError("Participants collection not initialized")
    return collection
