"""Boundary Protocols — contract between the service layer and the collection.

Invariants:
    - Services depend on ParticipantCollection, never on a concrete store
    - "Not found" is an empty result (None / [] / {}), never an exception
    - Every store failure surfaces as CollectionOperationError (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Any, Mapping, Protocol, Sequence

from participant_api.core.domain_types import ParticipantEmail, ReturnValues


class ParticipantCollection(Protocol):
    """Key-value view of the Participants collection — implemented by infrastructure."""

    async def put(self, item: Mapping[str, Any]) -> None: ...

    async def get_by_key(
        self,
        email: ParticipantEmail,
        attribute_filter: Mapping[str, Any] | None = None,
        projection: Sequence[str] | None = None,
    ) -> dict | None: ...

    async def scan(
        self,
        attribute_filter: Mapping[str, Any] | None = None,
        projection: Sequence[str] | None = None,
    ) -> list[dict]: ...

    async def update_fields(
        self,
        email: ParticipantEmail,
        field_map: Mapping[str, Any],
        return_values: ReturnValues = ReturnValues.UPDATED_NEW,
    ) -> dict: ...
