"""Participants Collection — key-value accessor over the participants table.

Invariants:
    - put() is insert-or-replace by email (a second put overwrites the first)
    - get_by_key() returns zero or one item; filter/projection applied to that item
    - scan() visits every row: cost grows with the collection, not the result
    - update_fields() on an absent email writes nothing and returns {}
    - Every operation is bounded by timeout_seconds; expiry → CollectionOperationError
    - No retries: the first failure is the caller's failure

Design Decisions:
    - Attribute filters pushed into SQL WHERE; projections applied in Python after
      the read so dotted paths (work.salary) work on JSON columns of any dialect
    - put() is a single INSERT ... ON CONFLICT DO UPDATE: concurrent puts of one
      new email resolve last-write-wins instead of colliding on the primary key
    - update_fields reads then writes inside one session/transaction: portable across
      SQLite and PostgreSQL without relying on UPDATE ... RETURNING
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite

from participant_api.core.domain_types import (
    PARTICIPANT_FIELDS, UPDATABLE_FIELDS, ParticipantEmail, ReturnValues,
)
from participant_api.core.errors import CollectionOperationError
from participant_api.core.projection import project
from participant_api.infrastructure.database import DatabaseSessionManager
from participant_api.models.participant import Participant

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlParticipantCollection:
    """ParticipantCollection implementation backed by DatabaseSessionManager."""

    def __init__(
        self, db_manager: DatabaseSessionManager, timeout_seconds: float = 10.0,
    ):
        self._db = db_manager
        self._timeout = timeout_seconds

    async def _run(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        try:
            return await asyncio.wait_for(call(), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.error(
                f"Collection {operation} timed out after {self._timeout}s",
                extra={"operation": operation},
            )
            raise CollectionOperationError(
                f"timed out after {self._timeout}s", operation, timed_out=True,
            ) from e

    @staticmethod
    def _where(statement, attribute_filter: Mapping[str, Any] | None):
        for name, expected in (attribute_filter or {}).items():
            if name not in PARTICIPANT_FIELDS:
                raise CollectionOperationError(
                    f"unknown filter attribute '{name}'", "filter",
                )
            statement = statement.where(getattr(Participant, name) == expected)
        return statement

    @staticmethod
    def _upsert(dialect_name: str, item: Mapping[str, Any]):
        dialect = postgresql if dialect_name == "postgresql" else sqlite
        statement = dialect.insert(Participant).values(
            **{name: item[name] for name in PARTICIPANT_FIELDS},
        )
        return statement.on_conflict_do_update(
            index_elements=[Participant.email],
            set_={name: statement.excluded[name] for name in UPDATABLE_FIELDS},
        )

    @staticmethod
    def _shape(row: Participant, projection: Sequence[str] | None) -> dict:
        item = row.to_item()
        return project(item, projection) if projection else item

    # ─── Operations ──────────────────────────────────────────────

    async def put(self, item: Mapping[str, Any]) -> None:
        async def _put() -> None:
            async with self._db.session("put") as db:
                await db.execute(self._upsert(db.bind.dialect.name, item))
                await db.commit()

        await self._run("put", _put)

    async def get_by_key(
        self,
        email: ParticipantEmail,
        attribute_filter: Mapping[str, Any] | None = None,
        projection: Sequence[str] | None = None,
    ) -> dict | None:
        async def _get() -> dict | None:
            statement = self._where(
                select(Participant).where(Participant.email == email),
                attribute_filter,
            )
            async with self._db.session("get_by_key") as db:
                result = await db.execute(statement)
                row = result.scalar_one_or_none()
            return self._shape(row, projection) if row is not None else None

        return await self._run("get_by_key", _get)

    async def scan(
        self,
        attribute_filter: Mapping[str, Any] | None = None,
        projection: Sequence[str] | None = None,
    ) -> list[dict]:
        async def _scan() -> list[dict]:
            statement = self._where(
                select(Participant).order_by(Participant.email), attribute_filter,
            )
            async with self._db.session("scan") as db:
                result = await db.execute(statement)
                rows = result.scalars().all()
            return [self._shape(row, projection) for row in rows]

        return await self._run("scan", _scan)

    async def update_fields(
        self,
        email: ParticipantEmail,
        field_map: Mapping[str, Any],
        return_values: ReturnValues = ReturnValues.UPDATED_NEW,
    ) -> dict:
        unknown = set(field_map) - set(UPDATABLE_FIELDS)
        if unknown:
            raise CollectionOperationError(
                f"cannot update attributes {sorted(unknown)}", "update_fields",
            )

        async def _update() -> dict:
            async with self._db.session("update_fields") as db:
                row = await db.get(Participant, email)
                if row is None:
                    logger.info(
                        "update_fields on absent key, nothing written",
                        extra={"email": email},
                    )
                    return {}
                for name, value in field_map.items():
                    setattr(row, name, value)
                await db.commit()
                item = row.to_item()
            if return_values is ReturnValues.ALL_NEW:
                return item
            return {name: item[name] for name in field_map}

        return await self._run("update_fields", _update)
