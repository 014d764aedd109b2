"""SQLAlchemy parcel store."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import NoReturn

from sqlalchemy import delete, select, update
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from parcel_tracker.config import ParcelTrackerConfig
from parcel_tracker.contrib.sqlalchemy.models import ParcelModel
from parcel_tracker.exceptions import (
    InvalidTransitionError,
    ParcelLockedError,
    ParcelNotFoundError,
    PersistenceError,
)
from parcel_tracker.types import Parcel, ParcelStatus

logger = logging.getLogger(__name__)

_MUTABLE_STATUSES = [s.value for s in ParcelStatus.mutable_statuses()]


class ParcelStore:
    """Parcel store backed by SQLAlchemy async sessions.

    The session factory (and the engine behind it) belongs to the caller.
    Each operation opens one session, commits, and closes it again.

    Every mutation is guarded in the statement itself. Address changes and
    deletion only match rows still in ``registered`` state; status changes
    only match rows whose status lies behind the target. When a guarded
    statement matches nothing, the row is looked up in the same transaction
    to tell a missing parcel (:class:`ParcelNotFoundError`) from one in the
    wrong state (:class:`ParcelLockedError` or
    :class:`InvalidTransitionError`).

    Status only moves forward. By default a state may be skipped
    (``registered`` straight to ``delivered``); with ``strict_transitions``
    enabled only the single next step is accepted.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        strict_transitions: bool = False,
    ) -> None:
        self.session_factory = session_factory
        self.strict_transitions = strict_transitions

    @classmethod
    def from_config(
        cls,
        session_factory: async_sessionmaker[AsyncSession],
        config: ParcelTrackerConfig,
    ) -> ParcelStore:
        return cls(
            session_factory, strict_transitions=config.strict_transitions
        )

    @asynccontextmanager
    async def _session(self, action: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not {action}: {exc}") from exc

    async def add(self, parcel: Parcel) -> int:
        """Insert a parcel and return the number assigned to it."""
        row = ParcelModel(
            client=parcel.client,
            status=ParcelStatus(parcel.status).value,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        async with self._session(
            f"add parcel for client {parcel.client}"
        ) as session:
            session.add(row)
            await session.flush()
            number = row.number
            await session.commit()
        logger.debug("Added parcel %d for client %d", number, parcel.client)
        return number

    async def get(self, number: int) -> Parcel:
        async with self._session(f"get parcel {number}") as session:
            result = await session.execute(
                select(ParcelModel).where(ParcelModel.number == number)
            )
            try:
                row = result.scalar_one()
            except NoResultFound as e:
                raise ParcelNotFoundError(number) from e
            return self._to_parcel(row)

    async def get_by_client(self, client: int) -> list[Parcel]:
        """List all parcels of a client, ordered by number."""
        async with self._session(
            f"list parcels of client {client}"
        ) as session:
            result = await session.execute(
                select(ParcelModel)
                .where(ParcelModel.client == client)
                .order_by(ParcelModel.number)
            )
            return [self._to_parcel(row) for row in result.scalars()]

    async def set_address(self, number: int, address: str) -> None:
        async with self._session(
            f"change address of parcel {number}"
        ) as session:
            result = await session.execute(
                update(ParcelModel)
                .where(
                    ParcelModel.number == number,
                    ParcelModel.status.in_(_MUTABLE_STATUSES),
                )
                .values(address=address)
            )
            if result.rowcount == 0:
                await self._reject(session, number, "address change")
            await session.commit()
        logger.debug("Parcel %d address changed", number)

    async def set_status(self, number: int, status: ParcelStatus) -> None:
        """Move a parcel forward to ``status``.

        Backward moves and repeating the current status are rejected with
        :class:`InvalidTransitionError`.
        """
        status = ParcelStatus(status)
        sources = ParcelStatus.sources_for(
            status, allow_skip=not self.strict_transitions
        )
        async with self._session(f"set status of parcel {number}") as session:
            result = await session.execute(
                update(ParcelModel)
                .where(
                    ParcelModel.number == number,
                    ParcelModel.status.in_([s.value for s in sources]),
                )
                .values(status=status.value)
            )
            if result.rowcount == 0:
                await self._reject_transition(session, number, status)
            await session.commit()
        logger.debug("Parcel %d status set to %s", number, status.value)

    async def delete(self, number: int) -> None:
        async with self._session(f"delete parcel {number}") as session:
            result = await session.execute(
                delete(ParcelModel).where(
                    ParcelModel.number == number,
                    ParcelModel.status.in_(_MUTABLE_STATUSES),
                )
            )
            if result.rowcount == 0:
                await self._reject(session, number, "deletion")
            await session.commit()
        logger.debug("Parcel %d deleted", number)

    async def _current_status(
        self, session: AsyncSession, number: int
    ) -> ParcelStatus:
        status = await session.scalar(
            select(ParcelModel.status).where(ParcelModel.number == number)
        )
        if status is None:
            raise ParcelNotFoundError(number)
        return ParcelStatus(status)

    async def _reject(
        self, session: AsyncSession, number: int, action: str
    ) -> NoReturn:
        current = await self._current_status(session, number)
        logger.warning(
            "Rejected %s of parcel %d in status %s",
            action,
            number,
            current.value,
        )
        raise ParcelLockedError(number, current)

    async def _reject_transition(
        self, session: AsyncSession, number: int, target: ParcelStatus
    ) -> NoReturn:
        current = await self._current_status(session, number)
        logger.warning(
            "Rejected transition of parcel %d from %s to %s",
            number,
            current.value,
            target.value,
        )
        raise InvalidTransitionError(number, current, target)

    @staticmethod
    def _to_parcel(row: ParcelModel) -> Parcel:
        return Parcel(
            number=row.number,
            client=row.client,
            status=ParcelStatus(row.status),
            address=row.address,
            created_at=row.created_at,
        )
