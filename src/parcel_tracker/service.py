"""Parcel workflow on top of a parcel repository."""

from __future__ import annotations

import logging

from parcel_tracker.protocols import ParcelRepository
from parcel_tracker.types import Parcel, ParcelStatus, utc_now_rfc3339

logger = logging.getLogger(__name__)


class ParcelService:
    """Registers parcels and moves them through their lifecycle."""

    def __init__(self, store: ParcelRepository) -> None:
        self.store = store

    async def register(self, client: int, address: str) -> Parcel:
        """Register a new parcel for a client and return it with its number."""
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=utc_now_rfc3339(),
        )
        parcel.number = await self.store.add(parcel)
        logger.info(
            "Parcel %d to %r from client %d registered at %s",
            parcel.number,
            parcel.address,
            parcel.client,
            parcel.created_at,
        )
        return parcel

    async def list_client_parcels(self, client: int) -> list[Parcel]:
        parcels = await self.store.get_by_client(client)
        logger.info("Client %d has %d parcel(s)", client, len(parcels))
        for parcel in parcels:
            logger.info(
                "Parcel %d to %r registered at %s, status %s",
                parcel.number,
                parcel.address,
                parcel.created_at,
                parcel.status.value,
            )
        return parcels

    async def next_status(self, number: int) -> ParcelStatus | None:
        """Advance a parcel one step forward.

        Returns the new status, or None when the parcel is already
        delivered.
        """
        parcel = await self.store.get(number)
        next_status = parcel.status.next_status
        if next_status is None:
            logger.info("Parcel %d is already delivered", number)
            return None
        await self.store.set_status(number, next_status)
        logger.info("Parcel %d has new status: %s", number, next_status.value)
        return next_status

    async def change_address(self, number: int, address: str) -> None:
        await self.store.set_address(number, address)
        logger.info("Parcel %d address changed to %r", number, address)

    async def delete(self, number: int) -> None:
        await self.store.delete(number)
        logger.info("Parcel %d deleted", number)
