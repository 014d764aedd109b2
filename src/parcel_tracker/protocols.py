"""Storage protocol consumed by the parcel service."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from parcel_tracker.types import Parcel, ParcelStatus


@runtime_checkable
class ParcelRepository(Protocol):
    """Persistence gateway for parcels."""

    async def add(self, parcel: Parcel) -> int: ...

    async def get(self, number: int) -> Parcel: ...

    async def get_by_client(self, client: int) -> list[Parcel]: ...

    async def set_address(self, number: int, address: str) -> None: ...

    async def set_status(self, number: int, status: ParcelStatus) -> None: ...

    async def delete(self, number: int) -> None: ...
