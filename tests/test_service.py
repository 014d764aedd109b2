"""ParcelService workflow tests."""

import logging
from unittest.mock import AsyncMock

import pytest

from conftest import random_client
from parcel_tracker.exceptions import ParcelLockedError, ParcelNotFoundError
from parcel_tracker.service import ParcelService
from parcel_tracker.types import Parcel, ParcelStatus


async def test_register_stores_registered_parcel(service, store) -> None:
    client = random_client()

    parcel = await service.register(client, "Pskov")

    assert parcel.number > 0
    assert parcel.status is ParcelStatus.REGISTERED
    assert await store.get(parcel.number) == parcel


async def test_register_logs(service, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="parcel_tracker.service"):
        parcel = await service.register(random_client(), "Pskov")
    assert f"Parcel {parcel.number} to 'Pskov'" in caplog.text


async def test_next_status_walks_the_lifecycle(service, store) -> None:
    parcel = await service.register(random_client(), "Pskov")

    assert await service.next_status(parcel.number) is ParcelStatus.SENT
    assert await service.next_status(parcel.number) is ParcelStatus.DELIVERED
    assert await service.next_status(parcel.number) is None

    stored = await store.get(parcel.number)
    assert stored.status is ParcelStatus.DELIVERED


async def test_next_status_on_delivered_does_not_write() -> None:
    store = AsyncMock()
    store.get.return_value = Parcel(
        number=5,
        client=1,
        status=ParcelStatus.DELIVERED,
        address="a",
        created_at="2024-01-02T03:04:05Z",
    )
    service = ParcelService(store)

    assert await service.next_status(5) is None
    store.set_status.assert_not_awaited()


async def test_next_status_unknown_parcel(service) -> None:
    with pytest.raises(ParcelNotFoundError):
        await service.next_status(999_999)


async def test_next_status_works_with_strict_store(strict_store) -> None:
    service = ParcelService(strict_store)
    parcel = await service.register(random_client(), "Pskov")

    await service.next_status(parcel.number)
    await service.next_status(parcel.number)

    stored = await strict_store.get(parcel.number)
    assert stored.status is ParcelStatus.DELIVERED


async def test_change_address_before_shipping(service, store) -> None:
    parcel = await service.register(random_client(), "Pskov")

    await service.change_address(parcel.number, "Saratov")

    assert (await store.get(parcel.number)).address == "Saratov"


async def test_change_address_after_shipping_is_rejected(service) -> None:
    parcel = await service.register(random_client(), "Pskov")
    await service.next_status(parcel.number)

    with pytest.raises(ParcelLockedError):
        await service.change_address(parcel.number, "Saratov")


async def test_delete_registered_parcel(service, store) -> None:
    parcel = await service.register(random_client(), "Pskov")

    await service.delete(parcel.number)

    with pytest.raises(ParcelNotFoundError):
        await store.get(parcel.number)


async def test_delete_shipped_parcel_is_rejected(service, store) -> None:
    parcel = await service.register(random_client(), "Pskov")
    await service.next_status(parcel.number)

    with pytest.raises(ParcelLockedError):
        await service.delete(parcel.number)
    assert (await store.get(parcel.number)).status is ParcelStatus.SENT


async def test_list_client_parcels(service, caplog) -> None:
    client = random_client()
    first = await service.register(client, "Pskov")
    second = await service.register(client, "Saratov")
    await service.register(client + 1, "Tver")

    with caplog.at_level(logging.INFO, logger="parcel_tracker.service"):
        parcels = await service.list_client_parcels(client)

    assert parcels == [first, second]
    assert f"Client {client} has 2 parcel(s)" in caplog.text
