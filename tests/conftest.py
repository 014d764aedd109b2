"""Shared fixtures for parcel-tracker tests."""

from __future__ import annotations

import random

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from parcel_tracker.contrib.sqlalchemy.models import Base
from parcel_tracker.contrib.sqlalchemy.store import ParcelStore
from parcel_tracker.service import ParcelService
from parcel_tracker.types import Parcel, ParcelStatus, utc_now_rfc3339


def make_parcel(client: int = 1000, address: str = "test") -> Parcel:
    """Return a fresh registered parcel that has not been stored yet."""
    return Parcel(
        client=client,
        status=ParcelStatus.REGISTERED,
        address=address,
        created_at=utc_now_rfc3339(),
    )


def random_client() -> int:
    return random.randint(1, 10_000_000)


@pytest.fixture()
async def async_engine():
    """Create an in-memory aiosqlite async engine with the parcel table."""
    engine = create_async_engine("sqlite+aiosqlite://", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture()
async def session_factory(async_engine):
    """Create an async session factory bound to the in-memory engine."""
    factory = async_sessionmaker(
        async_engine, class_=AsyncSession, expire_on_commit=False
    )
    yield factory


@pytest.fixture()
def store(session_factory) -> ParcelStore:
    return ParcelStore(session_factory)


@pytest.fixture()
def strict_store(session_factory) -> ParcelStore:
    return ParcelStore(session_factory, strict_transitions=True)


@pytest.fixture()
def service(store) -> ParcelService:
    return ParcelService(store)
