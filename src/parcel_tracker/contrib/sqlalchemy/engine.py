"""Engine and session factory construction from config."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from parcel_tracker.config import ParcelTrackerConfig


def create_engine_from_config(config: ParcelTrackerConfig) -> AsyncEngine:
    """Create an async engine. The caller owns it and must dispose it."""
    return create_async_engine(config.database_url, echo=config.echo_sql)


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
