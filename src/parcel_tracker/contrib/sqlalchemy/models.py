"""SQLAlchemy parcel table."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from parcel_tracker.exceptions import PersistenceError
from parcel_tracker.types import ParcelStatus

_STATUS_VALUES = ", ".join(f"'{status.value}'" for status in ParcelStatus)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""


class ParcelModel(Base):
    """One row per parcel."""

    __tablename__ = "parcel"
    __table_args__ = (
        CheckConstraint(
            f"status IN ({_STATUS_VALUES})", name="ck_parcel_status"
        ),
        # Numbers of deleted parcels must never be handed out again.
        {"sqlite_autoincrement": True},
    )

    number: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    client: Mapped[int] = mapped_column(Integer, index=True)
    status: Mapped[str] = mapped_column(
        String(16), default=ParcelStatus.REGISTERED.value
    )
    address: Mapped[str] = mapped_column(Text)
    created_at: Mapped[str] = mapped_column(String(32))


async def create_schema(engine: AsyncEngine) -> None:
    """Create the parcel table if it does not exist yet.

    Meant for tests and local runs; there is no migration support.
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Could not create schema: {exc}") from exc
