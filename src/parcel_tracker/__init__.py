"""parcel-tracker public API."""

from typing import TYPE_CHECKING

__version__ = "0.1.0"

__all__ = [
    "InvalidTransitionError",
    "Parcel",
    "ParcelLockedError",
    "ParcelNotFoundError",
    "ParcelRepository",
    "ParcelService",
    "ParcelStatus",
    "ParcelStore",
    "ParcelTrackerConfig",
    "ParcelTrackerError",
    "PersistenceError",
    "__version__",
]

if TYPE_CHECKING:
    from parcel_tracker.config import ParcelTrackerConfig
    from parcel_tracker.contrib.sqlalchemy.store import ParcelStore
    from parcel_tracker.exceptions import (
        InvalidTransitionError,
        ParcelLockedError,
        ParcelNotFoundError,
        ParcelTrackerError,
        PersistenceError,
    )
    from parcel_tracker.protocols import ParcelRepository
    from parcel_tracker.service import ParcelService
    from parcel_tracker.types import Parcel, ParcelStatus

_EXCEPTIONS = {
    "InvalidTransitionError",
    "ParcelLockedError",
    "ParcelNotFoundError",
    "ParcelTrackerError",
    "PersistenceError",
}


def __getattr__(name: str):
    # Lazy imports keep SQLAlchemy out of plain ``import parcel_tracker``.
    if name in ("Parcel", "ParcelStatus"):
        from parcel_tracker import types

        return getattr(types, name)
    if name in _EXCEPTIONS:
        from parcel_tracker import exceptions

        return getattr(exceptions, name)
    if name == "ParcelTrackerConfig":
        from parcel_tracker.config import ParcelTrackerConfig

        return ParcelTrackerConfig
    if name == "ParcelStore":
        from parcel_tracker.contrib.sqlalchemy.store import ParcelStore

        return ParcelStore
    if name == "ParcelRepository":
        from parcel_tracker.protocols import ParcelRepository

        return ParcelRepository
    if name == "ParcelService":
        from parcel_tracker.service import ParcelService

        return ParcelService
    raise AttributeError(
        f"module 'parcel_tracker' has no attribute {name!r}"
    )
