"""Exceptions raised by parcel-tracker."""

from __future__ import annotations

from parcel_tracker.types import ParcelStatus


class ParcelTrackerError(Exception):
    """Base class for all parcel-tracker errors."""


class ParcelNotFoundError(ParcelTrackerError):
    """No parcel with the given number exists."""

    def __init__(self, number: int, message: str | None = None) -> None:
        self.number = number
        super().__init__(message or f"Parcel {number} not found")


class ParcelLockedError(ParcelNotFoundError):
    """The parcel exists but its status forbids the requested change.

    Guarded mutations match no row when the precondition fails, so this is
    reported as a kind of "not found".
    """

    def __init__(
        self,
        number: int,
        status: ParcelStatus,
        message: str | None = None,
    ) -> None:
        self.status = status
        super().__init__(
            number,
            message
            or f"Parcel {number} is {status.value} and cannot be changed",
        )


class InvalidTransitionError(ParcelLockedError):
    """Requested status is not the single forward step from the current one."""

    def __init__(
        self, number: int, current: ParcelStatus, target: ParcelStatus
    ) -> None:
        self.current = current
        self.target = target
        super().__init__(
            number,
            current,
            f"Parcel {number} cannot move from {current.value} "
            f"to {target.value}",
        )


class PersistenceError(ParcelTrackerError):
    """The database could not complete the operation."""
