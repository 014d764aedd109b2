"""Parcel value types and the status lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum


class ParcelStatus(StrEnum):
    """Parcel lifecycle state.

    Status flow:
        REGISTERED -> SENT -> DELIVERED
    """

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

    @property
    def next_status(self) -> ParcelStatus | None:
        """Return the single forward successor, or None when terminal."""
        match self:
            case ParcelStatus.REGISTERED:
                return ParcelStatus.SENT
            case ParcelStatus.SENT:
                return ParcelStatus.DELIVERED
            case ParcelStatus.DELIVERED:
                return None

    @property
    def is_mutable(self) -> bool:
        """Address changes and deletion are allowed only before shipping."""
        return self is ParcelStatus.REGISTERED

    def can_transition_to(
        self, target: ParcelStatus, *, allow_skip: bool = True
    ) -> bool:
        """Whether moving to ``target`` goes strictly forward.

        With ``allow_skip=False`` only the single next step qualifies.
        """
        if not allow_skip:
            return self.next_status is target
        order = list(ParcelStatus)
        return order.index(target) > order.index(self)

    @classmethod
    def sources_for(
        cls, target: ParcelStatus, *, allow_skip: bool = True
    ) -> list[ParcelStatus]:
        """Statuses from which ``target`` may be reached."""
        return [
            status
            for status in cls
            if status.can_transition_to(target, allow_skip=allow_skip)
        ]

    @classmethod
    def mutable_statuses(cls) -> list[ParcelStatus]:
        return [status for status in cls if status.is_mutable]


def utc_now_rfc3339() -> str:
    """Current UTC time as an RFC3339 string with second precision."""
    return datetime.now(tz=UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass
class Parcel:
    """Detached copy of a parcel row.

    ``number`` is assigned by the store; it stays 0 until the parcel is
    added.
    """

    client: int
    status: ParcelStatus
    address: str
    created_at: str
    number: int = 0
