"""Status label classification shared by services and groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

STATUS_NUMBERS: dict[str, int] = {
    "critical": 4,
    "warning": 3,
    "active": 2,
    "maintenance": 1,
    "disabled": 0,
}
UNKNOWN_STATUS_NUMBER = -1

# Anything below "warning" counts as online, unknown labels included.
OFFLINE_THRESHOLD = 3


def status_to_number(status: Any) -> int:
    """Map a raw status label to its severity ordinal (higher is worse)."""
    if not isinstance(status, str):
        return UNKNOWN_STATUS_NUMBER
    return STATUS_NUMBERS.get(status, UNKNOWN_STATUS_NUMBER)


def is_online_status(status: Any) -> bool:
    return status_to_number(status) < OFFLINE_THRESHOLD


@dataclass(frozen=True)
class StatusFields:
    """The status triple injected into services and groups."""

    status: str | None
    status_number: int
    is_online: bool

    @classmethod
    def from_status(cls, status: Any) -> StatusFields:
        number = status_to_number(status)
        return cls(
            status=status if isinstance(status, str) else None,
            status_number=number,
            is_online=number < OFFLINE_THRESHOLD,
        )
