"""Domain entity representing a reservation request for a place."""

from dataclasses import dataclass
from datetime import datetime

RESERVATION_STATUS_PENDING = "pending"
RESERVATION_STATUS_CONFIRMED = "confirmed"
RESERVATION_STATUS_CANCELLED = "cancelled"


@dataclass
class Reservation:
    """A booking made by a user for a given place and date."""

    id: int | None
    user_id: int
    place_id: int
    date: datetime
    guests: int
    status: str = RESERVATION_STATUS_PENDING
    created_at: datetime | None = None
    place_name: str | None = None


__all__ = [
    "RESERVATION_STATUS_CANCELLED",
    "RESERVATION_STATUS_CONFIRMED",
    "RESERVATION_STATUS_PENDING",
    "Reservation",
]
