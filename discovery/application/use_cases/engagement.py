"""Use cases recording what visitors do while browsing places."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from discovery.domain.entities import RESERVATION_STATUS_PENDING, Place, Reservation
from discovery.infrastructure.repositories import EngagementRepository, PlaceRepository
from discovery.utils import ensure_app_naive_datetime, now_in_app_naive_datetime

MAX_GUESTS = 50


def record_search(session: Session, *, user_id: int | None, query: str) -> int | None:
    """Store a search; blank queries are ignored and return ``None``."""

    normalized = query.strip()
    if not normalized:
        return None
    return EngagementRepository(session).add_search(
        user_id=user_id, query=normalized[:255], timestamp=now_in_app_naive_datetime()
    )


def record_page_view(
    session: Session, *, user_id: int | None, path: str, duration: int = 0
) -> int:
    """Store a page visit lasting ``duration`` seconds."""

    if not path.startswith("/"):
        raise ValueError("La ruta debe comenzar con '/'")
    if duration < 0:
        raise ValueError("La duración no puede ser negativa")
    return EngagementRepository(session).add_page_view(
        user_id=user_id,
        path=path,
        duration=duration,
        timestamp=now_in_app_naive_datetime(),
    )


def add_favorite(session: Session, *, user_id: int, place_id: int) -> datetime:
    """Mark ``place_id`` as favorite; repeating the call keeps the first date."""

    if not PlaceRepository(session).exists(place_id):
        raise ValueError("Lugar no encontrado")
    return EngagementRepository(session).add_favorite(
        user_id=user_id, place_id=place_id, created_at=now_in_app_naive_datetime()
    )


def remove_favorite(session: Session, *, user_id: int, place_id: int) -> None:
    if not EngagementRepository(session).remove_favorite(
        user_id=user_id, place_id=place_id
    ):
        raise ValueError("Favorito no encontrado")


def list_favorites(session: Session, *, user_id: int) -> Sequence[Place]:
    return EngagementRepository(session).list_favorite_places(user_id)


def create_reservation(
    session: Session, *, user_id: int, place_id: int, date: datetime, guests: int
) -> Reservation:
    """Create a pending reservation for a future date."""

    if not PlaceRepository(session).exists(place_id):
        raise ValueError("Lugar no encontrado")
    if not 1 <= guests <= MAX_GUESTS:
        raise ValueError(f"El número de personas debe estar entre 1 y {MAX_GUESTS}")

    now = now_in_app_naive_datetime()
    reservation_date = ensure_app_naive_datetime(date)
    if reservation_date <= now:
        raise ValueError("La fecha de la reserva debe ser futura")

    return EngagementRepository(session).add_reservation(
        Reservation(
            id=None,
            user_id=user_id,
            place_id=place_id,
            date=reservation_date,
            guests=guests,
            status=RESERVATION_STATUS_PENDING,
            created_at=now,
        )
    )


def list_reservations(session: Session, *, user_id: int) -> Sequence[Reservation]:
    return EngagementRepository(session).list_reservations(user_id)


__all__ = [
    "add_favorite",
    "create_reservation",
    "list_favorites",
    "list_reservations",
    "record_page_view",
    "record_search",
    "remove_favorite",
]
