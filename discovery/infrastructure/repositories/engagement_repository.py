"""Persistence layer for the events visitors generate while browsing."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from discovery.domain.entities import Place, Reservation
from discovery.infrastructure.models import (
    FavoriteModel,
    PageViewModel,
    PlaceModel,
    ReservationModel,
    SearchHistoryModel,
)


class EngagementRepository:
    """Write searches, page views, favorites and reservations."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add_search(self, *, user_id: int | None, query: str, timestamp: datetime) -> int:
        model = SearchHistoryModel(user_id=user_id, query=query, timestamp=timestamp)
        self.session.add(model)
        self.session.commit()
        return model.id

    def add_page_view(
        self, *, user_id: int | None, path: str, duration: int, timestamp: datetime
    ) -> int:
        model = PageViewModel(
            user_id=user_id, path=path, duration=duration, timestamp=timestamp
        )
        self.session.add(model)
        self.session.commit()
        return model.id

    def add_favorite(self, *, user_id: int, place_id: int, created_at: datetime) -> datetime:
        existing = self.session.get(FavoriteModel, (user_id, place_id))
        if existing is not None:
            return existing.created_at
        model = FavoriteModel(user_id=user_id, place_id=place_id, created_at=created_at)
        self.session.add(model)
        self.session.commit()
        return model.created_at

    def remove_favorite(self, *, user_id: int, place_id: int) -> bool:
        model = self.session.get(FavoriteModel, (user_id, place_id))
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def list_favorite_places(self, user_id: int) -> Sequence[Place]:
        rows = (
            self.session.query(PlaceModel)
            .join(FavoriteModel, FavoriteModel.place_id == PlaceModel.id)
            .filter(FavoriteModel.user_id == user_id)
            .order_by(FavoriteModel.created_at.desc())
            .all()
        )
        return [
            Place(
                id=model.id,
                name=model.name,
                description=model.description,
                address=model.address,
                latitude=model.latitude,
                longitude=model.longitude,
                rating=model.rating,
                image=model.image,
            )
            for model in rows
        ]

    def add_reservation(self, reservation: Reservation) -> Reservation:
        model = ReservationModel(
            user_id=reservation.user_id,
            place_id=reservation.place_id,
            date=reservation.date,
            guests=reservation.guests,
            status=reservation.status,
            created_at=reservation.created_at,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._reservation_to_entity(model)

    def list_reservations(self, user_id: int) -> Sequence[Reservation]:
        models = (
            self.session.query(ReservationModel)
            .filter(ReservationModel.user_id == user_id)
            .order_by(ReservationModel.created_at.desc(), ReservationModel.id.desc())
            .all()
        )
        return [self._reservation_to_entity(model) for model in models]

    @staticmethod
    def _reservation_to_entity(model: ReservationModel) -> Reservation:
        return Reservation(
            id=model.id,
            user_id=model.user_id,
            place_id=model.place_id,
            date=model.date,
            guests=model.guests,
            status=model.status,
            created_at=model.created_at,
            place_name=model.place.name if model.place else None,
        )


__all__ = ["EngagementRepository"]
