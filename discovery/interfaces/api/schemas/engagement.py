"""Schemas for favorites and reservations."""

from datetime import datetime

from pydantic import Field

from .base import CamelModel
from .catalog import PlaceSummaryRead


class FavoriteResponse(CamelModel):
    success: bool = True
    place_id: int
    created_at: datetime


class FavoriteListResponse(CamelModel):
    success: bool = True
    places: list[PlaceSummaryRead]


class ReservationCreate(CamelModel):
    date: datetime = Field(..., description="Fecha y hora de la reserva")
    guests: int = Field(..., ge=1, le=50)


class ReservationRead(CamelModel):
    id: int
    place_id: int
    place_name: str | None = None
    date: datetime
    guests: int
    status: str
    created_at: datetime | None = None


class ReservationResponse(CamelModel):
    success: bool = True
    reservation: ReservationRead


class ReservationListResponse(CamelModel):
    success: bool = True
    reservations: list[ReservationRead]
