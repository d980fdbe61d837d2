"""Pydantic schemas for the user-activity endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import CamelModel


class ActivityUserRead(CamelModel):
    name: str | None = None
    email: str | None = None
    avatar: str | None = None


class ActivityRecordRead(CamelModel):
    id: str = Field(..., description="Identificador único dentro del feed")
    kind: str = Field(..., description="Colección de origen del evento")
    user_id: int | None = Field(None, description="Usuario que generó el evento")
    user: ActivityUserRead | None = None
    action: str = Field(..., description="Acción mostrada en el panel")
    details: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime


class ActivityStatsRead(CamelModel):
    page_views: int = 0
    searches: int = 0
    reservations: int = 0


class UserActivityRead(CamelModel):
    activities: list[ActivityRecordRead]
    active_users: int = Field(..., description="Sesiones abiertas iniciadas en la ventana")
    stats: ActivityStatsRead
    date_from: datetime = Field(..., description="Inicio de la ventana consultada")
    generated_at: datetime
    activity_filter: str = Field(..., alias="filter")
    time_range: str


class PageViewCreate(CamelModel):
    path: str = Field(..., min_length=1, max_length=500)
    duration: int = Field(0, ge=0, description="Segundos que duró la visita")


class PageViewCreated(CamelModel):
    success: bool = True
    id: int


__all__ = [
    "ActivityRecordRead",
    "ActivityStatsRead",
    "ActivityUserRead",
    "PageViewCreate",
    "PageViewCreated",
    "UserActivityRead",
]
