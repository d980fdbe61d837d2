"""Use cases for browsing and managing places."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from discovery.domain.entities import Place
from discovery.infrastructure.repositories import PlaceRepository

_PLACE_FIELDS = (
    "name",
    "description",
    "address",
    "latitude",
    "longitude",
    "phone",
    "website",
    "cuisine",
    "price_level",
    "rating",
    "is_open_now",
    "is_featured",
    "image",
)


def _validate_place(place: Place) -> None:
    if not place.name or not place.name.strip():
        raise ValueError("El nombre del lugar es obligatorio")
    if (place.latitude is None) != (place.longitude is None):
        raise ValueError("La latitud y la longitud deben indicarse juntas")
    if place.latitude is not None and not -90 <= place.latitude <= 90:
        raise ValueError("La latitud debe estar entre -90 y 90")
    if place.longitude is not None and not -180 <= place.longitude <= 180:
        raise ValueError("La longitud debe estar entre -180 y 180")
    if place.rating is not None and not 0 <= place.rating <= 5:
        raise ValueError("La valoración debe estar entre 0 y 5")
    if place.price_level is not None and not 1 <= place.price_level <= 4:
        raise ValueError("El nivel de precio debe estar entre 1 y 4")


def list_places(
    session: Session,
    *,
    search: str | None = None,
    category_id: int | None = None,
    featured: bool | None = None,
    limit: int | None = None,
) -> Sequence[Place]:
    """Return places matching the optional filters, ordered by name."""

    return PlaceRepository(session).list(
        search=search.strip() if search else None,
        category_id=category_id,
        featured=featured,
        limit=limit,
    )


def get_place(session: Session, place_id: int) -> Place:
    place = PlaceRepository(session).get(place_id)
    if place is None:
        raise ValueError("Lugar no encontrado")
    return place


def create_place(
    session: Session,
    *,
    data: dict[str, Any],
    category_ids: Sequence[int] = (),
    subcategory_ids: Sequence[int] = (),
    feature_ids: Sequence[int] = (),
) -> Place:
    """Create a place from ``data`` and link it to the given taxonomy ids."""

    place = Place(id=None, **{key: data[key] for key in _PLACE_FIELDS if key in data})
    _validate_place(place)
    return PlaceRepository(session).create(
        place,
        category_ids=category_ids,
        subcategory_ids=subcategory_ids,
        feature_ids=feature_ids,
    )


def update_place(
    session: Session,
    place_id: int,
    *,
    changes: dict[str, Any],
    category_ids: Sequence[int] | None = None,
    subcategory_ids: Sequence[int] | None = None,
    feature_ids: Sequence[int] | None = None,
) -> Place:
    """Apply ``changes`` to the place; link lists left as ``None`` are kept."""

    repository = PlaceRepository(session)
    current = repository.get(place_id)
    if current is None:
        raise ValueError("Lugar no encontrado")

    updated = replace(
        current, **{key: value for key, value in changes.items() if key in _PLACE_FIELDS}
    )
    _validate_place(updated)
    return repository.update(
        updated,
        category_ids=category_ids,
        subcategory_ids=subcategory_ids,
        feature_ids=feature_ids,
    )


def delete_place(session: Session, place_id: int) -> None:
    repository = PlaceRepository(session)
    if not repository.exists(place_id):
        raise ValueError("Lugar no encontrado")
    repository.delete(place_id)


__all__ = [
    "create_place",
    "delete_place",
    "get_place",
    "list_places",
    "update_place",
]
