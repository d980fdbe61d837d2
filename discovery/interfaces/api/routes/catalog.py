"""Rutas públicas para explorar categorías y lugares."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from discovery.application.use_cases.categories import get_category, list_categories
from discovery.application.use_cases.engagement import record_search
from discovery.application.use_cases.places import get_place, list_places
from discovery.domain.entities import User
from discovery.infrastructure.database import get_db
from discovery.interfaces.api.dependencies import get_optional_user
from discovery.interfaces.api.schemas import (
    CategoryListResponse,
    CategoryRead,
    CategoryResponse,
    PlaceListResponse,
    PlaceRead,
    PlaceResponse,
)

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/categories", response_model=CategoryListResponse)
def read_categories(db: Session = Depends(get_db)) -> CategoryListResponse:
    """Devuelve las categorías con sus subcategorías."""

    return CategoryListResponse(
        categories=[CategoryRead.model_validate(category) for category in list_categories(db)]
    )


@router.get("/categories/{category_id}", response_model=CategoryResponse)
def read_category(category_id: int, db: Session = Depends(get_db)) -> CategoryResponse:
    try:
        category = get_category(db, category_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return CategoryResponse(category=CategoryRead.model_validate(category))


@router.get("/places", response_model=PlaceListResponse)
def read_places(
    search: str | None = Query(None, max_length=255),
    category_id: int | None = Query(None, alias="categoryId", ge=1),
    featured: bool | None = Query(None),
    limit: int | None = Query(None, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> PlaceListResponse:
    """Busca lugares por texto libre, categoría o destacados.

    Las búsquedas de usuarios con sesión iniciada quedan registradas en el
    historial que alimenta el panel de actividad.
    """

    places = list_places(
        db, search=search, category_id=category_id, featured=featured, limit=limit
    )
    if current_user is not None and search:
        record_search(db, user_id=current_user.id, query=search)

    return PlaceListResponse(places=[PlaceRead.model_validate(place) for place in places])


@router.get("/places/{place_id}", response_model=PlaceResponse)
def read_place(place_id: int, db: Session = Depends(get_db)) -> PlaceResponse:
    try:
        place = get_place(db, place_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return PlaceResponse(place=PlaceRead.model_validate(place))


__all__ = ["router"]
