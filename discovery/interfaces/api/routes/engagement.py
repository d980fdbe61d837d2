"""Rutas para favoritos y reservas del visitante autenticado."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from discovery.application.use_cases.engagement import (
    add_favorite,
    create_reservation,
    list_favorites,
    list_reservations,
    remove_favorite,
)
from discovery.domain.entities import User
from discovery.infrastructure.database import get_db
from discovery.interfaces.api.dependencies import get_current_active_user
from discovery.interfaces.api.schemas import (
    FavoriteListResponse,
    FavoriteResponse,
    PlaceSummaryRead,
    ReservationCreate,
    ReservationListResponse,
    ReservationRead,
    ReservationResponse,
)

router = APIRouter(prefix="/api", tags=["engagement"])


@router.post(
    "/places/{place_id}/favorite",
    response_model=FavoriteResponse,
    status_code=status.HTTP_201_CREATED,
)
def favorite_place(
    place_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> FavoriteResponse:
    """Marca el lugar como favorito; repetir la llamada no duplica el registro."""

    try:
        created_at = add_favorite(db, user_id=current_user.id, place_id=place_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return FavoriteResponse(place_id=place_id, created_at=created_at)


@router.delete("/places/{place_id}/favorite", status_code=status.HTTP_204_NO_CONTENT)
def unfavorite_place(
    place_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    try:
        remove_favorite(db, user_id=current_user.id, place_id=place_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/favorites", response_model=FavoriteListResponse)
def read_favorites(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> FavoriteListResponse:
    places = list_favorites(db, user_id=current_user.id)
    return FavoriteListResponse(
        places=[PlaceSummaryRead.model_validate(place) for place in places]
    )


@router.post(
    "/places/{place_id}/reservations",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
)
def reserve_place(
    place_id: int,
    payload: ReservationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ReservationResponse:
    """Crea una reserva pendiente de confirmación."""

    try:
        reservation = create_reservation(
            db,
            user_id=current_user.id,
            place_id=place_id,
            date=payload.date,
            guests=payload.guests,
        )
    except ValueError as exc:
        status_code = status.HTTP_400_BAD_REQUEST
        if str(exc) == "Lugar no encontrado":
            status_code = status.HTTP_404_NOT_FOUND
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
    return ReservationResponse(reservation=ReservationRead.model_validate(reservation))


@router.get("/reservations", response_model=ReservationListResponse)
def read_reservations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ReservationListResponse:
    """Devuelve las reservas del usuario, de la más reciente a la más antigua."""

    reservations = list_reservations(db, user_id=current_user.id)
    return ReservationListResponse(
        reservations=[ReservationRead.model_validate(item) for item in reservations]
    )


__all__ = ["router"]
