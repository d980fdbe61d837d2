"""Rutas para administrar usuarios desde el back-office."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from discovery.application.use_cases.users import (
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    list_roles as list_roles_uc,
    list_users as list_users_uc,
    update_user as update_user_uc,
)
from discovery.domain.entities import User
from discovery.infrastructure.database import get_db
from discovery.interfaces.api.dependencies import require_admin
from discovery.interfaces.api.schemas import RoleRead, UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/api/admin", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.get("/roles", response_model=list[RoleRead])
def list_roles(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> list[RoleRead]:
    """Devuelve los roles que se pueden asignar a un usuario."""

    return [RoleRead.model_validate(role) for role in list_roles_uc(db)]


@router.get("/users", response_model=list[UserRead])
def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> list[UserRead]:
    """Devuelve una lista de usuarios registrados."""

    return [_to_read_model(user) for user in list_users_uc(db, skip=skip, limit=limit)]


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> UserRead:
    """Crea un nuevo usuario con la contraseña indicada por el administrador."""

    try:
        user = create_user_uc(
            db,
            name=user_in.name,
            email=user_in.email,
            password=user_in.password,
            role_id=user_in.role_id,
            avatar=user_in.avatar,
            is_active=user_in.is_active,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(user)


@router.get("/users/{user_id}", response_model=UserRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> UserRead:
    """Obtiene al usuario identificado por ``user_id``."""

    try:
        user = get_user_uc(db, user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(user)


@router.put("/users/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> UserRead:
    """Actualiza los datos de un usuario existente."""

    update_data = user_in.model_dump(exclude_unset=True)
    try:
        user = update_user_uc(db, user_id=user_id, **update_data)
    except ValueError as exc:
        status_code = status.HTTP_400_BAD_REQUEST
        if str(exc) == "Usuario no encontrado":
            status_code = status.HTTP_404_NOT_FOUND
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
    return _to_read_model(user)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> Response:
    """Elimina al usuario indicado."""

    try:
        delete_user_uc(db, user_id, deleted_by=current_user.id)
    except PermissionError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
