"""Use case for updating user information."""

from dataclasses import replace

from sqlalchemy.orm import Session

from discovery.domain.entities import User
from discovery.infrastructure.repositories import RoleRepository, UserRepository
from discovery.infrastructure.security import get_password_hash
from discovery.utils import now_in_app_naive_datetime

from .validators import ensure_valid_password, normalize_email

_UNSET = object()


def update_user(
    session: Session,
    *,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
    password: str | None = None,
    role_id: int | None = None,
    is_active: bool | None = None,
    avatar=_UNSET,
) -> User:
    """Update the provided user with the new values.

    ``avatar`` may be set to ``None`` to remove the picture; leaving it out
    keeps the current one.
    """

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise ValueError("Usuario no encontrado")

    new_email = current_user.email
    if email is not None:
        normalized_email = normalize_email(email)
        if normalized_email != current_user.email:
            existing_with_email = repository.get_by_email(normalized_email)
            if existing_with_email and existing_with_email.id != user_id:
                raise ValueError("El correo electrónico ya está registrado")
            new_email = normalized_email

    new_role = current_user.role
    if role_id is not None and role_id != current_user.role.id:
        role = RoleRepository(session).get(role_id)
        if role is None:
            raise ValueError("Rol no encontrado")
        new_role = role

    updated_user = replace(
        current_user,
        role=new_role,
        name=name.strip() if name is not None else current_user.name,
        email=new_email,
        avatar=current_user.avatar if avatar is _UNSET else avatar,
        is_active=is_active if is_active is not None else current_user.is_active,
        updated_at=now_in_app_naive_datetime(),
    )

    if password:
        ensure_valid_password(password)
        updated_user = replace(updated_user, password=get_password_hash(password))

    return repository.update(updated_user)
