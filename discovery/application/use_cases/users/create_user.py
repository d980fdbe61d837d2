"""Use case for creating users."""

from sqlalchemy.orm import Session

from discovery.domain.entities import USER_ROLE_ALIAS, User
from discovery.infrastructure.repositories import RoleRepository, UserRepository
from discovery.infrastructure.security import get_password_hash
from discovery.utils import now_in_app_naive_datetime

from .validators import ensure_valid_password, normalize_email


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_id: int | None = None,
    avatar: str | None = None,
    is_active: bool = True,
) -> User:
    """Create a new user ensuring unique email addresses.

    Without ``role_id`` the user gets the visitor role.
    """

    repository = UserRepository(session)
    role_repository = RoleRepository(session)

    normalized_email = normalize_email(email)
    ensure_valid_password(password)

    if repository.get_by_email(normalized_email):
        raise ValueError("El correo electrónico ya está registrado")

    if role_id is None:
        role = role_repository.get_by_alias(USER_ROLE_ALIAS)
    else:
        role = role_repository.get(role_id)
    if role is None:
        raise ValueError("Rol no encontrado")

    user = User(
        id=None,
        role=role,
        name=name.strip(),
        email=normalized_email,
        password=get_password_hash(password),
        avatar=avatar,
        is_active=is_active,
        last_login=None,
        created_at=now_in_app_naive_datetime(),
        updated_at=None,
    )

    return repository.create(user)
