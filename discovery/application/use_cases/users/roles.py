"""Use case for seeding the built-in roles."""

from sqlalchemy.orm import Session

from discovery.domain.entities import ADMIN_ROLE_ALIAS, USER_ROLE_ALIAS, Role
from discovery.infrastructure.repositories import RoleRepository

DEFAULT_ROLES = {
    ADMIN_ROLE_ALIAS: "Administrador",
    USER_ROLE_ALIAS: "Usuario",
}


def ensure_default_roles(session: Session) -> list[Role]:
    """Create the administrator and visitor roles when they are missing."""

    repository = RoleRepository(session)
    return [
        repository.get_or_create(alias=alias, name=name)
        for alias, name in DEFAULT_ROLES.items()
    ]


def list_roles(session: Session) -> list[Role]:
    """Return every role that can be assigned to a user."""

    return RoleRepository(session).list()
