"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import ADMIN_ROLE_ALIAS, Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    name: str
    email: str
    password: str
    avatar: str | None
    is_active: bool
    last_login: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ADMIN_ROLE_ALIAS)


__all__ = ["User"]
