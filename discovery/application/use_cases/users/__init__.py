"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user
from .delete_user import delete_user
from .get_user import get_user
from .list_users import list_users
from .roles import ensure_default_roles, list_roles
from .sessions import end_session, get_session, start_session
from .update_user import update_user

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "delete_user",
    "end_session",
    "ensure_default_roles",
    "get_session",
    "get_user",
    "list_roles",
    "list_users",
    "start_session",
    "update_user",
]
