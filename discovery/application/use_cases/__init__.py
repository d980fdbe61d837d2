"""Aggregate application use cases."""

from .activity import ActivityFetchError, get_user_activity
from .users import authenticate_user, create_user, start_session

__all__ = [
    "ActivityFetchError",
    "authenticate_user",
    "create_user",
    "get_user_activity",
    "start_session",
]
