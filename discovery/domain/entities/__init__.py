"""Domain entities exposed by the application."""

from .activity import (
    ActivityFeed,
    ActivityFilter,
    ActivityKind,
    ActivityRecord,
    ActivityStats,
    ActivityUser,
    TimeRange,
)
from .category import Category, Feature, Subcategory
from .place import Place
from .reservation import (
    RESERVATION_STATUS_CANCELLED,
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_PENDING,
    Reservation,
)
from .role import ADMIN_ROLE_ALIAS, USER_ROLE_ALIAS, Role
from .user import User
from .user_session import UserSession

__all__ = [
    "ActivityFeed",
    "ActivityFilter",
    "ActivityKind",
    "ActivityRecord",
    "ActivityStats",
    "ActivityUser",
    "TimeRange",
    "Category",
    "Feature",
    "Subcategory",
    "Place",
    "RESERVATION_STATUS_CANCELLED",
    "RESERVATION_STATUS_CONFIRMED",
    "RESERVATION_STATUS_PENDING",
    "Reservation",
    "ADMIN_ROLE_ALIAS",
    "USER_ROLE_ALIAS",
    "Role",
    "User",
    "UserSession",
]
