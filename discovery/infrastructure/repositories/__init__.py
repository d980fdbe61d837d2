"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository
from .category_repository import CategoryRepository, FeatureRepository
from .engagement_repository import EngagementRepository
from .place_repository import PlaceRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository
from .user_session_repository import UserSessionRepository

__all__ = [
    "ActivityRepository",
    "CategoryRepository",
    "EngagementRepository",
    "FeatureRepository",
    "PlaceRepository",
    "RoleRepository",
    "UserRepository",
    "UserSessionRepository",
]
