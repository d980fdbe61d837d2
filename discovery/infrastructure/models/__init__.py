"""ORM models used by the application infrastructure."""

from .category import CategoryModel, FeatureModel, SubcategoryModel
from .events import (
    FavoriteModel,
    PageViewModel,
    ReservationModel,
    SearchHistoryModel,
)
from .place import (
    PlaceModel,
    place_category_table,
    place_feature_table,
    place_subcategory_table,
)
from .role import RoleModel
from .user import UserModel
from .user_session import UserSessionModel

__all__ = [
    "CategoryModel",
    "FeatureModel",
    "SubcategoryModel",
    "FavoriteModel",
    "PageViewModel",
    "ReservationModel",
    "SearchHistoryModel",
    "PlaceModel",
    "place_category_table",
    "place_feature_table",
    "place_subcategory_table",
    "RoleModel",
    "UserModel",
    "UserSessionModel",
]
