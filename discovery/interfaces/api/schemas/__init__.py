from .activity import (
    ActivityRecordRead,
    ActivityStatsRead,
    ActivityUserRead,
    PageViewCreate,
    PageViewCreated,
    UserActivityRead,
)
from .auth import AuthResponse, AuthUserRead, LoginRequest, MeResponse, RegisterRequest
from .base import ErrorResponse, SuccessResponse
from .catalog import (
    CategoryCreate,
    CategoryListResponse,
    CategoryRead,
    CategoryResponse,
    CategoryUpdate,
    FeatureCreate,
    FeatureListResponse,
    FeatureRead,
    FeatureResponse,
    PlaceCreate,
    PlaceListResponse,
    PlaceRead,
    PlaceResponse,
    PlaceSummaryRead,
    PlaceUpdate,
    SubcategoryCreate,
    SubcategoryListResponse,
    SubcategoryRead,
    SubcategoryResponse,
)
from .engagement import (
    FavoriteListResponse,
    FavoriteResponse,
    ReservationCreate,
    ReservationListResponse,
    ReservationRead,
    ReservationResponse,
)
from .user import RoleRead, UserCreate, UserRead, UserUpdate

__all__ = [
    "ActivityRecordRead",
    "ActivityStatsRead",
    "ActivityUserRead",
    "PageViewCreate",
    "PageViewCreated",
    "UserActivityRead",
    "AuthResponse",
    "AuthUserRead",
    "LoginRequest",
    "MeResponse",
    "RegisterRequest",
    "ErrorResponse",
    "SuccessResponse",
    "CategoryCreate",
    "CategoryListResponse",
    "CategoryRead",
    "CategoryResponse",
    "CategoryUpdate",
    "FeatureCreate",
    "FeatureListResponse",
    "FeatureRead",
    "FeatureResponse",
    "PlaceCreate",
    "PlaceListResponse",
    "PlaceRead",
    "PlaceResponse",
    "PlaceSummaryRead",
    "PlaceUpdate",
    "SubcategoryCreate",
    "SubcategoryListResponse",
    "SubcategoryRead",
    "SubcategoryResponse",
    "FavoriteListResponse",
    "FavoriteResponse",
    "ReservationCreate",
    "ReservationListResponse",
    "ReservationRead",
    "ReservationResponse",
    "RoleRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
