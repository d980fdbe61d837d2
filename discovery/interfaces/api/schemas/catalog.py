"""Schemas for categories, subcategories, features and places."""

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class SubcategoryRead(CamelModel):
    id: int
    category_id: int
    name: str
    description: str | None = None


class SubcategoryCreate(CamelModel):
    category_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class CategoryRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    icon: str | None = None
    image: str | None = None
    color: str | None = None
    is_trending: bool = False
    subcategories: list[SubcategoryRead] = Field(default_factory=list)


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    icon: str | None = Field(default=None, max_length=50)
    image: str | None = Field(default=None, max_length=500)
    color: str | None = Field(default=None, max_length=20)
    is_trending: bool = False


class CategoryUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    icon: str | None = Field(default=None, max_length=50)
    image: str | None = Field(default=None, max_length=500)
    color: str | None = Field(default=None, max_length=20)
    is_trending: bool | None = None


class FeatureRead(CamelModel):
    id: int
    name: str
    icon: str | None = None


class FeatureCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    icon: str | None = Field(default=None, max_length=50)


class PlaceCategoryRead(CamelModel):
    id: int
    name: str
    icon: str | None = None
    color: str | None = None


class PlaceSubcategoryRead(CamelModel):
    id: int
    category_id: int
    name: str


class PlaceRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None
    website: str | None = None
    cuisine: str | None = None
    price_level: int | None = None
    rating: float | None = None
    is_open_now: bool = False
    is_featured: bool = False
    image: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    categories: list[PlaceCategoryRead] = Field(default_factory=list)
    subcategories: list[PlaceSubcategoryRead] = Field(default_factory=list)
    features: list[FeatureRead] = Field(default_factory=list)


class PlaceSummaryRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    rating: float | None = None
    image: str | None = None


class PlaceCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: str | None = None
    address: str | None = Field(default=None, max_length=255)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    phone: str | None = Field(default=None, max_length=50)
    website: str | None = Field(default=None, max_length=255)
    cuisine: str | None = Field(default=None, max_length=100)
    price_level: int | None = Field(default=None, ge=1, le=4)
    rating: float | None = Field(default=None, ge=0, le=5)
    is_open_now: bool = False
    is_featured: bool = False
    image: str | None = Field(default=None, max_length=500)
    category_ids: list[int] = Field(default_factory=list)
    subcategory_ids: list[int] = Field(default_factory=list)
    feature_ids: list[int] = Field(default_factory=list)


class PlaceUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=150)
    description: str | None = None
    address: str | None = Field(default=None, max_length=255)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    phone: str | None = Field(default=None, max_length=50)
    website: str | None = Field(default=None, max_length=255)
    cuisine: str | None = Field(default=None, max_length=100)
    price_level: int | None = Field(default=None, ge=1, le=4)
    rating: float | None = Field(default=None, ge=0, le=5)
    is_open_now: bool | None = None
    is_featured: bool | None = None
    image: str | None = Field(default=None, max_length=500)
    category_ids: list[int] | None = None
    subcategory_ids: list[int] | None = None
    feature_ids: list[int] | None = None


class CategoryListResponse(CamelModel):
    success: bool = True
    categories: list[CategoryRead]


class CategoryResponse(CamelModel):
    success: bool = True
    category: CategoryRead


class SubcategoryListResponse(CamelModel):
    success: bool = True
    subcategories: list[SubcategoryRead]


class SubcategoryResponse(CamelModel):
    success: bool = True
    subcategory: SubcategoryRead


class FeatureListResponse(CamelModel):
    success: bool = True
    features: list[FeatureRead]


class FeatureResponse(CamelModel):
    success: bool = True
    feature: FeatureRead


class PlaceListResponse(CamelModel):
    success: bool = True
    places: list[PlaceRead]


class PlaceResponse(CamelModel):
    success: bool = True
    place: PlaceRead
