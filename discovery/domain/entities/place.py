"""Domain entity representing a place listed in the catalog."""

from dataclasses import dataclass, field
from datetime import datetime

from .category import Category, Feature, Subcategory


@dataclass
class Place:
    """A venue visitors can discover, favorite and book."""

    id: int | None
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
    categories: list[Category] = field(default_factory=list)
    subcategories: list[Subcategory] = field(default_factory=list)
    features: list[Feature] = field(default_factory=list)


__all__ = ["Place"]
