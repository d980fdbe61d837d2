"""Domain entities for the place taxonomy."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Subcategory:
    """Finer grained grouping inside a category."""

    id: int | None
    category_id: int
    name: str
    description: str | None = None


@dataclass
class Category:
    """Top level grouping used to browse places."""

    id: int | None
    name: str
    description: str | None = None
    icon: str | None = None
    image: str | None = None
    color: str | None = None
    is_trending: bool = False
    created_at: datetime | None = None
    subcategories: list[Subcategory] = field(default_factory=list)


@dataclass
class Feature:
    """Amenity a place can offer (wifi, parking, terrace...)."""

    id: int | None
    name: str
    icon: str | None = None


__all__ = ["Category", "Feature", "Subcategory"]
