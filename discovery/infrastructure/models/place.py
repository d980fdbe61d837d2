"""SQLAlchemy model for places and their taxonomy links."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import relationship

from discovery.infrastructure.database import Base
from discovery.utils import now_in_app_naive_datetime

place_category_table = Table(
    "place_category",
    Base.metadata,
    Column("place_id", Integer, ForeignKey("place.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "category_id", Integer, ForeignKey("category.id", ondelete="CASCADE"), primary_key=True
    ),
)

place_subcategory_table = Table(
    "place_subcategory",
    Base.metadata,
    Column("place_id", Integer, ForeignKey("place.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "subcategory_id",
        Integer,
        ForeignKey("subcategory.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

place_feature_table = Table(
    "place_feature",
    Base.metadata,
    Column("place_id", Integer, ForeignKey("place.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "feature_id", Integer, ForeignKey("feature.id", ondelete="CASCADE"), primary_key=True
    ),
)


class PlaceModel(Base):
    """Database representation of a place."""

    __tablename__ = "place"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False, index=True)
    description = Column(Text, nullable=True)
    address = Column(String(255), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    phone = Column(String(50), nullable=True)
    website = Column(String(255), nullable=True)
    cuisine = Column(String(100), nullable=True)
    price_level = Column(Integer, nullable=True)
    rating = Column(Float, nullable=True)
    is_open_now = Column(Boolean, nullable=False, default=False)
    is_featured = Column(Boolean, nullable=False, default=False)
    image = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)
    categories = relationship("CategoryModel", secondary=place_category_table)
    subcategories = relationship("SubcategoryModel", secondary=place_subcategory_table)
    features = relationship("FeatureModel", secondary=place_feature_table)


__all__ = [
    "PlaceModel",
    "place_category_table",
    "place_feature_table",
    "place_subcategory_table",
]
