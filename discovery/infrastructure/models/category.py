"""SQLAlchemy models for categories, subcategories and features."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from discovery.infrastructure.database import Base
from discovery.utils import now_in_app_naive_datetime


class CategoryModel(Base):
    """Database representation of a browsing category."""

    __tablename__ = "category"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    icon = Column(String(50), nullable=True)
    image = Column(String(500), nullable=True)
    color = Column(String(20), nullable=True)
    is_trending = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    subcategories = relationship(
        "SubcategoryModel",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SubcategoryModel.name",
    )


class SubcategoryModel(Base):
    """Database representation of a subcategory nested in a category."""

    __tablename__ = "subcategory"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(
        Integer,
        ForeignKey("category.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    category = relationship("CategoryModel", back_populates="subcategories")


class FeatureModel(Base):
    """Database representation of a place amenity."""

    __tablename__ = "feature"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    icon = Column(String(50), nullable=True)


__all__ = ["CategoryModel", "FeatureModel", "SubcategoryModel"]
