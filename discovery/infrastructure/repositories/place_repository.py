"""Persistence layer for places."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from discovery.domain.entities import Category, Feature, Place, Subcategory
from discovery.infrastructure.models import (
    CategoryModel,
    FeatureModel,
    PlaceModel,
    SubcategoryModel,
)


def _escape_like(value: str) -> str:
    """Match ``%`` and ``_`` literally in a LIKE pattern."""

    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PlaceRepository:
    """Provide CRUD operations for place entities and their taxonomy links."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        search: str | None = None,
        category_id: int | None = None,
        featured: bool | None = None,
        limit: int | None = None,
    ) -> Sequence[Place]:
        query = self._base_query()
        if search:
            pattern = f"%{_escape_like(search.strip())}%"
            query = query.filter(
                or_(
                    PlaceModel.name.ilike(pattern, escape="\\"),
                    PlaceModel.description.ilike(pattern, escape="\\"),
                    PlaceModel.address.ilike(pattern, escape="\\"),
                    PlaceModel.cuisine.ilike(pattern, escape="\\"),
                )
            )
        if category_id is not None:
            query = query.filter(PlaceModel.categories.any(CategoryModel.id == category_id))
        if featured is not None:
            query = query.filter(PlaceModel.is_featured.is_(featured))
        query = query.order_by(PlaceModel.name, PlaceModel.id)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, place_id: int) -> Place | None:
        model = self._base_query().filter(PlaceModel.id == place_id).first()
        return self._to_entity(model) if model else None

    def exists(self, place_id: int) -> bool:
        return self.session.get(PlaceModel, place_id) is not None

    def create(
        self,
        place: Place,
        *,
        category_ids: Sequence[int] = (),
        subcategory_ids: Sequence[int] = (),
        feature_ids: Sequence[int] = (),
    ) -> Place:
        model = PlaceModel()
        self._apply_entity_to_model(model, place)
        self._apply_links(model, category_ids, subcategory_ids, feature_ids)
        self.session.add(model)
        self.session.commit()
        return self.get(model.id)

    def update(
        self,
        place: Place,
        *,
        category_ids: Sequence[int] | None = None,
        subcategory_ids: Sequence[int] | None = None,
        feature_ids: Sequence[int] | None = None,
    ) -> Place:
        model = self._base_query().filter(PlaceModel.id == place.id).first()
        if model is None:
            msg = f"Place with id {place.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, place)
        self._apply_links(model, category_ids, subcategory_ids, feature_ids)
        self.session.add(model)
        self.session.commit()
        return self.get(model.id)

    def delete(self, place_id: int) -> None:
        model = self.session.get(PlaceModel, place_id)
        if model is None:
            msg = f"Place with id {place_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _base_query(self):
        return self.session.query(PlaceModel).options(
            selectinload(PlaceModel.categories),
            selectinload(PlaceModel.subcategories),
            selectinload(PlaceModel.features),
        )

    def _apply_links(
        self,
        model: PlaceModel,
        category_ids: Sequence[int] | None,
        subcategory_ids: Sequence[int] | None,
        feature_ids: Sequence[int] | None,
    ) -> None:
        if category_ids is not None:
            model.categories = self._load_all(CategoryModel, category_ids, "Categoría")
        if subcategory_ids is not None:
            model.subcategories = self._load_all(
                SubcategoryModel, subcategory_ids, "Subcategoría"
            )
        if feature_ids is not None:
            model.features = self._load_all(FeatureModel, feature_ids, "Característica")

    def _load_all(self, model_class, ids: Sequence[int], label: str) -> list:
        unique_ids = list(dict.fromkeys(int(item) for item in ids))
        if not unique_ids:
            return []
        models = self.session.query(model_class).filter(model_class.id.in_(unique_ids)).all()
        missing = set(unique_ids) - {model.id for model in models}
        if missing:
            self.session.rollback()
            msg = f"{label} no encontrada: {', '.join(str(item) for item in sorted(missing))}"
            raise ValueError(msg)
        return models

    @staticmethod
    def _apply_entity_to_model(model: PlaceModel, place: Place) -> None:
        model.name = place.name
        model.description = place.description
        model.address = place.address
        model.latitude = place.latitude
        model.longitude = place.longitude
        model.phone = place.phone
        model.website = place.website
        model.cuisine = place.cuisine
        model.price_level = place.price_level
        model.rating = place.rating
        model.is_open_now = place.is_open_now
        model.is_featured = place.is_featured
        model.image = place.image

    @staticmethod
    def _to_entity(model: PlaceModel) -> Place:
        return Place(
            id=model.id,
            name=model.name,
            description=model.description,
            address=model.address,
            latitude=model.latitude,
            longitude=model.longitude,
            phone=model.phone,
            website=model.website,
            cuisine=model.cuisine,
            price_level=model.price_level,
            rating=model.rating,
            is_open_now=model.is_open_now,
            is_featured=model.is_featured,
            image=model.image,
            created_at=model.created_at,
            updated_at=model.updated_at,
            categories=[
                Category(
                    id=category.id,
                    name=category.name,
                    icon=category.icon,
                    color=category.color,
                )
                for category in model.categories
            ],
            subcategories=[
                Subcategory(id=sub.id, category_id=sub.category_id, name=sub.name)
                for sub in model.subcategories
            ],
            features=[
                Feature(id=feature.id, name=feature.name, icon=feature.icon)
                for feature in model.features
            ],
        )


__all__ = ["PlaceRepository"]
