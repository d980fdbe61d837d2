"""Persistence layer for categories, subcategories and features."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session, selectinload

from discovery.domain.entities import Category, Feature, Subcategory
from discovery.infrastructure.models import CategoryModel, FeatureModel, SubcategoryModel


class CategoryRepository:
    """Provide CRUD operations for categories and their subcategories."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Category]:
        query = (
            self.session.query(CategoryModel)
            .options(selectinload(CategoryModel.subcategories))
            .order_by(CategoryModel.name)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, category_id: int) -> Category | None:
        model = self._get_model(category_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> Category | None:
        model = self.session.query(CategoryModel).filter_by(name=name).first()
        return self._to_entity(model) if model else None

    def create(self, category: Category) -> Category:
        model = CategoryModel()
        self._apply_entity_to_model(model, category)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, category: Category) -> Category:
        model = self._get_model(category.id)
        if model is None:
            msg = f"Category with id {category.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, category)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, category_id: int) -> None:
        model = self._get_model(category_id)
        if model is None:
            msg = f"Category with id {category_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def list_subcategories(self, category_id: int | None = None) -> Sequence[Subcategory]:
        query = self.session.query(SubcategoryModel)
        if category_id is not None:
            query = query.filter(SubcategoryModel.category_id == category_id)
        query = query.order_by(SubcategoryModel.category_id, SubcategoryModel.name)
        return [self._subcategory_to_entity(model) for model in query.all()]

    def get_subcategory(self, subcategory_id: int) -> Subcategory | None:
        model = self.session.get(SubcategoryModel, subcategory_id)
        return self._subcategory_to_entity(model) if model else None

    def create_subcategory(self, subcategory: Subcategory) -> Subcategory:
        model = SubcategoryModel(
            category_id=subcategory.category_id,
            name=subcategory.name,
            description=subcategory.description,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._subcategory_to_entity(model)

    def delete_subcategory(self, subcategory_id: int) -> None:
        model = self.session.get(SubcategoryModel, subcategory_id)
        if model is None:
            msg = f"Subcategory with id {subcategory_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _get_model(self, category_id: int | None) -> CategoryModel | None:
        return (
            self.session.query(CategoryModel)
            .options(selectinload(CategoryModel.subcategories))
            .filter_by(id=category_id)
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(model: CategoryModel, category: Category) -> None:
        model.name = category.name
        model.description = category.description
        model.icon = category.icon
        model.image = category.image
        model.color = category.color
        model.is_trending = category.is_trending

    @staticmethod
    def _to_entity(model: CategoryModel, *, include_subcategories: bool = True) -> Category:
        return Category(
            id=model.id,
            name=model.name,
            description=model.description,
            icon=model.icon,
            image=model.image,
            color=model.color,
            is_trending=model.is_trending,
            created_at=model.created_at,
            subcategories=(
                [CategoryRepository._subcategory_to_entity(sub) for sub in model.subcategories]
                if include_subcategories
                else []
            ),
        )

    @staticmethod
    def _subcategory_to_entity(model: SubcategoryModel) -> Subcategory:
        return Subcategory(
            id=model.id,
            category_id=model.category_id,
            name=model.name,
            description=model.description,
        )


class FeatureRepository:
    """Provide CRUD operations for place features."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Feature]:
        models = self.session.query(FeatureModel).order_by(FeatureModel.name).all()
        return [self._to_entity(model) for model in models]

    def get(self, feature_id: int) -> Feature | None:
        model = self.session.get(FeatureModel, feature_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> Feature | None:
        model = self.session.query(FeatureModel).filter_by(name=name).first()
        return self._to_entity(model) if model else None

    def create(self, feature: Feature) -> Feature:
        model = FeatureModel(name=feature.name, icon=feature.icon)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, feature_id: int) -> None:
        model = self.session.get(FeatureModel, feature_id)
        if model is None:
            msg = f"Feature with id {feature_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: FeatureModel) -> Feature:
        return Feature(id=model.id, name=model.name, icon=model.icon)


__all__ = ["CategoryRepository", "FeatureRepository"]
