"""Use cases for managing categories, subcategories and features."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from discovery.domain.entities import Category, Feature, Subcategory
from discovery.infrastructure.repositories import CategoryRepository, FeatureRepository

_CATEGORY_FIELDS = ("name", "description", "icon", "image", "color", "is_trending")


def list_categories(session: Session) -> Sequence[Category]:
    return CategoryRepository(session).list()


def get_category(session: Session, category_id: int) -> Category:
    category = CategoryRepository(session).get(category_id)
    if category is None:
        raise ValueError("Categoría no encontrada")
    return category


def create_category(session: Session, *, data: dict[str, Any]) -> Category:
    """Create a category; names are unique."""

    repository = CategoryRepository(session)
    name = (data.get("name") or "").strip()
    if not name:
        raise ValueError("El nombre de la categoría es obligatorio")
    if repository.get_by_name(name):
        raise ValueError("Ya existe una categoría con ese nombre")

    fields = {key: data[key] for key in _CATEGORY_FIELDS if key in data}
    fields["name"] = name
    return repository.create(Category(id=None, **fields))


def update_category(
    session: Session, category_id: int, *, changes: dict[str, Any]
) -> Category:
    repository = CategoryRepository(session)
    current = repository.get(category_id)
    if current is None:
        raise ValueError("Categoría no encontrada")

    fields = {key: value for key, value in changes.items() if key in _CATEGORY_FIELDS}
    if "name" in fields:
        name = (fields["name"] or "").strip()
        if not name:
            raise ValueError("El nombre de la categoría es obligatorio")
        existing = repository.get_by_name(name)
        if existing and existing.id != category_id:
            raise ValueError("Ya existe una categoría con ese nombre")
        fields["name"] = name
    return repository.update(replace(current, **fields))


def delete_category(session: Session, category_id: int) -> None:
    repository = CategoryRepository(session)
    if repository.get(category_id) is None:
        raise ValueError("Categoría no encontrada")
    repository.delete(category_id)


def list_subcategories(
    session: Session, *, category_id: int | None = None
) -> Sequence[Subcategory]:
    return CategoryRepository(session).list_subcategories(category_id)


def create_subcategory(
    session: Session, *, category_id: int, name: str, description: str | None = None
) -> Subcategory:
    repository = CategoryRepository(session)
    if repository.get(category_id) is None:
        raise ValueError("Categoría no encontrada")
    if not name.strip():
        raise ValueError("El nombre de la subcategoría es obligatorio")
    return repository.create_subcategory(
        Subcategory(
            id=None, category_id=category_id, name=name.strip(), description=description
        )
    )


def delete_subcategory(session: Session, subcategory_id: int) -> None:
    repository = CategoryRepository(session)
    if repository.get_subcategory(subcategory_id) is None:
        raise ValueError("Subcategoría no encontrada")
    repository.delete_subcategory(subcategory_id)


def list_features(session: Session) -> Sequence[Feature]:
    return FeatureRepository(session).list()


def create_feature(session: Session, *, name: str, icon: str | None = None) -> Feature:
    repository = FeatureRepository(session)
    normalized = name.strip()
    if not normalized:
        raise ValueError("El nombre de la característica es obligatorio")
    if repository.get_by_name(normalized):
        raise ValueError("Ya existe una característica con ese nombre")
    return repository.create(Feature(id=None, name=normalized, icon=icon))


def delete_feature(session: Session, feature_id: int) -> None:
    repository = FeatureRepository(session)
    if repository.get(feature_id) is None:
        raise ValueError("Característica no encontrada")
    repository.delete(feature_id)


__all__ = [
    "create_category",
    "create_feature",
    "create_subcategory",
    "delete_category",
    "delete_feature",
    "delete_subcategory",
    "get_category",
    "list_categories",
    "list_features",
    "list_subcategories",
    "update_category",
]
