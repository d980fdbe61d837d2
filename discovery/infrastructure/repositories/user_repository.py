"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from discovery.domain.entities import Role, User
from discovery.infrastructure.models import UserModel


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[User]:
        query = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> None:
        model = self._get_model(id=user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=UserRepository._role_to_entity(model.role),
            name=model.name,
            email=model.email,
            password=model.password,
            avatar=model.avatar,
            is_active=model.is_active,
            last_login=model.last_login,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _get_model(self, **filters) -> UserModel | None:
        return (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter_by(**filters)
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields and user.created_at is not None:
            model.created_at = user.created_at
        model.role_id = user.role.id
        model.name = user.name
        model.email = user.email
        model.password = user.password
        model.avatar = user.avatar
        model.is_active = user.is_active
        model.last_login = user.last_login
        if not include_creation_fields:
            model.updated_at = user.updated_at

    @staticmethod
    def _role_to_entity(model_role) -> Role:
        if model_role is None:
            msg = "User role is not set"
            raise ValueError(msg)
        return Role(id=model_role.id, name=model_role.name, alias=model_role.alias)


__all__ = ["UserRepository"]
