"""User schemas."""

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from .base import CamelModel


class RoleRead(CamelModel):
    id: int
    name: str
    alias: str


class UserCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role_id: int | None = Field(default=None, ge=1)
    avatar: str | None = Field(default=None, max_length=500)
    is_active: bool = True


class UserUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6)
    role_id: int | None = Field(default=None, ge=1)
    avatar: str | None = Field(default=None, max_length=500)
    is_active: bool | None = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class UserRead(CamelModel):
    id: int
    name: str
    email: EmailStr
    avatar: str | None
    role: RoleRead
    is_active: bool
    last_login: datetime | None
    created_at: datetime | None
    updated_at: datetime | None
