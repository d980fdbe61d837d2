"""Authentication related schemas."""

from pydantic import EmailStr, Field

from .base import CamelModel


class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthUserRead(CamelModel):
    id: int
    name: str
    email: EmailStr
    avatar: str | None = None
    role: str = Field(..., description="Alias del rol del usuario")


class AuthResponse(CamelModel):
    success: bool = True
    user: AuthUserRead
    access_token: str


class MeResponse(CamelModel):
    success: bool = True
    user: AuthUserRead
