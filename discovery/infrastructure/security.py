"""Security helpers for hashing and token generation."""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from hashlib import sha256

from jose import JWTError, jwt
from passlib.context import CryptContext

from discovery.config import get_settings

_ALGORITHM = "HS256"


@lru_cache(maxsize=1)
def _pwd_context() -> CryptContext:
    return CryptContext(
        schemes=["pbkdf2_sha256"],
        deprecated="auto",
        pbkdf2_sha256__rounds=get_settings().password_hash_rounds,
    )


def get_password_hash(password: str) -> str:
    return _pwd_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return _pwd_context().verify(plain_password, hashed_password)


def password_signature(hashed_password: str, is_active: bool) -> str:
    """Fingerprint embedded in tokens so a password change revokes them."""

    return sha256(f"{hashed_password}:{int(is_active)}".encode()).hexdigest()


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=_ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, get_settings().secret_key, algorithms=[_ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


__all__ = [
    "create_access_token",
    "decode_access_token",
    "get_password_hash",
    "password_signature",
    "verify_password",
]
