"""FastAPI dependency utilities."""

from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from discovery.application.use_cases.users import get_session
from discovery.config import get_settings
from discovery.domain.entities import User
from discovery.infrastructure.database import get_db
from discovery.infrastructure.repositories import UserRepository
from discovery.infrastructure.security import decode_access_token, password_signature

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


@dataclass
class AuthContext:
    """Authenticated user together with the session its token belongs to."""

    user: User
    session_id: int | None
    token: str


def _unauthorized(detail: str = "Credenciales inválidas") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def extract_token(request: Request, bearer_token: str | None) -> str | None:
    """Return the session cookie token, falling back to the bearer header."""

    cookie_token = request.cookies.get(get_settings().session_cookie_name)
    return cookie_token or bearer_token


def resolve_auth_context(token: str, db: Session) -> AuthContext:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    email = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(email, str) or not isinstance(signature_claim, str):
        raise _unauthorized()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _unauthorized("Usuario no encontrado")

    if signature_claim != password_signature(user.password, user.is_active):
        raise _unauthorized()

    session_id = payload.get("sid")
    if session_id is not None:
        user_session = get_session(db, int(session_id))
        if user_session is None or not user_session.is_open or user_session.user_id != user.id:
            raise _unauthorized("La sesión ha finalizado")

    return AuthContext(user=user, session_id=session_id, token=token)


def get_auth_context(
    request: Request,
    bearer_token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> AuthContext:
    token = extract_token(request, bearer_token)
    if not token:
        raise _unauthorized("No autenticado")
    return resolve_auth_context(token, db)


def get_current_user(context: AuthContext = Depends(get_auth_context)) -> User:
    """Return the authenticated user from the provided token."""

    return context.user


def get_optional_user(
    request: Request,
    bearer_token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Return the signed-in user or ``None`` for anonymous visitors."""

    token = extract_token(request, bearer_token)
    if not token:
        return None
    try:
        return resolve_auth_context(token, db).user
    except HTTPException:
        return None


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Usuario inactivo",
        )
    return current_user


def require_admin(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="No autorizado",
        )
    return current_user
