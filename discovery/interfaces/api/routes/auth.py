"""Endpoints relacionados con autenticación y sesiones."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from discovery.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_user,
    end_session,
    start_session,
)
from discovery.config import get_settings
from discovery.domain.entities import User
from discovery.infrastructure.database import get_db
from discovery.infrastructure.security import create_access_token, password_signature
from discovery.interfaces.api.dependencies import AuthContext, get_auth_context
from discovery.interfaces.api.schemas import (
    AuthResponse,
    AuthUserRead,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    SuccessResponse,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _to_auth_user(user: User) -> AuthUserRead:
    return AuthUserRead(
        id=user.id,
        name=user.name,
        email=user.email,
        avatar=user.avatar,
        role=user.role.alias,
    )


def _issue_session(db: Session, user: User, response: Response) -> AuthResponse:
    """Open a session for ``user`` and attach its token as an HTTP-only cookie."""

    settings = get_settings()
    user_session = start_session(db, user.id)
    access_token = create_access_token(
        data={
            "sub": user.email,
            "role": user.role.alias,
            "pwd_sig": password_signature(user.password, user.is_active),
            "sid": user_session.id,
        }
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=access_token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return AuthResponse(user=_to_auth_user(user), access_token=access_token)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: RegisterRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthResponse:
    """Registra un visitante e inicia su sesión."""

    try:
        user = create_user(
            db, name=payload.name, email=payload.email, password=payload.password
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return _issue_session(db, user, response)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthResponse:
    """Autentica al usuario por correo electrónico y abre una sesión."""

    user, auth_status = authenticate_user(db, payload.email, payload.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales incorrectas",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Usuario inactivo",
        )

    return _issue_session(db, user, response)


@router.post("/logout", response_model=SuccessResponse)
def logout(
    response: Response,
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
) -> SuccessResponse:
    """Cierra la sesión actual y elimina la cookie."""

    if context.session_id is not None:
        end_session(db, int(context.session_id))
    else:
        logger.warning("Logout without session id for user %s", context.user.id)

    response.delete_cookie(get_settings().session_cookie_name)
    return SuccessResponse()


@router.api_route("/me", methods=["GET", "POST"], response_model=MeResponse)
def read_me(context: AuthContext = Depends(get_auth_context)) -> MeResponse:
    """Devuelve el usuario asociado a la sesión actual."""

    return MeResponse(user=_to_auth_user(context.user))


__all__ = ["router"]
