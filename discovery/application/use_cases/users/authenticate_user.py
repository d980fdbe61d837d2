"""Use case for checking login credentials."""

from enum import Enum

from sqlalchemy.orm import Session

from discovery.domain.entities import User
from discovery.infrastructure.repositories import UserRepository
from discovery.infrastructure.security import verify_password


class AuthenticationStatus(str, Enum):
    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"
    INACTIVE = "inactive"


def authenticate_user(
    session: Session, email: str, password: str
) -> tuple[User | None, AuthenticationStatus]:
    """Look the user up by e-mail and verify ``password``.

    Unknown e-mails and wrong passwords share one status so the caller cannot
    tell them apart. The user is only returned once the password matched.
    """

    user = UserRepository(session).get_by_email(email.strip())
    if user is None or not verify_password(password, user.password):
        return None, AuthenticationStatus.INVALID_CREDENTIALS
    if not user.is_active:
        return user, AuthenticationStatus.INACTIVE
    return user, AuthenticationStatus.SUCCESS
