"""Use cases for opening and closing signed-in sessions."""

import logging

from sqlalchemy.orm import Session

from discovery.domain.entities import UserSession
from discovery.infrastructure.repositories import UserRepository, UserSessionRepository
from discovery.utils import now_in_app_naive_datetime

logger = logging.getLogger(__name__)


def start_session(session: Session, user_id: int) -> UserSession:
    """Record the login of ``user_id`` and open a new session for it."""

    now = now_in_app_naive_datetime()
    user_repository = UserRepository(session)
    user = user_repository.get(user_id)
    if user is None:
        raise ValueError("Usuario no encontrado")

    user.last_login = now
    user_repository.update(user)

    user_session = UserSessionRepository(session).open(user_id, start_time=now)
    logger.info("Session %s opened for user %s", user_session.id, user_id)
    return user_session


def end_session(session: Session, session_id: int) -> UserSession | None:
    """Close ``session_id``; unknown ids are ignored."""

    user_session = UserSessionRepository(session).close(
        session_id, end_time=now_in_app_naive_datetime()
    )
    if user_session is None:
        logger.warning("Tried to close unknown session %s", session_id)
    else:
        logger.info("Session %s closed for user %s", session_id, user_session.user_id)
    return user_session


def get_session(session: Session, session_id: int) -> UserSession | None:
    return UserSessionRepository(session).get(session_id)
