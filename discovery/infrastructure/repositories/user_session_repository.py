"""Persistence layer for signed-in sessions."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from discovery.domain.entities import UserSession
from discovery.infrastructure.models import UserSessionModel


class UserSessionRepository:
    """Open, close and look up :class:`UserSession` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, session_id: int) -> UserSession | None:
        model = self.session.get(UserSessionModel, session_id)
        return self._to_entity(model) if model else None

    def open(self, user_id: int, *, start_time: datetime) -> UserSession:
        model = UserSessionModel(user_id=user_id, start_time=start_time)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def close(self, session_id: int, *, end_time: datetime) -> UserSession | None:
        """Record ``end_time`` on an open session; closed sessions are left as is."""

        model = self.session.get(UserSessionModel, session_id)
        if model is None:
            return None
        if model.end_time is None:
            model.end_time = end_time
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserSessionModel) -> UserSession:
        return UserSession(
            id=model.id,
            user_id=model.user_id,
            start_time=model.start_time,
            end_time=model.end_time,
        )


__all__ = ["UserSessionRepository"]
