"""SQLAlchemy model for signed-in sessions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer

from discovery.infrastructure.database import Base
from discovery.utils import now_in_app_naive_datetime


class UserSessionModel(Base):
    """A login; the session stays open until ``end_time`` is recorded."""

    __tablename__ = "user_session"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_time = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )
    end_time = Column(DateTime, nullable=True)


__all__ = ["UserSessionModel"]
