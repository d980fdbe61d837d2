"""SQLAlchemy models for the user-activity event collections."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from discovery.infrastructure.database import Base
from discovery.utils import now_in_app_naive_datetime


class SearchHistoryModel(Base):
    """A search typed by a visitor; ``user_id`` is empty for anonymous ones.

    ``user_id`` carries no foreign key so the id outlives a deleted account.
    """

    __tablename__ = "search_history"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=True, index=True)
    query = Column(String(255), nullable=False)
    timestamp = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )
    user = relationship(
        "UserModel",
        primaryjoin="foreign(SearchHistoryModel.user_id) == UserModel.id",
        viewonly=True,
    )


class PageViewModel(Base):
    """A page visited by a visitor, with the seconds spent on it."""

    __tablename__ = "page_view"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=True, index=True)
    path = Column(String(500), nullable=False)
    duration = Column(Integer, nullable=False, default=0)
    timestamp = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )
    user = relationship(
        "UserModel",
        primaryjoin="foreign(PageViewModel.user_id) == UserModel.id",
        viewonly=True,
    )


class ReservationModel(Base):
    """A reservation request for a place."""

    __tablename__ = "reservation"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    place_id = Column(
        Integer, ForeignKey("place.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(DateTime, nullable=False)
    guests = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False)
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )
    user = relationship("UserModel")
    place = relationship("PlaceModel")


class FavoriteModel(Base):
    """A place saved by a user; identified by the (user, place) pair."""

    __tablename__ = "favorite"

    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True
    )
    place_id = Column(
        Integer, ForeignKey("place.id", ondelete="CASCADE"), primary_key=True
    )
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )
    user = relationship("UserModel")
    place = relationship("PlaceModel")


__all__ = [
    "FavoriteModel",
    "PageViewModel",
    "ReservationModel",
    "SearchHistoryModel",
]
