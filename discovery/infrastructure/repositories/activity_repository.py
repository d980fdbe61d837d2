"""Read-only queries over the user-activity event collections."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from discovery.domain.entities import ActivityKind, ActivityRecord, ActivityUser
from discovery.infrastructure.models import (
    FavoriteModel,
    PageViewModel,
    PlaceModel,
    ReservationModel,
    SearchHistoryModel,
    UserModel,
    UserSessionModel,
)


class ActivityRepository:
    """Fetch, normalize and count events of every :class:`ActivityKind`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_recent(
        self, kind: ActivityKind, since: datetime, limit: int
    ) -> list[ActivityRecord]:
        """Return up to ``limit`` events of ``kind`` newer than ``since``, newest first."""

        if kind is ActivityKind.SEARCH:
            return self._list_searches(since, limit)
        if kind is ActivityKind.PAGE_VIEW:
            return self._list_page_views(since, limit)
        if kind is ActivityKind.RESERVATION:
            return self._list_reservations(since, limit)
        return self._list_favorites(since, limit)

    def count(self, kind: ActivityKind, since: datetime) -> int:
        """Return how many events of ``kind`` happened at or after ``since``."""

        model, column = _TIMESTAMP_COLUMNS[kind]
        return (
            self.session.query(func.count())
            .select_from(model)
            .filter(column >= since)
            .scalar()
            or 0
        )

    def count_open_sessions(self, since: datetime) -> int:
        """Return sessions started at or after ``since`` that have not ended."""

        return (
            self.session.query(func.count(UserSessionModel.id))
            .filter(UserSessionModel.start_time >= since)
            .filter(UserSessionModel.end_time.is_(None))
            .scalar()
            or 0
        )

    def _with_user(self, *columns, source_user_id) -> Query:
        return self.session.query(
            *columns,
            UserModel.name.label("user_name"),
            UserModel.email.label("user_email"),
            UserModel.avatar.label("user_avatar"),
        ).outerjoin(UserModel, UserModel.id == source_user_id)

    def _list_searches(self, since: datetime, limit: int) -> list[ActivityRecord]:
        rows = (
            self._with_user(
                SearchHistoryModel.id,
                SearchHistoryModel.user_id,
                SearchHistoryModel.query,
                SearchHistoryModel.timestamp,
                source_user_id=SearchHistoryModel.user_id,
            )
            .filter(SearchHistoryModel.timestamp >= since)
            .order_by(SearchHistoryModel.timestamp.desc(), SearchHistoryModel.id.asc())
            .limit(limit)
            .all()
        )
        return [
            ActivityRecord(
                kind=ActivityKind.SEARCH,
                source_ids=(row.id,),
                user_id=row.user_id,
                user=_user_from_row(row),
                details={"query": row.query},
                timestamp=row.timestamp,
            )
            for row in rows
        ]

    def _list_page_views(self, since: datetime, limit: int) -> list[ActivityRecord]:
        rows = (
            self._with_user(
                PageViewModel.id,
                PageViewModel.user_id,
                PageViewModel.path,
                PageViewModel.duration,
                PageViewModel.timestamp,
                source_user_id=PageViewModel.user_id,
            )
            .filter(PageViewModel.timestamp >= since)
            .order_by(PageViewModel.timestamp.desc(), PageViewModel.id.asc())
            .limit(limit)
            .all()
        )
        return [
            ActivityRecord(
                kind=ActivityKind.PAGE_VIEW,
                source_ids=(row.id,),
                user_id=row.user_id,
                user=_user_from_row(row),
                details={"path": row.path, "duration": row.duration},
                timestamp=row.timestamp,
            )
            for row in rows
        ]

    def _list_reservations(self, since: datetime, limit: int) -> list[ActivityRecord]:
        rows = (
            self._with_user(
                ReservationModel.id,
                ReservationModel.user_id,
                ReservationModel.date,
                ReservationModel.guests,
                ReservationModel.status,
                ReservationModel.created_at,
                PlaceModel.name.label("place_name"),
                source_user_id=ReservationModel.user_id,
            )
            .outerjoin(PlaceModel, PlaceModel.id == ReservationModel.place_id)
            .filter(ReservationModel.created_at >= since)
            .order_by(ReservationModel.created_at.desc(), ReservationModel.id.asc())
            .limit(limit)
            .all()
        )
        return [
            ActivityRecord(
                kind=ActivityKind.RESERVATION,
                source_ids=(row.id,),
                user_id=row.user_id,
                user=_user_from_row(row),
                details={
                    "place": row.place_name,
                    "date": row.date,
                    "guests": row.guests,
                    "status": row.status,
                },
                timestamp=row.created_at,
            )
            for row in rows
        ]

    def _list_favorites(self, since: datetime, limit: int) -> list[ActivityRecord]:
        rows = (
            self._with_user(
                FavoriteModel.user_id,
                FavoriteModel.place_id,
                FavoriteModel.created_at,
                PlaceModel.name.label("place_name"),
                source_user_id=FavoriteModel.user_id,
            )
            .outerjoin(PlaceModel, PlaceModel.id == FavoriteModel.place_id)
            .filter(FavoriteModel.created_at >= since)
            .order_by(
                FavoriteModel.created_at.desc(),
                FavoriteModel.user_id.asc(),
                FavoriteModel.place_id.asc(),
            )
            .limit(limit)
            .all()
        )
        return [
            ActivityRecord(
                kind=ActivityKind.FAVORITE,
                source_ids=(row.user_id, row.place_id),
                user_id=row.user_id,
                user=_user_from_row(row),
                details={"place": row.place_name},
                timestamp=row.created_at,
            )
            for row in rows
        ]


_TIMESTAMP_COLUMNS = {
    ActivityKind.SEARCH: (SearchHistoryModel, SearchHistoryModel.timestamp),
    ActivityKind.PAGE_VIEW: (PageViewModel, PageViewModel.timestamp),
    ActivityKind.RESERVATION: (ReservationModel, ReservationModel.created_at),
    ActivityKind.FAVORITE: (FavoriteModel, FavoriteModel.created_at),
}


def _user_from_row(row) -> ActivityUser | None:
    # An outer join without a match leaves every user column empty.
    if row.user_name is None and row.user_email is None:
        return None
    return ActivityUser(name=row.user_name, email=row.user_email, avatar=row.user_avatar)


__all__ = ["ActivityRepository"]
