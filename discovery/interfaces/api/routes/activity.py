"""Endpoints providing and recording user activity."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from discovery.application.use_cases.activity import ActivityFetchError, get_user_activity
from discovery.application.use_cases.engagement import record_page_view
from discovery.domain.entities import (
    ActivityFeed,
    ActivityFilter,
    ActivityRecord,
    TimeRange,
    User,
)
from discovery.infrastructure.database import get_db
from discovery.interfaces.api.dependencies import get_optional_user, require_admin
from discovery.interfaces.api.schemas import (
    ActivityRecordRead,
    ActivityStatsRead,
    ActivityUserRead,
    ErrorResponse,
    PageViewCreate,
    PageViewCreated,
    UserActivityRead,
)

router = APIRouter(tags=["activity"])

FETCH_FAILED_MESSAGE = "Failed to fetch user activity"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(by_alias=True),
    )


def _record_to_schema(record: ActivityRecord) -> ActivityRecordRead:
    return ActivityRecordRead(
        id=record.id,
        kind=record.kind.value,
        user_id=record.user_id,
        user=ActivityUserRead.model_validate(record.user) if record.user else None,
        action=record.action,
        details=dict(record.details),
        timestamp=record.timestamp,
    )


def _feed_to_schema(feed: ActivityFeed) -> UserActivityRead:
    return UserActivityRead(
        activities=[_record_to_schema(record) for record in feed.activities],
        active_users=feed.active_users,
        stats=ActivityStatsRead.model_validate(feed.stats),
        date_from=feed.date_from,
        generated_at=feed.generated_at,
        activity_filter=feed.activity_filter.value,
        time_range=feed.time_range.value,
    )


@router.get(
    "/api/admin/user-activity",
    response_model=UserActivityRead,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def read_user_activity(
    activity_filter: str | None = Query(
        None,
        alias="filter",
        description="all, searches, pageViews, reservations o favorites",
    ),
    time_range: str | None = Query(
        None,
        alias="timeRange",
        description="1h, 6h, 24h, 7d o 30d",
    ),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Return the merged activity feed and counters for the requested window."""

    try:
        parsed_filter = ActivityFilter.parse(activity_filter)
        parsed_range = TimeRange.parse(time_range)
    except ValueError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    try:
        feed = get_user_activity(
            db, activity_filter=parsed_filter, time_range=parsed_range
        )
    except ActivityFetchError:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, FETCH_FAILED_MESSAGE)

    return _feed_to_schema(feed)


@router.post(
    "/api/activity/page-views",
    response_model=PageViewCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_page_view(
    payload: PageViewCreate,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    """Registra la visita de una página reportada por el cliente web."""

    try:
        page_view_id = record_page_view(
            db,
            user_id=current_user.id if current_user else None,
            path=payload.path,
            duration=payload.duration,
        )
    except ValueError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    return PageViewCreated(id=page_view_id)


__all__ = ["router"]
