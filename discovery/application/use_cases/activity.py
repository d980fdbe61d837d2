"""Use case for aggregating user activity across the event collections."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from discovery.domain.entities import (
    ActivityFeed,
    ActivityFilter,
    ActivityKind,
    ActivityRecord,
    ActivityStats,
    TimeRange,
)
from discovery.infrastructure.repositories import ActivityRepository
from discovery.utils import ensure_app_naive_datetime, now_in_app_naive_datetime

logger = logging.getLogger(__name__)


class ActivityFetchError(RuntimeError):
    """Raised when any query of an aggregation fails; no partial feed is returned."""


def merge_activity_records(
    *record_groups: list[ActivityRecord],
) -> list[ActivityRecord]:
    """Concatenate ``record_groups`` and order them newest first.

    Records sharing a timestamp are ordered by kind (search, page view,
    reservation, favorite) and then by their natural key.
    """

    merged = [record for group in record_groups for record in group]
    merged.sort(key=lambda record: record.tie_break_key)
    # Python's sort is stable, also with ``reverse=True``.
    merged.sort(key=lambda record: record.timestamp, reverse=True)
    return merged


def get_user_activity(
    session: Session,
    *,
    activity_filter: ActivityFilter = ActivityFilter.ALL,
    time_range: TimeRange = TimeRange.LAST_24_HOURS,
    reference: datetime | None = None,
) -> ActivityFeed:
    """Return the merged activity feed and headline counters for a window.

    ``activity_filter`` only narrows the feed; ``active_users`` and ``stats``
    always cover every kind over the whole window.
    """

    now = ensure_app_naive_datetime(reference) or now_in_app_naive_datetime()
    date_from = time_range.window_start(now)
    repository = ActivityRepository(session)

    try:
        groups = [
            repository.list_recent(kind, date_from, kind.limit)
            for kind in activity_filter.kinds
        ]
        active_users = repository.count_open_sessions(date_from)
        stats = ActivityStats(
            page_views=repository.count(ActivityKind.PAGE_VIEW, date_from),
            searches=repository.count(ActivityKind.SEARCH, date_from),
            reservations=repository.count(ActivityKind.RESERVATION, date_from),
        )
    except SQLAlchemyError as exc:
        logger.exception(
            "Error fetching user activity (filter=%s, timeRange=%s)",
            activity_filter.value,
            time_range.value,
        )
        raise ActivityFetchError("Failed to fetch user activity") from exc

    return ActivityFeed(
        activities=tuple(merge_activity_records(*groups)),
        active_users=active_users,
        stats=stats,
        date_from=date_from,
        generated_at=now,
        activity_filter=activity_filter,
        time_range=time_range,
    )


__all__ = ["ActivityFetchError", "get_user_activity", "merge_activity_records"]
