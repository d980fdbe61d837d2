"""Domain entities describing the merged user-activity feed."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from types import MappingProxyType
from typing import Any


class ActivityKind(str, Enum):
    """Source collection an activity record was read from."""

    SEARCH = "search"
    PAGE_VIEW = "pageview"
    RESERVATION = "reservation"
    FAVORITE = "favorite"

    @property
    def action(self) -> str:
        """Human readable label shown in the dashboard feed."""

        return _ACTIONS[self]

    @property
    def limit(self) -> int:
        """Maximum number of records fetched for this kind per request."""

        return _LIMITS[self]

    @property
    def rank(self) -> int:
        """Position of the kind when breaking timestamp ties."""

        return _RANKS[self]


_ACTIONS = {
    ActivityKind.SEARCH: "Search",
    ActivityKind.PAGE_VIEW: "Page View",
    ActivityKind.RESERVATION: "Reservation",
    ActivityKind.FAVORITE: "Added Favorite",
}
_LIMITS = {
    ActivityKind.SEARCH: 50,
    ActivityKind.PAGE_VIEW: 50,
    ActivityKind.RESERVATION: 30,
    ActivityKind.FAVORITE: 30,
}
_RANKS = {kind: index for index, kind in enumerate(ActivityKind)}


class ActivityFilter(str, Enum):
    """Selects which event kinds are included in the feed."""

    ALL = "all"
    SEARCHES = "searches"
    PAGE_VIEWS = "pageViews"
    RESERVATIONS = "reservations"
    FAVORITES = "favorites"

    @property
    def kinds(self) -> tuple[ActivityKind, ...]:
        if self is ActivityFilter.ALL:
            return tuple(ActivityKind)
        return (_FILTER_KINDS[self],)

    @classmethod
    def parse(cls, value: str | None) -> "ActivityFilter":
        """Return the filter for ``value``; ``None`` or blank means ``all``."""

        if value is None or not value.strip():
            return cls.ALL
        try:
            return cls(value.strip())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            msg = f"Invalid filter '{value}'. Expected one of: {allowed}"
            raise ValueError(msg) from exc


_FILTER_KINDS = {
    ActivityFilter.SEARCHES: ActivityKind.SEARCH,
    ActivityFilter.PAGE_VIEWS: ActivityKind.PAGE_VIEW,
    ActivityFilter.RESERVATIONS: ActivityKind.RESERVATION,
    ActivityFilter.FAVORITES: ActivityKind.FAVORITE,
}


class TimeRange(str, Enum):
    """Size of the window the feed and the counters look back over."""

    LAST_HOUR = "1h"
    LAST_6_HOURS = "6h"
    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"

    @property
    def duration(self) -> timedelta:
        return _DURATIONS[self]

    def window_start(self, reference: datetime) -> datetime:
        """Return ``dateFrom`` for a request issued at ``reference``."""

        return reference - self.duration

    @classmethod
    def parse(cls, value: str | None) -> "TimeRange":
        """Return the range for ``value``; ``None`` or blank means ``24h``."""

        if value is None or not value.strip():
            return cls.LAST_24_HOURS
        try:
            return cls(value.strip())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            msg = f"Invalid timeRange '{value}'. Expected one of: {allowed}"
            raise ValueError(msg) from exc


_DURATIONS = {
    TimeRange.LAST_HOUR: timedelta(hours=1),
    TimeRange.LAST_6_HOURS: timedelta(hours=6),
    TimeRange.LAST_24_HOURS: timedelta(days=1),
    TimeRange.LAST_7_DAYS: timedelta(days=7),
    TimeRange.LAST_30_DAYS: timedelta(days=30),
}


@dataclass(frozen=True)
class ActivityUser:
    """Minimal user fields needed to render a feed entry."""

    name: str
    email: str
    avatar: str | None = None


@dataclass(frozen=True)
class ActivityRecord:
    """Normalized projection of one event of any kind."""

    kind: ActivityKind
    source_ids: tuple[int, ...]
    user_id: int | None
    user: ActivityUser | None
    details: Mapping[str, Any] = field(hash=False)
    timestamp: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    @property
    def source_id(self) -> str:
        return "_".join(str(part) for part in self.source_ids)

    @property
    def id(self) -> str:
        """Display identifier, unique across every kind in a feed."""

        return f"{self.kind.value}_{self.source_id}"

    @property
    def action(self) -> str:
        return self.kind.action

    @property
    def tie_break_key(self) -> tuple[int, tuple[int, ...]]:
        return (self.kind.rank, self.source_ids)


@dataclass(frozen=True)
class ActivityStats:
    """Headline counters for the requested window."""

    page_views: int = 0
    searches: int = 0
    reservations: int = 0


@dataclass(frozen=True)
class ActivityFeed:
    """Result of one aggregation request."""

    activities: tuple[ActivityRecord, ...]
    active_users: int
    stats: ActivityStats
    date_from: datetime
    generated_at: datetime
    activity_filter: ActivityFilter = ActivityFilter.ALL
    time_range: TimeRange = TimeRange.LAST_24_HOURS


__all__ = [
    "ActivityFeed",
    "ActivityFilter",
    "ActivityKind",
    "ActivityRecord",
    "ActivityStats",
    "ActivityUser",
    "TimeRange",
]
