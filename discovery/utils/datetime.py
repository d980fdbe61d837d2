"""Clock helpers for the application timezone.

Event timestamps are stored as naive datetimes expressed in ``APP_TIMEZONE``.
Anything compared against stored values must go through
:func:`ensure_app_naive_datetime` first.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from discovery.config import get_settings

# Fixed offsets such as ``UTC+2`` or ``GMT-05:30``.
_FIXED_OFFSET = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def parse_timezone(name: str) -> tzinfo:
    """Return the tzinfo for an IANA name or a fixed offset; UTC when unknown."""

    name = name.strip()
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    match = _FIXED_OFFSET.match(name)
    if match is None:
        return timezone.utc
    offset = timedelta(
        hours=int(match["hours"]), minutes=int(match["minutes"] or 0)
    )
    return timezone(-offset if match["sign"] == "-" else offset)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    return parse_timezone(get_settings().app_timezone)


def now_in_app_naive_datetime() -> datetime:
    """Current wall-clock time in the application timezone, without ``tzinfo``."""

    return datetime.now(tz=get_app_timezone()).replace(tzinfo=None)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Convert ``value`` to a naive datetime in the application timezone.

    Naive input is assumed to already be in the application timezone.
    """

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(get_app_timezone()).replace(tzinfo=None)
