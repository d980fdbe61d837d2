"""Async client that keeps the admin activity dashboard up to date.

The poller fetches ``/api/admin/user-activity`` on a fixed interval and keeps
the last good response in an :class:`ActivityDashboardState`. Only one request
is in flight at a time: starting a new fetch cancels the previous one, so an
older response can never overwrite a newer one.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime

import httpx

from discovery.config import get_settings
from discovery.domain.entities import ActivityFilter, TimeRange
from discovery.interfaces.api.schemas import (
    ActivityRecordRead,
    ActivityStatsRead,
    UserActivityRead,
)
from discovery.utils import now_in_app_naive_datetime

USER_ACTIVITY_PATH = "/api/admin/user-activity"

logger = logging.getLogger(__name__)


class ActivityPollError(RuntimeError):
    """Raised when the activity endpoint cannot be read."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class ActivitySnapshot:
    """One successful response of the activity endpoint."""

    activities: tuple[ActivityRecordRead, ...]
    active_users: int
    stats: ActivityStatsRead
    activity_filter: ActivityFilter
    time_range: TimeRange
    date_from: datetime
    generated_at: datetime
    fetched_at: datetime

    @property
    def is_empty(self) -> bool:
        return not self.activities

    @classmethod
    def from_payload(cls, payload: UserActivityRead) -> "ActivitySnapshot":
        return cls(
            activities=tuple(payload.activities),
            active_users=payload.active_users,
            stats=payload.stats,
            activity_filter=ActivityFilter(payload.activity_filter),
            time_range=TimeRange(payload.time_range),
            date_from=payload.date_from,
            generated_at=payload.generated_at,
            fetched_at=now_in_app_naive_datetime(),
        )


@dataclass
class ActivityDashboardState:
    """View state of a single dashboard."""

    is_loading: bool = False
    error: ActivityPollError | None = None
    snapshot: ActivitySnapshot | None = None


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("error") or body.get("detail")
        if isinstance(message, str):
            return message
    return f"Unexpected status {response.status_code}"


class ActivityPoller:
    """Poll the activity feed for one dashboard.

    ``poll_interval`` and ``request_timeout`` default to the
    ``ACTIVITY_POLL_INTERVAL_SECONDS`` and ``ACTIVITY_REQUEST_TIMEOUT_SECONDS``
    settings. ``token`` is sent as the session cookie. ``transport`` lets
    callers plug in any ``httpx`` transport.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        activity_filter: ActivityFilter = ActivityFilter.ALL,
        time_range: TimeRange = TimeRange.LAST_24_HOURS,
        poll_interval: float | None = None,
        request_timeout: float | None = None,
        cookie_name: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if poll_interval is None or request_timeout is None or cookie_name is None:
            settings = get_settings()
            if poll_interval is None:
                poll_interval = settings.activity_poll_interval_seconds
            if request_timeout is None:
                request_timeout = settings.activity_request_timeout_seconds
            if cookie_name is None:
                cookie_name = settings.session_cookie_name

        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if request_timeout <= 0 or request_timeout > poll_interval:
            raise ValueError("request_timeout must be positive and not exceed poll_interval")

        self.poll_interval = poll_interval
        self.request_timeout = request_timeout
        self.activity_filter = activity_filter
        self.time_range = time_range
        self.state = ActivityDashboardState()

        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=request_timeout,
            cookies={cookie_name: token} if token else None,
            transport=transport,
        )
        self._in_flight: asyncio.Task[ActivitySnapshot] | None = None
        self._stopped = asyncio.Event()

    async def __aenter__(self) -> "ActivityPoller":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        self.stop()
        await self._client.aclose()

    async def _fetch(
        self, activity_filter: ActivityFilter, time_range: TimeRange
    ) -> ActivitySnapshot:
        try:
            response = await self._client.get(
                USER_ACTIVITY_PATH,
                params={"filter": activity_filter.value, "timeRange": time_range.value},
            )
        except httpx.HTTPError as exc:
            raise ActivityPollError(f"Activity request failed: {exc}") from exc

        if response.is_error:
            raise ActivityPollError(
                _error_message(response), status_code=response.status_code
            )

        try:
            payload = UserActivityRead.model_validate(response.json())
            return ActivitySnapshot.from_payload(payload)
        except ValueError as exc:
            raise ActivityPollError("Malformed activity response") from exc

    async def refresh(self) -> ActivityDashboardState:
        """Fetch the feed once, superseding any request still in flight."""

        if self._in_flight is not None and not self._in_flight.done():
            logger.debug("Cancelling superseded activity request")
            self._in_flight.cancel()

        task = asyncio.create_task(self._fetch(self.activity_filter, self.time_range))
        self._in_flight = task
        self.state.is_loading = True
        logger.debug(
            "Polling activity feed filter=%s timeRange=%s",
            self.activity_filter.value,
            self.time_range.value,
        )

        try:
            snapshot = await task
        except asyncio.CancelledError:
            if self._in_flight is not task:
                # A newer refresh owns the state now.
                return self.state
            self.state.is_loading = False
            raise
        except ActivityPollError as exc:
            if self._in_flight is task:
                logger.warning("Activity poll failed: %s", exc)
                self.state.error = exc
                self.state.is_loading = False
            return self.state

        if self._in_flight is task:
            self.state.snapshot = snapshot
            self.state.error = None
            self.state.is_loading = False
        return self.state

    async def set_query(
        self,
        *,
        activity_filter: ActivityFilter | None = None,
        time_range: TimeRange | None = None,
    ) -> ActivityDashboardState:
        """Change the filter or time range and refresh immediately."""

        if activity_filter is not None:
            self.activity_filter = activity_filter
        if time_range is not None:
            self.time_range = time_range
        return await self.refresh()

    async def run(self) -> None:
        """Refresh every ``poll_interval`` seconds until :meth:`stop` is called."""

        self._stopped.clear()
        while not self._stopped.is_set():
            try:
                await self.refresh()
            except asyncio.CancelledError:
                if self._stopped.is_set():
                    break
                raise
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self.poll_interval)
            except asyncio.TimeoutError:
                continue

    def stop(self) -> None:
        self._stopped.set()
        if self._in_flight is not None and not self._in_flight.done():
            self._in_flight.cancel()


__all__ = [
    "ActivityDashboardState",
    "ActivityPollError",
    "ActivityPoller",
    "ActivitySnapshot",
    "USER_ACTIVITY_PATH",
]
