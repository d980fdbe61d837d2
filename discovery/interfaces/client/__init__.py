"""Clients consuming the place discovery API."""

from .activity_poller import (
    ActivityDashboardState,
    ActivityPoller,
    ActivityPollError,
    ActivitySnapshot,
)

__all__ = [
    "ActivityDashboardState",
    "ActivityPollError",
    "ActivityPoller",
    "ActivitySnapshot",
]
