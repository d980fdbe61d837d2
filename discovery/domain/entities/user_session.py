"""Domain entity describing a signed-in browser session."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class UserSession:
    """A login of ``user_id``; the session is open while ``end_time`` is unset."""

    id: int | None
    user_id: int
    start_time: datetime
    end_time: datetime | None = None

    @property
    def is_open(self) -> bool:
        return self.end_time is None


__all__ = ["UserSession"]
