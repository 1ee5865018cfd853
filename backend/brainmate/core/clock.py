"""UTC calendar and timestamp helpers shared by every service."""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_today(now: Optional[datetime] = None) -> str:
    """ISO date (YYYY-MM-DD) of the current UTC day; rolls over at UTC midnight."""
    now = now or utc_now()
    return now.astimezone(timezone.utc).date().isoformat()


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 timestamp with millisecond precision and a Z suffix."""
    now = now or utc_now()
    return (
        now.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def epoch_millis(now: Optional[datetime] = None) -> int:
    now = now or utc_now()
    return int(now.timestamp() * 1000)
