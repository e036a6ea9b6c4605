from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time; forms take an injectable clock defaulting to this."""
    return datetime.now(timezone.utc)


def to_iso_timestamp(value: datetime) -> str:
    """Render an instant the way the API stores attendance times (ISO-8601, UTC, milliseconds)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
