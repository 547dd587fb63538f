from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional


def now_utc() -> datetime:
    """Current UTC time, naive, truncated to milliseconds.

    Note: Wrapped so tests can patch it. MySQL DATETIME(3) columns are naive
    and store milliseconds only.
    """
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def round_to_millis(value: datetime) -> datetime:
    """Round half up to milliseconds, the way a DATETIME(3) column stores it."""
    millis = (value.microsecond + 500) // 1000
    return value.replace(microsecond=0) + timedelta(milliseconds=millis)


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime into a naive UTC datetime.

    Accepts "2024-01-31", "2024-01-31T10:00:00" and offsets such as "Z" or "+02:00".
    """
    value = value.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def to_iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
    if isinstance(value, date):
        return value.strftime("%Y-%m-%dT00:00:00.000Z")
    return str(value)
