"""Clinic Time: pure calendar arithmetic in the clinic's local timezone.

Invariants:
    - Every datetime returned here is timezone-aware UTC
    - day_window is half-open: [local midnight today, local midnight tomorrow)
    - Naive inputs are read as clinic-local wall-clock time
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo


def normalize_timestamp(value: datetime, tz: tzinfo) -> datetime:
    """Attach the clinic zone to naive values, then convert to UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz)
    return value.astimezone(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Read-side counterpart of normalize_timestamp.

    Stored values are UTC, but some drivers (SQLite) hand them back naive.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def local_midnight(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz).astimezone(timezone.utc)


def day_window(now: datetime, tz: tzinfo) -> tuple[datetime, datetime]:
    """Return (start, end) of the local calendar day containing `now`."""
    today = ensure_utc(now).astimezone(tz).date()
    return local_midnight(today, tz), local_midnight(today + timedelta(days=1), tz)


def month_start(now: datetime, tz: tzinfo) -> datetime:
    """Local midnight on the first day of the month containing `now`."""
    today = ensure_utc(now).astimezone(tz).date()
    return local_midnight(today.replace(day=1), tz)
