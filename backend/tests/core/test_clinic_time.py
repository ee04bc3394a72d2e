"""Clinic Time: calendar arithmetic in the clinic's local timezone.

Tests:
    - Naive timestamps are read as clinic-local, aware ones keep their instant
    - day_window is [local midnight, next local midnight) expressed in UTC
    - month_start is local midnight on the 1st, also across DST changes
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from gastromed.core.clinic_time import (
    day_window, ensure_utc, local_midnight, month_start, normalize_timestamp,
)

SAO_PAULO = ZoneInfo("America/Sao_Paulo")
NEW_YORK = ZoneInfo("America/New_York")


def test_naive_timestamp_is_clinic_local():
    result = normalize_timestamp(datetime(2026, 3, 10, 9, 0), SAO_PAULO)
    assert result == datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)
    assert result.tzinfo == timezone.utc


def test_aware_timestamp_keeps_its_instant():
    value = datetime(2026, 3, 10, 9, 0, tzinfo=timezone(timedelta(hours=2)))
    assert normalize_timestamp(value, SAO_PAULO) == datetime(
        2026, 3, 10, 7, 0, tzinfo=timezone.utc,
    )


def test_ensure_utc_tags_naive_values_as_utc():
    assert ensure_utc(datetime(2026, 1, 1, 8, 30)) == datetime(
        2026, 1, 1, 8, 30, tzinfo=timezone.utc,
    )


def test_local_midnight_in_utc():
    assert local_midnight(datetime(2026, 5, 4).date(), SAO_PAULO) == datetime(
        2026, 5, 4, 3, 0, tzinfo=timezone.utc,
    )


def test_day_window_is_half_open_local_day():
    now = datetime(2026, 5, 4, 15, 0, tzinfo=timezone.utc)
    start, end = day_window(now, SAO_PAULO)
    assert start == datetime(2026, 5, 4, 3, 0, tzinfo=timezone.utc)
    assert end == datetime(2026, 5, 5, 3, 0, tzinfo=timezone.utc)


def test_day_window_uses_local_date_not_utc_date():
    # 01:00 UTC on the 5th is still the evening of the 4th in Sao Paulo
    now = datetime(2026, 5, 5, 1, 0, tzinfo=timezone.utc)
    start, _ = day_window(now, SAO_PAULO)
    assert start == datetime(2026, 5, 4, 3, 0, tzinfo=timezone.utc)


def test_day_window_spans_23_hours_on_dst_start():
    start, end = day_window(datetime(2026, 3, 8, 17, 0, tzinfo=timezone.utc), NEW_YORK)
    assert end - start == timedelta(hours=23)


def test_month_start_is_first_day_local_midnight():
    now = datetime(2026, 11, 20, 12, 0, tzinfo=timezone.utc)
    assert month_start(now, NEW_YORK) == datetime(2026, 11, 1, 4, 0, tzinfo=timezone.utc)


def test_utc_clinic_has_utc_midnights():
    start, end = day_window(datetime(2026, 7, 1, 23, 59, 59, tzinfo=timezone.utc), timezone.utc)
    assert start == datetime(2026, 7, 1, tzinfo=timezone.utc)
    assert end == datetime(2026, 7, 2, tzinfo=timezone.utc)
