"""
Tests for core.utils.helpers
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from core.utils.helpers import (
    day_bounds,
    days_between,
    ensure_utc,
    format_last_activity,
    round_half_up,
    split_csv,
    utcnow,
)


def test_utcnow_is_timezone_aware():
    assert utcnow().tzinfo is not None
    assert utcnow().utcoffset() == timedelta(0)


def test_ensure_utc():
    naive = datetime(2025, 3, 10, 8)
    offset = datetime(2025, 3, 10, 10, tzinfo=timezone(timedelta(hours=2)))

    assert ensure_utc(None) is None
    assert ensure_utc(naive) == datetime(2025, 3, 10, 8, tzinfo=timezone.utc)
    assert ensure_utc(offset).hour == 8


def test_day_bounds_from_date_and_datetime():
    start, end = day_bounds(date(2025, 3, 10))
    same_start, _ = day_bounds(datetime(2025, 3, 10, 17, 45, tzinfo=timezone.utc))

    assert start == datetime(2025, 3, 10, tzinfo=timezone.utc)
    assert end.date() == date(2025, 3, 10)
    assert end.hour == 23 and end.minute == 59
    assert same_start == start


def test_days_between_mixes_naive_and_aware():
    earlier = datetime(2025, 3, 1)
    later = datetime(2025, 3, 4, 12, tzinfo=timezone.utc)

    assert days_between(earlier, later) == pytest.approx(3.5)


@pytest.mark.parametrize(
    "hours, label",
    [
        (0, "Just now"),
        (0.9, "Just now"),
        (1, "1 hours ago"),
        (23, "23 hours ago"),
        (24, "1 day ago"),
        (47, "1 day ago"),
        (48, "2 days ago"),
        (24 * 9, "9 days ago"),
    ],
)
def test_format_last_activity(hours, label):
    now = datetime(2025, 3, 10, 12, tzinfo=timezone.utc)

    assert format_last_activity(now - timedelta(hours=hours), now) == label


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (62.5, 63), (52.49, 52), (-0.5, 0), (0, 0)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_split_csv():
    assert split_csv(None) == []
    assert split_csv("") == []
    assert split_csv("vegan, gluten-free,,  keto ") == ["vegan", "gluten-free", "keto"]
