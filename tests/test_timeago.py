from datetime import date, datetime, timedelta, timezone

import pytest

from rasathane.timeago import INVALID, time_ago

NOW = datetime(2026, 10, 19, 12, 0, 0)


@pytest.mark.parametrize("delta, expected", [
    (timedelta(0), "just now"),
    (timedelta(milliseconds=400), "just now"),
    (timedelta(seconds=-30), "just now"),
    (timedelta(seconds=1), "1s ago"),
    (timedelta(seconds=59), "59s ago"),
    (timedelta(seconds=60), "1m ago"),
    (timedelta(seconds=90), "1m 30s ago"),
    (timedelta(hours=2), "2h ago"),
    (timedelta(hours=2, minutes=5, seconds=30), "2h 5m ago"),
    (timedelta(hours=23, minutes=59, seconds=59), "23h 59m ago"),
    (timedelta(days=1), "1d ago"),
    (timedelta(days=3, hours=5, minutes=10), "3d 5h ago"),
    (timedelta(days=6, hours=23), "6d 23h ago"),
    (timedelta(days=7), "1w ago"),
    (timedelta(days=9), "1w ago"),
    (timedelta(days=27), "3w ago"),
    (timedelta(days=45), "1mo ago"),
    (timedelta(days=200), "6mo ago"),
    (timedelta(days=365), "11mo ago"),
    (timedelta(days=400), "1y ago"),
    (timedelta(days=800), "2y ago"),
])
def test_buckets(delta, expected):
    assert time_ago(NOW - delta, now=NOW) == expected


def test_four_weeks_rounds_down_to_zero_months():
    assert time_ago(NOW - timedelta(days=28), now=NOW) == "0mo ago"


def test_fractional_seconds_are_floored():
    assert time_ago(NOW - timedelta(seconds=90, milliseconds=999), now=NOW) == "1m 30s ago"


@pytest.mark.parametrize("value", [None, "", "not a date", "2024-13-01", object(), True, float("nan"), [1]])
def test_invalid_input(value):
    assert time_ago(value, now=NOW) == INVALID == "Invalid date"


def test_coerces_iso_string():
    assert time_ago("2026-10-19T11:59:00", now=NOW) == "1m ago"


def test_coerces_date_to_midnight():
    assert time_ago(date(2026, 10, 18), now=NOW) == "1d 12h ago"


def test_coerces_posix_timestamp():
    ts = 1_700_000_000
    assert time_ago(ts, now=datetime.fromtimestamp(ts + 125)) == "2m 5s ago"


def test_aware_datetimes():
    now = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
    when = datetime(2026, 10, 19, 11, 0, tzinfo=timezone(timedelta(hours=3)))
    assert time_ago(when, now=now) == "1h ago"


def test_mixed_awareness_is_invalid():
    when = datetime(2026, 10, 19, 11, 0, tzinfo=timezone.utc)
    assert time_ago(when, now=NOW) == INVALID


def test_default_now_uses_wall_clock():
    assert time_ago(datetime.now() - timedelta(hours=3, minutes=1)) == "3h 1m ago"
    assert time_ago(datetime.now(timezone.utc) - timedelta(days=2)) == "2d ago"
