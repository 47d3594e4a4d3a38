"""Tests for the coarse "N units ago" cascade."""

from datetime import timedelta

import pytest

from chronophrase.formatter import describe_interval, round_half_up, show_time


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "just now"),
        (59, "just now"),
        (60, "1 minute ago"),
        (89, "1 minute ago"),
        (90, "2 minutes ago"),
        (119, "2 minutes ago"),
        (120, "2 minutes ago"),
        (149, "2 minutes ago"),
        (150, "3 minutes ago"),
        (3599, "60 minutes ago"),
        (3600, "1 hour ago"),
        (5399, "1 hour ago"),
        (5400, "1 hour ago"),
        (7199, "1 hour ago"),
        (7200, "2 hours ago"),
        (9000, "3 hours ago"),
        (86399, "24 hours ago"),
        (86400, "1 day ago"),
        (129599, "1 day ago"),
        (129600, "1 day ago"),
        (172799, "1 day ago"),
        (172800, "2 days ago"),
        (216000, "3 days ago"),
        (30 * 86400, "30 days ago"),
    ],
)
def test_describe_interval_thresholds(now, seconds, expected):
    """Test each threshold and round-half-up counts."""
    assert describe_interval(now - timedelta(seconds=seconds), now) == expected


def test_describe_interval_truncates_to_whole_seconds(now):
    """Test fractional seconds are dropped before thresholds apply."""
    target = now - timedelta(seconds=89, milliseconds=999)
    assert describe_interval(target, now) == "1 minute ago"


def test_describe_interval_future_is_not_applicable(now):
    """Test a target after now yields no phrase."""
    assert describe_interval(now + timedelta(seconds=1), now) is None
    assert describe_interval(now + timedelta(milliseconds=1), now) is None
    assert describe_interval(now + timedelta(days=3), now, include_hour_scale=False) is None


@pytest.mark.parametrize("seconds", [3600, 7200, 86400, 10**6])
def test_describe_interval_without_hour_scale(now, seconds):
    """Test gaps of an hour or more yield no phrase without the hour scale."""
    target = now - timedelta(seconds=seconds)
    assert describe_interval(target, now, include_hour_scale=False) is None


def test_describe_interval_without_hour_scale_keeps_minutes(now):
    """Test minute-scale phrases are unaffected by include_hour_scale."""
    target = now - timedelta(minutes=12)
    assert describe_interval(target, now, include_hour_scale=False) == "12 minutes ago"


def test_describe_interval_is_monotonic(now):
    """Test larger gaps never report a finer unit."""

    def rank(phrase: str) -> int:
        if phrase == "just now":
            return 0
        for level, unit in enumerate(("minute", "hour", "day"), start=1):
            if unit in phrase:
                return level
        raise AssertionError(phrase)

    gaps = [0, 30, 59, 60, 119, 120, 1800, 3599, 3600, 7199, 7200, 43200,
            86399, 86400, 172799, 172800, 10**6, 10**8]
    ranks = [rank(describe_interval(now - timedelta(seconds=s), now)) for s in gaps]
    assert ranks == sorted(ranks)


def test_show_time_never_reports_negative_duration(now):
    """Test future targets never get a relative phrase."""
    for seconds in (1, 59, 3600, 86400):
        text = show_time(now + timedelta(seconds=seconds), now)
        assert "ago" not in text
        assert text != "just now"


def test_round_half_up():
    """Test halves round up rather than to even."""
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(0.0) == 0


@pytest.mark.parametrize(
    "seconds, expected",
    [(5400, "1 hour ago"), (6000, "1 hour ago"), (150000, "1 day ago")],
)
def test_describe_interval_singular_hour_and_day_bands(now, seconds, expected):
    """Test a full second hour or day is needed before the plural phrase."""
    assert describe_interval(now - timedelta(seconds=seconds), now) == expected
