"""Tests for calendar comparisons."""

from datetime import datetime, timedelta, timezone

import pytest

from chronophrase.calendar import (
    calendar_fields,
    day_distance,
    is_this_year,
    is_today,
    same_day,
    same_week,
    same_year,
    to_local,
)
from chronophrase.exceptions import InvalidInstantError


def test_calendar_fields():
    """Test fields derived from a naive local datetime."""
    fields = calendar_fields(datetime(2024, 3, 10, 14, 30, 15, 250000))
    assert fields.year == 2024
    assert fields.month == 3
    assert fields.day == 10
    assert fields.day_of_year == 70
    assert fields.week_of_year == 10
    assert fields.weekday == 6  # Sunday
    assert fields.hour == 14
    assert fields.minute == 30
    assert fields.second == 15
    assert fields.millisecond == 250


def test_calendar_fields_are_fresh_per_call():
    """Test each call derives an independent projection."""
    a = calendar_fields(datetime(2024, 1, 1))
    b = calendar_fields(datetime(2025, 6, 1))
    assert a.year == 2024
    assert b.year == 2025
    assert a is not calendar_fields(datetime(2024, 1, 1))


def test_calendar_fields_from_posix_seconds():
    """Test numeric instants are POSIX seconds."""
    fields = calendar_fields(1710064800)
    assert (fields.year, fields.month, fields.day, fields.hour) == (2024, 3, 10, 10)


def test_calendar_fields_from_aware_datetime():
    """Test aware datetimes are converted to the local zone (UTC in tests)."""
    plus_eight = timezone(timedelta(hours=8))
    fields = calendar_fields(datetime(2024, 3, 10, 2, 0, tzinfo=plus_eight))
    assert (fields.month, fields.day, fields.hour) == (3, 9, 18)


def test_to_local_rejects_non_instants():
    """Test strings and bools are not instants."""
    with pytest.raises(InvalidInstantError):
        to_local("2024-03-10")
    with pytest.raises(InvalidInstantError):
        to_local(True)


def test_to_local_rejects_out_of_range_timestamp():
    """Test huge timestamps raise InvalidInstantError."""
    with pytest.raises(InvalidInstantError):
        to_local(1e20)


def test_to_local_keeps_extreme_datetimes():
    """Test datetime.min and datetime.max keep their fields."""
    earliest = to_local(datetime.min)
    latest = to_local(datetime.max)
    assert earliest.tzinfo is not None
    assert (earliest.year, earliest.month, earliest.day) == (1, 1, 1)
    assert (latest.year, latest.month, latest.day) == (9999, 12, 31)


def test_same_year():
    """Test same calendar year."""
    assert same_year(datetime(2024, 1, 1), datetime(2024, 12, 31, 23, 59))
    assert not same_year(datetime(2023, 12, 31, 23, 59), datetime(2024, 1, 1))


def test_same_day_reflexive_and_symmetric():
    """Test same_day(t, t) and symmetry."""
    t = datetime(2024, 3, 10, 10, 0)
    other = datetime(2024, 3, 10, 23, 59)
    assert same_day(t, t)
    assert same_day(t, other) == same_day(other, t)
    assert same_day(t, other)


def test_same_day_requires_same_year():
    """Test same day-of-year in different years is not the same day."""
    assert not same_day(datetime(2023, 3, 11), datetime(2024, 3, 10))
    assert calendar_fields(datetime(2023, 3, 11)).day_of_year == 70
    assert calendar_fields(datetime(2024, 3, 10)).day_of_year == 70


def test_day_distance():
    """Test day-of-year distance, including negative for later targets."""
    now = datetime(2024, 3, 10, 10, 0)
    assert day_distance(now, datetime(2024, 3, 9, 23, 59)) == 1
    assert day_distance(now, datetime(2024, 3, 8, 0, 0)) == 2
    assert day_distance(now, datetime(2024, 3, 10, 0, 0)) == 0
    assert day_distance(now, datetime(2024, 3, 12)) == -2


def test_day_distance_across_month_boundary():
    """Test day-of-year distance across a leap February."""
    assert day_distance(datetime(2024, 3, 1), datetime(2024, 2, 29)) == 1


def test_same_week_monday_start():
    """Test default week runs Monday to Sunday."""
    sunday = datetime(2024, 3, 10, 10, 0)
    assert same_week(datetime(2024, 3, 4), sunday)
    assert not same_week(datetime(2024, 3, 3), sunday)


def test_same_week_sunday_start():
    """Test a Sunday week start moves the boundary."""
    sunday = datetime(2024, 3, 10, 10, 0)
    assert not same_week(datetime(2024, 3, 4), sunday, first_weekday=6)
    assert same_week(datetime(2024, 3, 16), sunday, first_weekday=6)


def test_same_week_spans_new_year():
    """Test a week crossing New Year compares as one week."""
    assert same_week(datetime(2024, 12, 31), datetime(2025, 1, 2))
    assert not same_week(datetime(2024, 1, 1), datetime(2024, 12, 30))
    assert calendar_fields(datetime(2024, 12, 30)).week_of_year == 1


def test_is_this_year_and_is_today():
    """Test helpers with an injected now."""
    now = datetime(2024, 3, 10, 10, 0)
    assert is_this_year(datetime(2024, 1, 1), now)
    assert not is_this_year(datetime(2016, 3, 10), now)
    assert is_today(datetime(2024, 3, 10, 0, 1), now)
    assert not is_today(datetime(2024, 3, 1), now)
