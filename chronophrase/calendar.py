"""Calendar comparisons between two instants.

Every function derives fresh calendar fields from its raw arguments; nothing
here holds on to a calendar object between calls.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from chronophrase.constants import DEFAULT_FIRST_WEEKDAY
from chronophrase.exceptions import InvalidInstantError

Instant = datetime | int | float


def to_local(instant: Instant) -> datetime:
    """Normalise an instant to an aware datetime in the host local zone.

    Datetimes near ``datetime.min`` or ``datetime.max`` cannot be shifted
    into the local zone. Their fields are kept as given, with naive values
    tagged UTC.

    Args:
        instant: Naive datetime (taken as local wall-clock time), aware
            datetime, or POSIX seconds.

    Returns:
        Aware datetime in the host local zone.

    Raises:
        InvalidInstantError: If the value is not an instant or is a timestamp
            out of range.
    """
    if isinstance(instant, datetime):
        try:
            return instant.astimezone()
        except (OverflowError, OSError, ValueError):
            if instant.tzinfo is None:
                return instant.replace(tzinfo=timezone.utc)
            return instant
    # bool is an int subclass but never a timestamp
    if isinstance(instant, (int, float)) and not isinstance(instant, bool):
        try:
            return datetime.fromtimestamp(instant).astimezone()
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidInstantError(f"Instant out of range: {instant!r}") from e
    raise InvalidInstantError(
        f"Expected datetime or POSIX seconds, got {type(instant).__name__}"
    )


@dataclass(frozen=True)
class CalendarFields:
    """Read-only projection of an instant onto the local calendar."""

    year: int
    month: int
    day: int
    day_of_year: int
    week_of_year: int
    weekday: int  # 0 = Monday
    hour: int
    minute: int
    second: int
    millisecond: int

    def week_start(self, first_weekday: int = DEFAULT_FIRST_WEEKDAY) -> date:
        """Date of the first day of the week containing this instant."""
        offset = (self.weekday - first_weekday) % 7
        return date(self.year, self.month, self.day) - timedelta(days=offset)


def calendar_fields(instant: Instant) -> CalendarFields:
    """Derive calendar fields for an instant under local time rules."""
    dt = to_local(instant)
    return CalendarFields(
        year=dt.year,
        month=dt.month,
        day=dt.day,
        day_of_year=dt.timetuple().tm_yday,
        week_of_year=dt.isocalendar()[1],
        weekday=dt.weekday(),
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
        millisecond=dt.microsecond // 1000,
    )


def same_year(a: Instant, b: Instant) -> bool:
    """True if both instants fall in the same calendar year."""
    return calendar_fields(a).year == calendar_fields(b).year


def same_day(a: Instant, b: Instant) -> bool:
    """True if both instants fall on the same calendar day."""
    fa = calendar_fields(a)
    fb = calendar_fields(b)
    return fa.year == fb.year and fa.day_of_year == fb.day_of_year


def day_distance(now: Instant, target: Instant) -> int:
    """Day-of-year of ``now`` minus day-of-year of ``target``.

    Only meaningful when ``same_year(now, target)``. Negative when the target
    is later in the year than ``now``.
    """
    return calendar_fields(now).day_of_year - calendar_fields(target).day_of_year


def same_week(
    a: Instant, b: Instant, first_weekday: int = DEFAULT_FIRST_WEEKDAY
) -> bool:
    """True if both instants fall in the same calendar week.

    Args:
        a: First instant.
        b: Second instant.
        first_weekday: Day the week starts on, 0 = Monday .. 6 = Sunday.
    """
    return calendar_fields(a).week_start(first_weekday) == calendar_fields(
        b
    ).week_start(first_weekday)


def is_this_year(instant: Instant, now: Instant) -> bool:
    """True if the instant falls in the same year as ``now``."""
    return same_year(instant, now)


def is_today(instant: Instant, now: Instant) -> bool:
    """True if the instant falls on the same day as ``now``."""
    return same_day(instant, now)
