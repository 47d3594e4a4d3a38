"""Human-friendly rendering of timestamps relative to a reference "now".

Two cascades live here. ``describe_interval`` turns the elapsed time into a
coarse "N minutes ago" style phrase. ``show_time`` tries the minute-scale
phrase first and otherwise falls back to calendar-relative output such as
"yesterday 09:00" or "03-21". Both are pure: "now" is always an argument,
and only the ``TimeFormatter`` convenience methods consult a clock when it
is omitted.
"""

import logging
import math

from chronophrase.calendar import (
    CalendarFields,
    Instant,
    calendar_fields,
    day_distance,
    same_week,
    same_year,
    to_local,
)
from chronophrase.clock import Clock, SystemClock
from chronophrase.config import HumanizeConfig
from chronophrase.constants import (
    DEFAULT_FIRST_WEEKDAY,
    EPOCH,
    ONE_DAY,
    ONE_HOUR,
    ONE_MINUTE,
    TWO_DAYS,
    TWO_HOURS,
)
from chronophrase.phrase_loader import load_phrase_table
from chronophrase.phrases import Phrase, PhraseTable

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


class TimeFormatter:
    """Formats instants with a bound phrase table and clock.

    Usage:
        formatter = TimeFormatter(load_phrase_table("zh"))
        formatter.show_time(posted_at)  # now read from the clock
        formatter.show_time(posted_at, now=reference)
    """

    def __init__(
        self,
        phrases: PhraseTable | None = None,
        clock: Clock | None = None,
        first_weekday: int = DEFAULT_FIRST_WEEKDAY,
    ):
        if not 0 <= first_weekday <= 6:
            raise ValueError(f"first_weekday must be 0-6, got {first_weekday}")
        self.phrases = phrases if phrases is not None else load_phrase_table()
        self.clock = clock if clock is not None else SystemClock()
        self.first_weekday = first_weekday

    @classmethod
    def from_config(
        cls, config: HumanizeConfig, clock: Clock | None = None
    ) -> "TimeFormatter":
        """Build a formatter from configuration."""
        return cls(
            load_phrase_table(config.locale, config.phrase_dir),
            clock=clock,
            first_weekday=config.first_weekday,
        )

    def _now(self, now: Instant | None) -> Instant:
        return self.clock.now() if now is None else now

    def _render(self, phrase: Phrase, fields: CalendarFields, count: int = 0) -> str:
        return self.phrases.render(
            phrase,
            year=fields.year,
            month=fields.month,
            day=fields.day,
            hour=fields.hour,
            minute=fields.minute,
            second=fields.second,
            millisecond=fields.millisecond,
            weekday=self.phrases.weekday_name(fields.weekday),
            count=count,
        )

    def _render_minutes(self, fields: CalendarFields, seconds: int) -> str:
        # The rounded count picks the phrase, so 90s is "2 minutes", not "1 minute"
        count = round_half_up(seconds / ONE_MINUTE)
        if count == 1:
            return self._render(Phrase.MINUTE_AGO, fields, 1)
        return self._render(Phrase.MINUTES_AGO, fields, count)

    def describe_interval(
        self,
        target: Instant,
        now: Instant | None = None,
        include_hour_scale: bool = True,
    ) -> str | None:
        """Describe how long ago ``target`` was.

        Args:
            target: Instant to describe.
            now: Reference instant; read from the clock if omitted.
            include_hour_scale: If False, only minute-scale phrases (under one
                hour) are produced.

        Returns:
            The phrase, or None when no phrase applies: the target is after
            ``now``, or the gap is an hour or more and ``include_hour_scale``
            is False.
        """
        now = self._now(now)
        elapsed = (to_local(now) - to_local(target)).total_seconds()
        if elapsed < 0:
            return None

        fields = calendar_fields(target)
        seconds = int(elapsed)
        if seconds < ONE_MINUTE:
            return self._render(Phrase.JUST_NOW, fields)
        if seconds < ONE_HOUR:
            return self._render_minutes(fields, seconds)

        if not include_hour_scale:
            return None

        if seconds < TWO_HOURS:
            return self._render(Phrase.HOUR_AGO, fields, 1)
        if seconds < ONE_DAY:
            return self._render(
                Phrase.HOURS_AGO, fields, round_half_up(seconds / ONE_HOUR)
            )
        if seconds < TWO_DAYS:
            return self._render(Phrase.DAY_AGO, fields, 1)
        return self._render(Phrase.DAYS_AGO, fields, round_half_up(seconds / ONE_DAY))

    def show_time(self, target: Instant, now: Instant | None = None) -> str:
        """Render ``target`` relative to ``now``, coarsest trustworthy form first.

        The checks run in a fixed order and the first match wins: future or
        pre-epoch guard, minute-scale phrase, different year, yesterday and
        the day before, same week, month-day, same day, full fallback.
        """
        now = self._now(now)
        target_dt = to_local(target)
        now_dt = to_local(now)
        fields = calendar_fields(target_dt)

        # Future or at/before the epoch: only year-month is trusted
        if target_dt > now_dt or target_dt <= EPOCH:
            logger.debug(f"Untrusted instant {target_dt.isoformat()}, using year-month")
            return self._render(Phrase.BEFORE_EPOCH, fields)

        interval = self.describe_interval(target_dt, now_dt, include_hour_scale=False)
        if interval is not None:
            return interval

        if not same_year(target_dt, now_dt):
            return self._render(Phrase.DIFFERENT_YEAR, fields)

        # Day distance is only defined within a year, so New Year's Day never
        # reports "yesterday"
        distance = day_distance(now_dt, target_dt)
        if distance == 1:
            return self._render(Phrase.YESTERDAY, fields)
        if distance == 2:
            return self._render(Phrase.DAY_BEFORE_YESTERDAY, fields)

        if distance > 2 and same_week(target_dt, now_dt, self.first_weekday):
            return self._render(Phrase.SAME_WEEK, fields)

        now_fields = calendar_fields(now_dt)
        if fields.month != now_fields.month or fields.day != now_fields.day:
            return self._render(Phrase.SAME_YEAR_DIFFERENT_MONTH, fields)

        if distance == 0:
            return self._render(Phrase.SAME_DAY, fields)

        return self._render(Phrase.FALLBACK, fields)

    def format_full(self, instant: Instant) -> str:
        """Render an instant with date, time to the second, and weekday."""
        return self._render(Phrase.FULL, calendar_fields(instant))


def show_time(
    target: Instant, now: Instant, phrases: PhraseTable | None = None
) -> str:
    """Render ``target`` relative to ``now``. See ``TimeFormatter.show_time``."""
    return TimeFormatter(phrases).show_time(target, now)


def describe_interval(
    target: Instant,
    now: Instant,
    include_hour_scale: bool = True,
    phrases: PhraseTable | None = None,
) -> str | None:
    """Coarse "N units ago" phrase. See ``TimeFormatter.describe_interval``."""
    return TimeFormatter(phrases).describe_interval(target, now, include_hour_scale)


def format_full(instant: Instant, phrases: PhraseTable | None = None) -> str:
    """Date, time to the second, and weekday. See ``TimeFormatter.format_full``."""
    return TimeFormatter(phrases).format_full(instant)


def date_stamp(instant: Instant) -> str:
    """Compact date, e.g. ``20180115``, for directory names."""
    f = calendar_fields(instant)
    return f"{f.year:04d}{f.month:02d}{f.day:02d}"


def time_stamp(instant: Instant) -> str:
    """Compact time with milliseconds, e.g. ``173605123``, for file names."""
    f = calendar_fields(instant)
    return f"{f.hour:02d}{f.minute:02d}{f.second:02d}{f.millisecond:03d}"
