"""Humanized timestamps: "just now", "3 minutes ago", "yesterday 14:30"."""

from chronophrase.calendar import (
    CalendarFields,
    Instant,
    calendar_fields,
    day_distance,
    is_this_year,
    is_today,
    same_day,
    same_week,
    same_year,
    to_local,
)
from chronophrase.clock import Clock, FixedClock, SystemClock
from chronophrase.config import HumanizeConfig
from chronophrase.formatter import (
    TimeFormatter,
    date_stamp,
    describe_interval,
    format_full,
    show_time,
    time_stamp,
)
from chronophrase.phrase_loader import available_locales, load_phrase_table
from chronophrase.phrases import Phrase, PhraseTable

__all__ = [
    # Formatting
    "TimeFormatter",
    "show_time",
    "describe_interval",
    "format_full",
    "date_stamp",
    "time_stamp",
    # Calendar comparisons
    "CalendarFields",
    "Instant",
    "calendar_fields",
    "day_distance",
    "is_this_year",
    "is_today",
    "same_day",
    "same_week",
    "same_year",
    "to_local",
    # Phrase tables
    "Phrase",
    "PhraseTable",
    "available_locales",
    "load_phrase_table",
    # Clocks
    "Clock",
    "FixedClock",
    "SystemClock",
    # Configuration
    "HumanizeConfig",
]
