"""Shared constants for chronophrase."""

from datetime import datetime, timezone

# Interval thresholds, in seconds
ONE_MINUTE = 60
ONE_HOUR = 60 * ONE_MINUTE
TWO_HOURS = 2 * ONE_HOUR
ONE_DAY = 24 * ONE_HOUR
TWO_DAYS = 2 * ONE_DAY

# Instants at or before this are not trusted for relative phrasing
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Default phrase table
DEFAULT_LOCALE = "en"

# Monday, matching ISO week numbering
DEFAULT_FIRST_WEEKDAY = 0
