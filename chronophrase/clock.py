"""Clock abstraction for supplying "now" to the formatter."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Protocol for getting the current instant. Inject a fake in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Default clock backed by the real system time, in the local zone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class FixedClock:
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
