import os
import time
from datetime import datetime

import pytest

from chronophrase.formatter import TimeFormatter
from chronophrase.phrase_loader import clear_cache, load_phrase_table


@pytest.fixture(autouse=True)
def utc_local_zone():
    """Pin the host local zone to UTC so calendar fields are deterministic."""
    original = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    if hasattr(time, "tzset"):
        time.tzset()
    yield
    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    if hasattr(time, "tzset"):
        time.tzset()


@pytest.fixture(autouse=True)
def fresh_phrase_cache():
    """Start every test with an empty phrase table cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def now():
    """Reference instant: Sunday 2024-03-10 10:00."""
    return datetime(2024, 3, 10, 10, 0, 0)


@pytest.fixture
def zh_formatter():
    """Chinese formatter."""
    return TimeFormatter(load_phrase_table("zh"))
