"""CLI utilities for parsing instants from the command line."""

import logging
from datetime import datetime

import typer

logger = logging.getLogger(__name__)


def parse_instant(value: str) -> datetime | float:
    """Parse an ISO-8601 string or POSIX seconds.

    Args:
        value: Command-line value, e.g. "2024-03-10T10:00" or "1710064800".

    Returns:
        Parsed datetime, or POSIX seconds as a float.

    Raises:
        typer.BadParameter: If the value is neither.
    """
    try:
        return float(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(
            f"Invalid instant: {value}. Use ISO-8601 (YYYY-MM-DDTHH:MM) or POSIX seconds."
        )
