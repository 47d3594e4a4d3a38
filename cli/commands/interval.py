"""Describe how long ago a timestamp was."""

import logging

import typer
from typing_extensions import Annotated

from chronophrase.exceptions import ChronoPhraseError
from cli.context import get_context
from cli.display import console
from cli.utils import parse_instant

logger = logging.getLogger(__name__)


def interval_command(
    target: Annotated[
        str,
        typer.Argument(help="Instant to describe (ISO-8601 or POSIX seconds)"),
    ],
    now: Annotated[
        str | None,
        typer.Option("--now", "-n", help="Reference instant (default: current time)"),
    ] = None,
    minutes_only: Annotated[
        bool,
        typer.Option("--minutes-only", help="Only produce phrases under one hour"),
    ] = False,
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Phrase table to use"),
    ] = None,
) -> None:
    """Describe the gap as "N minutes/hours/days ago".

    Prints "n/a" when no phrase applies (target in the future, or over an
    hour ago with --minutes-only).
    """
    ctx = get_context()
    target_instant = parse_instant(target)
    now_instant = parse_instant(now) if now is not None else None

    try:
        formatter = ctx.formatter_for(locale)
        text = formatter.describe_interval(
            target_instant, now_instant, include_hour_scale=not minutes_only
        )
    except ChronoPhraseError as e:
        logger.error(f"Could not describe {target}: {e}")
        raise typer.Exit(1)

    if text is None:
        console.print("[dim]n/a[/dim]")
        return
    console.print(text, markup=False, highlight=False)
