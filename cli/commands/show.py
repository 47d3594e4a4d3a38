"""Render a timestamp relative to now."""

import logging

import typer
from typing_extensions import Annotated

from chronophrase.exceptions import ChronoPhraseError
from cli.context import get_context
from cli.display import console
from cli.utils import parse_instant

logger = logging.getLogger(__name__)


def show_command(
    target: Annotated[
        str,
        typer.Argument(help="Instant to render (ISO-8601 or POSIX seconds)"),
    ],
    now: Annotated[
        str | None,
        typer.Option("--now", "-n", help="Reference instant (default: current time)"),
    ] = None,
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Phrase table to use"),
    ] = None,
) -> None:
    """Render a timestamp the way a chat or forum would show it.

    Examples:
        chronophrase show 2024-03-09T09:00 --now 2024-03-10T10:00   # yesterday 09:00
        chronophrase show 2023-12-31T23:59 --now 2024-03-10T10:00   # 2023-12-31
        chronophrase show 1710064800 --locale zh
    """
    ctx = get_context()
    target_instant = parse_instant(target)
    now_instant = parse_instant(now) if now is not None else None

    try:
        formatter = ctx.formatter_for(locale)
        text = formatter.show_time(target_instant, now_instant)
    except ChronoPhraseError as e:
        logger.error(f"Could not render {target}: {e}")
        raise typer.Exit(1)

    logger.info(f"Rendered {target} with locale {formatter.phrases.locale}")
    console.print(text, markup=False, highlight=False)
