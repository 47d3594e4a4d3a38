"""Show the templates in a phrase table."""

import logging

import typer
from typing_extensions import Annotated

from chronophrase.exceptions import ChronoPhraseError
from chronophrase.phrase_loader import available_locales
from cli.context import get_context
from cli.display import PhraseTableRenderer, console

logger = logging.getLogger(__name__)


def phrases_command(
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Phrase table to show"),
    ] = None,
    list_locales: Annotated[
        bool,
        typer.Option("--list", help="List available phrase tables"),
    ] = False,
) -> None:
    """Show the phrase templates for a locale, or list available locales."""
    ctx = get_context()

    if list_locales:
        for name in available_locales(ctx.config.phrase_dir):
            console.print(name)
        return

    try:
        table = ctx.phrases(locale)
    except ChronoPhraseError as e:
        logger.error(f"Phrase table error: {e}")
        raise typer.Exit(1)

    PhraseTableRenderer().render(table)
