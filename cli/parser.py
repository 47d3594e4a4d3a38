"""CLI application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import interval_command, phrases_command, show_command
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Render timestamps as human-friendly phrases.",
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages on the console"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors on the console"),
    ] = False,
) -> None:
    """Render timestamps as human-friendly phrases."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("show")(show_command)
app.command("interval")(interval_command)
app.command("phrases")(phrases_command)
