"""Table renderer for phrase tables."""

from rich.markup import escape
from rich.table import Table

from chronophrase.phrases import Phrase, PhraseTable
from cli.display.console import console


class PhraseTableRenderer:
    """Render a phrase table's templates and weekday names.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render(self, table: PhraseTable) -> None:
        """Render every scenario tag alongside its template.

        Args:
            table: Phrase table to display.
        """
        console.print(f"\n[bold]Phrase table: {escape(table.locale)}[/bold]")

        rich_table = Table(show_header=True, header_style="bold")
        rich_table.add_column("Tag", style="cyan", no_wrap=True)
        rich_table.add_column("Template", overflow="fold")

        for phrase in Phrase:
            rich_table.add_row(phrase.value, escape(table.templates[phrase]))

        console.print(rich_table)
        console.print(f"[dim]Weekdays:[/dim] {escape(', '.join(table.weekdays))}")
