"""Shared CLI context with lazy-initialized dependencies."""

from chronophrase.config import HumanizeConfig
from chronophrase.formatter import TimeFormatter
from chronophrase.phrase_loader import load_phrase_table
from chronophrase.phrases import PhraseTable


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        print(ctx.formatter.show_time(target))
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: HumanizeConfig | None = None
        self._formatter: TimeFormatter | None = None

    @property
    def config(self) -> HumanizeConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = HumanizeConfig.from_env()
        return self._config

    @property
    def formatter(self) -> TimeFormatter:
        """Get formatter for the configured locale (lazy-loaded)."""
        if self._formatter is None:
            self._formatter = TimeFormatter.from_config(self.config)
        return self._formatter

    def phrases(self, locale: str | None = None) -> PhraseTable:
        """Get the phrase table for ``locale``, or the configured one."""
        if locale is None:
            return self.formatter.phrases
        return load_phrase_table(locale, self.config.phrase_dir)

    def formatter_for(self, locale: str | None = None) -> TimeFormatter:
        """Get a formatter, overriding the configured locale if given."""
        if locale is None:
            return self.formatter
        return TimeFormatter(
            self.phrases(locale), first_weekday=self.config.first_weekday
        )


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
