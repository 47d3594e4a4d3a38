"""Display module for rendering CLI output.

It provides:
- console: Shared Rich console instance
- PhraseTableRenderer: Phrase table display
"""

from cli.display.console import console
from cli.display.phrase_renderer import PhraseTableRenderer

__all__ = [
    "console",
    "PhraseTableRenderer",
]
