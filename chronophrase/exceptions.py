"""Exception hierarchy for timestamp humanization."""


class ChronoPhraseError(Exception):
    """Base exception for chronophrase operations."""

    pass


class InvalidInstantError(ChronoPhraseError):
    """Value cannot be interpreted as an instant."""

    pass


class PhraseTableError(ChronoPhraseError):
    """Base exception for phrase table loading."""

    pass


class PhraseTableNotFoundError(PhraseTableError):
    """Phrase table not found."""

    pass


class InvalidPhraseTableError(PhraseTableError):
    """Phrase table failed validation (bad JSON, missing tag, bad template)."""

    pass
