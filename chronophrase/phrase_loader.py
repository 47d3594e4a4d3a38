"""Phrase table loader for loading and caching phrase tables."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from chronophrase.constants import DEFAULT_LOCALE
from chronophrase.exceptions import InvalidPhraseTableError, PhraseTableNotFoundError
from chronophrase.phrases import PhraseTable

logger = logging.getLogger(__name__)

BUILTIN_PHRASE_DIR = Path(__file__).parent / "locales"

# Cache for loaded phrase tables
_phrase_cache: dict[str, PhraseTable] = {}


def _merge_phrase_data(base_data: dict, extending_data: dict) -> dict:
    """
    Merge extending phrase data over base phrase data.

    Args:
        base_data: Base table data
        extending_data: Extending table data

    Returns:
        Merged table data
    """
    merged = base_data.copy()

    # Templates merge per tag; weekdays replace as a whole
    if "templates" in extending_data:
        merged["templates"] = {
            **base_data.get("templates", {}),
            **extending_data["templates"],
        }
    if "weekdays" in extending_data:
        merged["weekdays"] = extending_data["weekdays"]
    if "locale" in extending_data:
        merged["locale"] = extending_data["locale"]

    merged.pop("extends", None)
    return merged


def _find_table(locale: str, phrase_dir: Path | None) -> Path:
    """Locate a table file, preferring ``phrase_dir`` over the built-ins."""
    search = [phrase_dir, BUILTIN_PHRASE_DIR] if phrase_dir else [BUILTIN_PHRASE_DIR]
    for directory in search:
        path = directory / f"{locale}.json"
        if path.exists():
            return path
    raise PhraseTableNotFoundError(
        f"Phrase table not found: {locale} (searched {', '.join(str(d) for d in search)})"
    )


def _read_table_data(
    locale: str, phrase_dir: Path | None, _seen: tuple[str, ...] = ()
) -> dict:
    """Read raw table data, resolving ``extends`` chains."""
    if locale in _seen:
        chain = " -> ".join((*_seen, locale))
        raise InvalidPhraseTableError(f"Circular phrase table extends: {chain}")

    path = _find_table(locale, phrase_dir)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidPhraseTableError(f"Invalid JSON in phrase table {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidPhraseTableError(f"Phrase table {path} must be a JSON object")

    data.setdefault("locale", locale)
    extends_name = data.get("extends")
    if extends_name:
        base_data = _read_table_data(extends_name, phrase_dir, (*_seen, locale))
        return _merge_phrase_data(base_data, data)
    return data


def load_phrase_table(
    locale: str = DEFAULT_LOCALE, phrase_dir: Path | None = None
) -> PhraseTable:
    """
    Load a phrase table from disk, using cache if available.
    Handles table extensions by loading base tables and merging.

    Args:
        locale: Name of table (without .json extension)
        phrase_dir: Optional directory searched before the built-in tables

    Returns:
        Loaded PhraseTable

    Raises:
        PhraseTableNotFoundError: If no table file exists for the locale
        InvalidPhraseTableError: If the table JSON or its templates are invalid
    """
    cache_key = f"{phrase_dir or BUILTIN_PHRASE_DIR}/{locale}"
    if cache_key in _phrase_cache:
        return _phrase_cache[cache_key]

    data = _read_table_data(locale, phrase_dir)
    try:
        table = PhraseTable(**data)
    except ValidationError as e:
        raise InvalidPhraseTableError(f"Invalid phrase table {locale}: {e}") from e

    _phrase_cache[cache_key] = table
    logger.debug(f"Loaded phrase table: {locale}")
    return table


def available_locales(phrase_dir: Path | None = None) -> list[str]:
    """List table names found in ``phrase_dir`` and the built-ins."""
    directories = [BUILTIN_PHRASE_DIR] + ([phrase_dir] if phrase_dir else [])
    names = {
        path.stem
        for directory in directories
        if directory.is_dir()
        for path in directory.glob("*.json")
    }
    return sorted(names)


def clear_cache() -> None:
    """Clear the phrase table cache (useful for testing)."""
    _phrase_cache.clear()
