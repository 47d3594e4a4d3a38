"""Phrase tables: one format template per humanization scenario."""

from enum import Enum
from string import Formatter
from types import MappingProxyType
from typing import Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)


class Phrase(str, Enum):
    """Scenario tags selected by the formatting cascades."""

    JUST_NOW = "just_now"
    MINUTE_AGO = "minute_ago"
    MINUTES_AGO = "minutes_ago"
    HOUR_AGO = "hour_ago"
    HOURS_AGO = "hours_ago"
    DAY_AGO = "day_ago"
    DAYS_AGO = "days_ago"
    YESTERDAY = "yesterday"
    DAY_BEFORE_YESTERDAY = "day_before_yesterday"
    SAME_WEEK = "same_week"
    SAME_YEAR_DIFFERENT_MONTH = "same_year_different_month"
    SAME_DAY = "same_day"
    DIFFERENT_YEAR = "different_year"
    BEFORE_EPOCH = "before_epoch"
    FALLBACK = "fallback"
    FULL = "full"


# Placeholders a template may reference
TEMPLATE_FIELDS = frozenset(
    {
        "year",
        "month",
        "day",
        "hour",
        "minute",
        "second",
        "millisecond",
        "weekday",
        "count",
    }
)

_SAMPLE_VALUES = {
    "year": 2000,
    "month": 1,
    "day": 1,
    "hour": 0,
    "minute": 0,
    "second": 0,
    "millisecond": 0,
    "weekday": "Monday",
    "count": 2,
}


class PhraseTable(BaseModel):
    """Immutable mapping from scenario tag to format template.

    Templates use ``str.format`` syntax, e.g. ``"{count} minutes ago"`` or
    ``"{hour:02d}:{minute:02d} {weekday}"``. Weekday names start on Monday.
    """

    model_config = ConfigDict(frozen=True)

    locale: str
    templates: dict[Phrase, str]
    weekdays: tuple[str, ...] = Field(min_length=7, max_length=7)

    @field_validator("templates")
    @classmethod
    def _check_templates(cls, templates: dict[Phrase, str]) -> Mapping[Phrase, str]:
        missing = [p.value for p in Phrase if p not in templates]
        if missing:
            raise ValueError(f"missing templates: {', '.join(missing)}")

        for phrase, template in templates.items():
            try:
                names = {
                    name
                    for _, name, _, _ in Formatter().parse(template)
                    if name is not None
                }
            except ValueError as e:
                raise ValueError(f"{phrase.value}: {e}") from e
            unknown = names - TEMPLATE_FIELDS
            if unknown:
                raise ValueError(
                    f"{phrase.value}: unknown placeholder(s) {sorted(unknown)}"
                )
            try:
                template.format(**_SAMPLE_VALUES)
            except (ValueError, KeyError, IndexError) as e:
                raise ValueError(f"{phrase.value}: {e}") from e
        # Tables are cached and shared, so the mapping is read-only
        return MappingProxyType(dict(templates))

    @field_serializer("templates")
    def _dump_templates(self, templates: Mapping[Phrase, str]) -> dict[str, str]:
        return {phrase.value: template for phrase, template in templates.items()}

    @model_validator(mode="after")
    def _check_weekdays(self) -> "PhraseTable":
        if any(not name for name in self.weekdays):
            raise ValueError("weekday names must not be empty")
        return self

    def render(self, phrase: Phrase, **values) -> str:
        """Fill the template for ``phrase`` with calendar values or a count."""
        return self.templates[phrase].format(**values)

    def weekday_name(self, weekday: int) -> str:
        """Name of a weekday, 0 = Monday."""
        return self.weekdays[weekday]
