"""Enumerations used by the suggestion models.

``SuggestionCategory`` values map directly to the four analysis categories
named in the grammar-check prompt. They are intentionally human-readable and
suitable for use as serialised JSON fields.
"""

from __future__ import annotations

from enum import Enum


class SuggestionCategory(str, Enum):
    """All valid categories a suggestion can be filed under."""

    GRAMMAR = "Grammar"
    STYLE = "Style"
    CLARITY = "Clarity"
    ENHANCEMENT = "Enhancement"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]

    @classmethod
    def coerce(cls, value: object) -> "SuggestionCategory":
        """Return the category for ``value``, defaulting to ``GRAMMAR``.

        Matching is case-insensitive. Labels produced by older prompts
        (``spelling``, ``tone`` and so on) are folded into the four current
        categories.
        """
        if isinstance(value, cls):
            return value
        label = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == label:
                return member
        return _LEGACY_CATEGORIES.get(label, cls.GRAMMAR)


_LEGACY_CATEGORIES = {
    "spelling": SuggestionCategory.GRAMMAR,
    "punctuation": SuggestionCategory.GRAMMAR,
    "tone": SuggestionCategory.STYLE,
    "readability": SuggestionCategory.CLARITY,
}


class Severity(str, Enum):
    """How strongly a suggestion should be surfaced to the writer."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]

    @classmethod
    def coerce(cls, value: object) -> "Severity":
        if isinstance(value, cls):
            return value
        label = str(value or "").strip().lower()
        try:
            return cls(label)
        except ValueError:
            return cls.MEDIUM

    @property
    def weight(self) -> float:
        return _SEVERITY_WEIGHTS[self]


_SEVERITY_WEIGHTS = {
    Severity.LOW: 0.5,
    Severity.MEDIUM: 1.0,
    Severity.HIGH: 2.0,
}


class OverlapPolicy(str, Enum):
    """Strategies for choosing between suggestions that target overlapping text.

    Values:
        FIRST: the earliest suggestion in the list wins
        SEVERITY: a later suggestion wins only if it is strictly more severe
            than every suggestion it collides with
    """

    FIRST = "first"
    SEVERITY = "severity"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]
