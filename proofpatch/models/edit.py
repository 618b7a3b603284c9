"""Pydantic model representing a single proposed edit to a document.

Edits are built from LLM output, which routinely contains missing or
nonsensical positions. The model therefore never rejects an edit because of
its offsets: malformed values are coerced to ``None`` and the patch applier
decides later whether the edit can be used. Category and severity are
defaulted here, once, so nothing downstream needs to guess.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .enums import Severity, SuggestionCategory


class Edit(BaseModel):
    """A localized replacement proposed for a document.

    Contract:
    - original_text: the exact text expected at ``[range_start, range_end)``
    - suggested_text: the replacement; ``""`` deletes, ``None`` means the
      provider did not supply one
    - range_start / range_end: half-open UTF-16 code unit offsets, ``None``
      when absent or malformed
    - message: short rationale shown to the writer
    - category / severity: enum-backed classification
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    original_text: str = ""
    suggested_text: str | None = None
    range_start: int | None = None
    range_end: int | None = None
    message: str = ""
    category: SuggestionCategory = SuggestionCategory.GRAMMAR
    severity: Severity = Severity.MEDIUM

    @field_validator("original_text", mode="before")
    def _text_or_empty(cls, value: object) -> str:
        # Whitespace is significant when matching against the document
        return "" if value is None else str(value)

    @field_validator("suggested_text", mode="before")
    def _optional_text(cls, value: object) -> str | None:
        if value is None:
            return None
        return str(value)

    @field_validator("message", mode="before")
    def _strip_message(cls, value: object) -> str:
        return str(value or "").strip()

    @field_validator("range_start", "range_end", mode="before")
    def _coerce_offset(cls, value: object) -> int | None:
        return _to_offset(value)

    @field_validator("category", mode="before")
    def _coerce_category(cls, value: object) -> SuggestionCategory:
        return SuggestionCategory.coerce(value)

    @field_validator("severity", mode="before")
    def _coerce_severity(cls, value: object) -> Severity:
        return Severity.coerce(value)

    @property
    def dedup_key(self) -> tuple[int | None, int | None, str | None]:
        """Identity used to spot exact duplicates."""
        return (self.range_start, self.range_end, self.suggested_text)

    @property
    def length(self) -> int | None:
        if self.range_start is None or self.range_end is None:
            return None
        return self.range_end - self.range_start

    @property
    def is_insertion(self) -> bool:
        return self.range_start is not None and self.range_start == self.range_end


def _to_offset(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
