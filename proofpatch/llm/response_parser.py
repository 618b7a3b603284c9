"""Turn raw LLM grammar-check output into :class:`~proofpatch.models.Edit` values.

Providers disagree on field names (``index``/``endIndex``, ``offset``/
``length``, camelCase or snake_case) and frequently omit some of them. The
parser is deliberately forgiving: anything it cannot make sense of becomes an
edit with missing offsets, which the patch applier then ignores.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from proofpatch.models import Edit
from proofpatch.models.edit import _to_offset

from .json_utils import extract_json_array

logger = logging.getLogger(__name__)

DEFAULT_MAX_MESSAGE_LENGTH = 160

_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "original_text": ("original", "originalText", "original_text"),
    "suggested_text": ("suggested", "suggestedText", "suggested_text", "suggestion", "replacement"),
    "range_start": ("index", "rangeStart", "range_start", "start", "offset"),
    "range_end": ("endIndex", "rangeEnd", "range_end", "end"),
    "message": ("explanation", "message", "reason"),
    "category": ("category", "type"),
    "severity": ("severity",),
}


class SuggestionParseError(ValueError):
    """Raised when an LLM response does not contain a usable suggestion list.

    The raw response text is kept to aid debugging when the model returns
    unexpected content.
    """

    def __init__(self, message: str, *, response_text: str | None = None) -> None:
        super().__init__(message)
        self.response_text = response_text

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.response_text is not None:
            text = self.response_text
            if len(text) > 2000:
                text = text[:2000] + "... [truncated]"
            parts.append(f"\n--- LLM Response ---\n{text}")
        return "".join(parts)


def _first_present(data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def edit_from_mapping(
    data: Mapping[str, Any],
    *,
    max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH,
) -> Edit:
    """Build an Edit from one suggestion object in an LLM response.

    Args:
        data: A single decoded suggestion object
        max_message_length: Messages longer than this are truncated

    Returns:
        An Edit; offsets the provider got wrong are left as ``None``
    """
    values = {field: _first_present(data, keys) for field, keys in _FIELD_ALIASES.items()}

    # Some providers send offset/length pairs instead of an end index
    if values["range_end"] is None and data.get("length") is not None:
        start = _to_offset(values["range_start"])
        length = _to_offset(data["length"])
        if start is not None and length is not None:
            values["range_end"] = start + length

    # A list of alternatives: take the model's first choice
    if isinstance(values["suggested_text"], list):
        values["suggested_text"] = values["suggested_text"][0] if values["suggested_text"] else None

    message = str(values["message"] or "").strip()
    values["message"] = message[:max_message_length]

    return Edit(**values)


def parse_suggestions(
    response_text: str,
    *,
    max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH,
) -> list[Edit]:
    """Parse every suggestion object out of ``response_text``.

    Args:
        response_text: Raw text returned by the model
        max_message_length: Forwarded to :func:`edit_from_mapping`

    Returns:
        The edits in the order the model listed them

    Raises:
        SuggestionParseError: If no JSON array can be recovered
    """
    try:
        items = extract_json_array(response_text)
    except (ValueError, json.JSONDecodeError) as exc:
        raise SuggestionParseError(
            f"Could not extract suggestions: {exc}",
            response_text=response_text if isinstance(response_text, str) else None,
        ) from exc

    edits: list[Edit] = []
    for position, item in enumerate(items):
        if not isinstance(item, Mapping):
            logger.debug("Skipping non-object suggestion at position %d: %r", position, item)
            continue
        edits.append(edit_from_mapping(item, max_message_length=max_message_length))

    logger.debug("Parsed %d suggestion(s) from %d item(s)", len(edits), len(items))
    return edits
