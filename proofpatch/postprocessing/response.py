"""Serialise check results into the JSON shape the editor front end expects."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from proofpatch.engine.ranges import utf16_length
from proofpatch.models import Edit

from .scoring import calculate_writing_score, count_words


def edit_to_wire(edit: Edit) -> dict[str, Any]:
    """Return the front-end representation of a single suggestion.

    ``offset``/``length`` duplicate ``index``/``endIndex`` for older clients.
    """
    return {
        "original": edit.original_text,
        "suggested": edit.suggested_text,
        "message": edit.message,
        "category": edit.category.value,
        "severity": edit.severity.value,
        "index": edit.range_start,
        "endIndex": edit.range_end,
        "offset": edit.range_start,
        "length": edit.length,
    }


def build_check_response(
    edits: Sequence[Edit],
    corrected_text: str,
    original_text: str,
    metadata: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the response body for a grammar check.

    Args:
        edits: The cleaned suggestions, in display order
        corrected_text: ``original_text`` with the suggestions applied
        original_text: The (sanitised) text that was checked
        metadata: Extra caller fields merged into ``metadata``

    Returns:
        A JSON-serialisable dict
    """
    return {
        "suggestions": [edit_to_wire(edit) for edit in edits],
        "corrected_text": corrected_text,
        "writingScore": calculate_writing_score(edits, original_text),
        "metadata": {
            "totalSuggestions": len(edits),
            "textLength": utf16_length(original_text),
            "wordCount": count_words(original_text),
            **dict(metadata or {}),
        },
    }
