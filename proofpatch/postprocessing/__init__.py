"""Helpers that surround the engine: input clean-up, checks and output shaping."""

from __future__ import annotations

from .response import build_check_response, edit_to_wire
from .sanitize import sanitize_text, strip_markup
from .scoring import calculate_writing_score, count_words
from .validation import filter_matching, matches_document

__all__ = [
    "build_check_response",
    "calculate_writing_score",
    "count_words",
    "edit_to_wire",
    "filter_matching",
    "matches_document",
    "sanitize_text",
    "strip_markup",
]
