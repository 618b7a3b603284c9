"""Suggestion reconciliation and text-patching engine.

Both halves are pure functions over in-memory values and hold no shared
state, so they can be called concurrently for independent documents.
"""

from __future__ import annotations

from .normalizer import find_overlaps, normalize_edits, resolve_overlaps
from .patcher import apply_edits, select_applicable
from .ranges import has_valid_range, ranges_overlap, slice_units, utf16_length

__all__ = [
    "apply_edits",
    "find_overlaps",
    "has_valid_range",
    "normalize_edits",
    "ranges_overlap",
    "resolve_overlaps",
    "select_applicable",
    "slice_units",
    "utf16_length",
]
