"""Reconcile AI writing suggestions and patch them into documents."""

from __future__ import annotations

__version__ = "0.1.0"

from .engine import apply_edits, normalize_edits, resolve_overlaps
from .models import Edit, OverlapPolicy, Severity, SuggestionCategory

__all__ = [
    "Edit",
    "OverlapPolicy",
    "Severity",
    "SuggestionCategory",
    "apply_edits",
    "normalize_edits",
    "resolve_overlaps",
]
