from __future__ import annotations

from typing import Sequence

from proofpatch.models import Edit


def count_words(text: str) -> int:
    return len(text.split())


def calculate_writing_score(edits: Sequence[Edit], text: str) -> int:
    """Score ``text`` from 0 to 100 based on the severity of its suggestions.

    Each suggestion contributes its severity weight; the weighted error count
    per 100 words costs ten points per unit.
    """
    if not text:
        return 0

    weighted_errors = sum(edit.severity.weight for edit in edits)
    error_rate = weighted_errors / max(count_words(text), 1) * 100
    return round(max(0.0, 100 - error_rate * 10))
