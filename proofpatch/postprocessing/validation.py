"""Check suggestions against the document they claim to edit."""

from __future__ import annotations

from typing import Iterable

from proofpatch.engine.ranges import decode_units, encode_units, has_valid_range
from proofpatch.models import Edit


def matches_document(edit: Edit, document: str) -> bool:
    """True when ``edit`` has a usable range whose text equals ``original_text``.

    Models often report offsets that are off by a few characters; such edits
    would replace the wrong words, so they are treated as invalid.
    """
    return _matches_units(edit, encode_units(document))


def filter_matching(edits: Iterable[Edit], document: str) -> list[Edit]:
    units = encode_units(document)
    return [edit for edit in edits if _matches_units(edit, units)]


def _matches_units(edit: Edit, units: bytes) -> bool:
    if not has_valid_range(edit, units):
        return False
    actual = decode_units(units[edit.range_start * 2 : edit.range_end * 2])
    return actual == edit.original_text
