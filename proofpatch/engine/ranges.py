"""Range validation helpers shared by the patch applier and the normalizer.

Offsets produced for the editor count UTF-16 code units, so every check here
works on the UTF-16-LE encoding of the document rather than on Python string
indices. For text without astral characters (emoji, some CJK) the two agree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from proofpatch.models import Edit

_CODEC = "utf-16-le"
_LOW_SURROGATES = range(0xDC00, 0xE000)


def encode_units(text: str) -> bytes:
    """Encode ``text`` as UTF-16-LE, two bytes per code unit."""
    return text.encode(_CODEC, "surrogatepass")


def decode_units(units: bytes) -> str:
    return units.decode(_CODEC, "surrogatepass")


def utf16_length(text: str) -> int:
    return len(encode_units(text)) // 2


def is_unit_boundary(units: bytes, offset: int) -> bool:
    """Return False when ``offset`` would split a surrogate pair."""
    if offset <= 0 or offset * 2 >= len(units):
        return True
    unit = int.from_bytes(units[offset * 2 : offset * 2 + 2], "little")
    return unit not in _LOW_SURROGATES


def slice_units(text: str, start: int, end: int) -> str:
    """Return the substring of ``text`` between two UTF-16 offsets."""
    return decode_units(encode_units(text)[start * 2 : end * 2])


def has_valid_range(edit: "Edit", units: bytes) -> bool:
    """Check that ``edit`` can be applied to the encoded document ``units``.

    An edit is applicable when both offsets are present, the range lies
    inside the document, a zero-width range carries no original text, neither
    end splits a surrogate pair and a replacement was supplied.
    """
    start, end = edit.range_start, edit.range_end
    if start is None or end is None or edit.suggested_text is None:
        return False
    if start < 0 or end < start or end * 2 > len(units):
        return False
    if start == end and edit.original_text:
        return False
    return is_unit_boundary(units, start) and is_unit_boundary(units, end)


def ranges_overlap(first: "Edit", second: "Edit") -> bool:
    """Half-open overlap test; edits with missing offsets never overlap."""
    if None in (first.range_start, first.range_end, second.range_start, second.range_end):
        return False
    return first.range_start < second.range_end and second.range_start < first.range_end
