"""Apply accepted edits to a document in a single deterministic pass.

Edits are applied from the highest start offset down. Replacing text near the
end of the document cannot move anything before it, so the offsets of every
edit still to be applied stay valid and are never recomputed.

Edits that cannot be applied (missing or out-of-range offsets, inverted
ranges, split surrogate pairs) are dropped rather than clamped, and the rest
of the patch proceeds. Of two edits whose ranges overlap, the one listed first
is kept; the later one is dropped with a warning.
"""

from __future__ import annotations

import logging
from typing import Sequence

from proofpatch.models import Edit

from .ranges import decode_units, encode_units, has_valid_range, ranges_overlap

logger = logging.getLogger(__name__)


def select_applicable(document: str, edits: Sequence[Edit]) -> list[Edit]:
    """Return the edits ``apply_edits`` would apply, in input order."""
    units = encode_units(document)
    accepted: list[Edit] = []
    for edit in edits:
        if not has_valid_range(edit, units):
            logger.debug(
                "Dropping edit with unusable range [%s, %s) for document of %d code units",
                edit.range_start,
                edit.range_end,
                len(units) // 2,
            )
            continue
        clash = next((kept for kept in accepted if ranges_overlap(kept, edit)), None)
        if clash is not None:
            logger.warning(
                "Dropping edit [%s, %s) -> %r: overlaps earlier edit [%s, %s)",
                edit.range_start,
                edit.range_end,
                edit.suggested_text,
                clash.range_start,
                clash.range_end,
            )
            continue
        accepted.append(edit)
    return accepted


def apply_edits(document: str, edits: Sequence[Edit]) -> str:
    """Return ``document`` with every applicable edit substituted in.

    Args:
        document: The base text. It is not modified.
        edits: Accepted edits with UTF-16 offsets into ``document``.

    Returns:
        The patched text. With no applicable edits this equals ``document``.

    Notes:
        Edits sharing the same range (only possible for insertions at one
        point) are applied in the order given, so the last one listed ends up
        first in the output.
    """
    accepted = select_applicable(document, edits)
    if not accepted:
        return document

    # sorted() is stable with reverse=True, which keeps input order on ties
    ordered = sorted(
        accepted,
        key=lambda edit: (edit.range_start, edit.range_end),
        reverse=True,
    )

    working = encode_units(document)
    for edit in ordered:
        working = (
            working[: edit.range_start * 2]
            + encode_units(edit.suggested_text)
            + working[edit.range_end * 2 :]
        )
    return decode_units(working)
