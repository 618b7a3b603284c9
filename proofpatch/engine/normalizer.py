"""Remove redundant suggestions before they are shown or applied."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Iterable, Sequence

from proofpatch.models import Edit, OverlapPolicy

from .ranges import ranges_overlap

logger = logging.getLogger(__name__)


def normalize_edits(edits: Iterable[Edit]) -> list[Edit]:
    """Drop exact duplicates, keeping the first occurrence of each.

    Two edits are duplicates when they share start, end and suggested text;
    message, category and severity are ignored. Overlapping edits that
    propose different text are left alone.
    """
    seen: set[tuple[int | None, int | None, str | None]] = set()
    unique: list[Edit] = []
    for edit in edits:
        key = edit.dedup_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(edit)

    return unique


def find_overlaps(edits: Sequence[Edit]) -> list[tuple[int, int]]:
    """Return index pairs ``(i, j)`` with ``i < j`` whose ranges overlap."""
    return [
        (i, j)
        for (i, first), (j, second) in combinations(enumerate(edits), 2)
        if ranges_overlap(first, second)
    ]


def resolve_overlaps(
    edits: Sequence[Edit],
    policy: OverlapPolicy = OverlapPolicy.FIRST,
) -> list[Edit]:
    """Pick one edit from every group of overlapping edits.

    Args:
        edits: Candidate edits, typically already passed through
            :func:`normalize_edits`.
        policy: ``FIRST`` keeps whichever edit was listed first. ``SEVERITY``
            lets a later edit displace the ones it overlaps, but only when its
            severity outranks all of them.

    Returns:
        The surviving edits in their original relative order. Edits without
        usable offsets never overlap anything and are passed through.
    """
    policy = OverlapPolicy(policy)
    kept: list[tuple[int, Edit]] = []

    for index, edit in enumerate(edits):
        clashes = [item for item in kept if ranges_overlap(item[1], edit)]
        if not clashes:
            kept.append((index, edit))
            continue

        wins = policy is OverlapPolicy.SEVERITY and all(
            edit.severity.weight > other.severity.weight for _, other in clashes
        )
        if not wins:
            logger.debug("Discarding overlapping edit %r", edit.dedup_key)
            continue

        for item in clashes:
            logger.debug("Edit %r displaced by more severe %r", item[1].dedup_key, edit.dedup_key)
            kept.remove(item)
        kept.append((index, edit))

    kept.sort(key=lambda item: item[0])
    return [edit for _, edit in kept]
