"""End-to-end correction: raw model output in, cleaned suggestions and patched text out.

Steps:
1. Sanitise the input text (the model was shown the sanitised text, so its
   offsets refer to it)
2. Parse the model response into edits; an unparsable response yields none
3. Optionally drop edits whose ``original_text`` does not match the document
4. Remove exact duplicates, then optionally resolve overlaps by policy
5. Apply the surviving edits
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from proofpatch.config import CorrectionSettings
from proofpatch.engine import apply_edits, normalize_edits, resolve_overlaps, select_applicable
from proofpatch.llm import SuggestionParseError, edit_from_mapping, parse_suggestions
from proofpatch.models import Edit
from proofpatch.postprocessing import build_check_response, filter_matching, sanitize_text

logger = logging.getLogger(__name__)

SuggestionInput = str | Sequence[Edit | Mapping[str, Any]]


@dataclass
class CorrectionResult:
    """Outcome of one correction request."""

    original_text: str
    corrected_text: str
    suggestions: list[Edit] = field(default_factory=list)
    applied: list[Edit] = field(default_factory=list)
    rejected_count: int = 0

    @property
    def changed(self) -> bool:
        return self.original_text != self.corrected_text

    def to_response(self, metadata: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return build_check_response(
            self.suggestions,
            self.corrected_text,
            self.original_text,
            metadata,
        )


def _coerce_edits(suggestions: SuggestionInput, max_message_length: int) -> list[Edit]:
    if isinstance(suggestions, str):
        try:
            return parse_suggestions(suggestions, max_message_length=max_message_length)
        except SuggestionParseError as exc:
            logger.warning("Ignoring unparsable suggestion response: %s", exc.args[0])
            return []

    edits: list[Edit] = []
    for item in suggestions:
        if isinstance(item, Edit):
            edits.append(item)
        elif isinstance(item, Mapping):
            edits.append(edit_from_mapping(item, max_message_length=max_message_length))
        else:
            logger.debug("Skipping suggestion of unsupported type %s", type(item).__name__)
    return edits


def correct_text(
    text: str,
    suggestions: SuggestionInput,
    *,
    settings: CorrectionSettings | None = None,
    sanitize: bool = True,
) -> CorrectionResult:
    """Clean ``suggestions`` and apply them to ``text``.

    Args:
        text: The document that was checked
        suggestions: The raw model response, or already decoded suggestions
            (``Edit`` instances or mappings with provider field names)
        settings: Pipeline settings; defaults to :class:`CorrectionSettings()`
        sanitize: Run :func:`sanitize_text` on ``text`` first

    Returns:
        A CorrectionResult. This function does not raise for bad suggestions.
    """
    settings = settings or CorrectionSettings()
    document = sanitize_text(text) if sanitize else text

    candidates = _coerce_edits(suggestions, settings.max_message_length)
    cleaned = filter_matching(candidates, document) if settings.require_match else list(candidates)
    cleaned = normalize_edits(cleaned)
    if settings.overlap_policy is not None:
        cleaned = resolve_overlaps(cleaned, settings.overlap_policy)

    applied = select_applicable(document, cleaned)
    corrected = apply_edits(document, applied)

    logger.info(
        "Applied %d of %d suggestion(s) (%d kept for display)",
        len(applied),
        len(candidates),
        len(cleaned),
    )

    return CorrectionResult(
        original_text=document,
        corrected_text=corrected,
        suggestions=cleaned,
        applied=applied,
        rejected_count=len(candidates) - len(cleaned),
    )
