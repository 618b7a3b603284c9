"""End-to-end tests for the correction pipeline."""

from __future__ import annotations

import json
import logging

import pytest

from proofpatch.config import CorrectionSettings
from proofpatch.models import Edit, OverlapPolicy
from proofpatch.pipeline import correct_text


def _response(*items: dict) -> str:
    return "```json\n" + json.dumps(list(items)) + "\n```"


def test_raw_response_is_parsed_and_applied() -> None:
    response = _response(
        {"original": "seen", "suggested": "saw", "explanation": "Past tense.", "index": 2, "endIndex": 6},
        {"original": "it", "suggested": "them", "index": 7, "endIndex": 9},
    )

    result = correct_text("I seen it", response)

    assert result.corrected_text == "I saw them"
    assert result.changed
    assert len(result.suggestions) == 2
    assert result.applied == result.suggestions
    assert result.rejected_count == 0


def test_mismatched_original_text_is_dropped() -> None:
    response = _response({"original": "gramer", "suggested": "grammar", "index": 4, "endIndex": 11})

    result = correct_text("The grammer error", response)

    assert result.corrected_text == "The grammer error"
    assert result.suggestions == []
    assert result.rejected_count == 1


def test_mismatch_allowed_when_matching_disabled() -> None:
    response = _response({"original": "gramer", "suggested": "grammar", "index": 4, "endIndex": 11})
    settings = CorrectionSettings(require_match=False)

    result = correct_text("The grammer error", response, settings=settings)

    assert result.corrected_text == "The grammar error"


def test_invalid_ranges_are_kept_for_display_but_not_applied() -> None:
    settings = CorrectionSettings(require_match=False)
    edits = [
        Edit(original_text="I", suggested_text="We", range_start=0, range_end=1),
        Edit(original_text="x", suggested_text="y", range_start=5, range_end=99),
    ]

    result = correct_text("I seen it", edits, settings=settings)

    assert result.corrected_text == "We seen it"
    assert len(result.suggestions) == 2
    assert result.applied == edits[:1]


def test_duplicates_are_collapsed() -> None:
    item = {"original": "grammer", "suggested": "grammar", "index": 4, "endIndex": 11}
    result = correct_text("The grammer error", [item, item, dict(item, explanation="again")])

    assert len(result.suggestions) == 1
    assert result.corrected_text == "The grammar error"


def test_unparsable_response_yields_no_suggestions(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="proofpatch.pipeline"):
        result = correct_text("Fine text.", "I could not produce JSON, sorry.")

    assert result.corrected_text == "Fine text."
    assert result.suggestions == []
    assert "unparsable" in caplog.text


def test_infinite_offsets_do_not_break_correction() -> None:
    settings = CorrectionSettings(require_match=False)
    suggestions = [
        {"original": "a", "suggested": "b", "offset": 0, "length": float("inf")},
        {"original": "c", "suggested": "C", "offset": 2, "length": 1},
    ]

    result = correct_text("abc", suggestions, settings=settings)
    raw = correct_text("abc", '[{"suggested": "b", "offset": 1e400, "length": 1}]', settings=settings)

    assert result.corrected_text == "abC"
    assert raw.corrected_text == "abc"


def test_text_is_sanitised_before_applying() -> None:
    response = _response({"original": "seen", "suggested": "saw", "index": 2, "endIndex": 6})

    result = correct_text("  <p>I seen it</p>\r\n", response)

    assert result.original_text == "I seen it"
    assert result.corrected_text == "I saw it"


def test_sanitising_can_be_disabled() -> None:
    response = _response({"original": "seen", "suggested": "saw", "index": 3, "endIndex": 7})
    result = correct_text(" I seen it", response, sanitize=False)
    assert result.corrected_text == " I saw it"


def test_severity_policy_resolves_overlaps() -> None:
    response = _response(
        {"original": "very unique", "suggested": "unique", "severity": "low", "index": 4, "endIndex": 15},
        {"original": "unique", "suggested": "distinctive", "severity": "high", "index": 9, "endIndex": 15},
    )
    settings = CorrectionSettings(overlap_policy=OverlapPolicy.SEVERITY)

    result = correct_text("Its very unique", response, settings=settings)

    assert [edit.suggested_text for edit in result.suggestions] == ["distinctive"]
    assert result.corrected_text == "Its very distinctive"


def test_overlaps_without_policy_apply_first_listed() -> None:
    response = _response(
        {"original": "very unique", "suggested": "unique", "index": 4, "endIndex": 15},
        {"original": "unique", "suggested": "distinctive", "index": 9, "endIndex": 15},
    )

    result = correct_text("Its very unique", response)

    assert len(result.suggestions) == 2
    assert result.corrected_text == "Its unique"


def test_to_response_shape() -> None:
    response = _response({"original": "seen", "suggested": "saw", "index": 2, "endIndex": 6})

    body = correct_text("I seen it", response).to_response({"mode": "ai"})

    assert body["corrected_text"] == "I saw it"
    assert body["suggestions"][0]["offset"] == 2
    assert body["suggestions"][0]["length"] == 4
    assert body["metadata"]["mode"] == "ai"
    json.dumps(body)
