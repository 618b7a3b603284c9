from __future__ import annotations

import pytest
from pydantic import ValidationError

from proofpatch.models import Edit, Severity, SuggestionCategory


def test_edit_accepts_camel_case_aliases() -> None:
    edit = Edit.model_validate(
        {
            "originalText": "grammer",
            "suggestedText": "grammar",
            "rangeStart": 4,
            "rangeEnd": 11,
            "message": "  Spelling mistake. ",
            "category": "grammar",
            "severity": "high",
        }
    )

    assert edit.original_text == "grammer"
    assert edit.suggested_text == "grammar"
    assert (edit.range_start, edit.range_end) == (4, 11)
    assert edit.message == "Spelling mistake."
    assert edit.category is SuggestionCategory.GRAMMAR
    assert edit.severity is Severity.HIGH
    assert edit.length == 7


def test_edit_dumps_with_aliases() -> None:
    edit = Edit(original_text="a", suggested_text="b", range_start=0, range_end=1)
    dumped = edit.model_dump(by_alias=True)
    assert dumped["rangeStart"] == 0
    assert dumped["suggestedText"] == "b"


def test_edit_defaults_classification_once() -> None:
    edit = Edit(suggested_text="x", range_start=0, range_end=0)
    assert edit.category is SuggestionCategory.GRAMMAR
    assert edit.severity is Severity.MEDIUM
    assert edit.original_text == ""
    assert edit.is_insertion


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (3, 3),
        ("7", 7),
        (" 12 ", 12),
        (4.0, 4),
        (1.5, None),
        ("abc", None),
        (True, None),
        (None, None),
        ([1], None),
        (float("nan"), None),
    ],
)
def test_malformed_offsets_become_none(raw: object, expected: int | None) -> None:
    edit = Edit(suggested_text="x", range_start=raw, range_end=raw)
    assert edit.range_start == expected
    assert edit.range_end == expected


def test_negative_offsets_are_kept_for_the_applier_to_reject() -> None:
    edit = Edit(suggested_text="x", range_start=-1, range_end=2)
    assert edit.range_start == -1


def test_original_text_whitespace_is_preserved() -> None:
    edit = Edit(original_text=" its ", suggested_text=" it's ", range_start=0, range_end=5)
    assert edit.original_text == " its "
    assert edit.suggested_text == " it's "


def test_missing_suggestion_stays_none() -> None:
    edit = Edit(original_text="x", range_start=0, range_end=1)
    assert edit.suggested_text is None


def test_edit_is_frozen_and_hashable() -> None:
    first = Edit(original_text="a", suggested_text="b", range_start=0, range_end=1)
    second = Edit(original_text="a", suggested_text="b", range_start=0, range_end=1)

    assert first == second
    assert len({first, second}) == 1
    with pytest.raises(ValidationError):
        first.suggested_text = "c"


def test_edit_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        Edit(suggested_text="x", range_start=0, range_end=1, confidence=0.9)


def test_dedup_key_ignores_message_and_classification() -> None:
    first = Edit(suggested_text="b", range_start=0, range_end=1, message="one", severity="low")
    second = Edit(suggested_text="b", range_start=0, range_end=1, message="two", severity="high")
    assert first.dedup_key == second.dedup_key == (0, 1, "b")
    assert first != second
