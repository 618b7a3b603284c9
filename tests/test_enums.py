from __future__ import annotations

import pytest

from proofpatch.models import OverlapPolicy, Severity, SuggestionCategory


def test_category_values() -> None:
    assert SuggestionCategory.GRAMMAR.value == "Grammar"
    assert set(SuggestionCategory.all_values()) == {"Grammar", "Style", "Clarity", "Enhancement"}


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Grammar", SuggestionCategory.GRAMMAR),
        ("clarity", SuggestionCategory.CLARITY),
        ("  ENHANCEMENT ", SuggestionCategory.ENHANCEMENT),
        ("spelling", SuggestionCategory.GRAMMAR),
        ("punctuation", SuggestionCategory.GRAMMAR),
        ("tone", SuggestionCategory.STYLE),
        ("readability", SuggestionCategory.CLARITY),
        ("made-up", SuggestionCategory.GRAMMAR),
        (None, SuggestionCategory.GRAMMAR),
        (SuggestionCategory.STYLE, SuggestionCategory.STYLE),
    ],
)
def test_category_coerce(raw: object, expected: SuggestionCategory) -> None:
    assert SuggestionCategory.coerce(raw) is expected


def test_severity_coerce_defaults_to_medium() -> None:
    assert Severity.coerce("HIGH") is Severity.HIGH
    assert Severity.coerce("low") is Severity.LOW
    assert Severity.coerce("critical") is Severity.MEDIUM
    assert Severity.coerce("") is Severity.MEDIUM


def test_severity_weights_are_ordered() -> None:
    assert Severity.LOW.weight < Severity.MEDIUM.weight < Severity.HIGH.weight
    assert Severity.MEDIUM.weight == 1.0


def test_overlap_policy_values() -> None:
    assert OverlapPolicy.all_values() == ["first", "severity"]
