"""Parsing of raw LLM responses into suggestion edits."""

from __future__ import annotations

from .json_utils import extract_json_array, strip_code_fence
from .response_parser import (
    DEFAULT_MAX_MESSAGE_LENGTH,
    SuggestionParseError,
    edit_from_mapping,
    parse_suggestions,
)

__all__ = [
    "DEFAULT_MAX_MESSAGE_LENGTH",
    "SuggestionParseError",
    "edit_from_mapping",
    "extract_json_array",
    "parse_suggestions",
    "strip_code_fence",
]
