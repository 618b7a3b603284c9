"""JSON extraction and repair for suggestion lists returned by LLMs.

Models asked for "ONLY a JSON array" still wrap it in code fences, add
commentary, or leave trailing commas. This module digs the array out and
repairs it before parsing.
"""

from __future__ import annotations

import json
import re
from typing import Any

from json_repair import repair_json

_CODE_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)


def strip_code_fence(text: str) -> str:
    """Return the body of the first Markdown code fence, or ``text`` itself."""
    match = _CODE_FENCE.search(text)
    if match:
        return match.group(1).strip()
    return text.strip()


def extract_json_array(text: str) -> list[Any]:
    """Extract and repair a JSON array from LLM response text.

    This function:
    1. Prefers the contents of a ```json code fence when one is present
    2. Takes the span from the first ``[`` to the last ``]``
    3. Repairs common formatting issues and parses the result
    4. Unwraps ``{"suggestions": [...]}`` when the model returned an object

    Args:
        text: The response text from an LLM that should contain a JSON array

    Returns:
        The parsed list (possibly empty)

    Raises:
        ValueError: If no array can be located in the text
        json.JSONDecodeError: If the repaired text still cannot be parsed

    Example:
        >>> extract_json_array('Sure! [{"index": 0}] Hope that helps.')
        [{'index': 0}]
    """
    if not isinstance(text, str):
        raise ValueError(f"Expected string input, got {type(text)}")

    body = strip_code_fence(text)

    wrapped = _unwrap_object(body)
    if wrapped is not None:
        return wrapped

    start = body.find("[")
    end = body.rfind("]")
    if start == -1 or end <= start:
        raise ValueError("Response text does not contain a JSON array.")

    parsed = json.loads(repair_json(body[start : end + 1]))
    if not isinstance(parsed, list):
        raise ValueError(f"Expected a JSON array, got {type(parsed).__name__}")
    return parsed


def _unwrap_object(body: str) -> list[Any] | None:
    # Only worth trying when the object opens before any array does
    start_obj = body.find("{")
    start_arr = body.find("[")
    if start_obj == -1 or (start_arr != -1 and start_arr < start_obj):
        return None

    end = body.rfind("}")
    if end <= start_obj:
        return None

    try:
        parsed = json.loads(repair_json(body[start_obj : end + 1]))
    except json.JSONDecodeError:
        return None

    if isinstance(parsed, dict) and isinstance(parsed.get("suggestions"), list):
        return parsed["suggestions"]
    return None
