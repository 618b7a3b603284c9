"""Settings for the correction pipeline, read from the environment.

Values can also come from a ``.env`` file; pass its path to
:func:`load_settings` (the CLI exposes this as ``--dotenv``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from proofpatch.llm import DEFAULT_MAX_MESSAGE_LENGTH
from proofpatch.models import OverlapPolicy

ENV_PREFIX = "PROOFPATCH"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CorrectionSettings:
    """Knobs for :func:`proofpatch.pipeline.correct_text`."""

    # None leaves overlap handling to the patch applier (first listed wins)
    overlap_policy: OverlapPolicy | None = None
    require_match: bool = True
    max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH
    log_level: str = "WARNING"


def _read_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _read_policy(name: str) -> OverlapPolicy | None:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return None
    try:
        return OverlapPolicy(raw)
    except ValueError as exc:
        raise ValueError(
            f"{name} must be one of {OverlapPolicy.all_values()}, got {raw!r}"
        ) from exc


def _read_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name, "").strip().upper()
    if not raw:
        return default
    if raw not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {list(LOG_LEVELS)}, got {raw!r}")
    return raw


def _read_positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(dotenv_path: str | Path | None = None) -> CorrectionSettings:
    """Build settings from ``PROOFPATCH_*`` environment variables.

    Args:
        dotenv_path: Optional ``.env`` file loaded first. Existing environment
            variables take precedence over the file.

    Raises:
        ValueError: If a variable holds a value that cannot be interpreted
    """
    if dotenv_path is not None:
        load_dotenv(dotenv_path=str(dotenv_path))

    return CorrectionSettings(
        overlap_policy=_read_policy(f"{ENV_PREFIX}_OVERLAP_POLICY"),
        require_match=_read_bool(f"{ENV_PREFIX}_REQUIRE_MATCH", True),
        max_message_length=_read_positive_int(
            f"{ENV_PREFIX}_MAX_MESSAGE_LENGTH", DEFAULT_MAX_MESSAGE_LENGTH
        ),
        log_level=_read_log_level(f"{ENV_PREFIX}_LOG_LEVEL", "WARNING"),
    )
