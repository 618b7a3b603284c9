"""Public model exports for the project.

Tests and other modules should import ``from proofpatch.models import Edit,
SuggestionCategory``.
"""

from __future__ import annotations

from .edit import Edit
from .enums import OverlapPolicy, Severity, SuggestionCategory

__all__ = ["Edit", "OverlapPolicy", "Severity", "SuggestionCategory"]
