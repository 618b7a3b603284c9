from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def clean_proofpatch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PROOFPATCH_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("PROOFPATCH_"):
            monkeypatch.delenv(name)
