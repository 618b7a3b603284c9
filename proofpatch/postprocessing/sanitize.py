"""Input clean-up applied before text is checked or patched."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_TAG_HINT = re.compile(r"<[A-Za-z/!]")
# C0 and C1 control characters, keeping tab, newline and carriage return
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def strip_markup(text: str) -> str:
    """Remove HTML tags but keep their text content.

    Script and style blocks are dropped entirely.
    """
    if not _TAG_HINT.search(text):
        return text
    soup = BeautifulSoup(text, "html.parser")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text()


def sanitize_text(text: object) -> str:
    """Return ``text`` with markup, control characters and CRLF line endings removed.

    Non-string input yields an empty string. Offsets reported by the model
    refer to the sanitised text, so this must run before the check.
    """
    if not isinstance(text, str):
        return ""

    cleaned = strip_markup(text)
    cleaned = _CONTROL_CHARS.sub("", cleaned)
    cleaned = cleaned.replace("\r\n", "\n").replace("\r", "\n")
    return cleaned.strip()
