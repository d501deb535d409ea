"""Sanitization of untrusted repository text before it reaches a prompt.

Repository descriptions are written by whoever owns the repository, so they
are treated as data: invisible characters are removed, the text is NFC
normalised, common instruction-override phrases are replaced with a marker,
and the length is capped.
"""
from __future__ import annotations

import re
import unicodedata
from typing import Optional


# ---------------------------------------------------------------------------
# Known injection patterns (case-insensitive)
# ---------------------------------------------------------------------------

_INJECTION_PATTERNS: list[re.Pattern[str]] = [
    re.compile(p, re.IGNORECASE)
    for p in [
        r"(ignore|disregard|forget|override)\s+(all\s+)?(previous|prior|above|earlier)\s+(instructions?|prompts?|rules?|context)",
        r"you\s+are\s+now\s+",
        r"pretend\s+(you\s+are|to\s+be)\s+",
        r"your\s+new\s+(role|instructions?|task|purpose)\s+",
        r"<\s*/?\s*(system|instruction|user|assistant)\s*>",
        r"\[/?INST\]",
        r"###\s*(system|instruction|user|assistant)",
    ]
]

_CONTROL_CHAR_RE = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f"
    r"\u200b-\u200f"           # Zero-width chars
    r"\u202a-\u202e"           # Bidi overrides
    r"\u2060-\u2064"           # Invisible formatters
    r"\ufeff"                  # BOM
    r"]"
)

FILTERED_MARKER = "[FILTERED]"
MAX_DESCRIPTION_LENGTH = 2000


def _strip_control_chars(text: str) -> str:
    return _CONTROL_CHAR_RE.sub("", text)


def _neutralise_injections(text: str) -> str:
    for pattern in _INJECTION_PATTERNS:
        text = pattern.sub(FILTERED_MARKER, text)
    return text


def sanitize_text(text: Optional[str], max_length: int = MAX_DESCRIPTION_LENGTH) -> str:
    """Return a cleaned copy of *text* safe to embed in a prompt.

    ``None`` becomes an empty string. The function is idempotent.
    """
    if not text:
        return ""

    text = _strip_control_chars(text)
    text = unicodedata.normalize("NFC", text)
    text = _neutralise_injections(text)

    if len(text) > max_length:
        text = text[:max_length]

    return text.strip()


__all__ = ["sanitize_text", "FILTERED_MARKER", "MAX_DESCRIPTION_LENGTH"]
