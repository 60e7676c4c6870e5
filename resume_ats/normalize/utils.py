from __future__ import annotations

import re
from typing import Any

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·+"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))")
_BULLET_PREFIX = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]+|\d+[\.\)])\s*")
# Word chars, whitespace and technical punctuation survive normalization.
_NON_TECHNICAL = re.compile(r"[^\w\s.+#\-/()]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: Any) -> str:
    """Clean raw text for tokenization.

    Keeps alphanumerics and the technical punctuation ``. + # - / ( )``;
    every other character becomes a space and whitespace is collapsed.
    Anything that is not a string yields an empty string.
    """
    if not isinstance(text, str) or not text:
        return ""
    cleaned = _WHITESPACE.sub(" ", text)
    cleaned = _NON_TECHNICAL.sub(" ", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()


def normalize_line(line: str) -> str:
    return _WHITESPACE.sub(" ", line).strip()


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PREFIX.sub("", line).strip()
