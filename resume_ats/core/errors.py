from __future__ import annotations

import logging
import re
from typing import Any, Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class AnalysisInputError(ValueError):
    """Raised when the caller passes no resume or job description text."""


def contained(step: str, fallback: T, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run one pipeline sub-step; any failure counts as "no signal found" for that step."""
    try:
        return func(*args, **kwargs)
    except Exception as exc:
        logger.warning("ats_step_failed step=%s error=%s", step, exc)
        logger.debug("ats_step_failed_trace step=%s", step, exc_info=True)
        return fallback


def escaped_pattern(term: str, *, flags: int = re.IGNORECASE) -> re.Pattern[str] | None:
    try:
        return re.compile(re.escape(term), flags)
    except re.error as exc:
        logger.warning("ats_pattern_invalid term_len=%s error=%s", len(term), exc)
        return None


def safe_count(term: str, text: str) -> int:
    if not term or not text:
        return 0
    pattern = escaped_pattern(term)
    if pattern is None:
        return 0
    return len(pattern.findall(text))


def safe_search(pattern: str, text: str, *, flags: int = 0) -> bool:
    try:
        return re.search(pattern, text, flags) is not None
    except re.error as exc:
        logger.warning("ats_pattern_invalid pattern_len=%s error=%s", len(pattern), exc)
        return False
