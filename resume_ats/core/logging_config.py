from __future__ import annotations

import logging

from resume_ats.core.config import settings


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or settings.log_level, format="%(message)s")


def clip_for_log(text: str | None) -> str:
    value = (text or "").replace("\n", " ")
    limit = settings.log_message_max_chars
    if len(value) <= limit:
        return value
    return value[:limit] + "..."
