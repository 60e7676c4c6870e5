from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_ROOT = _CONFIG_DIR.parents[1]


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_path(name: str, default: Path) -> Path:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_message_max_chars: int
    scoring_config_path: Path
    taxonomy_dir: Path


settings = Settings(
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
    log_message_max_chars=_get_env_int("LOG_MESSAGE_MAX_CHARS", 800),
    scoring_config_path=_get_env_path("SCORING_CONFIG_PATH", _CONFIG_DIR / "scoring.yaml"),
    taxonomy_dir=_get_env_path("TAXONOMY_DIR", _PACKAGE_ROOT / "taxonomy"),
)

if settings.log_message_max_chars <= 0:
    raise RuntimeError("LOG_MESSAGE_MAX_CHARS must be greater than 0.")
