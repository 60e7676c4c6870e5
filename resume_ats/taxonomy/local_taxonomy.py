from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from resume_ats.core.config import settings

from .provider import TaxonomyProvider

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def _clean(raw: str) -> str:
    return _WHITESPACE.sub(" ", (raw or "").strip().lower())


class LocalTaxonomy(TaxonomyProvider):
    """Static synonym and typo tables loaded from JSON once, read-only afterwards."""

    def __init__(
        self,
        synonyms_path: str | Path | None = None,
        typos_path: str | Path | None = None,
    ) -> None:
        synonyms_file = Path(synonyms_path) if synonyms_path else settings.taxonomy_dir / "synonyms.json"
        typos_file = Path(typos_path) if typos_path else settings.taxonomy_dir / "typos.json"
        self._synonyms: Mapping[str, str] = MappingProxyType(self._load_table(synonyms_file))
        self._typos: Mapping[str, str] = MappingProxyType(self._load_table(typos_file))
        self._typo_keys = tuple(self._typos)
        self._check_idempotent()
        logger.debug(
            "taxonomy_loaded synonyms=%s typos=%s",
            len(self._synonyms),
            len(self._typos),
        )

    @staticmethod
    def _load_table(path: Path) -> dict[str, str]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise ValueError(f"Taxonomy table '{path}' must be a JSON object.")
        return {_clean(str(key)): _clean(str(value)) for key, value in raw.items()}

    def _check_idempotent(self) -> None:
        for alias, canonical in self._synonyms.items():
            target = self._synonyms.get(canonical, canonical)
            if target != canonical:
                raise ValueError(
                    f"Synonym table is not idempotent: '{alias}' -> '{canonical}' -> '{target}'."
                )

    @property
    def synonyms(self) -> Mapping[str, str]:
        return self._synonyms

    @property
    def typo_keys(self) -> tuple[str, ...]:
        return self._typo_keys

    def normalize_skill(self, raw: str) -> str:
        cleaned = _clean(raw)
        return self._synonyms.get(cleaned, cleaned)

    def lookup_typo(self, raw: str) -> str | None:
        return self._typos.get(_clean(raw))
