from __future__ import annotations

from typing import Protocol


class TaxonomyProvider(Protocol):
    def normalize_skill(self, raw: str) -> str:
        """Return the canonical form of a skill term."""

    def lookup_typo(self, raw: str) -> str | None:
        """Return the correction for an exactly known misspelling, if any."""

    @property
    def typo_keys(self) -> tuple[str, ...]:
        """Known spellings the autocorrect step may fuzzily snap to."""
