"""
Per-region term dictionary with exact-region lookup.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from ..exceptions import TermDictionaryError, UnknownTermError
from .models import RegionCode, TermDictionary, TermKey

logger = logging.getLogger("banky-edu.localization")

DEFAULT_TERMS_PATH = Path(__file__).parent / "data" / "region_terms.yaml"


def parse_term_key(value: TermKey | str) -> TermKey:
    """Resolve a term-key, failing fast on anything outside the closed set.

    Raises:
        UnknownTermError: If ``value`` names no TermKey
    """
    if isinstance(value, TermKey):
        return value
    try:
        return TermKey(value)
    except ValueError:
        raise UnknownTermError(value) from None


class TermMap:
    """Read-only dictionary of localized surface strings per region.

    Built once from a validated TermDictionary and never mutated afterwards;
    the same instance is safe to share between any number of adapters and
    callers.

    Example:
        >>> terms = TermMap.default()
        >>> terms.localized_term(RegionCode.IN, TermKey.CREDIT_SCORE)
        'CIBIL'
        >>> terms.localized_term("Atlantis", "CREDIT_SCORE")
        'Credit Score'
    """

    def __init__(self, dictionary: TermDictionary) -> None:
        self._regions: Mapping[RegionCode, Mapping[TermKey, str]] = MappingProxyType(
            {region: MappingProxyType(dict(terms)) for region, terms in dictionary.regions.items()}
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TermMap:
        """Build a TermMap from a raw ``{"regions": {...}}`` document.

        Raises:
            TermDictionaryError: If a region or term-key is missing, blank,
                or unknown
        """
        try:
            dictionary = TermDictionary.model_validate(data)
        except ValidationError as e:
            raise TermDictionaryError(
                "Invalid term dictionary",
                details={"errors": e.errors(include_url=False)},
            ) from e
        return cls(dictionary)

    @classmethod
    def load_yaml(cls, path: Path) -> TermMap:
        """Load a term dictionary from a YAML file.

        Args:
            path: Path to YAML file with a top-level ``regions`` key

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
            TermDictionaryError: If the dictionary is incomplete
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict) or "regions" not in data:
            raise TermDictionaryError(
                "YAML file must contain a 'regions' key", details={"path": str(path)}
            )

        term_map = cls.from_dict({"regions": data["regions"]})
        logger.info("Loaded term dictionary for %d regions from %s", len(term_map.regions), path)
        return term_map

    @classmethod
    def default(cls) -> TermMap:
        """Return the packaged term dictionary, loaded once per process."""
        return _default_term_map()

    @property
    def regions(self) -> tuple[RegionCode, ...]:
        """Regions present in this dictionary."""
        return tuple(self._regions)

    def terms_for(self, region: RegionCode | str | None) -> Mapping[TermKey, str]:
        """Return the read-only term set of a region (unknown → Global)."""
        return self._regions[RegionCode.coerce(region)]

    def localized_term(self, region: RegionCode | str | None, term_key: TermKey | str) -> str:
        """Look up the surface string of ``term_key`` for ``region``.

        Args:
            region: Region code; anything unrecognized is treated as Global
            term_key: One of the TermKey values

        Returns:
            The region's localized string, never empty

        Raises:
            UnknownTermError: If ``term_key`` is not a TermKey
        """
        return self.terms_for(region)[parse_term_key(term_key)]


@lru_cache(maxsize=1)
def _default_term_map() -> TermMap:
    return TermMap.load_yaml(DEFAULT_TERMS_PATH)


def localized_term(region: RegionCode | str | None, term_key: TermKey | str) -> str:
    """Look up a term in the packaged dictionary."""
    return TermMap.default().localized_term(region, term_key)


__all__ = ["DEFAULT_TERMS_PATH", "TermMap", "localized_term", "parse_term_key"]
