"""
Literal, ordered rewriting of canonical (US-style) terms into regional terms.
"""

from __future__ import annotations

from functools import lru_cache
from typing import overload

from ..exceptions import TermDictionaryError
from .models import RegionCode, TermKey
from .terms import TermMap

# Recognition patterns in authored text, applied in this order.
# The bare currency sign must stay last: earlier replacements may insert "$".
SOURCE_PATTERNS: tuple[tuple[str, TermKey], ...] = (
    ("401k", TermKey.RETIREMENT_ACC),
    ("Roth IRA", TermKey.TAX_FREE_ACC),
    ("IRS", TermKey.TAX_AGENCY),
    ("FICO", TermKey.CREDIT_SCORE),
    ("S&P 500", TermKey.INDEX_FUND),
    ("$", TermKey.CURRENCY_SYMBOL),
)


class TextAdapter:
    """Rewrites canonical terms in free text for a region.

    Each recognition pattern is replaced everywhere it occurs, literally and
    case-sensitively, with the region's surface string for its bound
    term-key. There is no word-boundary check: a pattern also matches inside
    longer words.

    On construction every region is checked so that no replacement contains
    a pattern applied later in the pass, which would otherwise be rewritten a
    second time (e.g. a replacement carrying "$" before the currency rule).
    The check looks at each replacement on its own. A replacement that only
    forms a later pattern together with the authored text around it (one
    ending in "IR" placed right before an "S") is not caught and will be
    rewritten by the later rule.

    Example:
        >>> adapter = TextAdapter(TermMap.default())
        >>> adapter.adapt("Max out your 401k before buying S&P 500.", "UK")
        'Max out your Pension before buying FTSE 100.'
    """

    def __init__(
        self,
        term_map: TermMap,
        patterns: tuple[tuple[str, TermKey], ...] = SOURCE_PATTERNS,
    ) -> None:
        self.term_map = term_map
        self.patterns = patterns
        self._rules: dict[RegionCode, tuple[tuple[str, str], ...]] = {
            region: tuple(
                (pattern, term_map.localized_term(region, key)) for pattern, key in patterns
            )
            for region in term_map.regions
        }
        self._check_no_rematch()

    def _check_no_rematch(self) -> None:
        for region, rules in self._rules.items():
            for i, (pattern, replacement) in enumerate(rules):
                for later_pattern, _ in rules[i + 1:]:
                    if later_pattern in replacement:
                        raise TermDictionaryError(
                            f"Replacement {replacement!r} for {pattern!r} in region "
                            f"{region.value} would be rewritten again by {later_pattern!r}",
                            details={
                                "region": region.value,
                                "pattern": pattern,
                                "replacement": replacement,
                                "later_pattern": later_pattern,
                            },
                        )

    @overload
    def adapt(self, text: str, region: RegionCode | str | None) -> str: ...

    @overload
    def adapt(self, text: None, region: RegionCode | str | None) -> None: ...

    def adapt(self, text: str | None, region: RegionCode | str | None) -> str | None:
        """Return ``text`` with every recognized canonical term localized.

        Args:
            text: Authored text; empty or None is returned as-is
            region: Target region; anything unrecognized is treated as Global

        Returns:
            The adapted text
        """
        if not text:
            return text

        adapted = text
        for pattern, replacement in self._rules[RegionCode.coerce(region)]:
            adapted = adapted.replace(pattern, replacement)
        return adapted


@lru_cache(maxsize=1)
def default_text_adapter() -> TextAdapter:
    """Return the adapter over the packaged term dictionary."""
    return TextAdapter(TermMap.default())


def adapt_text(text: str | None, region: RegionCode | str | None) -> str | None:
    """Localize ``text`` for ``region`` using the packaged term dictionary."""
    return default_text_adapter().adapt(text, region)


__all__ = ["SOURCE_PATTERNS", "TextAdapter", "adapt_text", "default_text_adapter"]
