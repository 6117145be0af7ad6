"""
Regional terminology for financial-education content (US, IN, UK, EU, Global).

Maps region-independent term-keys to localized surface strings and rewrites
canonical US-style text (401k, Roth IRA, IRS, FICO, S&P 500, $) into the
region's own terms.
"""

from .models import RegionCode, TermDictionary, TermKey
from .replacer import SOURCE_PATTERNS, TextAdapter, adapt_text, default_text_adapter
from .terms import TermMap, localized_term

__all__ = [
    "RegionCode",
    "TermKey",
    "TermDictionary",
    "TermMap",
    "TextAdapter",
    "SOURCE_PATTERNS",
    "adapt_text",
    "default_text_adapter",
    "localized_term",
]
