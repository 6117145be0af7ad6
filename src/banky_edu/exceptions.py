"""
Exception hierarchy for banky-edu.

Localization and catalog problems are authoring or programming defects:
they surface when data is loaded or an adapter is constructed, never as
recoverable runtime conditions. Unknown region codes are not errors at all;
they fall back to the Global region.
"""

from __future__ import annotations

from typing import Any


class BankyEduError(Exception):
    """Base exception for all banky-edu errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class LocalizationError(BankyEduError):
    """Base class for term dictionary and replacer errors."""
    pass


class UnknownTermError(LocalizationError):
    """A term-key outside the closed TermKey set was requested.

    Attributes:
        term_key: The key that could not be resolved
    """

    def __init__(self, term_key: object, details: dict[str, Any] | None = None):
        super().__init__(f"Unknown term key: {term_key!r}", details)
        self.term_key = term_key


class TermDictionaryError(LocalizationError):
    """The term dictionary is incomplete or would double-substitute.

    Raised when a region or term-key is missing, a surface string is empty,
    or a region's replacement text contains a recognition pattern that is
    applied later in the same pass.
    """
    pass


class CatalogError(BankyEduError):
    """The base module catalog is malformed.

    Attributes:
        source: Where the catalog was read from, if known
    """

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.source = source


__all__ = [
    "BankyEduError",
    "LocalizationError",
    "UnknownTermError",
    "TermDictionaryError",
    "CatalogError",
]
