"""
banky-edu: regional localization of Banky's financial-education content.

The base catalog is authored once in US style; ``get_localized_modules``
rewrites it for a region (US, IN, UK, EU, Global) as a fresh copy the caller
owns.
"""

from .config import EducationConfig, load_config
from .education import ModuleAdapter, get_localized_modules
from .exceptions import (
    BankyEduError,
    CatalogError,
    LocalizationError,
    TermDictionaryError,
    UnknownTermError,
)
from .localization import RegionCode, TermKey, TermMap, TextAdapter, adapt_text, localized_term

__version__ = "0.1.0"

__all__ = [
    "EducationConfig",
    "load_config",
    "ModuleAdapter",
    "get_localized_modules",
    "BankyEduError",
    "CatalogError",
    "LocalizationError",
    "TermDictionaryError",
    "UnknownTermError",
    "RegionCode",
    "TermKey",
    "TermMap",
    "TextAdapter",
    "adapt_text",
    "localized_term",
]
