"""
Data models for regional term localization.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger("banky-edu.localization")


class RegionCode(str, Enum):
    """Regions with their own localized term set."""
    US = "US"
    IN = "IN"
    UK = "UK"
    EU = "EU"
    GLOBAL = "Global"

    @classmethod
    def coerce(cls, value: Any) -> RegionCode:
        """Map any value to a region, falling back to Global.

        Matching is exact: ``"IN"`` is India, ``"in"`` is not a known code
        and resolves to Global like any other unrecognized value.

        Example:
            >>> RegionCode.coerce("UK")
            <RegionCode.UK: 'UK'>
            >>> RegionCode.coerce("Mars")
            <RegionCode.GLOBAL: 'Global'>
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            if value is not None:
                logger.debug("Unknown region %r, using Global", value)
            return cls.GLOBAL


class TermKey(str, Enum):
    """Region-independent identifiers of localizable financial concepts."""
    CURRENCY_SYMBOL = "CURRENCY_SYMBOL"
    TAX_AGENCY = "TAX_AGENCY"
    RETIREMENT_ACC = "RETIREMENT_ACC"
    TAX_FREE_ACC = "TAX_FREE_ACC"
    CREDIT_SCORE = "CREDIT_SCORE"
    INDEX_FUND = "INDEX_FUND"
    ID_NUM = "ID_NUM"
    TAX_SECTION = "TAX_SECTION"
    CENTRAL_BANK = "CENTRAL_BANK"
    ESTATE_LAW = "ESTATE_LAW"


class TermDictionary(BaseModel):
    """Validated shape of a term dictionary document.

    Every region in RegionCode must be present and every region must carry a
    non-empty surface string for every TermKey. A region may repeat another
    region's value, but only by writing it out: lookups never fall through
    from one region to another.

    Expected YAML format:
        regions:
          US:
            CURRENCY_SYMBOL: "$"
            TAX_AGENCY: IRS
            ...
          IN:
            CURRENCY_SYMBOL: "₹"
            ...
    """
    model_config = ConfigDict(frozen=True)

    regions: dict[RegionCode, dict[TermKey, str]] = Field(
        ..., description="Region code -> term key -> localized surface string"
    )

    @field_validator("regions")
    @classmethod
    def validate_complete(
        cls, v: dict[RegionCode, dict[TermKey, str]]
    ) -> dict[RegionCode, dict[TermKey, str]]:
        """Ensure no region and no term-key is missing or blank."""
        missing_regions = [r.value for r in RegionCode if r not in v]
        if missing_regions:
            raise ValueError(f"missing regions: {', '.join(missing_regions)}")

        for region, terms in v.items():
            missing = [k.value for k in TermKey if k not in terms]
            if missing:
                raise ValueError(f"region {region.value} is missing terms: {', '.join(missing)}")
            blank = [k.value for k, surface in terms.items() if not surface]
            if blank:
                raise ValueError(f"region {region.value} has empty terms: {', '.join(blank)}")
        return v


__all__ = ["RegionCode", "TermKey", "TermDictionary"]
