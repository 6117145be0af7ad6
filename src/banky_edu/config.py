"""
Configuration for the education engine.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .localization import RegionCode

logger = logging.getLogger("banky-edu")

_ENV_FIELDS = {
    "BANKY_REGION": "default_region",
    "BANKY_TERMS_PATH": "terms_path",
    "BANKY_CATALOG_PATH": "catalog_path",
    "BANKY_ALLOCATOR_TOLERANCE": "allocator_tolerance",
    "BANKY_MAX_HEARTS": "max_hearts",
    "BANKY_MERCY_AFTER": "mercy_after",
}


class EducationConfig(BaseModel):
    """Settings for localization and lesson play.

    ``terms_path`` and ``catalog_path`` replace the packaged term dictionary
    and base catalog when set; leave them unset to use the packaged data.
    """

    default_region: RegionCode = Field(
        default=RegionCode.GLOBAL,
        description="Region used when the learner has not picked one"
    )
    terms_path: Path | None = Field(
        default=None,
        description="YAML term dictionary overriding the packaged one"
    )
    catalog_path: Path | None = Field(
        default=None,
        description="YAML base catalog overriding the packaged one"
    )
    allocator_tolerance: float = Field(
        default=5.0,
        gt=0.0,
        le=100.0,
        description="Percentage points a slider may be off its target"
    )
    max_hearts: int = Field(
        default=3,
        ge=1,
        description="Hearts at the start of a lesson"
    )
    mercy_after: int = Field(
        default=3,
        ge=1,
        description="Wrong attempts on one step before the answer is revealed"
    )

    @field_validator("default_region", mode="before")
    @classmethod
    def validate_default_region(cls, v: Any) -> RegionCode:
        """Unknown or empty regions fall back to Global instead of failing."""
        if isinstance(v, str):
            v = v.strip()
        return RegionCode.coerce(v or None)

    @field_validator("terms_path", "catalog_path", mode="before")
    @classmethod
    def validate_path(cls, v: Any) -> Any:
        """Treat empty strings as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


def load_config(env_file: Path | None = None, **overrides: Any) -> EducationConfig:
    """Build an EducationConfig from ``.env``, the environment and overrides.

    Explicit keyword overrides win over environment variables, which win over
    the defaults.

    Args:
        env_file: Optional .env file; the default dotenv lookup is used otherwise
        **overrides: EducationConfig fields to set directly
    """
    if not load_dotenv(env_file):
        logger.debug("No .env file loaded")

    values: dict[str, Any] = {}
    for env_name, field_name in _ENV_FIELDS.items():
        raw = os.getenv(env_name)
        if raw is not None:
            values[field_name] = raw
    values.update(overrides)

    config = EducationConfig(**values)
    logger.debug("Education config: %s", config.model_dump())
    return config


__all__ = ["EducationConfig", "load_config"]
