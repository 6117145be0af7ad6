"""
Loading of the base (canonical, US-style) education catalog.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..exceptions import CatalogError
from .models import EducationModule

logger = logging.getLogger("banky-edu.education")

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "base_modules.yaml"


def parse_modules(data: Any, source: str | None = None) -> list[EducationModule]:
    """Validate a raw catalog document into EducationModule objects.

    Args:
        data: Parsed document with a top-level ``modules`` list
        source: Where the document came from, for error messages

    Raises:
        CatalogError: If ``modules`` is missing or a module fails validation
    """
    if not isinstance(data, dict) or not isinstance(data.get("modules"), list):
        raise CatalogError("Catalog must contain a 'modules' list", source=source)

    modules: list[EducationModule] = []
    for index, raw in enumerate(data["modules"]):
        try:
            modules.append(EducationModule.model_validate(raw))
        except ValidationError as e:
            module_id = raw.get("id") if isinstance(raw, dict) else None
            raise CatalogError(
                f"Invalid module at index {index} ({module_id or 'no id'})",
                source=source,
                details={"errors": e.errors(include_url=False)},
            ) from e

    seen: set[str] = set()
    for module in modules:
        if module.id in seen:
            raise CatalogError(f"Duplicate module id: {module.id}", source=source)
        seen.add(module.id)

    return modules


def load_modules(path: Path) -> list[EducationModule]:
    """Load a catalog from a YAML file.

    Expected YAML format (camelCase keys, as authored):
        modules:
          - id: unit-1
            title: The Money Mindset
            xpReward: 100
            category: Basics
            estimatedTime: 5m
            steps:
              - id: "1-1"
                type: info
                content: ...

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        yaml.YAMLError: If the YAML is malformed
        CatalogError: If the catalog shape is invalid
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    modules = parse_modules(data, source=str(path))
    logger.info("Loaded %d education modules from %s", len(modules), path)
    return modules


@lru_cache(maxsize=1)
def packaged_modules() -> tuple[EducationModule, ...]:
    """Return the packaged base catalog, loaded once per process.

    The modules are shared by every caller. Nothing in this package modifies
    them; callers outside it should use base_modules() instead.
    """
    return tuple(load_modules(DEFAULT_CATALOG_PATH))


def base_modules() -> list[EducationModule]:
    """Return a private copy of the packaged base catalog.

    Changing the returned modules does not affect the shared catalog or any
    later localization.
    """
    return [module.model_copy(deep=True) for module in packaged_modules()]


__all__ = ["DEFAULT_CATALOG_PATH", "base_modules", "load_modules", "packaged_modules", "parse_modules"]
