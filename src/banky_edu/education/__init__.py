"""
Education modules: base catalog, region adaptation, grading and rewards.
"""

from .adapter import ModuleAdapter, get_localized_modules
from .catalog import base_modules, load_modules, parse_modules
from .definitions import TextSegment, split_with_definitions
from .grading import (
    LessonProgress,
    Outcome,
    SortResult,
    check_allocator,
    check_fill_blank,
    check_puzzle,
    check_sort_prefix,
    compose_feedback,
    is_connection_match,
    is_selector_target,
    reveal_answer,
)
from .models import (
    AllocatorCategory,
    BinaryChoice,
    ConnectionPair,
    EducationModule,
    LessonOption,
    LessonStep,
    ModuleCategory,
    Playbook,
    PlaybookDefinition,
    ScenarioOption,
    StepType,
)
from .rewards import LOOT_TABLE, LootItem, Rarity, draw_loot, find_loot

__all__ = [
    "ModuleAdapter",
    "get_localized_modules",
    "base_modules",
    "load_modules",
    "parse_modules",
    "TextSegment",
    "split_with_definitions",
    "LessonProgress",
    "Outcome",
    "SortResult",
    "check_allocator",
    "check_fill_blank",
    "check_puzzle",
    "check_sort_prefix",
    "compose_feedback",
    "is_connection_match",
    "is_selector_target",
    "reveal_answer",
    "AllocatorCategory",
    "BinaryChoice",
    "ConnectionPair",
    "EducationModule",
    "LessonOption",
    "LessonStep",
    "ModuleCategory",
    "Playbook",
    "PlaybookDefinition",
    "ScenarioOption",
    "StepType",
    "LOOT_TABLE",
    "LootItem",
    "Rarity",
    "draw_loot",
    "find_loot",
]
