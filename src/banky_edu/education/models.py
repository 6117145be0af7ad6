"""
Data models for education modules, lessons and playbooks.

Attribute names are snake_case; every model also accepts and dumps the
camelCase names the catalog is authored in (``fillBlankCorrect``,
``targetPercent``, ...). Dump for consumers with
``model_dump(by_alias=True, exclude_none=True)`` so absent optional fields
stay absent.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CatalogModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StepType(str, Enum):
    """Interaction shape of a lesson step."""
    INFO = "info"
    QUESTION = "question"
    PUZZLE = "puzzle"
    SORTING = "sorting"
    FILL_BLANK = "fill-blank"
    SCENARIO = "scenario"
    CONNECTIONS = "connections"
    SLIDER_ALLOCATOR = "slider-allocator"
    TEXT_SELECTOR = "text-selector"
    BINARY_CHOICE = "binary-choice"
    CARD_SWIPE = "card-swipe"


class ModuleCategory(str, Enum):
    """Map section a module belongs to."""
    BASICS = "Basics"
    INVESTING = "Investing"
    TAXES = "Taxes"
    BUSINESS = "Business"
    CREDIT = "Credit"
    ASSETS = "Assets"
    ECONOMICS = "Economics"
    ADVANCED = "Advanced"
    ADVENTURE = "Adventure"


class LessonOption(_CatalogModel):
    """A multiple-choice answer."""
    id: str = Field(..., description="Option identifier within the step")
    text: str = Field(..., description="Displayed answer text")
    is_correct: bool = Field(..., description="Whether this answer is right")
    feedback: str = Field(..., description="Shown after the option is picked")


class ScenarioOption(_CatalogModel):
    """A choice in a scenario step."""
    text: str
    is_correct: bool
    feedback: str


class ConnectionPair(_CatalogModel):
    """A term and the item it must be connected to."""
    term: str
    match: str


class AllocatorCategory(_CatalogModel):
    """A slider in a slider-allocator step.

    Only ``label`` is text; the percentages are targets and starting
    positions and never change with the region.
    """
    label: str
    target_percent: float = Field(..., ge=0, le=100)
    start_percent: float = Field(..., ge=0, le=100)


class BinaryChoice(_CatalogModel):
    """One side of a binary-choice or card-swipe step."""
    label: str
    is_correct: bool
    feedback: str


class LessonStep(_CatalogModel):
    """One interactive unit of a lesson.

    ``type`` tells the renderer which interaction to show. Which optional
    field groups are filled in depends on the type, but nothing here enforces
    that pairing; the catalog authors own it.
    """
    id: str = Field(..., description="Step identifier, e.g. '1-3'")
    type: StepType = Field(..., description="Interaction shape")
    content: str = Field(..., description="Prompt or info text")
    options: list[LessonOption] | None = Field(default=None, description="Multiple-choice answers")
    info_blurb: str | None = None
    hint: str | None = None
    correct_answer_explanation: str | None = Field(
        default=None, description="Shown after a correct answer or a mercy reveal"
    )

    # puzzle
    puzzle_word: str | None = None
    scramble: str | None = None

    # sorting
    sort_correct_order: list[str] | None = None

    # fill-blank
    fill_blank_correct: str | None = None
    fill_blank_options: list[str] | None = None

    # scenario
    scenario_options: list[ScenarioOption] | None = None

    # connections
    connection_pairs: list[ConnectionPair] | None = None

    # slider-allocator
    allocator_categories: list[AllocatorCategory] | None = None

    # text-selector
    selector_target_phrases: list[str] | None = Field(
        default=None, description="Words or phrases the learner has to click"
    )

    # binary-choice / card-swipe
    binary_left: BinaryChoice | None = None
    binary_right: BinaryChoice | None = None


class PlaybookDefinition(_CatalogModel):
    """A glossary entry shown in a module's playbook."""
    term: str
    definition: str


class Playbook(_CatalogModel):
    """Summary block attached to a module, separate from its steps."""
    summary: str
    real_life_example: str
    definitions: list[PlaybookDefinition] = Field(default_factory=list)
    actionable_steps: list[str] = Field(default_factory=list)


class EducationModule(_CatalogModel):
    """A unit on the learning map."""
    id: str = Field(..., description="Module identifier, e.g. 'unit-11'")
    title: str
    description: str
    xp_reward: int = Field(..., ge=0, description="XP granted on completion")
    is_completed: bool = False
    category: ModuleCategory
    estimated_time: str = Field(..., description="Display duration, e.g. '6m'")
    playbook: Playbook | None = None
    steps: list[LessonStep] = Field(default_factory=list)


__all__ = [
    "StepType",
    "ModuleCategory",
    "LessonOption",
    "ScenarioOption",
    "ConnectionPair",
    "AllocatorCategory",
    "BinaryChoice",
    "LessonStep",
    "PlaybookDefinition",
    "Playbook",
    "EducationModule",
]
