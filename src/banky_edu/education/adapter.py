"""
Region adaptation of the education catalog.

Produces a localized deep copy of the base modules: every text field the
learner reads goes through the TextAdapter, everything else (ids, step
types, correctness flags, percentages) is carried over unchanged. The
mapping looks at which fields are present on a step, not at its type, so a
new step type needs no change here as long as it reuses existing fields.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from ..config import EducationConfig
from ..localization import RegionCode, TermMap, TextAdapter, default_text_adapter
from .catalog import base_modules, load_modules, packaged_modules
from .models import (
    BinaryChoice,
    ConnectionPair,
    EducationModule,
    LessonStep,
    Playbook,
    PlaybookDefinition,
)


class ModuleAdapter:
    """Localizes a fixed list of base modules for any region.

    The base modules are read, never modified, so one adapter can serve every
    region; each call returns a fresh tree owned by the caller. Results are
    not cached here; callers that re-render often should memoize by region.

    Example:
        >>> adapter = ModuleAdapter(default_text_adapter(), base_modules())
        >>> modules = adapter.get_localized_modules("IN")
    """

    def __init__(
        self,
        text_adapter: TextAdapter,
        modules: Sequence[EducationModule],
        default_region: RegionCode = RegionCode.GLOBAL,
    ) -> None:
        self.text_adapter = text_adapter
        self.modules = modules
        self.default_region = default_region

    @classmethod
    def from_config(cls, config: EducationConfig) -> ModuleAdapter:
        """Build an adapter over the configured term dictionary and catalog.

        Paths left unset in ``config`` use the packaged data.
        """
        term_map = TermMap.load_yaml(config.terms_path) if config.terms_path else TermMap.default()
        modules = load_modules(config.catalog_path) if config.catalog_path else base_modules()
        return cls(TextAdapter(term_map), modules, default_region=config.default_region)

    def get_localized_modules(self, region: RegionCode | str | None = None) -> list[EducationModule]:
        """Return a localized, independent copy of every base module.

        Args:
            region: Target region; None uses the adapter's default region and
                any unrecognized code is treated as Global
        """
        region = self.default_region if region is None else RegionCode.coerce(region)
        return [self.adapt_module(module, region) for module in self.modules]

    def adapt_module(self, module: EducationModule, region: RegionCode) -> EducationModule:
        adapt = self._adapter_for(region)
        update: dict[str, Any] = {
            "title": adapt(module.title),
            "description": adapt(module.description),
            "steps": [self.adapt_step(step, region) for step in module.steps],
        }
        if module.playbook is not None:
            update["playbook"] = self.adapt_playbook(module.playbook, region)
        return module.model_copy(update=update)

    def adapt_playbook(self, playbook: Playbook, region: RegionCode) -> Playbook:
        adapt = self._adapter_for(region)
        return Playbook(
            summary=adapt(playbook.summary),
            real_life_example=adapt(playbook.real_life_example),
            definitions=[
                PlaybookDefinition(term=adapt(d.term), definition=adapt(d.definition))
                for d in playbook.definitions
            ],
            actionable_steps=[adapt(s) for s in playbook.actionable_steps],
        )

    def adapt_step(self, step: LessonStep, region: RegionCode) -> LessonStep:
        """Localize one step, keeping absent field groups absent.

        ``correct_answer_explanation`` is the one exception: when missing it
        comes back as an empty string.
        """
        adapt = self._adapter_for(region)
        update: dict[str, Any] = {
            "content": adapt(step.content),
            "correct_answer_explanation": adapt(step.correct_answer_explanation or ""),
        }

        if step.options is not None:
            update["options"] = [
                o.model_copy(update={"text": adapt(o.text), "feedback": adapt(o.feedback)})
                for o in step.options
            ]
        if step.scenario_options is not None:
            update["scenario_options"] = [
                o.model_copy(update={"text": adapt(o.text), "feedback": adapt(o.feedback)})
                for o in step.scenario_options
            ]
        if step.connection_pairs is not None:
            update["connection_pairs"] = [
                ConnectionPair(term=adapt(p.term), match=adapt(p.match))
                for p in step.connection_pairs
            ]
        if step.fill_blank_correct is not None:
            update["fill_blank_correct"] = adapt(step.fill_blank_correct)
        if step.fill_blank_options is not None:
            update["fill_blank_options"] = [adapt(o) for o in step.fill_blank_options]
        if step.sort_correct_order is not None:
            update["sort_correct_order"] = [adapt(o) for o in step.sort_correct_order]
        if step.allocator_categories is not None:
            # percentages are copied by value; only the label is text
            update["allocator_categories"] = [
                c.model_copy(update={"label": adapt(c.label)})
                for c in step.allocator_categories
            ]
        if step.selector_target_phrases is not None:
            update["selector_target_phrases"] = [adapt(p) for p in step.selector_target_phrases]
        if step.binary_left is not None:
            update["binary_left"] = self._adapt_binary(step.binary_left, region)
        if step.binary_right is not None:
            update["binary_right"] = self._adapt_binary(step.binary_right, region)

        return step.model_copy(update=update)

    def _adapt_binary(self, choice: BinaryChoice, region: RegionCode) -> BinaryChoice:
        adapt = self._adapter_for(region)
        return choice.model_copy(update={"label": adapt(choice.label), "feedback": adapt(choice.feedback)})

    def _adapter_for(self, region: RegionCode) -> Callable[[str], str]:
        return lambda text: self.text_adapter.adapt(text, region)


def get_localized_modules(region: RegionCode | str | None) -> list[EducationModule]:
    """Localize the packaged base catalog for ``region``."""
    return ModuleAdapter(default_text_adapter(), packaged_modules()).get_localized_modules(region)


__all__ = ["ModuleAdapter", "get_localized_modules"]
