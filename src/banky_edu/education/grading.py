"""
Answer checking and lesson progress for education steps.

The checks take a (usually localized) LessonStep and the learner's input and
say whether it is right; LessonProgress keeps hearts, combo and the per-step
wrong-attempt count that triggers the mercy rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence

from ..config import EducationConfig
from .models import LessonStep, StepType

DEFAULT_ALLOCATOR_TOLERANCE = 5.0
DEFAULT_MAX_HEARTS = 3
DEFAULT_MERCY_AFTER = 3

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


class SortResult(str, Enum):
    """State of a sorting step after the learner places an item."""
    WRONG = "wrong"
    PARTIAL = "partial"
    COMPLETE = "complete"


class Outcome(str, Enum):
    """Result of recording an answer in LessonProgress."""
    CORRECT = "correct"
    WRONG = "wrong"
    MERCY = "mercy"


def check_puzzle(step: LessonStep, answer: str) -> bool:
    """Compare a decoded word, ignoring case and surrounding whitespace."""
    if not step.puzzle_word:
        return False
    return answer.strip().upper() == step.puzzle_word.upper()


def check_fill_blank(step: LessonStep, choice: str) -> bool:
    return step.fill_blank_correct is not None and choice == step.fill_blank_correct


def check_sort_prefix(step: LessonStep, placed: Sequence[str]) -> SortResult:
    """Check the items placed so far against the correct order.

    Every placed item must sit at its correct index; the step is complete
    once all items are placed.
    """
    correct = step.sort_correct_order or []
    if len(placed) > len(correct):
        return SortResult.WRONG
    for index, item in enumerate(placed):
        if item != correct[index]:
            return SortResult.WRONG
    if len(placed) == len(correct):
        return SortResult.COMPLETE
    return SortResult.PARTIAL


def is_connection_match(step: LessonStep, first: str, second: str) -> bool:
    """Whether two picked items form one of the step's pairs, in either order."""
    return any(
        (pair.term == first and pair.match == second) or (pair.match == first and pair.term == second)
        for pair in step.connection_pairs or []
    )


def check_allocator(
    step: LessonStep,
    values: Mapping[str, float],
    tolerance: float = DEFAULT_ALLOCATOR_TOLERANCE,
) -> bool:
    """Whether every slider is strictly within ``tolerance`` points of its target.

    Args:
        step: A slider-allocator step
        values: Current slider value per category label
        tolerance: Allowed distance from the target, exclusive
    """
    for category in step.allocator_categories or []:
        if category.label not in values:
            return False
        if abs(values[category.label] - category.target_percent) >= tolerance:
            return False
    return True


def is_selector_target(step: LessonStep, word: str) -> bool:
    """Whether a clicked word belongs to one of the step's target phrases.

    Punctuation is stripped from the word first; a word matches a phrase when
    either contains the other, ignoring case.
    """
    clean = _NON_ALNUM.sub("", word).lower()
    if not clean:
        return False
    return any(
        clean in phrase.lower() or phrase.lower() in clean
        for phrase in step.selector_target_phrases or []
    )


def compose_feedback(step: LessonStep, feedback: str) -> str:
    """Append the step's explanation to the feedback of a correct answer."""
    if step.correct_answer_explanation:
        return f"{feedback} {step.correct_answer_explanation}"
    return feedback


def _format_percent(value: float) -> str:
    # whole numbers without ".0", anything else at full precision
    if value.is_integer():
        return str(int(value))
    return repr(value)


def reveal_answer(step: LessonStep) -> str:
    """Text shown when the mercy rule gives the answer away.

    The explanation, if any, follows after a blank line.
    """
    answer = "The correct answer is shown above."

    if step.type == StepType.PUZZLE:
        answer = f"The word was: {step.puzzle_word}"
    elif step.type == StepType.FILL_BLANK:
        answer = f"The answer is: {step.fill_blank_correct}"
    elif step.type == StepType.SORTING:
        answer = f"Correct order: {' → '.join(step.sort_correct_order or [])}"
    elif step.type == StepType.QUESTION:
        correct = next((o for o in step.options or [] if o.is_correct), None)
        answer = f"Correct answer: {correct.text if correct else ''}"
    elif step.type == StepType.SCENARIO:
        correct = next((o for o in step.scenario_options or [] if o.is_correct), None)
        answer = f"Best choice: {correct.text if correct else ''}"
    elif step.type == StepType.SLIDER_ALLOCATOR:
        targets = ", ".join(
            f"{c.label}: {_format_percent(c.target_percent)}%" for c in step.allocator_categories or []
        )
        answer = f"Target: {targets}"
    elif step.type == StepType.TEXT_SELECTOR:
        answer = "Look for the red highlighted words."
    elif step.type in (StepType.BINARY_CHOICE, StepType.CARD_SWIPE):
        if step.binary_left and step.binary_left.is_correct:
            answer = step.binary_left.label
        else:
            answer = step.binary_right.label if step.binary_right else ""

    if step.correct_answer_explanation:
        return f"{answer}\n\n{step.correct_answer_explanation}"
    return answer


@dataclass
class LessonProgress:
    """Hearts, combo and wrong attempts for one run through a lesson.

    Attributes:
        hearts: Lives left; a wrong answer costs one
        combo: Correct answers in a row
        wrong_attempts: Wrong answers on the current step
        mercy_after: Wrong attempts on one step before the answer is revealed
        allocator_tolerance: Percentage points a slider may be off its target
    """
    hearts: int = DEFAULT_MAX_HEARTS
    combo: int = 0
    wrong_attempts: int = 0
    mercy_after: int = DEFAULT_MERCY_AFTER
    allocator_tolerance: float = DEFAULT_ALLOCATOR_TOLERANCE

    @classmethod
    def from_config(cls, config: EducationConfig) -> LessonProgress:
        return cls(
            hearts=config.max_hearts,
            mercy_after=config.mercy_after,
            allocator_tolerance=config.allocator_tolerance,
        )

    def check_allocator(self, step: LessonStep, values: Mapping[str, float]) -> bool:
        """Check a slider-allocator answer with this lesson's tolerance."""
        return check_allocator(step, values, tolerance=self.allocator_tolerance)

    def record(self, correct: bool) -> Outcome:
        """Record an answer on the current step.

        The answer that reaches ``mercy_after`` wrong attempts reveals the
        solution instead of costing a heart.
        """
        if correct:
            self.combo += 1
            return Outcome.CORRECT

        self.wrong_attempts += 1
        if self.wrong_attempts >= self.mercy_after:
            return Outcome.MERCY

        self.hearts = max(0, self.hearts - 1)
        self.combo = 0
        return Outcome.WRONG

    def record_mismatch(self) -> None:
        """A wrong connection pick costs a heart but is not a wrong attempt."""
        self.hearts = max(0, self.hearts - 1)

    def next_step(self) -> None:
        self.wrong_attempts = 0

    @property
    def out_of_hearts(self) -> bool:
        return self.hearts == 0


__all__ = [
    "SortResult",
    "Outcome",
    "LessonProgress",
    "check_puzzle",
    "check_fill_blank",
    "check_sort_prefix",
    "is_connection_match",
    "check_allocator",
    "is_selector_target",
    "compose_feedback",
    "reveal_answer",
]
