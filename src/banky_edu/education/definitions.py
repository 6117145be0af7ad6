"""
Splitting lesson text into plain and defined-term segments.
"""

from __future__ import annotations

import re
from typing import Sequence

from pydantic import BaseModel, Field

from .models import PlaybookDefinition


class TextSegment(BaseModel):
    """A run of text, tagged with its definition when it is a defined term."""
    text: str = Field(..., description="Text exactly as it appears in the source")
    definition: PlaybookDefinition | None = Field(
        default=None, description="The matching playbook entry, if this is a defined term"
    )

    @property
    def is_term(self) -> bool:
        return self.definition is not None


def split_with_definitions(
    text: str, definitions: Sequence[PlaybookDefinition] | None
) -> list[TextSegment]:
    """Split ``text`` so every occurrence of a defined term is its own segment.

    Terms are matched case-insensitively as literal text, longest term first,
    so "Roth IRA" wins over "IRA" at the same position. Concatenating the
    segment texts gives back ``text`` unchanged.

    Args:
        text: Lesson or playbook text
        definitions: Glossary entries to highlight

    Returns:
        Segments in order of appearance; an empty list for empty text

    Example:
        >>> defs = [PlaybookDefinition(term="Asset", definition="Puts money IN your pocket.")]
        >>> [(s.text, s.is_term) for s in split_with_definitions("Buy an asset.", defs)]
        [('Buy an ', False), ('asset', True), ('.', False)]
    """
    if not text:
        return []

    terms = [d for d in definitions or [] if d.term]
    if not terms:
        return [TextSegment(text=text)]

    by_term = {}
    for d in terms:
        # first definition of a term wins
        by_term.setdefault(d.term.lower(), d)

    ordered = sorted(by_term, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(term) for term in ordered), re.IGNORECASE)

    segments: list[TextSegment] = []
    position = 0
    for match in pattern.finditer(text):
        start, end = match.span()
        if start > position:
            segments.append(TextSegment(text=text[position:start]))
        segments.append(TextSegment(text=match.group(0), definition=by_term[match.group(0).lower()]))
        position = end
    if position < len(text):
        segments.append(TextSegment(text=text[position:]))

    return segments


__all__ = ["TextSegment", "split_with_definitions"]
