"""
Style descriptor - the short tag string sent to the generation service.

A descriptor is a comma-delimited list of genre, instrument and mood tags
that must fit a hard character budget. This module parses, classifies and
compresses descriptors without losing the most informative tags.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from chuk_music_prompts.constants import (
    DEFAULT_PRIORITY_ORDER,
    STYLE_MAX_ELEMENTS,
    STYLE_MAX_LENGTH,
    STYLE_MIN_ELEMENTS,
    STYLE_SEPARATOR,
    ErrorMessages,
    StyleCategory,
)
from chuk_music_prompts.errors import EmptyDescriptorError, LengthExceededError
from chuk_music_prompts.vocabulary import (
    GENRE_STEMS,
    STYLE_GENRES,
    STYLE_INSTRUMENTS,
    STYLE_MOODS,
)

_GENRES_LOWER = frozenset(g.lower() for g in STYLE_GENRES)
_INSTRUMENTS_LOWER = tuple(sorted(i.lower() for i in STYLE_INSTRUMENTS))
_MOODS_LOWER = tuple(sorted(m.lower() for m in STYLE_MOODS))


@dataclass(frozen=True)
class StructuredStyle:
    """Descriptor elements grouped by category."""

    genres: list[str] = field(default_factory=list)
    instruments: list[str] = field(default_factory=list)
    moods: list[str] = field(default_factory=list)
    other: list[str] = field(default_factory=list)

    def bucket(self, category: StyleCategory) -> list[str]:
        """Get the elements of one category."""
        return {
            StyleCategory.GENRE: self.genres,
            StyleCategory.INSTRUMENT: self.instruments,
            StyleCategory.MOOD: self.moods,
            StyleCategory.OTHER: self.other,
        }[category]


@dataclass(frozen=True)
class StyleStats:
    """Summary numbers for a descriptor."""

    length: int
    element_count: int
    average_element_length: int
    genre_count: int
    instrument_count: int
    mood_count: int


# ---------------------------------------------------------------------------
# Element-level helpers (work on raw strings, no budget enforcement)
# ---------------------------------------------------------------------------


def split_elements(text: str) -> list[str]:
    """Split on commas, trim, and drop empty elements."""
    return [part.strip() for part in text.split(",") if part.strip()]


def classify_element(element: str) -> StyleCategory:
    """
    Find the category of a single element.

    Genre wins over instrument, instrument over mood. Anything that
    matches none of the keyword sets is OTHER.
    """
    lowered = element.lower()
    if lowered in _GENRES_LOWER or any(stem in lowered for stem in GENRE_STEMS):
        return StyleCategory.GENRE
    if any(instrument in lowered for instrument in _INSTRUMENTS_LOWER):
        return StyleCategory.INSTRUMENT
    if any(mood in lowered for mood in _MOODS_LOWER):
        return StyleCategory.MOOD
    return StyleCategory.OTHER


def classify_elements(elements: Iterable[str]) -> StructuredStyle:
    """Group elements into buckets, keeping their original order."""
    structured = StructuredStyle()
    for element in elements:
        structured.bucket(classify_element(element)).append(element)
    return structured


def dedupe_elements(elements: Iterable[str]) -> list[str]:
    """Drop exact (case-sensitive) repeats, keeping first occurrences."""
    seen: set[str] = set()
    unique: list[str] = []
    for element in elements:
        if element not in seen:
            seen.add(element)
            unique.append(element)
    return unique


def prioritize_elements(
    elements: Iterable[str],
    order: Sequence[StyleCategory | str] = DEFAULT_PRIORITY_ORDER,
) -> list[str]:
    """Concatenate category buckets in the given order."""
    structured = classify_elements(elements)
    prioritized: list[str] = []
    for category in order:
        prioritized.extend(structured.bucket(StyleCategory(category)))
    return prioritized


def optimize_style_text(text: str, budget: int = STYLE_MAX_LENGTH) -> str:
    """
    Compress a style string to fit the character budget.

    Passes run in order and stop as soon as the result fits:
    1. unchanged if already within budget
    2. drop duplicate elements
    3. reorder by priority (genre, mood, instrument, other)
    4. keep prioritized elements greedily until the next would overflow
    5. hard-truncate the first element

    Args:
        text: Raw comma-separated style text
        budget: Maximum length of the result

    Returns:
        A non-empty string no longer than ``budget``

    Raises:
        EmptyDescriptorError: If the text is empty after trimming
    """
    trimmed = text.strip()
    if not trimmed:
        raise EmptyDescriptorError(ErrorMessages.EMPTY_STYLE)
    if len(trimmed) <= budget:
        return trimmed

    unique = dedupe_elements(split_elements(trimmed))
    deduplicated = STYLE_SEPARATOR.join(unique)
    if deduplicated and len(deduplicated) <= budget:
        return deduplicated

    prioritized = prioritize_elements(unique)
    reordered = STYLE_SEPARATOR.join(prioritized)
    if reordered and len(reordered) <= budget:
        return reordered

    result = ""
    for element in prioritized:
        candidate = f"{result}{STYLE_SEPARATOR}{element}" if result else element
        if len(candidate) > budget:
            break
        result = candidate

    if result:
        return result
    if prioritized:
        return prioritized[0][:budget]
    # Nothing but separators
    return trimmed[:budget]


# ---------------------------------------------------------------------------
# Value object
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StyleDescriptor:
    """
    An immutable, budget-checked style descriptor.

    Always trimmed, non-empty and at most STYLE_MAX_LENGTH characters.
    Use ``fit`` to compress over-budget text first.
    """

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value.strip())
        if not self.value:
            raise EmptyDescriptorError(ErrorMessages.EMPTY_STYLE)
        if len(self.value) > STYLE_MAX_LENGTH:
            raise LengthExceededError(
                ErrorMessages.STYLE_TOO_LONG.format(
                    limit=STYLE_MAX_LENGTH, length=len(self.value)
                )
            )

    @classmethod
    def create(cls, raw: str) -> StyleDescriptor:
        """Trim and validate raw input."""
        return cls(raw)

    @classmethod
    def fit(cls, raw: str) -> StyleDescriptor:
        """Compress raw input to the budget, then build a descriptor."""
        return cls(optimize_style_text(raw))

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def to_elements(self) -> list[str]:
        """Ordered, trimmed, non-empty elements."""
        return split_elements(self.value)

    def classify(self) -> StructuredStyle:
        """Group elements into genre / instrument / mood / other buckets."""
        return classify_elements(self.to_elements())

    def deduplicate(self) -> StyleDescriptor:
        """Return a descriptor without exact-duplicate elements."""
        unique = dedupe_elements(self.to_elements())
        if not unique:
            return self
        return StyleDescriptor(STYLE_SEPARATOR.join(unique))

    def prioritize(self, order: Sequence[StyleCategory | str]) -> str:
        """
        Reorder elements by category.

        The result is a plain string because it is not guaranteed to fit
        the budget.
        """
        return STYLE_SEPARATOR.join(prioritize_elements(self.to_elements(), order))

    def optimize(self) -> str:
        """Compress to the budget (see ``optimize_style_text``)."""
        return optimize_style_text(self.value)

    def is_within_limit(self) -> bool:
        """Check the character budget."""
        return len(self.value) <= STYLE_MAX_LENGTH

    def element_count(self) -> int:
        """Number of non-empty elements."""
        return len(self.to_elements())

    def is_recommended_complexity(self) -> bool:
        """Check the element count is in the recommended range."""
        return STYLE_MIN_ELEMENTS <= self.element_count() <= STYLE_MAX_ELEMENTS

    def get_stats(self) -> StyleStats:
        """Compute summary statistics."""
        elements = self.to_elements()
        structured = classify_elements(elements)
        average = 0
        if elements:
            average = int(sum(len(e) for e in elements) / len(elements) + 0.5)

        return StyleStats(
            length=len(self.value),
            element_count=len(elements),
            average_element_length=average,
            genre_count=len(structured.genres),
            instrument_count=len(structured.instruments),
            mood_count=len(structured.moods),
        )

    def get_validation_issues(self) -> list[str]:
        """List problems with the descriptor (empty if none)."""
        issues: list[str] = []
        stats = self.get_stats()

        if stats.length > STYLE_MAX_LENGTH:
            issues.append(
                f"Style is over the character limit ({stats.length}/{STYLE_MAX_LENGTH})"
            )
        if stats.element_count < STYLE_MIN_ELEMENTS:
            issues.append(f"Too few elements (at least {STYLE_MIN_ELEMENTS} recommended)")
        if stats.element_count > STYLE_MAX_ELEMENTS:
            issues.append(f"Too many elements (at most {STYLE_MAX_ELEMENTS} recommended)")
        if stats.genre_count == 0:
            issues.append("No genre element found")

        return issues

    def get_optimization_suggestions(self) -> list[str]:
        """Suggest improvements. Never returns an empty list."""
        issues = self.get_validation_issues()
        if not issues:
            return ["The style descriptor is already optimized"]

        stats = self.get_stats()
        suggestions: list[str] = []

        if stats.length > STYLE_MAX_LENGTH:
            suggestions.append("Remove duplicate elements or shorten long ones to save characters")
        if stats.element_count < STYLE_MIN_ELEMENTS:
            suggestions.append("Add mood or instrument elements for a more detailed style")
        if stats.element_count > STYLE_MAX_ELEMENTS:
            suggestions.append("Keep only the most important elements to stay focused")
        if stats.genre_count == 0:
            suggestions.append("Add a genre element to set the basic direction of the track")
        if stats.genre_count > 3:
            suggestions.append("Limit genre elements to three or fewer")

        return suggestions
