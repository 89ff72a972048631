"""
Style shrinker - built-in length optimizer for style descriptors.

Passes run in order while the text is still over the target length:
1. drop duplicate elements (case-insensitive)
2. strip filler words
3. swap long words for shorter synonyms
4. truncate with an ellipsis

A pass only counts when it makes the text shorter without emptying it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from chuk_music_prompts.constants import STYLE_SEPARATOR, OptimizationType
from chuk_music_prompts.models.style import StyleDescriptor, split_elements
from chuk_music_prompts.optimization.protocols import StyleChange, StyleOptimizationResult

logger = logging.getLogger(__name__)

FILLER_WORDS: tuple[str, ...] = (
    "very",
    "really",
    "extremely",
    "highly",
    "super",
    "amazing",
    "incredible",
    "fantastic",
    "awesome",
    "beautiful",
    "wonderful",
    "perfect",
)

SYNONYMS: dict[str, str] = {
    "electronic": "electro",
    "energetic": "energy",
    "beautiful": "pretty",
    "powerful": "strong",
    "melodic": "melody",
    "rhythmic": "rhythm",
    "emotional": "feel",
    "atmospheric": "ambient",
    "aggressive": "hard",
    "peaceful": "calm",
}

ELLIPSIS = "..."

_EXTRA_SPACES = re.compile(r"\s{2,}")
_EMPTY_ELEMENTS = re.compile(r"\s*,\s*(?:,\s*)+")
_SPACE_BEFORE_COMMA = re.compile(r"\s+,")


def _word_pattern(word: str) -> re.Pattern[str]:
    """Whole word, not part of a hyphenated compound such as "super-fast"."""
    return re.compile(rf"(?<![\w-]){re.escape(word)}(?![\w-])", re.IGNORECASE)


def tidy(text: str) -> str:
    """Collapse the gaps left behind by removed words."""
    text = _EXTRA_SPACES.sub(" ", text)
    text = _SPACE_BEFORE_COMMA.sub(",", text)
    text = _EMPTY_ELEMENTS.sub(STYLE_SEPARATOR, text)
    return text.strip(" ,")


class StyleShrinker:
    """
    Built-in style optimizer used when none is injected.

    Priorities are accepted for interface compatibility; the passes
    themselves are priority-independent.
    """

    def shrink(
        self,
        style: StyleDescriptor,
        target_length: int,
        priorities: Mapping[str, int] | None = None,
    ) -> StyleOptimizationResult:
        """
        Shrink a descriptor toward the target length.

        Args:
            style: Descriptor to shrink
            target_length: Desired maximum length
            priorities: Category weights (unused by the built-in passes)

        Returns:
            Shrunk descriptor and one change per effective pass
        """
        text = style.value
        changes: list[StyleChange] = []

        if len(text) <= target_length:
            return StyleOptimizationResult(style=style, changes=changes)

        for step in (self._dedupe, self._strip_fillers, self._shorten_synonyms, self._truncate):
            if len(text) <= target_length:
                break
            result = step(text, target_length)
            if result is None:
                continue
            shortened, description, change_type = result
            if not shortened or len(shortened) >= len(text):
                continue
            changes.append(StyleChange(change_type, description, before=text, after=shortened))
            text = shortened

        logger.debug(
            f"Shrank style from {len(style.value)} to {len(text)} chars "
            f"(target {target_length}, {len(changes)} passes)"
        )
        return StyleOptimizationResult(style=StyleDescriptor(text), changes=changes)

    async def optimize_for_length(
        self,
        style: StyleDescriptor,
        target_length: int,
        priorities: Mapping[str, int],
    ) -> StyleOptimizationResult:
        """Async form used by the optimization pipeline."""
        return self.shrink(style, target_length, priorities)

    # ------------------------------------------------------------------
    # Passes: each returns (text, description, type) or None if not applicable
    # ------------------------------------------------------------------

    def _dedupe(self, text: str, target_length: int) -> tuple[str, str, OptimizationType] | None:
        elements = split_elements(text)
        seen: set[str] = set()
        unique: list[str] = []
        for element in elements:
            key = element.lower()
            if key not in seen:
                seen.add(key)
                unique.append(element)

        removed = len(elements) - len(unique)
        if not removed:
            return None
        return (
            STYLE_SEPARATOR.join(unique),
            f"Removed {removed} duplicate element(s)",
            OptimizationType.MERGED,
        )

    def _strip_fillers(
        self, text: str, target_length: int
    ) -> tuple[str, str, OptimizationType] | None:
        stripped: list[str] = []
        for word in FILLER_WORDS:
            if len(text) <= target_length:
                break
            pattern = _word_pattern(word)
            if not pattern.search(text):
                continue
            candidate = tidy(pattern.sub("", text))
            if candidate:
                text = candidate
                stripped.append(word)

        if not stripped:
            return None
        words = ", ".join(f'"{w}"' for w in stripped)
        return text, f"Removed filler words {words}", OptimizationType.REMOVED

    def _shorten_synonyms(
        self, text: str, target_length: int
    ) -> tuple[str, str, OptimizationType] | None:
        swapped: list[str] = []
        for long_word, short_word in SYNONYMS.items():
            if len(text) <= target_length:
                break
            pattern = _word_pattern(long_word)
            candidate = pattern.sub(short_word, text)
            if len(candidate) < len(text):
                text = candidate
                swapped.append(f'"{long_word}" -> "{short_word}"')

        if not swapped:
            return None
        return text, f"Shortened {', '.join(swapped)}", OptimizationType.SHORTENED

    def _truncate(self, text: str, target_length: int) -> tuple[str, str, OptimizationType] | None:
        keep = max(target_length - len(ELLIPSIS), 0)
        truncated = text[:keep] + ELLIPSIS
        return (
            truncated,
            f"Truncated {len(text) - keep} characters to fit the length limit",
            OptimizationType.REMOVED,
        )
