"""
Prompt quality score - weighted composite of four 0-100 factors.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass

from chuk_music_prompts.constants import QUALITY_WEIGHTS, ErrorMessages
from chuk_music_prompts.errors import ScoreRangeError
from chuk_music_prompts.models.genre import Genre
from chuk_music_prompts.models.language import Language
from chuk_music_prompts.models.style import StyleDescriptor


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores."""
    return int(value + 0.5)


@dataclass(frozen=True)
class QualityScore:
    """Quality factors and their weighted overall score."""

    genre_clarity: int
    style_optimization: int
    language_optimization: int
    completeness: int

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if not 0 <= value <= 100:
                raise ScoreRangeError(
                    ErrorMessages.SCORE_OUT_OF_RANGE.format(name=name, value=value)
                )

    @property
    def overall(self) -> int:
        """Rounded weighted sum of the factors."""
        return round_half_up(
            sum(getattr(self, name) * weight for name, weight in QUALITY_WEIGHTS.items())
        )

    def breakdown(self) -> dict[str, int]:
        return asdict(self)

    def to_dict(self) -> dict[str, object]:
        return {"overall": self.overall, "breakdown": self.breakdown()}


class QualityScorer:
    """Computes QualityScore from prompt parts."""

    def compute(
        self,
        genre: Genre | None,
        style: StyleDescriptor,
        language: Language,
        title: str,
        description: str,
        tags: Sequence[str],
    ) -> QualityScore:
        """
        Score a prompt.

        Args:
            genre: Selected genre (None scores zero clarity)
            style: Style descriptor
            language: Lyric language
            title: Prompt title
            description: Free-text description
            tags: User tags

        Returns:
            QualityScore
        """
        genre_clarity = 100 if genre else 0

        stats = style.get_stats()
        style_optimization = 50
        if 2 <= stats.element_count <= 6:
            style_optimization += 30
        if stats.length <= 120:
            style_optimization += 20
        style_optimization = min(100, style_optimization)

        language_optimization = 100 if language.is_high_quality() else 60

        completeness = 40
        if description:
            completeness += 20
        if tags:
            completeness += 20
        if len(title) >= 5:
            completeness += 20

        return QualityScore(
            genre_clarity=genre_clarity,
            style_optimization=style_optimization,
            language_optimization=language_optimization,
            completeness=completeness,
        )
