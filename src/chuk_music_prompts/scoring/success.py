"""
Success-rate prediction - heuristic estimate of how well a prompt will generate.

Four factors, each 0-100, averaged into the overall score:
- genre_compatibility: fewer genres are easier to render
- style_cohesion: share of elements that belong to a related group
- length_optimality: distance from the ideal style length
- technical_correctness: punctuation, character set and casing hygiene
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chuk_music_prompts.models.prompt import Prompt

# Elements that reinforce each other when they appear together
COHESION_GROUPS: tuple[tuple[str, ...], ...] = (
    ("rock", "guitar", "drums", "bass", "electric"),
    ("electronic", "synth", "digital", "techno", "edm"),
    ("classical", "orchestra", "piano", "violin", "symphony"),
    ("jazz", "saxophone", "improvisation", "swing", "blues"),
    ("acoustic", "folk", "organic", "natural", "unplugged"),
)

# (low, high, score), first band containing the length wins
LENGTH_BANDS: tuple[tuple[int, int, int], ...] = (
    (80, 120, 100),
    (60, 140, 85),
    (40, 160, 70),
    (20, 200, 55),
)
LENGTH_FALLBACK_SCORE = 30

_PLAIN_STYLE = re.compile(r"^[a-zA-Z0-9\s,.-]+$")
_WORD_SPLIT = re.compile(r"[,\s]+")


@dataclass(frozen=True)
class SuccessFactors:
    """Per-factor scores, each 0-100."""

    genre_compatibility: float
    style_cohesion: float
    length_optimality: float
    technical_correctness: float

    @property
    def average(self) -> float:
        return sum(asdict(self).values()) / 4


@dataclass(frozen=True)
class SuccessPrediction:
    """Predicted success rate with improvement hints."""

    overall_score: float
    factors: SuccessFactors
    improvements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "overall_score": self.overall_score,
            "factors": asdict(self.factors),
            "improvements": list(self.improvements),
        }


def genre_compatibility_score(genre_count: int) -> float:
    if genre_count == 1:
        return 100
    if genre_count <= 3:
        return 85
    if genre_count <= 5:
        return 65
    return 40


def style_cohesion_score(style: str) -> float:
    """
    Score how many elements share a cohesion group.

    A group contributes only when at least two elements fall into it.
    """
    elements = [e.strip().lower() for e in style.split(",")]
    total = len(elements)
    if total == 0:
        return 0

    cohesion = 0.0
    for group in COHESION_GROUPS:
        matching = [e for e in elements if any(keyword in e for keyword in group)]
        if len(matching) > 1:
            cohesion += len(matching) / total

    return min(100.0, cohesion * 100)


def length_optimality_score(length: int) -> float:
    for low, high, score in LENGTH_BANDS:
        if low <= length <= high:
            return score
    return LENGTH_FALLBACK_SCORE


def technical_correctness_score(style: str) -> float:
    """Start at 100 and subtract for formatting problems."""
    score = 100
    if "  " in style:
        score -= 5
    if style.startswith(",") or style.endswith(","):
        score -= 10
    if ",," in style:
        score -= 10
    if not _PLAIN_STYLE.match(style):
        score -= 15

    # Mixed-case words like "HipHop" read inconsistently
    mixed_case = [
        word
        for word in _WORD_SPLIT.split(style)
        if len(word) > 1 and word != word.lower() and word != word.upper()
    ]
    score -= len(mixed_case) * 5

    return max(0, score)


class HeuristicSuccessPredictor:
    """Built-in success-rate predictor used when none is injected."""

    def predict(self, prompt: Prompt) -> SuccessPrediction:
        """
        Predict the success rate of a prompt.

        Args:
            prompt: Prompt to assess

        Returns:
            SuccessPrediction with factors and improvement hints
        """
        style = prompt.style.value
        factors = SuccessFactors(
            genre_compatibility=genre_compatibility_score(len(prompt.genre)),
            style_cohesion=style_cohesion_score(style),
            length_optimality=length_optimality_score(len(style)),
            technical_correctness=technical_correctness_score(style),
        )

        improvements: list[str] = []
        if factors.genre_compatibility < 70:
            improvements.append("Reconsider the genre combination")
        if factors.style_cohesion < 70:
            improvements.append("Make the style elements more cohesive")
        if factors.length_optimality < 80:
            improvements.append("Adjust the length of the style descriptor")
        if factors.technical_correctness < 80:
            improvements.append("Check the formatting of the style descriptor")

        return SuccessPrediction(
            overall_score=factors.average,
            factors=factors,
            improvements=improvements,
        )

    async def predict_success_rate(self, prompt: Prompt) -> SuccessPrediction:
        """Async form used by the optimization pipeline."""
        return self.predict(prompt)
