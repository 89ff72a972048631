"""
Prompt generator - builds a prompt from genre, mood and instrument selections.

Style elements are joined in a fixed order:
1. genres
2. moods
3. instruments
4. energy words
5. complexity words
6. the custom style text

Text over the style budget is compressed with ``StyleDescriptor.fit``
before the prompt is built.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from chuk_music_prompts.constants import (
    LEVEL_RANGE,
    MAX_GENRES,
    STYLE_MAX_LENGTH,
    STYLE_SEPARATOR,
    ErrorMessages,
)
from chuk_music_prompts.errors import ConstructionError, InputValidationError
from chuk_music_prompts.genres.compatibility import GenreCompatibilityChecker
from chuk_music_prompts.models.genre import Genre
from chuk_music_prompts.models.language import Language
from chuk_music_prompts.models.prompt import Prompt
from chuk_music_prompts.models.style import StyleDescriptor
from chuk_music_prompts.optimization.protocols import GenreConflictDetector, PromptRefiner
from chuk_music_prompts.storage.prompt_store import PromptStore

logger = logging.getLogger(__name__)

# (minimum level, words), highest first; the first band reached wins
ENERGY_WORDS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (8, ("high energy", "intense")),
    (6, ("energetic",)),
    (4, ("moderate",)),
    (1, ("calm", "relaxed")),
)
COMPLEXITY_WORDS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (8, ("complex", "intricate")),
    (6, ("layered",)),
    (4, ()),
    (1, ("simple", "minimalist")),
)

# Generation quality scoring
GENERATION_BASE_SCORE = 50
SINGLE_GENRE_BONUS = 20
FEW_GENRES_BONUS = 15
MANY_GENRES_BONUS = 5
FEW_GENRES_LIMIT = 3
FITS_BUDGET_BONUS = 20
OVER_BUDGET_PENALTY = 10
DETAIL_BONUS = 10  # moods, instruments
LEVEL_BONUS = 5  # energy, complexity

FITTED_NOTE = "Fitted to the character limit"


@dataclass
class GeneratePromptInput:
    """User selections for a new prompt."""

    genres: Sequence[str]
    language: str
    moods: Sequence[str] = ()
    instruments: Sequence[str] = ()
    energy: int | None = None
    complexity: int | None = None
    custom_style: str = ""


@dataclass
class GeneratePromptOutput:
    """Generated prompt with its score and notes."""

    prompt: Prompt
    quality_score: int
    optimizations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _check_level(name: str, value: int | None) -> None:
    low, high = LEVEL_RANGE
    if value is not None and not low <= value <= high:
        raise InputValidationError(
            ErrorMessages.INVALID_LEVEL.format(name=name, low=low, high=high, value=value)
        )


def validate_request(request: GeneratePromptInput) -> tuple[Genre, Language]:
    """
    Check the selections and build the genre and language values.

    Raises:
        InputValidationError: No genres, too many genres, no language, an
            unsupported genre or language, or a level outside 1-10
    """
    if not request.genres:
        raise InputValidationError(ErrorMessages.NO_GENRES)
    if len(request.genres) > MAX_GENRES:
        raise InputValidationError(
            ErrorMessages.TOO_MANY_GENRES.format(limit=MAX_GENRES, count=len(request.genres))
        )
    if not request.language:
        raise InputValidationError(ErrorMessages.NO_LANGUAGE)

    try:
        genre = Genre.create(list(request.genres))
    except ConstructionError as e:
        raise InputValidationError(
            ErrorMessages.INVALID_SELECTION.format(name="genre", reason=e)
        ) from e
    try:
        language = Language.create(request.language)
    except ConstructionError as e:
        raise InputValidationError(
            ErrorMessages.INVALID_SELECTION.format(name="language", reason=e)
        ) from e

    _check_level("Energy", request.energy)
    _check_level("Complexity", request.complexity)
    return genre, language


def level_words(bands: Sequence[tuple[int, tuple[str, ...]]], level: int) -> tuple[str, ...]:
    """Words for the first band whose minimum the level reaches."""
    for minimum, words in bands:
        if level >= minimum:
            return words
    return ()


def build_style_text(request: GeneratePromptInput) -> str:
    """Join the selections into raw style text. Blank entries are dropped."""
    parts = [*request.genres, *request.moods, *request.instruments]
    if request.energy is not None:
        parts.extend(level_words(ENERGY_WORDS, request.energy))
    if request.complexity is not None:
        parts.extend(level_words(COMPLEXITY_WORDS, request.complexity))
    parts.append(request.custom_style)

    return STYLE_SEPARATOR.join(part.strip() for part in parts if part.strip())


def generated_title(primary_genre: str, today: date | None = None) -> str:
    today = today or datetime.now(UTC).date()
    return f"{primary_genre} Prompt - {today.isoformat()}"


def generation_quality(request: GeneratePromptInput, style: StyleDescriptor) -> int:
    """Score how fully the selections describe the track, 0-100."""
    score = GENERATION_BASE_SCORE

    genre_count = len(request.genres)
    if genre_count == 1:
        score += SINGLE_GENRE_BONUS
    elif genre_count <= FEW_GENRES_LIMIT:
        score += FEW_GENRES_BONUS
    else:
        score += MANY_GENRES_BONUS

    if len(style) <= STYLE_MAX_LENGTH:
        score += FITS_BUDGET_BONUS
    else:
        score -= OVER_BUDGET_PENALTY

    if request.moods:
        score += DETAIL_BONUS
    if request.instruments:
        score += DETAIL_BONUS
    if request.energy is not None:
        score += LEVEL_BONUS
    if request.complexity is not None:
        score += LEVEL_BONUS

    return min(100, max(0, score))


class PromptGenerator:
    """
    Builds, scores and saves prompts from user selections.

    Genre conflicts are reported as warnings, never raised.
    """

    def __init__(
        self,
        store: PromptStore,
        conflict_detector: GenreConflictDetector | None = None,
        refiner: PromptRefiner | None = None,
    ):
        """
        Initialize the generator.

        Args:
            store: Where generated prompts are saved
            conflict_detector: Genre conflict detector (default: GenreCompatibilityChecker)
            refiner: Optional post-processing of the generated prompt
        """
        self.store = store
        self.conflict_detector: GenreConflictDetector = (
            conflict_detector or GenreCompatibilityChecker()
        )
        self.refiner = refiner

    async def generate(self, request: GeneratePromptInput) -> GeneratePromptOutput:
        """
        Generate a prompt.

        Args:
            request: User selections

        Returns:
            GeneratePromptOutput

        Raises:
            InputValidationError: If the selections are invalid (nothing is saved)
        """
        genre, language = validate_request(request)

        text = build_style_text(request)
        style = StyleDescriptor.fit(text)
        optimizations: list[str] = []
        if style.value != text:
            optimizations.append(FITTED_NOTE)

        conflicts = await self.conflict_detector.detect_conflicts(list(genre))
        warnings = [conflict.as_warning() for conflict in conflicts]

        prompt = Prompt.create(
            title=generated_title(genre.primary),
            genre=genre,
            language=language,
            style=style,
        )

        if self.refiner is not None:
            refinement = await self.refiner.refine(prompt, request)
            optimizations.extend(refinement.optimizations)
            warnings.extend(refinement.warnings)

        quality = generation_quality(request, style)

        # Persist; failures propagate to the caller
        await self.store.save(prompt)

        logger.info(
            f"Generated prompt '{prompt.title}' ({len(style)} chars, quality {quality}, "
            f"{len(warnings)} warnings)"
        )

        return GeneratePromptOutput(
            prompt=prompt,
            quality_score=quality,
            optimizations=optimizations,
            warnings=warnings,
        )
