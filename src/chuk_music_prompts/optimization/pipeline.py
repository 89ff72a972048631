"""
Prompt optimization pipeline - shrinks a prompt's style and assesses the result.

Steps run strictly in sequence:
1. validate input (the only step that raises)
2. detect genre conflicts
3. shrink the style toward the target length
4. structural checks on the original prompt
5. build the optimized prompt
6. predict the success rate
7. score the optimization
8. persist the optimized prompt
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from chuk_music_prompts.constants import (
    DEFAULT_PRIORITIES,
    DEFAULT_TARGET_LENGTH,
    OPTIMIZED_TITLE_SUFFIX,
    PRIORITY_RANGE,
    TARGET_LENGTH_RANGE,
    TITLE_MAX_LENGTH,
    ErrorMessages,
    OptimizationMode,
    OptimizationType,
)
from chuk_music_prompts.errors import InputValidationError
from chuk_music_prompts.genres.compatibility import GenreCompatibilityChecker
from chuk_music_prompts.models.prompt import Prompt
from chuk_music_prompts.optimization.protocols import (
    GenreConflictDetector,
    StyleChange,
    StyleOptimizer,
    SuccessRatePredictor,
)
from chuk_music_prompts.optimization.shrinker import StyleShrinker
from chuk_music_prompts.scoring.quality import round_half_up
from chuk_music_prompts.scoring.success import HeuristicSuccessPredictor, SuccessPrediction
from chuk_music_prompts.storage.prompt_store import PromptStore

logger = logging.getLogger(__name__)

# Wording in a style that points at protected works
RIGHTS_SENSITIVE_TERMS: tuple[str, ...] = (
    "copyright",
    "copyrighted",
    "trademarked",
    "artist name",
    "band name",
    "song title",
)

MAX_RECOMMENDED_GENRES = 3
MAX_RECOMMENDED_STYLE_ELEMENTS = 15

# Optimization quality scoring
REDUCTION_BONUSES: tuple[tuple[float, int], ...] = ((0.1, 20), (0.2, 10))
ACTION_BONUS = 10
SUCCESS_WEIGHT = 30
WARNING_PENALTY = 5
MAX_WARNING_PENALTY = 30


@dataclass(frozen=True)
class OptimizationAction:
    """An itemized change reported to the caller."""

    type: OptimizationType
    description: str
    original_text: str | None = None
    optimized_text: str | None = None


@dataclass
class OptimizePromptInput:
    """Pipeline request."""

    prompt: Prompt | None
    target_length: int | None = None
    mode: OptimizationMode | str = OptimizationMode.SUNO
    preserve_genres: bool = True
    preserve_language: bool = True
    custom_priorities: Mapping[str, int] | None = None


@dataclass
class OptimizePromptOutput:
    """Pipeline result."""

    optimized_prompt: Prompt
    original_length: int
    optimized_length: int
    compression_ratio: float
    optimizations: list[OptimizationAction] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    quality_score: int = 0
    suggestions: list[str] = field(default_factory=list)
    success_prediction: SuccessPrediction | None = None


def validate_input(request: OptimizePromptInput) -> Prompt:
    """
    Reject malformed requests before anything else runs.

    Returns:
        The prompt to optimize

    Raises:
        InputValidationError: Missing prompt, target length, mode or priority out of range
    """
    if request.prompt is None:
        raise InputValidationError(ErrorMessages.MISSING_PROMPT)

    low, high = TARGET_LENGTH_RANGE
    if request.target_length is not None and not low <= request.target_length <= high:
        raise InputValidationError(
            ErrorMessages.INVALID_TARGET_LENGTH.format(
                low=low, high=high, value=request.target_length
            )
        )

    try:
        OptimizationMode(request.mode)
    except ValueError as e:
        choices = ", ".join(m.value for m in OptimizationMode)
        raise InputValidationError(
            ErrorMessages.INVALID_MODE.format(mode=request.mode, choices=choices)
        ) from e

    low, high = PRIORITY_RANGE
    for name, value in (request.custom_priorities or {}).items():
        if not low <= value <= high:
            raise InputValidationError(
                ErrorMessages.INVALID_PRIORITY.format(name=name, low=low, high=high, value=value)
            )

    return request.prompt


def optimized_title(title: str) -> str:
    """Suffix the title, trimming it so the result stays within the title limit."""
    keep = TITLE_MAX_LENGTH - len(OPTIMIZED_TITLE_SUFFIX)
    return title[:keep] + OPTIMIZED_TITLE_SUFFIX


def check_structure(prompt: Prompt) -> tuple[list[str], list[str]]:
    """
    Structural checks on a prompt.

    Returns:
        (warnings, suggestions)
    """
    warnings: list[str] = []
    suggestions: list[str] = []

    genre_count = len(prompt.genre)
    if genre_count > MAX_RECOMMENDED_GENRES:
        warnings.append(f"Too many genres ({genre_count})")
        suggestions.append("Narrow the selection to 1-3 genres")

    element_count = len(prompt.style.value.split(","))
    if element_count > MAX_RECOMMENDED_STYLE_ELEMENTS:
        warnings.append(f"Too many style elements ({element_count})")
        suggestions.append("Keep the style to 10-15 elements")

    style = prompt.style.value.lower()
    for term in RIGHTS_SENSITIVE_TERMS:
        if term in style:
            warnings.append(f'Possibly rights-sensitive term: "{term}"')
            suggestions.append("Avoid naming specific artists or songs")

    return warnings, suggestions


def optimization_quality(
    original_length: int,
    optimized_length: int,
    action_count: int,
    warning_count: int,
    success_score: float,
) -> int:
    """Score an optimization run on 0-100."""
    score = 100.0

    if original_length > 0:
        reduction = (original_length - optimized_length) / original_length
        for threshold, bonus in REDUCTION_BONUSES:
            if reduction >= threshold:
                score += bonus
    if action_count:
        score += ACTION_BONUS

    score += success_score / 100 * SUCCESS_WEIGHT
    score -= min(warning_count * WARNING_PENALTY, MAX_WARNING_PENALTY)

    return min(100, max(0, round_half_up(score)))


def _action_type(value: OptimizationType | str) -> OptimizationType:
    """Unknown change kinds from injected optimizers count as shortening."""
    try:
        return OptimizationType(value)
    except ValueError:
        return OptimizationType.SHORTENED


class PromptOptimizationPipeline:
    """
    Orchestrates prompt optimization.

    Strategies are optional; the built-ins are used when none is given.
    """

    def __init__(
        self,
        store: PromptStore,
        style_optimizer: StyleOptimizer | None = None,
        conflict_detector: GenreConflictDetector | None = None,
        success_predictor: SuccessRatePredictor | None = None,
    ):
        """
        Initialize the pipeline.

        Args:
            store: Where optimized prompts are saved
            style_optimizer: Style length optimizer (default: StyleShrinker)
            conflict_detector: Genre conflict detector (default: GenreCompatibilityChecker)
            success_predictor: Success predictor (default: HeuristicSuccessPredictor)
        """
        self.store = store
        self.style_optimizer: StyleOptimizer = style_optimizer or StyleShrinker()
        self.conflict_detector: GenreConflictDetector = (
            conflict_detector or GenreCompatibilityChecker()
        )
        self.success_predictor: SuccessRatePredictor = (
            success_predictor or HeuristicSuccessPredictor()
        )

    async def execute(self, request: OptimizePromptInput) -> OptimizePromptOutput:
        """
        Optimize a prompt.

        Args:
            request: Prompt and optimization settings

        Returns:
            OptimizePromptOutput

        Raises:
            InputValidationError: If the request is malformed (nothing else runs)
        """
        original = validate_input(request)

        target_length = request.target_length or DEFAULT_TARGET_LENGTH
        original_style = original.style
        original_length = len(original_style)

        warnings: list[str] = []
        suggestions: list[str] = []

        # Genre conflicts
        conflicts = await self.conflict_detector.detect_conflicts(list(original.genre))
        for conflict in conflicts:
            warnings.append(conflict.as_warning())
            suggestions.append(conflict.suggestion)

        # Shrink
        priorities = {**DEFAULT_PRIORITIES, **(request.custom_priorities or {})}
        result = await self.style_optimizer.optimize_for_length(
            original_style, target_length, priorities
        )
        optimizations = [
            self._to_action(change, original_style.value, result.style.value)
            for change in result.changes
        ]

        # Structure
        structure_warnings, structure_suggestions = check_structure(original)
        warnings.extend(structure_warnings)
        suggestions.extend(structure_suggestions)

        # Build
        optimized = Prompt.create(
            title=optimized_title(original.title),
            genre=original.genre,
            language=original.language,
            style=result.style,
            tags=list(original.tags),
            description=original.description,
            is_public=original.is_public,
        )

        # Predict
        prediction = await self.success_predictor.predict_success_rate(optimized)
        suggestions.extend(prediction.improvements)

        optimized_length = len(optimized.style)
        quality = optimization_quality(
            original_length=original_length,
            optimized_length=optimized_length,
            action_count=len(optimizations),
            warning_count=len(warnings),
            success_score=prediction.overall_score,
        )

        # Persist; failures propagate to the caller
        await self.store.save(optimized)

        logger.info(
            f"Optimized prompt '{original.title}': {original_length} -> {optimized_length} chars, "
            f"{len(optimizations)} actions, {len(warnings)} warnings, quality {quality}"
        )

        return OptimizePromptOutput(
            optimized_prompt=optimized,
            original_length=original_length,
            optimized_length=optimized_length,
            compression_ratio=optimized_length / original_length if original_length else 1.0,
            optimizations=optimizations,
            warnings=warnings,
            quality_score=quality,
            suggestions=suggestions,
            success_prediction=prediction,
        )

    @staticmethod
    def _to_action(change: StyleChange, original: str, optimized: str) -> OptimizationAction:
        return OptimizationAction(
            type=_action_type(change.type),
            description=change.description,
            original_text=change.before if change.before is not None else original,
            optimized_text=change.after if change.after is not None else optimized,
        )
