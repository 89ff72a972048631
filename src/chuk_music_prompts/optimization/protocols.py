"""
Strategy interfaces for prompt optimization and generation.

Each strategy is optional; the pipeline falls back to the built-in
implementation (StyleShrinker, GenreCompatibilityChecker,
HeuristicSuccessPredictor) when none is injected. PromptRefiner has no
built-in: the generator skips refinement without one.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from chuk_music_prompts.constants import OptimizationType

if TYPE_CHECKING:
    from chuk_music_prompts.genres.compatibility import GenreConflict
    from chuk_music_prompts.models.prompt import Prompt
    from chuk_music_prompts.models.style import StyleDescriptor
    from chuk_music_prompts.optimization.generator import GeneratePromptInput
    from chuk_music_prompts.scoring.success import SuccessPrediction


@dataclass(frozen=True)
class StyleChange:
    """One change made while shrinking a style descriptor."""

    type: OptimizationType
    description: str
    before: str | None = None
    after: str | None = None


@dataclass(frozen=True)
class StyleOptimizationResult:
    """Shrunk descriptor and the changes that produced it."""

    style: StyleDescriptor
    changes: list[StyleChange] = field(default_factory=list)


@runtime_checkable
class StyleOptimizer(Protocol):
    """Shrinks a style descriptor toward a target length."""

    async def optimize_for_length(
        self,
        style: StyleDescriptor,
        target_length: int,
        priorities: Mapping[str, int],
    ) -> StyleOptimizationResult: ...


@runtime_checkable
class GenreConflictDetector(Protocol):
    """Finds incompatible genre pairs."""

    async def detect_conflicts(self, genres: Sequence[str]) -> list[GenreConflict]: ...


@runtime_checkable
class SuccessRatePredictor(Protocol):
    """Estimates how likely a prompt is to generate well."""

    async def predict_success_rate(self, prompt: Prompt) -> SuccessPrediction: ...


@dataclass(frozen=True)
class PromptRefinement:
    """Notes returned by a prompt refiner."""

    optimizations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@runtime_checkable
class PromptRefiner(Protocol):
    """Reviews a freshly generated prompt against the selections it came from."""

    async def refine(self, prompt: Prompt, request: GeneratePromptInput) -> PromptRefinement: ...
