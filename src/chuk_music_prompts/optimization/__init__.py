"""
Prompt optimization and generation.

This module provides:
- PromptOptimizationPipeline: Sequential optimize-and-assess workflow
- PromptGenerator: Builds prompts from genre, mood and instrument selections
- StyleShrinker: Built-in style length optimizer
- StyleOptimizer / GenreConflictDetector / SuccessRatePredictor / PromptRefiner:
  Strategy interfaces
"""

from chuk_music_prompts.optimization.generator import (
    GeneratePromptInput,
    GeneratePromptOutput,
    PromptGenerator,
)
from chuk_music_prompts.optimization.pipeline import (
    OptimizationAction,
    OptimizePromptInput,
    OptimizePromptOutput,
    PromptOptimizationPipeline,
)
from chuk_music_prompts.optimization.protocols import (
    GenreConflictDetector,
    PromptRefinement,
    PromptRefiner,
    StyleChange,
    StyleOptimizationResult,
    StyleOptimizer,
    SuccessRatePredictor,
)
from chuk_music_prompts.optimization.shrinker import StyleShrinker

__all__ = [
    "GeneratePromptInput",
    "GeneratePromptOutput",
    "GenreConflictDetector",
    "OptimizationAction",
    "OptimizePromptInput",
    "OptimizePromptOutput",
    "PromptGenerator",
    "PromptOptimizationPipeline",
    "PromptRefinement",
    "PromptRefiner",
    "StyleChange",
    "StyleOptimizationResult",
    "StyleOptimizer",
    "StyleShrinker",
    "SuccessRatePredictor",
]
