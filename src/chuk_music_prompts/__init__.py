"""
chuk-music-prompts - style descriptor optimization and content compliance
for music-generation prompts.

This package provides:
- StyleDescriptor: budget-checked style text with compression
- ComplianceEngine: rule-based content risk reports
- GenreCompatibilityChecker: incompatible genre detection
- QualityScorer / HeuristicSuccessPredictor: prompt scoring
- PromptGenerator: prompts built from genre, mood and instrument selections
- PromptOptimizationPipeline: end-to-end prompt optimization
"""

from chuk_music_prompts.compliance import ComplianceConfig, ComplianceEngine, ComplianceInput
from chuk_music_prompts.genres import GenreCompatibilityChecker
from chuk_music_prompts.models import Genre, Language, StyleDescriptor
from chuk_music_prompts.models.prompt import Prompt
from chuk_music_prompts.optimization import (
    GeneratePromptInput,
    GeneratePromptOutput,
    OptimizePromptInput,
    OptimizePromptOutput,
    PromptGenerator,
    PromptOptimizationPipeline,
)
from chuk_music_prompts.scoring import HeuristicSuccessPredictor, QualityScorer

__version__ = "0.1.0"

__all__ = [
    "ComplianceConfig",
    "ComplianceEngine",
    "ComplianceInput",
    "GeneratePromptInput",
    "GeneratePromptOutput",
    "Genre",
    "GenreCompatibilityChecker",
    "HeuristicSuccessPredictor",
    "Language",
    "OptimizePromptInput",
    "OptimizePromptOutput",
    "Prompt",
    "PromptGenerator",
    "PromptOptimizationPipeline",
    "QualityScorer",
    "StyleDescriptor",
]
