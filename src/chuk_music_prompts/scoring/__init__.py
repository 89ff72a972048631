"""
Prompt scoring.

This module provides:
- QualityScorer: Weighted four-factor quality score
- HeuristicSuccessPredictor: Built-in success-rate prediction
"""

from chuk_music_prompts.scoring.quality import QualityScore, QualityScorer
from chuk_music_prompts.scoring.success import (
    HeuristicSuccessPredictor,
    SuccessFactors,
    SuccessPrediction,
)

__all__ = [
    "HeuristicSuccessPredictor",
    "QualityScore",
    "QualityScorer",
    "SuccessFactors",
    "SuccessPrediction",
]
