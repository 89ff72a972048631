"""
Value objects for the prompt system.

This module provides:
- StyleDescriptor: Budget-checked style text
- Genre: One to five supported genre names
- Language: Lyric language with quality tier
- ComplianceRule / ComplianceIssue / ComplianceReport: Compliance results

The Prompt model lives in ``chuk_music_prompts.models.prompt``.
"""

from chuk_music_prompts.models.compliance import (
    ComplianceIssue,
    ComplianceReport,
    ComplianceRule,
    KeywordMatcher,
    PatternMatcher,
    RuleMatch,
)
from chuk_music_prompts.models.genre import Genre
from chuk_music_prompts.models.language import Language, LanguageInfo
from chuk_music_prompts.models.style import (
    StructuredStyle,
    StyleDescriptor,
    StyleStats,
    optimize_style_text,
)

__all__ = [
    "ComplianceIssue",
    "ComplianceReport",
    "ComplianceRule",
    "Genre",
    "KeywordMatcher",
    "Language",
    "LanguageInfo",
    "PatternMatcher",
    "RuleMatch",
    "StructuredStyle",
    "StyleDescriptor",
    "StyleStats",
    "optimize_style_text",
]
