"""
Prompt validation.
"""

from chuk_music_prompts.prompts.validator import (
    PromptValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_prompt,
)

__all__ = [
    "PromptValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "validate_prompt",
]
