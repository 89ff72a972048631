"""
Prompt Validator - validates prompt content and combinations.

Validates:
- Style descriptor issues (errors)
- Japanese lyrics paired with a J- genre (warning)
- Title specificity (warning)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chuk_music_prompts.models.prompt import Prompt

MIN_TITLE_LENGTH = 5


class ValidationSeverity(str, Enum):
    """How much a finding matters."""

    ERROR = "error"  # rejects the prompt
    WARNING = "warning"  # generation quality may suffer


@dataclass(frozen=True)
class ValidationIssue:
    """One finding against a prompt field."""

    severity: ValidationSeverity
    code: str
    message: str
    target: str

    def __str__(self) -> str:
        return f"{self.target}: {self.message} ({self.code}, {self.severity.value})"


@dataclass
class ValidationResult:
    """Findings for one prompt, in check order."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def add(self, severity: ValidationSeverity, code: str, message: str, target: str) -> None:
        self.issues.append(ValidationIssue(severity, code, message, target))

    def of_severity(self, severity: ValidationSeverity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self.of_severity(ValidationSeverity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self.of_severity(ValidationSeverity.WARNING)

    @property
    def is_valid(self) -> bool:
        """Warnings alone keep a prompt usable."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def summary(self) -> str:
        if not self.issues:
            return "No issues"
        return f"{len(self.errors)} error(s), {len(self.warnings)} warning(s)"

    def __str__(self) -> str:
        return "\n".join([self.summary(), *(str(issue) for issue in self.issues)])


class PromptValidator:
    """Validates prompt content and combinations."""

    def validate(self, prompt: Prompt) -> ValidationResult:
        """Run every check against the prompt, collecting findings in order."""
        result = ValidationResult()
        for check in (self._check_style, self._check_language, self._check_title):
            check(prompt, result)
        return result

    def _check_style(self, prompt: Prompt, result: ValidationResult) -> None:
        for message in prompt.style.get_validation_issues():
            result.add(ValidationSeverity.ERROR, "STYLE_ISSUE", message, "style")

    def _check_language(self, prompt: Prompt, result: ValidationResult) -> None:
        """Japanese lyrics suit J-Pop / J-Rock style genres."""
        if prompt.language.code == "ja" and "J-" not in str(prompt.genre):
            result.add(
                ValidationSeverity.WARNING,
                "LANGUAGE_GENRE_MISMATCH",
                "Japanese lyrics work best with a J- genre such as J-Pop or J-Rock",
                "genre",
            )

    def _check_title(self, prompt: Prompt, result: ValidationResult) -> None:
        if len(prompt.title) < MIN_TITLE_LENGTH:
            result.add(
                ValidationSeverity.WARNING, "SHORT_TITLE", "Use a more specific title", "title"
            )


def validate_prompt(prompt: Prompt) -> ValidationResult:
    """Validate a prompt with the default checks."""
    return PromptValidator().validate(prompt)
