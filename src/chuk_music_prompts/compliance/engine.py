"""
Compliance rule engine - scans text fields against the rule taxonomy.

The engine owns its configuration (strict mode, enabled categories,
custom rules). Configuration changes are not synchronized: share an
engine across tasks only if the caller serializes updates, or use one
engine per task.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field

from chuk_music_prompts.compliance.rules import builtin_rules
from chuk_music_prompts.constants import ComplianceCategory
from chuk_music_prompts.models.compliance import (
    ComplianceIssue,
    ComplianceReport,
    ComplianceRule,
    RuleMatch,
    extract_excerpt,
    find_matches,
)

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("title", "description", "prompt", "lyrics")

SUGGESTION_TEMPLATES: dict[ComplianceCategory, str] = {
    ComplianceCategory.COPYRIGHT: (
        '"{trigger}" may infringe copyright. Use original wording or obtain permission.'
    ),
    ComplianceCategory.TRADEMARK: (
        '"{trigger}" may be a registered trademark. Avoid it or obtain permission.'
    ),
    ComplianceCategory.INAPPROPRIATE_CONTENT: (
        '"{trigger}" may be seen as inappropriate. Consider more suitable wording.'
    ),
    ComplianceCategory.COMMERCIAL_USE: (
        '"{trigger}" may restrict commercial use. Check the license terms.'
    ),
    ComplianceCategory.PRIVACY: (
        "Personal information may be present. Remove anything that identifies a person."
    ),
    ComplianceCategory.CULTURAL_SENSITIVITY: (
        '"{trigger}" needs cultural sensitivity. Consider more inclusive, respectful wording.'
    ),
}
DEFAULT_SUGGESTION = 'Review "{trigger}" before publishing.'


def suggestion_for(category: ComplianceCategory, trigger: str) -> str:
    """Suggestion text for a category, with the triggering text filled in."""
    return SUGGESTION_TEMPLATES.get(category, DEFAULT_SUGGESTION).format(trigger=trigger)


class ComplianceInput(BaseModel):
    """Text fields to scan. Every field is optional."""

    title: str = ""
    description: str = ""
    prompt: str = ""
    lyrics: str = ""
    tags: list[str] = Field(default_factory=list)
    genre: str | None = None
    language: str | None = None


@dataclass
class ComplianceConfig:
    """Engine settings."""

    strict_mode: bool = False
    enabled_categories: frozenset[ComplianceCategory] = field(
        default_factory=lambda: frozenset(ComplianceCategory)
    )
    custom_rules: list[ComplianceRule] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.enabled_categories = frozenset(
            ComplianceCategory(c) for c in self.enabled_categories
        )
        self.custom_rules = list(self.custom_rules)

    def merged(self, **changes: Any) -> ComplianceConfig:
        """Copy with some settings replaced."""
        return dataclasses.replace(self, **changes)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_tags(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Iterable):
        return [_as_text(tag) for tag in value]
    return [_as_text(value)]


def build_corpus(fields: ComplianceInput | Mapping[str, Any] | None) -> str:
    """
    Join all text fields with single spaces.

    Missing or ``None`` fields count as empty strings; tags contribute one
    entry each.
    """
    if fields is None:
        values: Mapping[str, Any] = {}
    elif isinstance(fields, ComplianceInput):
        values = fields.model_dump()
    elif isinstance(fields, Mapping):
        values = fields
    else:
        values = {"prompt": fields}

    parts = [_as_text(values.get(name)) for name in TEXT_FIELDS]
    parts.extend(_as_tags(values.get("tags")))
    return " ".join(parts)


class ComplianceEngine:
    """
    Scans content against built-in and custom rules.

    Every check is independent and side-effect free; the only state is the
    configuration.
    """

    def __init__(
        self,
        config: ComplianceConfig | None = None,
        rules: Sequence[ComplianceRule] | None = None,
    ):
        """
        Initialize the engine.

        Args:
            config: Engine settings (defaults: all categories, not strict)
            rules: Base rule set (defaults to the built-in rules)
        """
        self._config = config.merged() if config else ComplianceConfig()
        self._builtin_rules = list(rules) if rules is not None else builtin_rules()

    @property
    def config(self) -> ComplianceConfig:
        return self._config

    def update_config(self, **changes: Any) -> None:
        """Merge partial settings into the current configuration."""
        self._config = self._config.merged(**changes)
        logger.debug(f"Compliance config updated: {sorted(changes)}")

    def add_custom_rule(self, rule: ComplianceRule) -> None:
        """Append a custom rule."""
        self._config.custom_rules.append(rule)

    def add_custom_rules(self, rules: Iterable[ComplianceRule]) -> None:
        """Append several custom rules, e.g. from a rule pack."""
        self._config.custom_rules.extend(rules)

    def remove_custom_rule(self, name: str) -> bool:
        """
        Remove custom rules with exactly this name.

        Returns:
            True if anything was removed
        """
        before = len(self._config.custom_rules)
        self._config.custom_rules = [r for r in self._config.custom_rules if r.name != name]
        return len(self._config.custom_rules) < before

    def active_rules(self) -> list[ComplianceRule]:
        """Enabled rules whose category is enabled."""
        return [
            rule
            for rule in (*self._builtin_rules, *self._config.custom_rules)
            if rule.enabled and rule.category in self._config.enabled_categories
        ]

    def check_compliance(
        self, fields: ComplianceInput | Mapping[str, Any] | None = None
    ) -> ComplianceReport:
        """
        Scan the given fields.

        Args:
            fields: A ComplianceInput or a mapping with any of title,
                description, prompt, lyrics and tags

        Returns:
            ComplianceReport with one issue per keyword hit or pattern match
        """
        original = build_corpus(fields)
        corpus = original.lower()
        # Excerpts keep the caller's casing when lower-casing kept offsets intact
        excerpt_source = original if len(original) == len(corpus) else corpus

        issues: list[ComplianceIssue] = []
        rules = self.active_rules()
        for rule in rules:
            for match in find_matches(rule.matcher, corpus):
                issues.append(self._issue_for(rule, match, excerpt_source))

        report = ComplianceReport.from_issues(issues, self._config.strict_mode)
        logger.debug(
            f"Compliance check: {len(rules)} rules, {len(issues)} issues, "
            f"level={report.overall_level.value}, score={report.score}"
        )
        return report

    def check_batch(
        self, inputs: Iterable[ComplianceInput | Mapping[str, Any] | None]
    ) -> list[ComplianceReport]:
        """Check each input independently, keeping order."""
        return [self.check_compliance(item) for item in inputs]

    def _issue_for(self, rule: ComplianceRule, match: RuleMatch, text: str) -> ComplianceIssue:
        """Turn a rule hit into an issue."""
        if match.keyword:
            description = f'"{match.trigger}" detected: {rule.description}'
        else:
            description = rule.description

        return ComplianceIssue(
            category=rule.category,
            level=rule.severity,
            title=rule.name,
            description=description,
            suggestion=suggestion_for(rule.category, match.trigger),
            affected_text=extract_excerpt(text, match.start, match.end),
        )
