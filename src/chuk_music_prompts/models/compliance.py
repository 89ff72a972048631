"""
Compliance models - rules, issues, and the report they produce.

A rule matches either a keyword list or a regular expression. Matching is
dispatched by ``find_matches`` so callers never check which kind of rule
they hold.

Scoring, levelling and recommendation text live here too, so a report can
recompute itself when an issue is resolved.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from chuk_music_prompts.constants import (
    EXCERPT_CONTEXT,
    LEVEL_RANK,
    MANY_ISSUES_THRESHOLD,
    SEVERITY_PENALTIES,
    STRICT_MODE_PENALTY,
    ComplianceCategory,
    ComplianceLevel,
    ErrorMessages,
)
from chuk_music_prompts.errors import ConstructionError, ScoreRangeError

# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeywordMatcher:
    """Matches each keyword as a case-insensitive substring."""

    keywords: tuple[str, ...]


@dataclass(frozen=True)
class PatternMatcher:
    """Matches every occurrence of a regular expression."""

    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, expression: str, flags: int = 0) -> PatternMatcher:
        return cls(re.compile(expression, flags))


RuleMatcher = KeywordMatcher | PatternMatcher


@dataclass(frozen=True)
class RuleMatch:
    """One hit of a rule against the corpus."""

    trigger: str  # keyword or matched text
    start: int
    end: int
    keyword: bool


@dataclass(frozen=True)
class ComplianceRule:
    """A named check in one compliance category."""

    name: str
    category: ComplianceCategory
    description: str
    matcher: RuleMatcher
    severity: ComplianceLevel
    enabled: bool = True

    def __post_init__(self) -> None:
        # Issues inherit title and description from their rule
        if not self.name.strip() or not self.description.strip():
            raise ConstructionError("Compliance rules need a name and a description.")

    @classmethod
    def keywords(
        cls,
        name: str,
        category: ComplianceCategory,
        description: str,
        keywords: Iterable[str],
        severity: ComplianceLevel,
        enabled: bool = True,
    ) -> ComplianceRule:
        """Build a keyword-list rule."""
        return cls(name, category, description, KeywordMatcher(tuple(keywords)), severity, enabled)

    @classmethod
    def pattern(
        cls,
        name: str,
        category: ComplianceCategory,
        description: str,
        expression: str,
        severity: ComplianceLevel,
        enabled: bool = True,
    ) -> ComplianceRule:
        """Build a regular-expression rule."""
        matcher = PatternMatcher.compile(expression)
        return cls(name, category, description, matcher, severity, enabled)


def find_matches(matcher: RuleMatcher, corpus: str) -> list[RuleMatch]:
    """
    Run a matcher over a lower-cased corpus.

    Keyword matchers report each distinct keyword once, at its first
    occurrence. Pattern matchers report every match.
    """
    matches: list[RuleMatch] = []

    if isinstance(matcher, KeywordMatcher):
        seen: set[str] = set()
        for keyword in matcher.keywords:
            needle = keyword.lower()
            if not needle or needle in seen:
                continue
            index = corpus.find(needle)
            if index != -1:
                seen.add(needle)
                matches.append(RuleMatch(keyword, index, index + len(needle), keyword=True))
    elif isinstance(matcher, PatternMatcher):
        for found in matcher.pattern.finditer(corpus):
            matches.append(RuleMatch(found.group(0), found.start(), found.end(), keyword=False))

    return matches


def extract_excerpt(text: str, start: int, end: int, context: int = EXCERPT_CONTEXT) -> str:
    """Matched text plus surrounding context, '...'-prefixed when cut at the start."""
    left = max(0, start - context)
    right = min(len(text), end + context)
    snippet = text[left:right]
    return f"...{snippet}" if left > 0 else snippet


# ---------------------------------------------------------------------------
# Issues and report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ComplianceIssue:
    """One detected risk instance."""

    category: ComplianceCategory
    level: ComplianceLevel
    title: str
    description: str
    suggestion: str = ""
    affected_text: str = ""

    def __str__(self) -> str:
        return f"[{self.level.value.upper()}] {self.category.value}: {self.title}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "level": self.level.value,
            "title": self.title,
            "description": self.description,
            "suggestion": self.suggestion,
            "affected_text": self.affected_text,
        }


ALL_CLEAR_RECOMMENDATIONS: tuple[str, ...] = (
    "No compliance issues were detected.",
    "The content is ready to publish.",
)

LEVEL_RECOMMENDATIONS: dict[ComplianceLevel, str] = {
    ComplianceLevel.UNSAFE: (
        "Serious compliance issues were detected. Resolve them before publishing "
        "and seek legal advice if needed."
    ),
    ComplianceLevel.WARNING: "Warning-level issues were detected. Fix them before release.",
    ComplianceLevel.CAUTION: "Some points need attention. Review the content and adjust as needed.",
}

CATEGORY_RECOMMENDATIONS: dict[ComplianceCategory, str] = {
    ComplianceCategory.COPYRIGHT: "Copyright: prefer original content.",
    ComplianceCategory.TRADEMARK: "Trademark: rephrase to avoid registered marks.",
    ComplianceCategory.INAPPROPRIATE_CONTENT: "Inappropriate content: use more suitable wording.",
    ComplianceCategory.COMMERCIAL_USE: "Commercial use: check the license terms.",
    ComplianceCategory.PRIVACY: "Privacy: remove personal information.",
    ComplianceCategory.CULTURAL_SENSITIVITY: (
        "Cultural sensitivity: consider more inclusive wording."
    ),
}

FULL_REVIEW_RECOMMENDATION = (
    "Many issues were detected. A full review of the content is recommended."
)

LEVEL_SCORES: dict[ComplianceLevel, int] = {
    ComplianceLevel.SAFE: 100,
    ComplianceLevel.CAUTION: 75,
    ComplianceLevel.WARNING: 50,
    ComplianceLevel.UNSAFE: 25,
}


def overall_level(issues: Iterable[ComplianceIssue]) -> ComplianceLevel:
    """Worst level present, SAFE when there are no issues."""
    return max(
        (issue.level for issue in issues),
        key=lambda level: LEVEL_RANK[level],
        default=ComplianceLevel.SAFE,
    )


def compliance_score(issues: Sequence[ComplianceIssue], strict_mode: bool = False) -> int:
    """100 minus severity penalties (plus a flat per-issue penalty in strict mode), clamped."""
    score = 100 - sum(SEVERITY_PENALTIES[issue.level] for issue in issues)
    if strict_mode:
        score -= STRICT_MODE_PENALTY * len(issues)
    return max(0, min(100, score))


def build_recommendations(
    issues: Sequence[ComplianceIssue], level: ComplianceLevel
) -> list[str]:
    """Lead line for the level, one line per category present, then a full-review note."""
    if not issues:
        return list(ALL_CLEAR_RECOMMENDATIONS)

    recommendations: list[str] = []
    if level in LEVEL_RECOMMENDATIONS:
        recommendations.append(LEVEL_RECOMMENDATIONS[level])

    present = {issue.category for issue in issues}
    for category in ComplianceCategory:
        if category in present:
            recommendations.append(CATEGORY_RECOMMENDATIONS[category])

    if len(issues) > MANY_ISSUES_THRESHOLD:
        recommendations.append(FULL_REVIEW_RECOMMENDATION)

    return recommendations


@dataclass(frozen=True)
class ComplianceReport:
    """
    Result of a compliance check.

    Reports are immutable. ``resolve_issue`` returns a new report with the
    issue removed and level, score and recommendations recomputed.
    """

    overall_level: ComplianceLevel
    issues: tuple[ComplianceIssue, ...]
    score: int
    recommendations: tuple[str, ...]
    checked_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    strict_mode: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.score <= 100:
            raise ScoreRangeError(
                ErrorMessages.SCORE_OUT_OF_RANGE.format(name="Compliance score", value=self.score)
            )
        for issue in self.issues:
            if not issue.title.strip() or not issue.description.strip():
                raise ConstructionError("Compliance issues need a title and a description.")

    @classmethod
    def from_issues(
        cls, issues: Iterable[ComplianceIssue], strict_mode: bool = False
    ) -> ComplianceReport:
        """Score and level a list of issues."""
        issue_list = tuple(issues)
        level = overall_level(issue_list)
        return cls(
            overall_level=level,
            issues=issue_list,
            score=compliance_score(issue_list, strict_mode),
            recommendations=tuple(build_recommendations(issue_list, level)),
            strict_mode=strict_mode,
        )

    @classmethod
    def safe(cls) -> ComplianceReport:
        """A report with no issues."""
        return cls.from_issues(())

    def has_issues(self) -> bool:
        return bool(self.issues)

    def has_critical_issues(self) -> bool:
        """True if any issue is warning or unsafe."""
        return any(
            issue.level in (ComplianceLevel.WARNING, ComplianceLevel.UNSAFE)
            for issue in self.issues
        )

    def issues_by_category(self, category: ComplianceCategory) -> list[ComplianceIssue]:
        return [issue for issue in self.issues if issue.category == category]

    def issues_by_level(self, level: ComplianceLevel) -> list[ComplianceIssue]:
        return [issue for issue in self.issues if issue.level == level]

    def category_counts(self) -> dict[ComplianceCategory, int]:
        counts = dict.fromkeys(ComplianceCategory, 0)
        for issue in self.issues:
            counts[issue.category] += 1
        return counts

    def level_counts(self) -> dict[ComplianceLevel, int]:
        counts = dict.fromkeys(ComplianceLevel, 0)
        for issue in self.issues:
            counts[issue.level] += 1
        return counts

    def is_safe_for_commercial_use(self) -> bool:
        """No commercial-use issues, and rights issues no worse than caution."""
        mild = (ComplianceLevel.SAFE, ComplianceLevel.CAUTION)
        return (
            not self.issues_by_category(ComplianceCategory.COMMERCIAL_USE)
            and all(i.level in mild for i in self.issues_by_category(ComplianceCategory.COPYRIGHT))
            and all(i.level in mild for i in self.issues_by_category(ComplianceCategory.TRADEMARK))
        )

    def is_safe_for_public_release(self) -> bool:
        """No content or privacy issues, cultural issues no worse than caution."""
        mild = (ComplianceLevel.SAFE, ComplianceLevel.CAUTION)
        return (
            not self.issues_by_category(ComplianceCategory.INAPPROPRIATE_CONTENT)
            and not self.issues_by_category(ComplianceCategory.PRIVACY)
            and all(
                i.level in mild
                for i in self.issues_by_category(ComplianceCategory.CULTURAL_SENSITIVITY)
            )
            and self.overall_level != ComplianceLevel.UNSAFE
        )

    def level_score(self) -> int:
        """Coarse numeric rating of the overall level."""
        return LEVEL_SCORES[self.overall_level]

    def resolve_issue(self, index: int) -> ComplianceReport:
        """
        Return a new report without the issue at ``index``.

        Raises:
            IndexError: If the index does not point at an issue
        """
        if not 0 <= index < len(self.issues):
            raise IndexError(
                ErrorMessages.ISSUE_INDEX_OUT_OF_RANGE.format(
                    index=index, last=len(self.issues) - 1
                )
            )
        remaining = self.issues[:index] + self.issues[index + 1 :]
        return ComplianceReport.from_issues(remaining, self.strict_mode)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable view including the analysis helpers."""
        return {
            "overall_level": self.overall_level.value,
            "issues": [issue.to_dict() for issue in self.issues],
            "score": self.score,
            "recommendations": list(self.recommendations),
            "checked_at": self.checked_at.isoformat(),
            "analysis": {
                "has_issues": self.has_issues(),
                "has_critical_issues": self.has_critical_issues(),
                "is_safe_for_commercial_use": self.is_safe_for_commercial_use(),
                "is_safe_for_public_release": self.is_safe_for_public_release(),
                "category_counts": {k.value: v for k, v in self.category_counts().items()},
                "level_counts": {k.value: v for k, v in self.level_counts().items()},
            },
        }
