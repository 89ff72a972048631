"""
Tests for the compliance engine and report.

Tests cover:
- Keyword and pattern matching
- Levels, scores and recommendations
- Configuration (strict mode, categories, custom rules)
- Report analysis and issue resolution
"""

from datetime import datetime

import pytest

from chuk_music_prompts.compliance import ComplianceConfig, ComplianceEngine, ComplianceInput
from chuk_music_prompts.compliance.engine import (
    DEFAULT_SUGGESTION,
    SUGGESTION_TEMPLATES,
    suggestion_for,
)
from chuk_music_prompts.constants import ComplianceCategory, ComplianceLevel
from chuk_music_prompts.errors import ConstructionError, ScoreRangeError
from chuk_music_prompts.models.compliance import (
    ALL_CLEAR_RECOMMENDATIONS,
    CATEGORY_RECOMMENDATIONS,
    FULL_REVIEW_RECOMMENDATION,
    LEVEL_RECOMMENDATIONS,
    ComplianceIssue,
    ComplianceReport,
    ComplianceRule,
    build_recommendations,
    extract_excerpt,
)


@pytest.fixture
def engine() -> ComplianceEngine:
    return ComplianceEngine()


class TestCleanContent:
    """Content with no matches."""

    def test_safe_report(self, engine: ComplianceEngine):
        """Zero matches: safe, 100, two all-clear lines."""
        report = engine.check_compliance(
            ComplianceInput(title="Summer Drive", prompt="upbeat tune about the ocean breeze")
        )
        assert report.overall_level == ComplianceLevel.SAFE
        assert report.score == 100
        assert report.issues == ()
        assert list(report.recommendations) == list(ALL_CLEAR_RECOMMENDATIONS)
        assert len(report.recommendations) == 2
        assert isinstance(report.checked_at, datetime)

    def test_total_over_input_shapes(self, engine: ComplianceEngine):
        """No input shape raises."""
        assert engine.check_compliance(None).score == 100
        assert engine.check_compliance({}).score == 100
        assert engine.check_compliance({"title": 5, "tags": None}).score == 100
        assert engine.check_compliance("kill").has_issues()


class TestKeywordRules:
    """Keyword matching."""

    def test_single_unsafe_keyword(self, engine: ComplianceEngine):
        """One unsafe keyword: level unsafe, score below 100."""
        report = engine.check_compliance({"prompt": "a racist anthem"})
        assert report.overall_level == ComplianceLevel.UNSAFE
        assert report.score == 70
        assert len(report.issues) == 1
        assert report.issues[0].category == ComplianceCategory.INAPPROPRIATE_CONTENT
        assert len(report.recommendations) == 2

    def test_adding_warning_never_raises_score(self, engine: ComplianceEngine):
        """Score is non-increasing in issues."""
        base = engine.check_compliance({"prompt": "a racist anthem"})
        more = engine.check_compliance({"prompt": "a racist anthem about murder"})
        assert more.score <= base.score
        assert len(more.issues) == 2

    def test_keyword_reported_once(self, engine: ComplianceEngine):
        """Repeated keywords produce a single issue."""
        report = engine.check_compliance({"lyrics": "kill kill kill"})
        assert len(report.issues) == 1
        issue = report.issues[0]
        assert issue.description == '"kill" detected: Contains violent language'
        assert issue.level == ComplianceLevel.WARNING
        assert "kill" in issue.suggestion

    def test_case_insensitive(self, engine: ComplianceEngine):
        """Keywords match regardless of case."""
        report = engine.check_compliance({"prompt": "Inspired by the BEATLES"})
        assert [i.title for i in report.issues] == ["Artist name reference"]

    def test_substring_match(self, engine: ComplianceEngine):
        """Keywords also fire inside longer words."""
        report = engine.check_compliance({"prompt": "show your skill"})
        assert len(report.issues) == 1

    def test_tags_are_scanned(self, engine: ComplianceEngine):
        """Tags are part of the corpus."""
        report = engine.check_compliance({"tags": ["nike"]})
        assert report.issues[0].category == ComplianceCategory.TRADEMARK

    def test_many_issues_full_review(self, engine: ComplianceEngine):
        """More than five issues adds the full-review line; score clamps at 0."""
        report = engine.check_compliance({"lyrics": "kill murder violence blood death hate"})
        assert len(report.issues) == 6
        assert report.score == 0
        assert report.recommendations[-1] == FULL_REVIEW_RECOMMENDATION


class TestPatternRules:
    """Regular-expression matching."""

    def test_quoted_lyrics(self, engine: ComplianceEngine):
        """Quoted text is flagged as a possible lyric quote."""
        report = engine.check_compliance({"prompt": 'sing "let it be" loudly'})
        assert len(report.issues) == 1
        assert report.issues[0].title == "Quoted lyrics"
        assert report.issues[0].description == "May quote lyrics from an existing song"
        assert report.score == 80

    def test_personal_information(self, engine: ComplianceEngine):
        """Every pattern match is its own issue."""
        report = engine.check_compliance(
            {"description": "call 090-1234-5678 or mail me at someone@example.com"}
        )
        privacy = report.issues_by_category(ComplianceCategory.PRIVACY)
        assert len(privacy) == 2
        assert report.overall_level == ComplianceLevel.UNSAFE
        assert report.score == 40


class TestExcerpts:
    """Affected-text excerpts."""

    def test_context_and_prefix(self, engine: ComplianceEngine):
        """Excerpt includes context and is prefixed when cut at the start."""
        report = engine.check_compliance(
            {"prompt": "The chorus repeats the line about blood on the dance floor tonight"}
        )
        excerpt = report.issues[0].affected_text
        assert excerpt.startswith("...")
        assert "blood on the dance floor" in excerpt

    def test_no_prefix_at_start(self):
        """No prefix when the excerpt starts at the beginning."""
        assert extract_excerpt("kill the lights", 0, 4) == "kill the lights"
        assert extract_excerpt("x" * 30 + "kill", 30, 34) == "..." + "x" * 20 + "kill"


def make_issue(category: ComplianceCategory, level: ComplianceLevel) -> ComplianceIssue:
    return ComplianceIssue(
        category=category, level=level, title=f"{category.value} rule", description="Detected"
    )


class TestRecommendations:
    """Recommendation lines built for a report."""

    @pytest.mark.parametrize(
        "level",
        [ComplianceLevel.UNSAFE, ComplianceLevel.WARNING, ComplianceLevel.CAUTION],
    )
    def test_lead_line_per_level(self, level: ComplianceLevel):
        """The worst level picks the opening line."""
        report = ComplianceReport.from_issues(
            [
                make_issue(ComplianceCategory.COPYRIGHT, ComplianceLevel.SAFE),
                make_issue(ComplianceCategory.PRIVACY, level),
            ]
        )
        assert report.recommendations[0] == LEVEL_RECOMMENDATIONS[level]
        assert report.recommendations[1:] == (
            CATEGORY_RECOMMENDATIONS[ComplianceCategory.COPYRIGHT],
            CATEGORY_RECOMMENDATIONS[ComplianceCategory.PRIVACY],
        )

    def test_category_lines_in_fixed_order(self):
        """Category lines follow the category order, not the issue order."""
        issues = [
            make_issue(ComplianceCategory.CULTURAL_SENSITIVITY, ComplianceLevel.CAUTION),
            make_issue(ComplianceCategory.TRADEMARK, ComplianceLevel.CAUTION),
            make_issue(ComplianceCategory.COPYRIGHT, ComplianceLevel.CAUTION),
            make_issue(ComplianceCategory.TRADEMARK, ComplianceLevel.CAUTION),
        ]
        lines = build_recommendations(issues, ComplianceLevel.CAUTION)
        assert lines == [
            LEVEL_RECOMMENDATIONS[ComplianceLevel.CAUTION],
            CATEGORY_RECOMMENDATIONS[ComplianceCategory.COPYRIGHT],
            CATEGORY_RECOMMENDATIONS[ComplianceCategory.TRADEMARK],
            CATEGORY_RECOMMENDATIONS[ComplianceCategory.CULTURAL_SENSITIVITY],
        ]

    def test_safe_issues_have_no_lead_line(self):
        """Safe-level issues only produce category lines."""
        report = ComplianceReport.from_issues(
            [make_issue(ComplianceCategory.COMMERCIAL_USE, ComplianceLevel.SAFE)]
        )
        assert report.overall_level == ComplianceLevel.SAFE
        assert report.recommendations == (
            CATEGORY_RECOMMENDATIONS[ComplianceCategory.COMMERCIAL_USE],
        )

    def test_engine_report_order(self, engine: ComplianceEngine):
        """Mixed hits from the built-in rules."""
        report = engine.check_compliance({"prompt": "nike kill beatles"})
        assert report.overall_level == ComplianceLevel.WARNING
        assert list(report.recommendations) == [
            LEVEL_RECOMMENDATIONS[ComplianceLevel.WARNING],
            CATEGORY_RECOMMENDATIONS[ComplianceCategory.COPYRIGHT],
            CATEGORY_RECOMMENDATIONS[ComplianceCategory.TRADEMARK],
            CATEGORY_RECOMMENDATIONS[ComplianceCategory.INAPPROPRIATE_CONTENT],
        ]

    def test_default_suggestion(self, monkeypatch: pytest.MonkeyPatch):
        """Categories without a template fall back to the generic suggestion."""
        monkeypatch.delitem(SUGGESTION_TEMPLATES, ComplianceCategory.PRIVACY)
        assert suggestion_for(ComplianceCategory.PRIVACY, "555-0100") == (
            DEFAULT_SUGGESTION.format(trigger="555-0100")
        )
        assert suggestion_for(ComplianceCategory.PRIVACY, "x") == 'Review "x" before publishing.'

    def test_mapped_suggestion_names_trigger(self):
        assert '"nike"' in suggestion_for(ComplianceCategory.TRADEMARK, "nike")


class TestConfiguration:
    """Engine configuration."""

    def test_strict_mode(self):
        """Strict mode subtracts five more per issue."""
        text = {"prompt": "like the beatles"}
        assert ComplianceEngine().check_compliance(text).score == 90
        strict = ComplianceEngine(ComplianceConfig(strict_mode=True))
        report = strict.check_compliance(text)
        assert report.score == 85
        assert report.strict_mode

    def test_enabled_categories(self, engine: ComplianceEngine):
        """Rules outside the enabled categories are skipped."""
        engine.update_config(enabled_categories={ComplianceCategory.PRIVACY})
        assert engine.check_compliance({"prompt": "kill"}).score == 100
        assert engine.config.enabled_categories == frozenset({ComplianceCategory.PRIVACY})

    def test_update_config_merges(self, engine: ComplianceEngine):
        """Partial updates keep other settings."""
        engine.update_config(strict_mode=True)
        assert engine.config.strict_mode
        assert engine.config.enabled_categories == frozenset(ComplianceCategory)

    def test_custom_rules(self, engine: ComplianceEngine):
        """Custom rules can be added and removed by name."""
        rule = ComplianceRule.keywords(
            "Zebra check",
            ComplianceCategory.COPYRIGHT,
            "Custom check",
            ["zebra"],
            ComplianceLevel.CAUTION,
        )
        engine.add_custom_rule(rule)
        assert engine.check_compliance({"prompt": "zebra stripes"}).score == 90

        assert engine.remove_custom_rule("Zebra check") is True
        assert engine.remove_custom_rule("Zebra check") is False
        assert engine.check_compliance({"prompt": "zebra stripes"}).score == 100

    def test_config_copied_on_entry(self):
        """Engine changes never leak into the caller's config."""
        config = ComplianceConfig(strict_mode=True)
        engine = ComplianceEngine(config)
        engine.add_custom_rule(
            ComplianceRule.keywords(
                "Zebra check",
                ComplianceCategory.COPYRIGHT,
                "Custom check",
                ["zebra"],
                ComplianceLevel.CAUTION,
            )
        )
        engine.update_config(strict_mode=False)

        assert config.custom_rules == []
        assert config.strict_mode
        assert len(engine.config.custom_rules) == 1

    def test_disabled_rule_skipped(self, engine: ComplianceEngine):
        """Disabled rules never fire."""
        engine.add_custom_rule(
            ComplianceRule.keywords(
                "Off",
                ComplianceCategory.COPYRIGHT,
                "Disabled",
                ["zebra"],
                ComplianceLevel.UNSAFE,
                enabled=False,
            )
        )
        assert engine.check_compliance({"prompt": "zebra"}).score == 100

    def test_rule_requires_name(self):
        """Blank rule names are rejected."""
        with pytest.raises(ConstructionError):
            ComplianceRule.keywords(
                " ", ComplianceCategory.COPYRIGHT, "x", ["a"], ComplianceLevel.CAUTION
            )

    def test_batch(self, engine: ComplianceEngine):
        """Batch keeps input order."""
        reports = engine.check_batch([{"prompt": "kill"}, {"prompt": "calm"}, None])
        assert [r.score for r in reports] == [80, 100, 100]


class TestReport:
    """Report analysis and resolution."""

    def test_safe_factory(self):
        """safe() is an all-clear report."""
        report = ComplianceReport.safe()
        assert report.overall_level == ComplianceLevel.SAFE
        assert report.score == 100
        assert report.level_score() == 100
        assert report.is_safe_for_commercial_use()
        assert report.is_safe_for_public_release()

    def test_score_range(self):
        """Scores outside 0-100 are rejected."""
        with pytest.raises(ScoreRangeError):
            ComplianceReport(ComplianceLevel.SAFE, (), 101, ())

    def test_analysis(self, engine: ComplianceEngine):
        """Counts and grouping helpers."""
        report = engine.check_compliance({"prompt": "a remix with blood"})
        assert report.has_issues()
        assert report.has_critical_issues()
        assert report.category_counts()[ComplianceCategory.COMMERCIAL_USE] == 1
        assert report.level_counts()[ComplianceLevel.WARNING] == 1
        assert len(report.issues_by_level(ComplianceLevel.CAUTION)) == 1
        assert not report.is_safe_for_commercial_use()
        assert not report.is_safe_for_public_release()
        assert report.level_score() == 50

    def test_resolve_issue(self, engine: ComplianceEngine):
        """Resolving returns a recomputed report and leaves the original intact."""
        report = engine.check_compliance({"prompt": "a racist remix"})
        assert report.overall_level == ComplianceLevel.UNSAFE

        unsafe_index = next(
            i for i, issue in enumerate(report.issues) if issue.level == ComplianceLevel.UNSAFE
        )
        resolved = report.resolve_issue(unsafe_index)
        assert len(resolved.issues) == 1
        assert resolved.overall_level == ComplianceLevel.CAUTION
        assert resolved.score == 90
        assert len(report.issues) == 2

        cleared = resolved.resolve_issue(0)
        assert cleared.score == 100
        assert len(cleared.recommendations) == 2

    def test_resolve_out_of_range(self, engine: ComplianceEngine):
        """Bad indexes raise IndexError."""
        report = engine.check_compliance({"prompt": "kill"})
        with pytest.raises(IndexError):
            report.resolve_issue(1)
        with pytest.raises(IndexError):
            report.resolve_issue(-1)

    def test_to_dict(self, engine: ComplianceEngine):
        """Serialized form includes analysis."""
        data = engine.check_compliance({"prompt": "kill"}).to_dict()
        assert data["overall_level"] == "warning"
        assert data["score"] == 80
        assert data["issues"][0]["category"] == "inappropriate_content"
        assert data["analysis"]["has_critical_issues"] is True

    def test_blank_issue_rejected(self):
        """Issues need a title and description."""
        issue = ComplianceIssue(
            ComplianceCategory.COPYRIGHT, ComplianceLevel.CAUTION, "", "description"
        )
        with pytest.raises(ConstructionError):
            ComplianceReport.from_issues([issue])
