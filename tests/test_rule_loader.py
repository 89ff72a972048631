"""
Tests for YAML rule packs.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chuk_music_prompts.compliance import (
    ComplianceEngine,
    RuleLoader,
    RulePack,
    RuleSpec,
)
from chuk_music_prompts.constants import ComplianceCategory, ComplianceLevel
from chuk_music_prompts.models.compliance import KeywordMatcher, PatternMatcher


def write_pack(directory: Path, filename: str, data: dict) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(yaml.safe_dump(data))
    return path


class TestRuleSpec:
    """Tests for RuleSpec validation."""

    def test_keyword_rule(self):
        """Keyword specs build keyword rules."""
        rule_spec = RuleSpec(
            name="Test",
            category=ComplianceCategory.TRADEMARK,
            description="Brand",
            keywords=["acme"],
        )
        rule = rule_spec.to_rule()
        assert isinstance(rule.matcher, KeywordMatcher)
        assert rule.severity == ComplianceLevel.CAUTION

    def test_pattern_rule(self):
        """Pattern specs build compiled pattern rules."""
        rule_spec = RuleSpec(
            name="Digits",
            category="privacy",
            description="Numbers",
            pattern=r"\d{6,}",
            severity="unsafe",
        )
        rule = rule_spec.to_rule()
        assert isinstance(rule.matcher, PatternMatcher)
        assert rule.severity == ComplianceLevel.UNSAFE

    def test_needs_exactly_one_matcher(self):
        """Both or neither matcher is rejected."""
        with pytest.raises(ValidationError):
            RuleSpec(name="x", category="privacy", description="x")
        with pytest.raises(ValidationError):
            RuleSpec(name="x", category="privacy", description="x", keywords=["a"], pattern="a")

    def test_bad_pattern_rejected(self):
        """Patterns must compile."""
        with pytest.raises(ValidationError):
            RuleSpec(name="x", category="privacy", description="x", pattern="(unclosed")

    def test_unknown_category_rejected(self):
        """Categories come from the taxonomy."""
        with pytest.raises(ValidationError):
            RuleSpec(name="x", category="weather", description="x", keywords=["rain"])

    def test_from_rule_roundtrip(self):
        """A rule can be described and rebuilt."""
        rule_spec = RuleSpec(name="x", category="privacy", description="d", pattern=r"\d+")
        assert RuleSpec.from_rule(rule_spec.to_rule()).model_dump() == rule_spec.model_dump()


class TestRuleLoader:
    """Tests for RuleLoader."""

    def test_library_pack(self):
        """The shipped library includes the soundalike pack."""
        loader = RuleLoader()
        names = [meta.name for meta in loader.list_packs()]
        assert "soundalike" in names

        pack = loader.get_pack("soundalike")
        assert pack is not None
        assert len(pack.rules) == 3

    def test_library_rules_detect_imitation(self):
        """Library rules plug into the engine."""
        engine = ComplianceEngine()
        engine.add_custom_rules(RuleLoader().load_rules(["soundalike"]))

        report = engine.check_compliance({"prompt": "calm tune in the style of a famous singer"})
        assert [i.title for i in report.issues] == ["Artist imitation request"]

    def test_library_pattern_rule(self):
        """The sample pattern matches sampling requests."""
        rules = RuleLoader().load_rules(["soundalike"])
        engine = ComplianceEngine(rules=rules)
        report = engine.check_compliance({"prompt": "sampling from an old record"})
        assert len(report.issues) == 1
        assert report.issues[0].category == ComplianceCategory.COMMERCIAL_USE
        assert "sampling from an" in report.issues[0].affected_text

    def test_project_overrides_library(self, temp_dir: Path):
        """A project pack with the same name wins."""
        library = temp_dir / "library"
        project = temp_dir / "project"
        rule = {"name": "A", "category": "copyright", "description": "a", "keywords": ["a"]}
        write_pack(library, "shared.yaml", {"name": "shared", "rules": [rule, rule]})
        write_pack(project, "shared.yaml", {"name": "shared", "rules": [rule]})

        loader = RuleLoader(library_path=library, project_path=project)
        pack = loader.get_pack("shared")
        assert pack is not None
        assert len(pack.rules) == 1

        metas = loader.list_packs()
        assert [(m.name, m.rule_count) for m in metas] == [("shared", 1)]

    def test_lookup_by_declared_name(self, temp_dir: Path):
        """Packs are found by declared name when the file stem differs."""
        write_pack(temp_dir, "pack-file.yaml", {"name": "friendly", "rules": []})
        loader = RuleLoader(library_path=temp_dir)
        pack = loader.get_pack("friendly")
        assert pack is not None
        assert pack.name == "friendly"

    def test_name_defaults_to_stem(self, temp_dir: Path):
        """A pack without a name is named after its file."""
        write_pack(temp_dir, "unnamed.yaml", {"rules": []})
        loader = RuleLoader(library_path=temp_dir)
        assert [m.name for m in loader.list_packs()] == ["unnamed"]

    def test_invalid_packs_skipped(self, temp_dir: Path):
        """Unparseable or invalid files are skipped."""
        (temp_dir / "broken.yaml").write_text("rules: [unclosed")
        write_pack(temp_dir, "invalid.yaml", {"rules": [{"name": "x"}]})
        (temp_dir / "scalar.yaml").write_text("just a string")

        loader = RuleLoader(library_path=temp_dir)
        assert loader.list_packs() == []
        assert loader.get_pack("broken") is None

    def test_missing_pack(self, temp_dir: Path):
        """Missing packs load no rules."""
        loader = RuleLoader(library_path=temp_dir)
        assert loader.get_pack("nope") is None
        assert loader.load_rules(["nope"]) == []

    def test_save_pack(self, temp_dir: Path):
        """Saved packs can be loaded back."""
        loader = RuleLoader(library_path=temp_dir / "lib", project_path=temp_dir / "proj")
        pack = RulePack(
            name="mine",
            description="Custom",
            rules=[
                RuleSpec(name="R", category="privacy", description="d", pattern=r"\d{8}"),
            ],
        )
        path = loader.save_pack(pack)
        assert path.exists()

        loader.clear_cache()
        loaded = loader.get_pack("mine")
        assert loaded is not None
        assert loaded.rules[0].pattern == r"\d{8}"
        assert loaded.to_yaml_dict()["schema"] == "rules/v1"

    def test_save_needs_project_path(self, temp_dir: Path):
        """Saving without a project path raises."""
        loader = RuleLoader(library_path=temp_dir)
        with pytest.raises(ValueError):
            loader.save_pack(RulePack(name="x"))
