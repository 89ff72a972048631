"""
Rule pack loader - discovers and loads custom compliance rules from YAML.

Rule packs can come from:
1. Built-in library (shipped with package)
2. Project packs (user's project rules directory)

Project packs override library packs with the same name.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from chuk_music_prompts.constants import ComplianceCategory, ComplianceLevel
from chuk_music_prompts.models.compliance import (
    ComplianceRule,
    KeywordMatcher,
    PatternMatcher,
)

logger = logging.getLogger(__name__)


class RuleSpec(BaseModel):
    """One rule as written in a pack file. Exactly one of keywords/pattern."""

    name: str = Field(..., min_length=1)
    category: ComplianceCategory
    description: str = Field(..., min_length=1)
    keywords: list[str] | None = None
    pattern: str | None = None
    severity: ComplianceLevel = ComplianceLevel.CAUTION
    enabled: bool = True

    model_config = {"frozen": True}

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str | None) -> str | None:
        """Reject patterns that do not compile."""
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid pattern {v!r}: {e}") from e
        return v

    @model_validator(mode="after")
    def check_matcher(self) -> RuleSpec:
        """Require exactly one matcher."""
        if (self.keywords is None) == (self.pattern is None):
            raise ValueError(f"Rule '{self.name}' needs either keywords or a pattern")
        if self.keywords is not None and not self.keywords:
            raise ValueError(f"Rule '{self.name}' has an empty keyword list")
        return self

    def to_rule(self) -> ComplianceRule:
        """Build the engine rule."""
        if self.keywords is not None:
            matcher: KeywordMatcher | PatternMatcher = KeywordMatcher(tuple(self.keywords))
        else:
            matcher = PatternMatcher.compile(self.pattern or "")
        return ComplianceRule(
            name=self.name,
            category=self.category,
            description=self.description,
            matcher=matcher,
            severity=self.severity,
            enabled=self.enabled,
        )

    @classmethod
    def from_rule(cls, rule: ComplianceRule) -> RuleSpec:
        """Describe an engine rule for writing back to YAML."""
        matcher = rule.matcher
        return cls(
            name=rule.name,
            category=rule.category,
            description=rule.description,
            keywords=list(matcher.keywords) if isinstance(matcher, KeywordMatcher) else None,
            pattern=matcher.pattern.pattern if isinstance(matcher, PatternMatcher) else None,
            severity=rule.severity,
            enabled=rule.enabled,
        )


class RulePack(BaseModel):
    """A named collection of rules."""

    schema_version: str = Field("rules/v1", alias="schema")
    name: str
    description: str = ""
    rules: list[RuleSpec] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}

    def to_rules(self) -> list[ComplianceRule]:
        return [rule_spec.to_rule() for rule_spec in self.rules]

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "rules": [r.model_dump(mode="json", exclude_none=True) for r in self.rules],
        }


class RulePackMetadata(BaseModel):
    """Lightweight metadata for listing packs."""

    name: str
    description: str
    rule_count: int
    path: Path

    model_config = {"frozen": True}


class RuleLoader:
    """
    Discovers and loads rule packs.

    Packs are YAML files in the library and project directories.
    Files that cannot be parsed are skipped with a warning.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the rule loader.

        Args:
            library_path: Path to built-in rule pack library
            project_path: Path to project rule packs
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, RulePack] = {}

    def list_packs(self) -> list[RulePackMetadata]:
        """List all available packs, project packs taking precedence."""
        packs: dict[str, RulePackMetadata] = {}

        for directory in self._search_dirs():
            for path in sorted(directory.glob("*.yaml")):
                pack = self._load_pack_file(path)
                if pack:
                    packs[pack.name] = RulePackMetadata(
                        name=pack.name,
                        description=pack.description,
                        rule_count=len(pack.rules),
                        path=path,
                    )

        return sorted(packs.values(), key=lambda m: m.name)

    def get_pack(self, name: str) -> RulePack | None:
        """
        Get a pack by name.

        Args:
            name: Pack name (file stem)

        Returns:
            RulePack if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        # Project first, then library; file stem first, then declared name
        directories = list(reversed(self._search_dirs()))
        for directory in directories:
            path = directory / f"{name}.yaml"
            if path.exists():
                pack = self._load_pack_file(path)
                if pack:
                    self._cache[name] = pack
                    return pack

        for directory in directories:
            for path in sorted(directory.glob("*.yaml")):
                pack = self._load_pack_file(path)
                if pack and pack.name == name:
                    self._cache[name] = pack
                    return pack

        return None

    def load_rules(self, names: list[str] | None = None) -> list[ComplianceRule]:
        """
        Load engine rules from packs.

        Args:
            names: Packs to load (default: every available pack)

        Returns:
            Rules in pack order
        """
        if names is None:
            names = [meta.name for meta in self.list_packs()]

        rules: list[ComplianceRule] = []
        for name in names:
            pack = self.get_pack(name)
            if pack is None:
                logger.warning(f"Rule pack not found: {name}")
                continue
            rules.extend(pack.to_rules())
        return rules

    def save_pack(self, pack: RulePack) -> Path:
        """
        Write a pack to the project directory.

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{pack.name}.yaml"
        with open(path, "w") as f:
            yaml.safe_dump(pack.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)

        self._cache.pop(pack.name, None)
        logger.info(f"Saved rule pack '{pack.name}' to {path}")
        return path

    def clear_cache(self) -> None:
        """Clear the pack cache."""
        self._cache.clear()

    def _search_dirs(self) -> list[Path]:
        """Existing directories, lowest precedence first."""
        dirs = [self.library_path]
        if self.project_path:
            dirs.append(self.project_path)
        return [d for d in dirs if d.exists()]

    def _load_pack_file(self, path: Path) -> RulePack | None:
        """Load a pack from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            data.setdefault("name", path.stem)
            return RulePack.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError, AttributeError) as e:
            logger.warning(f"Skipping rule pack {path}: {e}")
            return None
