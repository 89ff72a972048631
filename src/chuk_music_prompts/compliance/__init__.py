"""
Compliance checking - scans prompt content against a rule taxonomy.

This module provides:
- ComplianceEngine: Runs rules and builds reports
- ComplianceConfig: Strict mode, enabled categories, custom rules
- RuleLoader: Custom rule packs from YAML
"""

from chuk_music_prompts.compliance.engine import (
    ComplianceConfig,
    ComplianceEngine,
    ComplianceInput,
)
from chuk_music_prompts.compliance.loader import (
    RuleLoader,
    RulePack,
    RulePackMetadata,
    RuleSpec,
)
from chuk_music_prompts.compliance.rules import builtin_rules

__all__ = [
    "ComplianceConfig",
    "ComplianceEngine",
    "ComplianceInput",
    "RuleLoader",
    "RulePack",
    "RulePackMetadata",
    "RuleSpec",
    "builtin_rules",
]
