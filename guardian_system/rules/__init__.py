"""Gating rules and the priority-ordered rule chain.

Components:
    Rule: Base class for rules (id, name, priority, evaluate)
    Approve / Block / Continue: The three rule result shapes
    RuleContext: Tier, trust level and policy snapshot for one evaluation
    RuleChain: Rules stable-sorted by priority, highest first
    TrustedSourceRule: Approves verified partners and trusted sources (200)
    KeywordBlocklistRule: Blocks per-tier blocklisted terms (180)
    SuspiciousPatternRule: Score penalty for manipulative phrasing (170)

Usage:
    from guardian_system.rules import RuleChain, default_rules

    chain = RuleChain(default_rules())
"""

from typing import List

from guardian_system.rules.base import (
    SKIP,
    Approve,
    Block,
    Continue,
    Rule,
    RuleChain,
    RuleContext,
    RuleResult,
)
from guardian_system.rules.keyword_blocklist import KeywordBlocklistRule
from guardian_system.rules.suspicious_pattern import SuspiciousPatternRule
from guardian_system.rules.trusted_source import TrustedSourceRule


def default_rules() -> List[Rule]:
    """Built-in rules in registration order."""
    return [
        TrustedSourceRule(),
        KeywordBlocklistRule(),
        SuspiciousPatternRule(),
    ]


__all__ = [
    "SKIP",
    "Approve",
    "Block",
    "Continue",
    "Rule",
    "RuleChain",
    "RuleContext",
    "RuleResult",
    "KeywordBlocklistRule",
    "SuspiciousPatternRule",
    "TrustedSourceRule",
    "default_rules",
]
