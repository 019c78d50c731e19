"""Tests for the rule contract, result shapes and RuleChain ordering."""

import pytest

from guardian_system.data_management.schemas import AgeTier, ContentItem, TrustLevel
from guardian_system.rules import (
    SKIP,
    Approve,
    Block,
    Continue,
    Rule,
    RuleChain,
    RuleContext,
    default_rules,
)


class _StubRule(Rule):
    def __init__(self, rule_id: str, priority: int):
        self.id = rule_id
        self.name = f"Stub {rule_id}"
        self.priority = priority

    def evaluate(self, content, context):
        return SKIP


class TestRuleResults:
    """Tests for the three result shapes."""

    def test_skip_is_neutral_continue(self):
        assert SKIP == Continue()
        assert SKIP.score_adjustment == 0
        assert SKIP.reason is None

    def test_results_are_immutable(self):
        result = Block(reason="Blocked", matched_patterns=frozenset({"gore"}))
        with pytest.raises(AttributeError):
            result.reason = "changed"

    def test_results_compare_by_value(self):
        assert Approve("ok") == Approve("ok")
        assert Continue(-30, "x") != Continue(-60, "x")


class TestRuleContext:
    """Tests for strict mode derivation."""

    @pytest.mark.parametrize(
        "tier,strict",
        [
            (AgeTier.ALL, False),
            (AgeTier.UNDER_12, False),
            (AgeTier.UNDER_10, True),
            (AgeTier.UNDER_8, True),
            (AgeTier.UNDER_5, True),
        ],
    )
    def test_strict_mode(self, tier, strict):
        assert RuleContext(tier=tier, trust_level=TrustLevel.NEUTRAL).strict_mode is strict


class TestRuleChain:
    """Tests for priority ordering."""

    def test_sorted_by_priority_descending(self):
        chain = RuleChain([_StubRule("low", 10), _StubRule("high", 200), _StubRule("mid", 100)])
        assert [rule.id for rule in chain] == ["high", "mid", "low"]

    def test_ties_keep_registration_order(self):
        chain = RuleChain([_StubRule("a", 50), _StubRule("b", 50), _StubRule("c", 50)])
        assert [rule.id for rule in chain] == ["a", "b", "c"]

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate rule ids: dup"):
            RuleChain([_StubRule("dup", 1), _StubRule("dup", 2)])

    def test_default_chain_order(self):
        chain = RuleChain(default_rules())

        assert len(chain) == 3
        assert [rule.id for rule in chain] == [
            "trusted_channel",
            "keyword_blocklist",
            "suspicious_pattern",
        ]
        assert [rule.priority for rule in chain] == [200, 180, 170]

    def test_rule_repr(self):
        assert repr(_StubRule("x", 7)) == "_StubRule(id='x', priority=7)"

    def test_abstract_rule_not_instantiable(self):
        with pytest.raises(TypeError):
            Rule()


class TestTrustedSourceRuleInChain:
    """Tests for the trusted-source rule behavior."""

    @pytest.fixture
    def rule(self):
        return default_rules()[0]

    @pytest.fixture
    def item(self):
        return ContentItem(id="v1", title="Colors Song", source_name="Cocomelon")

    def test_approves_verified_partner(self, rule, item):
        result = rule.evaluate(item, RuleContext(AgeTier.UNDER_5, TrustLevel.VERIFIED_PARTNER))
        assert isinstance(result, Approve)
        assert result.reason == "Approved: Content from verified partner channel 'Cocomelon'"

    def test_approves_trusted(self, rule, item):
        result = rule.evaluate(item, RuleContext(AgeTier.UNDER_5, TrustLevel.TRUSTED))
        assert isinstance(result, Approve)

    @pytest.mark.parametrize(
        "level",
        [TrustLevel.RECOGNIZED, TrustLevel.NEUTRAL, TrustLevel.SUSPICIOUS, TrustLevel.BLOCKED],
    )
    def test_skips_other_levels(self, rule, item, level):
        assert rule.evaluate(item, RuleContext(AgeTier.UNDER_5, level)) == SKIP
