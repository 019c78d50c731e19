"""Tests for RatingPolicy threshold checks."""

import pytest

from guardian_system.data_management.schemas import (
    AgeTier,
    GuardianScore,
    PolicyConfig,
    ReasonImpact,
    ReasonType,
    ScoreBreakdown,
)
from guardian_system.scoring import RatingPolicy


def _score(total: int) -> GuardianScore:
    breakdown = ScoreBreakdown(trust=125, content=150, category=150, duration=100, community=50, metadata=100)
    return GuardianScore.from_breakdown(breakdown).with_adjustment(total - breakdown.total())


@pytest.fixture
def policy():
    return RatingPolicy()


class TestRatingPolicy:
    """Tests for is_allowed and the low-score reason."""

    def test_exact_threshold_allowed(self, policy):
        assert policy.is_allowed(_score(575), AgeTier.UNDER_8)

    def test_below_threshold_blocked(self, policy):
        assert not policy.is_allowed(_score(574), AgeTier.UNDER_8)

    def test_unrestricted_tier_allows_zero(self, policy):
        assert policy.is_allowed(GuardianScore.blocked(), AgeTier.ALL)

    def test_monotonic_across_tiers(self, policy):
        for total in range(0, 1001, 25):
            score = _score(total)
            for stricter in AgeTier:
                for looser in AgeTier:
                    if stricter.strictness > looser.strictness and policy.is_allowed(score, stricter):
                        assert policy.is_allowed(score, looser)

    def test_required_scores_monotonic(self, policy):
        for stricter in AgeTier:
            for looser in AgeTier:
                if stricter.strictness > looser.strictness:
                    assert policy.required_score(stricter) >= policy.required_score(looser)

    def test_low_score_reason(self, policy):
        reason = policy.low_score_reason(_score(545), AgeTier.UNDER_8)

        assert reason.type is ReasonType.LOW_SCORE
        assert reason.impact is ReasonImpact.NEGATIVE
        assert reason.message == "Score 545 below threshold 575 for Kids Under 8"

    def test_policy_snapshot_used(self, policy):
        scores = dict(PolicyConfig.default().required_scores)
        scores[AgeTier.UNDER_5] = 900
        custom = PolicyConfig.default().updated(required_scores=scores)

        assert policy.is_allowed(_score(700), AgeTier.UNDER_5)
        assert not policy.is_allowed(_score(700), AgeTier.UNDER_5, custom)
        assert "threshold 900" in policy.low_score_reason(_score(700), AgeTier.UNDER_5, custom).message

    def test_score_helpers_agree_with_policy(self, policy):
        scores = dict(PolicyConfig.default().required_scores)
        scores[AgeTier.UNDER_5] = 900
        custom = PolicyConfig.default().updated(required_scores=scores)

        for total in (599, 600, 899, 900):
            score = _score(total)
            for tier in AgeTier:
                assert policy.is_allowed(score, tier, custom) == score.meets_threshold(tier, custom)
                assert policy.is_allowed(score, tier, custom) == tier.is_score_acceptable(total, custom)
