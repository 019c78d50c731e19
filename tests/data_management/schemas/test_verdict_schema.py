"""Tests for Verdict and VerdictReason helpers."""

from datetime import datetime, timezone

from guardian_system.data_management.schemas import (
    AgeTier,
    GuardianScore,
    ReasonImpact,
    ReasonType,
    ScoreBreakdown,
    TrustLevel,
    Verdict,
    VerdictReason,
)


def _reason(impact: ReasonImpact, message: str) -> VerdictReason:
    return VerdictReason(type=ReasonType.LOW_SCORE, message=message, impact=impact)


class TestVerdictHelpers:
    """Tests for primary_reason, blocking_reasons and summary."""

    def test_primary_reason_is_most_severe(self):
        verdict = Verdict(
            allowed=False,
            score=GuardianScore.blocked(),
            tier=AgeTier.UNDER_8,
            trust_level=TrustLevel.NEUTRAL,
            reasons=[
                _reason(ReasonImpact.NEGATIVE, "penalty"),
                _reason(ReasonImpact.CRITICAL, "blocked"),
                _reason(ReasonImpact.CRITICAL, "second"),
            ],
        )
        assert verdict.primary_reason.message == "blocked"
        assert [r.message for r in verdict.blocking_reasons] == ["penalty", "blocked", "second"]
        assert verdict.summary() == "BLOCKED - blocked"

    def test_allowed_summary(self):
        score = GuardianScore.from_breakdown(
            ScoreBreakdown(trust=250, content=300, category=150, duration=100, community=50, metadata=70)
        )
        verdict = Verdict(
            allowed=True,
            score=score,
            tier=AgeTier.UNDER_5,
            trust_level=TrustLevel.VERIFIED_PARTNER,
        )
        assert verdict.primary_reason is None
        assert verdict.blocking_reasons == []
        assert verdict.summary() == "ALLOWED - Platinum Safe (920/1000)"

    def test_evaluated_at_defaults_to_utc(self):
        verdict = Verdict(
            allowed=False,
            score=GuardianScore.blocked(),
            tier=AgeTier.ALL,
            trust_level=TrustLevel.BLOCKED,
        )
        assert verdict.evaluated_at.tzinfo == timezone.utc

    def test_json_round_trip(self):
        verdict = Verdict(
            allowed=False,
            score=GuardianScore.blocked(),
            tier=AgeTier.UNDER_8,
            trust_level=TrustLevel.NEUTRAL,
            reasons=[
                VerdictReason(
                    type=ReasonType.RULE_TRIGGERED,
                    message="Blocked",
                    impact=ReasonImpact.CRITICAL,
                    source_rule_id="keyword_blocklist",
                    matched_patterns=["18+"],
                )
            ],
            evaluated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        restored = Verdict.model_validate_json(verdict.model_dump_json())
        assert restored == verdict

    def test_impact_severity_order(self):
        severities = [impact.severity for impact in ReasonImpact]
        assert severities == sorted(severities, reverse=True)
