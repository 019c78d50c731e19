"""Age-tier threshold policy for Guardian Scores."""

from typing import Optional

from loguru import logger

from guardian_system.data_management.schemas import (
    AgeTier,
    GuardianScore,
    PolicyConfig,
    ReasonImpact,
    ReasonType,
    VerdictReason,
)


class RatingPolicy:
    """
    Decides whether a score clears a tier's required threshold.

    The required score comes from the policy snapshot's per-tier table,
    which is validated to never decrease as strictness rises. Holding the
    score fixed, anything allowed for a stricter tier is therefore allowed
    for every looser tier.

    Usage:
        policy = RatingPolicy()
        if not policy.is_allowed(score, AgeTier.UNDER_8):
            reasons.append(policy.low_score_reason(score, AgeTier.UNDER_8))
    """

    def __init__(self, policy: Optional[PolicyConfig] = None):
        self.policy = policy or PolicyConfig.default()
        self._logger = logger.bind(component="RatingPolicy")

    def required_score(self, tier: AgeTier, policy: Optional[PolicyConfig] = None) -> int:
        return (policy or self.policy).required_score(tier)

    def is_allowed(
        self,
        score: GuardianScore,
        tier: AgeTier,
        policy: Optional[PolicyConfig] = None,
    ) -> bool:
        """score.total >= required score for the tier."""
        return score.meets_threshold(tier, policy or self.policy)

    def low_score_reason(
        self,
        score: GuardianScore,
        tier: AgeTier,
        policy: Optional[PolicyConfig] = None,
    ) -> VerdictReason:
        """Reason recorded when a score misses the threshold."""
        required = self.required_score(tier, policy)
        self._logger.debug(
            f"Score {score.total} below threshold {required} for {tier.value}"
        )
        return VerdictReason(
            type=ReasonType.LOW_SCORE,
            message=f"Score {score.total} below threshold {required} for {tier.display_name}",
            impact=ReasonImpact.NEGATIVE,
        )
