"""Schema package for content gating data structures.

Pydantic models for the content being judged, the tier and trust
taxonomies, the Guardian Score, the verdict and the policy snapshot.

Usage:
    from guardian_system.data_management.schemas import ContentItem, AgeTier
    item = ContentItem(id="v1", title="ABC Song", source_name="Fun Songs")
"""

from guardian_system.data_management.schemas.content_schema import (
    ContentItem,
    DURATION_MS_THRESHOLD,
)
from guardian_system.data_management.schemas.rating_schema import (
    AgeTier,
    TrustLevel,
    AgeGroup,
    TIER_MAPPING_VERSION,
    TIER_TO_AGE_GROUP,
    AGE_GROUP_TO_TIER,
    tier_to_age_group,
    age_group_to_tier,
)
from guardian_system.data_management.schemas.score_schema import (
    GuardianScore,
    GuardianGrade,
    ScoreBreakdown,
    MAX_SCORE,
)
from guardian_system.data_management.schemas.verdict_schema import (
    Verdict,
    VerdictReason,
    ReasonType,
    ReasonImpact,
)
from guardian_system.data_management.schemas.policy_schema import (
    PolicyConfig,
    DEFAULT_POLICY_VERSION,
)

__all__ = [
    "ContentItem",
    "DURATION_MS_THRESHOLD",
    "AgeTier",
    "TrustLevel",
    "AgeGroup",
    "TIER_MAPPING_VERSION",
    "TIER_TO_AGE_GROUP",
    "AGE_GROUP_TO_TIER",
    "tier_to_age_group",
    "age_group_to_tier",
    "GuardianScore",
    "GuardianGrade",
    "ScoreBreakdown",
    "MAX_SCORE",
    "Verdict",
    "VerdictReason",
    "ReasonType",
    "ReasonImpact",
    "PolicyConfig",
    "DEFAULT_POLICY_VERSION",
]
