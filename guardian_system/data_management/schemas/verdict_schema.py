"""Verdict schema - the allow/block decision with its reason trail.

Verdicts are computed per call and never persisted here; callers may log
or store them. The reason list is ordered by the time each reason was
produced during evaluation.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from guardian_system.data_management.schemas.rating_schema import AgeTier, TrustLevel
from guardian_system.data_management.schemas.score_schema import GuardianScore


class ReasonType(str, Enum):
    """Kinds of reasons recorded on a verdict."""

    TRUSTED_SOURCE = "trusted_source"
    BLOCKED_SOURCE = "blocked_source"
    KEYWORD_MATCH = "keyword_match"
    SUSPICIOUS_PATTERN = "suspicious_pattern"
    LOW_SCORE = "low_score"
    HIGH_SCORE = "high_score"
    CATEGORY_MATCH = "category_match"
    CATEGORY_MISMATCH = "category_mismatch"
    DURATION_FIT = "duration_fit"
    DURATION_EXCEEDED = "duration_exceeded"
    COMMUNITY_POSITIVE = "community_positive"
    COMMUNITY_NEGATIVE = "community_negative"
    METADATA_QUALITY = "metadata_quality"
    RULE_TRIGGERED = "rule_triggered"
    RULE_FAULT = "rule_fault"
    MANUAL_OVERRIDE = "manual_override"


class ReasonImpact(str, Enum):
    """Severity tier of a reason."""

    CRITICAL = "critical"  # Immediate block
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    APPROVED = "approved"  # Guaranteed approval

    @property
    def severity(self) -> int:
        return _IMPACT_SEVERITY[self]


_IMPACT_SEVERITY = {
    ReasonImpact.CRITICAL: 100,
    ReasonImpact.NEGATIVE: 75,
    ReasonImpact.NEUTRAL: 50,
    ReasonImpact.POSITIVE: 25,
    ReasonImpact.APPROVED: 0,
}


class VerdictReason(BaseModel):
    """One entry in a verdict's reason trail."""

    type: ReasonType
    message: str = Field(..., description="Human-readable explanation")
    impact: ReasonImpact
    source_rule_id: Optional[str] = Field(None, description="Rule that produced this reason")
    matched_patterns: list[str] = Field(
        default_factory=list, description="Evidence terms, sorted"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "type": "rule_triggered",
                    "message": "Blocked: Contains inappropriate content for Kids Under 8",
                    "impact": "critical",
                    "source_rule_id": "keyword_blocklist",
                    "matched_patterns": ["18+"],
                }
            ]
        },
    }


class Verdict(BaseModel):
    """Final allow/block decision for one content item and tier.

    Usage:
        verdict = engine.evaluate(item, AgeTier.UNDER_8)
        if not verdict.allowed:
            print(verdict.summary())
    """

    allowed: bool
    score: GuardianScore
    tier: AgeTier
    trust_level: TrustLevel
    reasons: list[VerdictReason] = Field(default_factory=list)
    evaluated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}

    @property
    def primary_reason(self) -> Optional[VerdictReason]:
        """Highest-severity reason; the earliest wins on ties."""
        if not self.reasons:
            return None
        return max(self.reasons, key=lambda reason: reason.impact.severity)

    @property
    def blocking_reasons(self) -> list[VerdictReason]:
        return [
            reason for reason in self.reasons
            if reason.impact in (ReasonImpact.CRITICAL, ReasonImpact.NEGATIVE)
        ]

    def summary(self) -> str:
        if self.allowed:
            return f"ALLOWED - {self.score.grade.display_name} ({self.score.total}/1000)"
        primary = self.primary_reason
        return f"BLOCKED - {primary.message if primary else 'Score too low'}"
