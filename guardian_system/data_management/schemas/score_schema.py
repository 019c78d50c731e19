"""Guardian Score schema - the 0-1000 composite safety score.

Six weighted components:

| Component | Max | Weight |
|-----------|-----|--------|
| trust     | 250 | 25%    |
| content   | 300 | 30%    |
| category  | 150 | 15%    |
| duration  | 100 | 10%    |
| community | 100 | 10%    |
| metadata  | 100 | 10%    |

The breakdown always sums to the pre-adjustment total. Rule adjustments
are recorded separately and the adjusted total is re-clamped to [0, 1000].
"""

from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

from pydantic import BaseModel, Field

from guardian_system.data_management.schemas.rating_schema import AgeTier

if TYPE_CHECKING:
    from guardian_system.data_management.schemas.policy_schema import PolicyConfig

MAX_SCORE = 1000

MAX_TRUST = 250
MAX_CONTENT = 300
MAX_CATEGORY = 150
MAX_DURATION = 100
MAX_COMMUNITY = 100
MAX_METADATA = 100


def clamp(value: int, low: int, high: int) -> int:
    """Clamp an integer into the inclusive range [low, high]."""
    return max(low, min(high, value))


class GuardianGrade(str, Enum):
    """Grade band for a Guardian Score total."""

    PLATINUM_SAFE = "platinum_safe"
    GOLD_SAFE = "gold_safe"
    SILVER_SAFE = "silver_safe"
    BRONZE_SAFE = "bronze_safe"
    CAUTION = "caution"
    RESTRICTED = "restricted"

    @property
    def min_score(self) -> int:
        return _GRADE_BANDS[self][0]

    @property
    def display_name(self) -> str:
        return _GRADE_BANDS[self][1]

    @classmethod
    def from_score(cls, score: int) -> "GuardianGrade":
        for grade in cls:
            if score >= grade.min_score:
                return grade
        return cls.RESTRICTED

    def is_safe_for(self, tier: AgeTier, policy: Optional["PolicyConfig"] = None) -> bool:
        """Whether every score in this band clears the tier's threshold.

        Thresholds come from ``policy`` when given, else the built-in tables.
        """
        return self.min_score >= tier.required_score_in(policy)


_GRADE_BANDS: Dict[GuardianGrade, tuple[int, str]] = {
    GuardianGrade.PLATINUM_SAFE: (900, "Platinum Safe"),
    GuardianGrade.GOLD_SAFE: (800, "Gold Safe"),
    GuardianGrade.SILVER_SAFE: (700, "Silver Safe"),
    GuardianGrade.BRONZE_SAFE: (600, "Bronze Safe"),
    GuardianGrade.CAUTION: (400, "Caution"),
    GuardianGrade.RESTRICTED: (0, "Restricted"),
}


class ScoreBreakdown(BaseModel):
    """Individual component scores, each bounded by its maximum."""

    trust: int = Field(0, ge=0, le=MAX_TRUST)
    content: int = Field(0, ge=0, le=MAX_CONTENT)
    category: int = Field(0, ge=0, le=MAX_CATEGORY)
    duration: int = Field(0, ge=0, le=MAX_DURATION)
    community: int = Field(0, ge=0, le=MAX_COMMUNITY)
    metadata: int = Field(0, ge=0, le=MAX_METADATA)

    model_config = {"frozen": True}

    @classmethod
    def zero(cls) -> "ScoreBreakdown":
        return cls()

    def total(self) -> int:
        return clamp(
            self.trust + self.content + self.category
            + self.duration + self.community + self.metadata,
            0,
            MAX_SCORE,
        )

    def percentages(self) -> Dict[str, float]:
        """Each component as a percentage of its maximum."""
        return {
            "trust": self.trust / MAX_TRUST * 100,
            "content": self.content / MAX_CONTENT * 100,
            "category": self.category / MAX_CATEGORY * 100,
            "duration": self.duration / MAX_DURATION * 100,
            "community": self.community / MAX_COMMUNITY * 100,
            "metadata": self.metadata / MAX_METADATA * 100,
        }


class GuardianScore(BaseModel):
    """Composite score with its breakdown and any rule adjustment.

    Usage:
        score = GuardianScore.from_breakdown(breakdown)
        adjusted = score.with_adjustment(-90)
    """

    total: int = Field(..., ge=0, le=MAX_SCORE)
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
    adjustment: int = Field(0, description="Rule adjustment applied after summation")

    model_config = {"frozen": True}

    @property
    def grade(self) -> GuardianGrade:
        return GuardianGrade.from_score(self.total)

    @classmethod
    def from_breakdown(cls, breakdown: ScoreBreakdown) -> "GuardianScore":
        return cls(total=breakdown.total(), breakdown=breakdown)

    @classmethod
    def blocked(cls) -> "GuardianScore":
        """Zero score used for every blocked verdict."""
        return cls(total=0, breakdown=ScoreBreakdown.zero())

    def with_adjustment(self, adjustment: int) -> "GuardianScore":
        """Apply a rule adjustment to the summed breakdown, re-clamped."""
        if adjustment == 0:
            return self
        return GuardianScore(
            total=clamp(self.breakdown.total() + adjustment, 0, MAX_SCORE),
            breakdown=self.breakdown,
            adjustment=adjustment,
        )

    def meets_threshold(self, tier: AgeTier, policy: Optional["PolicyConfig"] = None) -> bool:
        """total >= the tier's required score in ``policy`` (built-in tables if None)."""
        return self.total >= tier.required_score_in(policy)
