"""Guardian Score calculation per the six-factor weighted formula.

Core formula: Total = Trust + Content + Category + Duration + Community + Metadata

Components:
- Trust (<=250): the source trust level's base score
- Content (<=300): keyword signals in title, source name and description
- Category (<=150): category fit for the tier's allow-set
- Duration (<=100): length relative to the tier's recommended maximum
- Community (<=100): like ratio band
- Metadata (<=100): title length, description and source name quality

The calculation is a pure function of (content, trust level, tier, policy).
Rule adjustments are applied afterwards by the engine.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from guardian_system.data_management.schemas import (
    AgeTier,
    ContentItem,
    GuardianScore,
    PolicyConfig,
    ScoreBreakdown,
    TrustLevel,
)
from guardian_system.data_management.schemas.score_schema import (
    MAX_CATEGORY,
    MAX_COMMUNITY,
    MAX_CONTENT,
    MAX_DURATION,
    MAX_METADATA,
    MAX_TRUST,
    clamp,
)
from guardian_system.rules.suspicious_pattern import suspicious_penalty
from guardian_system.utils.text_matching import find_phrase_matches, find_substring_matches

# (minimum like ratio, points), evaluated top-down
COMMUNITY_BANDS = [
    (0.98, 100),
    (0.95, 90),
    (0.90, 80),
    (0.80, 70),
    (0.70, 50),
    (0.50, 30),
]
COMMUNITY_FLOOR = 10
COMMUNITY_UNKNOWN = 50

# (maximum ratio of duration to the tier maximum, points)
DURATION_BANDS = [
    (0.5, 100),
    (0.75, 80),
    (1.0, 60),
    (1.5, 30),
]
DURATION_FLOOR = 10


@dataclass
class ContentSignals:
    """Keyword evidence found in an item's text.

    Attributes:
        safe_keywords: Distinct safe keywords present
        strong_indicators: Strong safe indicator phrases present
        suspicious_patterns: Suspicious phrases present (word-boundary match)
    """

    safe_keywords: list[str]
    strong_indicators: list[str]
    suspicious_patterns: list[str]


class ScoreCalculator:
    """
    Computes the Guardian Score (0-1000) for content.

    Usage:
        calculator = ScoreCalculator()
        score = calculator.compute(item, TrustLevel.NEUTRAL, AgeTier.UNDER_8)
        print(score.total, score.breakdown.percentages())

    Attributes:
        policy: Default policy snapshot (built-in tables if None)
    """

    CONTENT_BASELINE = 150
    SAFE_KEYWORD_POINTS = 15
    SAFE_KEYWORD_CAP = 100
    STRONG_INDICATOR_BONUS = 50
    UNCATEGORIZED_SCORE = 75
    OFF_CATEGORY_SCORE = 50
    METADATA_BASELINE = 50

    def __init__(self, policy: Optional[PolicyConfig] = None):
        self.policy = policy or PolicyConfig.default()
        self._logger = logger.bind(component="ScoreCalculator")

    def compute(
        self,
        content: ContentItem,
        trust_level: TrustLevel,
        tier: AgeTier,
        policy: Optional[PolicyConfig] = None,
    ) -> GuardianScore:
        """
        Compute the unadjusted Guardian Score.

        Args:
            content: Item to score.
            trust_level: Resolved trust level of the item's source.
            tier: Target age tier.
            policy: Snapshot to use instead of the default.

        Returns:
            GuardianScore whose total equals the breakdown sum.
        """
        policy = policy or self.policy
        breakdown = ScoreBreakdown(
            trust=self.trust_score(trust_level),
            content=self.content_score(content, tier, policy),
            category=self.category_score(content, tier, policy),
            duration=self.duration_score(content, tier, policy),
            community=self.community_score(content),
            metadata=self.metadata_score(content),
        )
        score = GuardianScore.from_breakdown(breakdown)

        self._logger.debug(
            f"Guardian Score computed: {score.total}",
            content_id=content.id,
            tier=tier.value,
            components=breakdown.model_dump(),
        )
        return score

    def trust_score(self, trust_level: TrustLevel) -> int:
        return clamp(trust_level.base_score, 0, MAX_TRUST)

    def content_signals(self, content: ContentItem, policy: Optional[PolicyConfig] = None) -> ContentSignals:
        """Collect the keyword evidence used by the content component."""
        policy = policy or self.policy
        text = content.text_content
        return ContentSignals(
            safe_keywords=find_substring_matches(text, policy.safe_keywords),
            strong_indicators=find_substring_matches(text, policy.strong_safe_indicators),
            suspicious_patterns=find_phrase_matches(text, policy.suspicious_patterns),
        )

    def content_score(
        self,
        content: ContentItem,
        tier: AgeTier,
        policy: Optional[PolicyConfig] = None,
    ) -> int:
        """
        Content signals (0-300).

        Baseline 150; +15 per distinct safe keyword (capped at +100); +50 if
        any strong safe indicator is present; in strict mode, -30 per
        suspicious pattern (capped at -100).
        """
        policy = policy or self.policy
        signals = self.content_signals(content, policy)

        score = self.CONTENT_BASELINE
        score += min(len(signals.safe_keywords) * self.SAFE_KEYWORD_POINTS, self.SAFE_KEYWORD_CAP)
        if signals.strong_indicators:
            score += self.STRONG_INDICATOR_BONUS
        if signals.suspicious_patterns and policy.is_strict(tier):
            score -= suspicious_penalty(len(signals.suspicious_patterns))

        return clamp(score, 0, MAX_CONTENT)

    def category_score(
        self,
        content: ContentItem,
        tier: AgeTier,
        policy: Optional[PolicyConfig] = None,
    ) -> int:
        """
        Category fit (0-150).

        Always 150 for the unrestricted tier (strictness 0). Elsewhere 75
        without a category, 150 when the tier allows every category or the
        category is in its allow-set, and 50 otherwise.
        """
        if tier.strictness == 0:
            return MAX_CATEGORY
        if not content.category or not content.category.strip():
            return self.UNCATEGORIZED_SCORE

        policy = policy or self.policy
        allowed = policy.category_allow_sets[tier]
        if not allowed:
            return MAX_CATEGORY
        if content.category.strip().lower() in allowed:
            return MAX_CATEGORY
        return self.OFF_CATEGORY_SCORE

    def duration_score(
        self,
        content: ContentItem,
        tier: AgeTier,
        policy: Optional[PolicyConfig] = None,
    ) -> int:
        """
        Duration fit (0-100).

        Unrestricted tiers score 100. Otherwise the ratio of the duration
        (normalized to seconds) to the tier maximum is banded:
        <=0.5 -> 100, <=0.75 -> 80, <=1.0 -> 60, <=1.5 -> 30, else 10.
        """
        policy = policy or self.policy
        max_duration = policy.max_duration_seconds[tier]
        if tier is AgeTier.ALL or max_duration is None:
            return MAX_DURATION

        ratio = content.duration_seconds / max_duration
        for max_ratio, points in DURATION_BANDS:
            if ratio <= max_ratio:
                return points
        return DURATION_FLOOR

    def community_score(self, content: ContentItem) -> int:
        """
        Community signals (0-100).

        50 when the like ratio is unknown; otherwise banded at
        0.98/0.95/0.90/0.80/0.70/0.50 -> 100/90/80/70/50/30, else 10.
        """
        like_ratio = content.like_ratio
        if like_ratio is None:
            return COMMUNITY_UNKNOWN

        for min_ratio, points in COMMUNITY_BANDS:
            if like_ratio >= min_ratio:
                return clamp(points, 0, MAX_COMMUNITY)
        return COMMUNITY_FLOOR

    def metadata_score(self, content: ContentItem) -> int:
        """
        Metadata quality (0-100).

        Baseline 50. Title length 10-100: +20, 5-150: +10, otherwise -10.
        Non-blank description: +15, and +10 more at 100+ characters.
        Source name of 3+ characters without "user" in it: +5.
        """
        score = self.METADATA_BASELINE

        title_length = len(content.title)
        if 10 <= title_length <= 100:
            score += 20
        elif 5 <= title_length <= 150:
            score += 10
        else:
            score -= 10

        description = content.description
        if description and description.strip():
            score += 15
            if len(description) >= 100:
                score += 10

        if len(content.source_name) >= 3 and "user" not in content.source_name:
            score += 5

        return clamp(score, 0, MAX_METADATA)
