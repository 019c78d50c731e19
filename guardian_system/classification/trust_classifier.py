"""Trust classification for content sources.

Maps a source identity (id + display name) or a bare reputation score to a
TrustLevel. Unknown or empty identities resolve to NEUTRAL: BLOCKED only
ever comes from an explicit denylist entry or a reputation score under the
lowest cut point, never from missing data.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from guardian_system.data_management.schemas import PolicyConfig, TrustLevel


@dataclass
class TrustVerification:
    """Trust level for a source together with the table that decided it.

    Attributes:
        source_id: Source identifier that was classified
        source_name: Source display name that was classified
        trust_level: Resolved trust level
        reasons: Human-readable explanation of the match
    """

    source_id: str
    source_name: str
    trust_level: TrustLevel
    reasons: List[str] = field(default_factory=list)

    @property
    def trust_score(self) -> int:
        """Trust component contribution to the Guardian Score."""
        return self.trust_level.base_score


class TrustClassifier:
    """
    Resolves the TrustLevel of a content source.

    Resolution order (first match wins):
        1. source_id in blocked_source_ids -> BLOCKED
        2. source_id in verified_partner_ids -> VERIFIED_PARTNER
        3. source_id in trusted_ids -> TRUSTED
        4. source_name contains a trusted name fragment -> RECOGNIZED
        5. otherwise -> NEUTRAL

    Usage:
        classifier = TrustClassifier()
        level = classifier.classify("UCBnZ16ahKA2DZ_T5W0FPUXg", "Cocomelon")

    Example:
        >>> TrustClassifier().classify("", "")
        <TrustLevel.NEUTRAL: 'neutral'>
        >>> TrustClassifier().from_reputation_score(88)
        <TrustLevel.TRUSTED: 'trusted'>
    """

    def __init__(self, policy: Optional[PolicyConfig] = None):
        """
        Initialize classifier.

        Args:
            policy: Default snapshot for lookups (built-in tables if None).
                Callers may pass a different snapshot per call.
        """
        self.policy = policy or PolicyConfig.default()
        self._logger = logger.bind(component="TrustClassifier")

    def classify(
        self,
        source_id: Optional[str],
        source_name: Optional[str],
        policy: Optional[PolicyConfig] = None,
    ) -> TrustLevel:
        """
        Classify a source identity.

        Args:
            source_id: Creator/channel id, matched exactly.
            source_name: Display name, matched by case-insensitive fragment.
            policy: Snapshot to use instead of the default.

        Returns:
            Resolved TrustLevel.
        """
        return self.verify(source_id, source_name, policy).trust_level

    def verify(
        self,
        source_id: Optional[str],
        source_name: Optional[str],
        policy: Optional[PolicyConfig] = None,
    ) -> TrustVerification:
        """
        Classify a source identity and explain which table matched.

        Args:
            source_id: Creator/channel id.
            source_name: Display name.
            policy: Snapshot to use instead of the default.

        Returns:
            TrustVerification with level and reasons.
        """
        policy = policy or self.policy
        source_id = (source_id or "").strip()
        source_name = source_name or ""

        if source_id and source_id in policy.blocked_source_ids:
            level, reason = TrustLevel.BLOCKED, f"Source id {source_id} is on the denylist"
        elif source_id and source_id in policy.verified_partner_ids:
            level, reason = TrustLevel.VERIFIED_PARTNER, f"Source id {source_id} is a verified partner"
        elif source_id and source_id in policy.trusted_ids:
            level, reason = TrustLevel.TRUSTED, f"Source id {source_id} is trusted"
        else:
            fragment = self._match_name_fragment(source_name, policy)
            if fragment:
                level, reason = TrustLevel.RECOGNIZED, f"Source name matches trusted name '{fragment}'"
            else:
                level, reason = TrustLevel.NEUTRAL, "No reputation data for source"

        self._logger.debug(
            f"Source classified as {level.value}",
            source_id=source_id[:40],
            reason=reason,
        )
        return TrustVerification(
            source_id=source_id,
            source_name=source_name,
            trust_level=level,
            reasons=[reason],
        )

    def from_reputation_score(
        self,
        score: int,
        policy: Optional[PolicyConfig] = None,
    ) -> TrustLevel:
        """
        Bucket a 0-100 reputation score into a TrustLevel.

        Default cut points: >=95 VERIFIED_PARTNER, >=85 TRUSTED,
        >=70 RECOGNIZED, >=40 NEUTRAL, >=10 SUSPICIOUS, else BLOCKED.

        Args:
            score: Reputation score; values outside 0-100 are clamped.
            policy: Snapshot to use instead of the default.

        Returns:
            TrustLevel for the score.
        """
        policy = policy or self.policy
        score = max(0, min(100, score))
        for threshold, level in policy.reputation_cut_points:
            if score >= threshold:
                return level
        return policy.reputation_cut_points[-1][1]

    @staticmethod
    def _match_name_fragment(source_name: str, policy: PolicyConfig) -> Optional[str]:
        name_lower = source_name.lower()
        if not name_lower.strip():
            return None
        for fragment in sorted(policy.trusted_name_fragments):
            if fragment and fragment.lower() in name_lower:
                return fragment
        return None
