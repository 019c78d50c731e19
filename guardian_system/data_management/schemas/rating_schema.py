"""Age tiers, trust levels and the coarse age-group mapping.

AgeTier and TrustLevel are ordered enums. Their numeric attributes
(strictness, required score, base score, multiplier) are exposed as
properties backed by profile tables, so the enum values stay plain strings
that survive JSON round-trips.
"""

from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Union

from loguru import logger

from guardian_system.config.tier_policy import TIER_PROFILES

if TYPE_CHECKING:
    from guardian_system.data_management.schemas.policy_schema import PolicyConfig


class AgeTier(str, Enum):
    """Age-restrictiveness tier, declared from least to most restrictive.

    Strictness and required score come from TIER_PROFILES; the required
    score never decreases as strictness rises.
    """

    ALL = "all"
    UNDER_16 = "under_16"
    UNDER_14 = "under_14"
    UNDER_13 = "under_13"
    UNDER_12 = "under_12"
    UNDER_10 = "under_10"
    UNDER_8 = "under_8"
    UNDER_5 = "under_5"

    @property
    def display_name(self) -> str:
        return str(TIER_PROFILES[self.value]["display_name"])

    @property
    def age_limit(self) -> int:
        return int(TIER_PROFILES[self.value]["age_limit"])

    @property
    def strictness(self) -> int:
        return int(TIER_PROFILES[self.value]["strictness"])

    @property
    def required_score(self) -> int:
        """Required score from the built-in tables."""
        return int(TIER_PROFILES[self.value]["required_score"])

    def required_score_in(self, policy: Optional["PolicyConfig"] = None) -> int:
        """Required score from ``policy``, or the built-in tables if None."""
        if policy is None:
            return self.required_score
        return policy.required_score(self)

    @property
    def description(self) -> str:
        return str(TIER_PROFILES[self.value]["description"])

    def is_more_restrictive_than(self, other: "AgeTier") -> bool:
        return self.strictness > other.strictness

    def is_score_acceptable(self, score: int, policy: Optional["PolicyConfig"] = None) -> bool:
        return score >= self.required_score_in(policy)

    @classmethod
    def most_restrictive(cls) -> "AgeTier":
        return max(cls, key=lambda tier: (tier.strictness, tier.required_score))

    @classmethod
    def for_age(cls, age: int) -> "AgeTier":
        """Get the tier appropriate for a child of the given age."""
        if age < 5:
            return cls.UNDER_5
        if age < 8:
            return cls.UNDER_8
        if age < 10:
            return cls.UNDER_10
        if age < 12:
            return cls.UNDER_12
        if age < 13:
            return cls.UNDER_13
        if age < 14:
            return cls.UNDER_14
        if age < 16:
            return cls.UNDER_16
        return cls.ALL

    @classmethod
    def from_age_limit(cls, age_limit: int) -> "AgeTier":
        """Get the tier with this age limit; unknown limits map to ALL."""
        for tier in cls:
            if tier.age_limit == age_limit:
                return tier
        return cls.ALL

    @classmethod
    def coerce(cls, value: Union["AgeTier", str, None]) -> "AgeTier":
        """Resolve a tier from an enum member or its name/value.

        Unrecognized input fails closed: it resolves to the most
        restrictive tier instead of raising.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for tier in cls:
                if tier.value == normalized:
                    return tier
        fallback = cls.most_restrictive()
        logger.bind(component="AgeTier").warning(
            f"Unrecognized age tier {value!r}, failing closed to {fallback.value}"
        )
        return fallback


_TRUST_PROFILES: Dict[str, Dict[str, object]] = {
    "verified_partner": {
        "display_name": "Verified Partner",
        "multiplier": 1.0,
        "base_score": 250,
        "description": "Premium verified kid content creators",
    },
    "trusted": {
        "display_name": "Trusted",
        "multiplier": 0.9,
        "base_score": 225,
        "description": "Established family-friendly channels",
    },
    "recognized": {
        "display_name": "Recognized",
        "multiplier": 0.75,
        "base_score": 188,
        "description": "Channels with positive reputation",
    },
    "neutral": {
        "display_name": "Neutral",
        "multiplier": 0.5,
        "base_score": 125,
        "description": "Unknown channels requiring content analysis",
    },
    "suspicious": {
        "display_name": "Suspicious",
        "multiplier": 0.2,
        "base_score": 50,
        "description": "Channels with flagged or questionable content",
    },
    "blocked": {
        "display_name": "Blocked",
        "multiplier": 0.0,
        "base_score": 0,
        "description": "Blocked channels - content never shown",
    },
}


class TrustLevel(str, Enum):
    """Reliability of a content source, from most to least trusted."""

    VERIFIED_PARTNER = "verified_partner"
    TRUSTED = "trusted"
    RECOGNIZED = "recognized"
    NEUTRAL = "neutral"
    SUSPICIOUS = "suspicious"
    BLOCKED = "blocked"

    @property
    def display_name(self) -> str:
        return str(_TRUST_PROFILES[self.value]["display_name"])

    @property
    def multiplier(self) -> float:
        return float(_TRUST_PROFILES[self.value]["multiplier"])

    @property
    def base_score(self) -> int:
        return int(_TRUST_PROFILES[self.value]["base_score"])

    @property
    def description(self) -> str:
        return str(_TRUST_PROFILES[self.value]["description"])

    @property
    def auto_approve(self) -> bool:
        return self in (TrustLevel.VERIFIED_PARTNER, TrustLevel.TRUSTED)

    @property
    def requires_analysis(self) -> bool:
        return self in (TrustLevel.NEUTRAL, TrustLevel.SUSPICIOUS)

    @property
    def is_blocked(self) -> bool:
        return self is TrustLevel.BLOCKED

    def apply_multiplier(self, score: int) -> int:
        return int(score * self.multiplier)


class AgeGroup(str, Enum):
    """Coarse four-group age model used by settings sync and legacy data."""

    UNDER_5 = "under_5"
    UNDER_8 = "under_8"
    UNDER_13 = "under_13"
    UNDER_16 = "under_16"

    @classmethod
    def from_age(cls, age: int) -> "AgeGroup":
        if age < 5:
            return cls.UNDER_5
        if age < 8:
            return cls.UNDER_8
        if age < 13:
            return cls.UNDER_13
        return cls.UNDER_16

    @classmethod
    def from_code(cls, code: str) -> "AgeGroup":
        """Parse a stored group code, including removed legacy tiers.

        Unknown codes map to UNDER_16, matching how stored settings have
        always been read.
        """
        normalized = (code or "").strip().upper()
        legacy = LEGACY_AGE_GROUP_CODES.get(normalized)
        if legacy is not None:
            return legacy
        for group in cls:
            if group.name == normalized:
                return group
        return cls.UNDER_16

    def to_tier(self) -> AgeTier:
        return AGE_GROUP_TO_TIER[self]


# Mapping between the eight-tier model and the four-group model.
# The collapse is lossy and asymmetric on purpose: UNDER_10 folds down to
# UNDER_8 while UNDER_12 and UNDER_14 fold to UNDER_13, and ALL has no group
# of its own. Bump the version when a row changes.
TIER_MAPPING_VERSION = "1"

TIER_TO_AGE_GROUP: Dict[AgeTier, AgeGroup] = {
    AgeTier.ALL: AgeGroup.UNDER_16,
    AgeTier.UNDER_16: AgeGroup.UNDER_16,
    AgeTier.UNDER_14: AgeGroup.UNDER_13,
    AgeTier.UNDER_13: AgeGroup.UNDER_13,
    AgeTier.UNDER_12: AgeGroup.UNDER_13,
    AgeTier.UNDER_10: AgeGroup.UNDER_8,
    AgeTier.UNDER_8: AgeGroup.UNDER_8,
    AgeTier.UNDER_5: AgeGroup.UNDER_5,
}

AGE_GROUP_TO_TIER: Dict[AgeGroup, AgeTier] = {
    AgeGroup.UNDER_5: AgeTier.UNDER_5,
    AgeGroup.UNDER_8: AgeTier.UNDER_8,
    AgeGroup.UNDER_13: AgeTier.UNDER_13,
    AgeGroup.UNDER_16: AgeTier.UNDER_16,
}

LEGACY_AGE_GROUP_CODES: Dict[str, AgeGroup] = {
    "UNDER_10": AgeGroup.UNDER_8,
    "UNDER_12": AgeGroup.UNDER_13,
    "UNDER_14": AgeGroup.UNDER_13,
}


def tier_to_age_group(tier: AgeTier) -> AgeGroup:
    """Collapse a fine-grained tier onto the coarse age group."""
    return TIER_TO_AGE_GROUP[tier]


def age_group_to_tier(group: Optional[AgeGroup]) -> AgeTier:
    """Expand a coarse age group; a missing group fails closed to UNDER_5."""
    if group is None:
        return AgeTier.most_restrictive()
    return AGE_GROUP_TO_TIER[group]
