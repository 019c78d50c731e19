"""Policy configuration snapshot.

A PolicyConfig holds every table the engine reads: trust identity sets,
keyword tables, and per-tier category, duration and score tables. Snapshots
are frozen and validated on construction, so a table gap is a startup
error rather than a per-call failure. Updates build a new snapshot and swap
the reference (see PolicyStore); a snapshot is never edited in place.
"""

from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator

from guardian_system.config import keyword_lists, tier_policy, trusted_sources
from guardian_system.data_management.schemas.rating_schema import AgeTier, TrustLevel

DEFAULT_POLICY_VERSION = "builtin-1"


class PolicyConfig(BaseModel):
    """Immutable engine configuration.

    Attributes:
        version: Label of this snapshot, reported in engine info and logs.
        verified_partner_ids: Source ids resolved to VERIFIED_PARTNER.
        trusted_ids: Source ids resolved to TRUSTED.
        blocked_source_ids: Explicit denylist, resolved to BLOCKED.
        trusted_name_fragments: Lowercase fragments resolved to RECOGNIZED.
        keyword_blocklists: Per-tier substring blocklists.
        safe_keywords: Keywords that raise the content score.
        strong_safe_indicators: Phrases that add a flat content bonus.
        suspicious_patterns: Manipulative phrases, matched on word boundaries.
        category_allow_sets: Per-tier category allow-sets (empty = all allowed).
        max_duration_seconds: Per-tier recommended maximum (None = unrestricted).
        required_scores: Per-tier minimum Guardian Score.
        reputation_cut_points: (minimum reputation, level) pairs, descending.
        strict_mode_threshold: Tier strictness at which strict mode starts.
    """

    version: str = DEFAULT_POLICY_VERSION
    verified_partner_ids: FrozenSet[str] = frozenset()
    trusted_ids: FrozenSet[str] = frozenset()
    blocked_source_ids: FrozenSet[str] = frozenset()
    trusted_name_fragments: FrozenSet[str] = frozenset()
    keyword_blocklists: Dict[AgeTier, FrozenSet[str]]
    safe_keywords: FrozenSet[str] = frozenset()
    strong_safe_indicators: FrozenSet[str] = frozenset()
    suspicious_patterns: FrozenSet[str] = frozenset()
    category_allow_sets: Dict[AgeTier, FrozenSet[str]]
    max_duration_seconds: Dict[AgeTier, Optional[int]]
    required_scores: Dict[AgeTier, int]
    reputation_cut_points: List[Tuple[int, TrustLevel]] = Field(
        default_factory=lambda: [
            (threshold, TrustLevel(level))
            for threshold, level in tier_policy.REPUTATION_CUT_POINTS
        ]
    )
    strict_mode_threshold: int = Field(tier_policy.STRICT_MODE_THRESHOLD, ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_tables(self) -> "PolicyConfig":
        """Fail fast on incomplete or inconsistent tables."""
        tables = {
            "keyword_blocklists": self.keyword_blocklists,
            "category_allow_sets": self.category_allow_sets,
            "max_duration_seconds": self.max_duration_seconds,
            "required_scores": self.required_scores,
        }
        for name, table in tables.items():
            missing = [tier.value for tier in AgeTier if tier not in table]
            if missing:
                raise ValueError(f"{name} has no entry for tiers: {', '.join(missing)}")

        ordered_pairs = [
            (looser, stricter)
            for looser in AgeTier
            for stricter in AgeTier
            if stricter.strictness > looser.strictness
        ]
        for looser, stricter in ordered_pairs:
            if self.required_scores[stricter] < self.required_scores[looser]:
                raise ValueError(
                    f"required_scores must not decrease with strictness: "
                    f"{stricter.value}={self.required_scores[stricter]} < "
                    f"{looser.value}={self.required_scores[looser]}"
                )
            if not self.keyword_blocklists[stricter] >= self.keyword_blocklists[looser]:
                raise ValueError(
                    f"keyword_blocklists[{stricter.value}] must include every term "
                    f"blocked for {looser.value}"
                )

        thresholds = [threshold for threshold, _ in self.reputation_cut_points]
        if not thresholds or any(a <= b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("reputation_cut_points must be non-empty and strictly descending")
        if self.reputation_cut_points[-1][1] is not TrustLevel.BLOCKED:
            raise ValueError("reputation_cut_points must end with the blocked level")

        for tier, limit in self.max_duration_seconds.items():
            if limit is not None and limit <= 0:
                raise ValueError(f"max_duration_seconds[{tier.value}] must be positive")
        return self

    def required_score(self, tier: AgeTier) -> int:
        return self.required_scores[tier]

    def is_strict(self, tier: AgeTier) -> bool:
        return tier.strictness >= self.strict_mode_threshold

    @classmethod
    def default(cls) -> "PolicyConfig":
        """Build the snapshot from the built-in tables."""
        return cls(
            version=DEFAULT_POLICY_VERSION,
            verified_partner_ids=trusted_sources.VERIFIED_PARTNER_IDS,
            trusted_ids=trusted_sources.TRUSTED_IDS,
            blocked_source_ids=trusted_sources.BLOCKED_SOURCE_IDS,
            trusted_name_fragments=trusted_sources.TRUSTED_NAME_FRAGMENTS,
            keyword_blocklists=keyword_lists.KEYWORD_BLOCKLISTS,
            safe_keywords=keyword_lists.SAFE_KEYWORDS,
            strong_safe_indicators=keyword_lists.STRONG_SAFE_INDICATORS,
            suspicious_patterns=keyword_lists.SUSPICIOUS_PATTERNS,
            category_allow_sets=tier_policy.CATEGORY_ALLOW_SETS,
            max_duration_seconds=tier_policy.MAX_DURATION_SECONDS,
            required_scores=tier_policy.REQUIRED_SCORES,
        )

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "PolicyConfig":
        """Load and validate a snapshot written by ``model_dump_json()``."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))

    def updated(self, **changes) -> "PolicyConfig":
        """Return a new validated snapshot with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return PolicyConfig.model_validate(data)
