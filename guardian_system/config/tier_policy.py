"""Age-tier policy tables for the Guardian Score threshold check.

Each tier carries a strictness level and a required Guardian Score. The
required score never decreases as strictness rises:

| Tier     | Strictness | Required | Max duration |
|----------|------------|----------|--------------|
| all      | 0          | 0        | unrestricted |
| under_16 | 1          | 400      | 60 min       |
| under_14 | 2          | 450      | 40 min       |
| under_13 | 2          | 475      | 35 min       |
| under_12 | 3          | 500      | 30 min       |
| under_10 | 4          | 550      | 20 min       |
| under_8  | 5          | 575      | 15 min       |
| under_5  | 6          | 600      | 10 min       |

Keys are AgeTier values so the tables can be loaded from JSON unchanged.
"""

from typing import Dict, FrozenSet, List, Optional, Tuple

# Tier profiles, listed from least to most restrictive
TIER_PROFILES: Dict[str, Dict[str, object]] = {
    "all": {
        "display_name": "All Ages",
        "age_limit": 0,
        "strictness": 0,
        "required_score": 0,
        "description": "No restrictions - all content available",
    },
    "under_16": {
        "display_name": "Kids Under 16",
        "age_limit": 16,
        "strictness": 1,
        "required_score": 400,
        "description": "Minimal filtering for older teens",
    },
    "under_14": {
        "display_name": "Kids Under 14",
        "age_limit": 14,
        "strictness": 2,
        "required_score": 450,
        "description": "Light filtering for young teens",
    },
    "under_13": {
        "display_name": "Kids Under 13",
        "age_limit": 13,
        "strictness": 2,
        "required_score": 475,
        "description": "Moderate-light filtering for older pre-teens",
    },
    "under_12": {
        "display_name": "Kids Under 12",
        "age_limit": 12,
        "strictness": 3,
        "required_score": 500,
        "description": "Moderate filtering for pre-teens",
    },
    "under_10": {
        "display_name": "Kids Under 10",
        "age_limit": 10,
        "strictness": 4,
        "required_score": 550,
        "description": "Strict filtering for elementary school children",
    },
    "under_8": {
        "display_name": "Kids Under 8",
        "age_limit": 8,
        "strictness": 5,
        "required_score": 575,
        "description": "Very strict filtering for young children",
    },
    "under_5": {
        "display_name": "Kids Under 5",
        "age_limit": 5,
        "strictness": 6,
        "required_score": 600,
        "description": "Strictest filtering for toddlers and preschoolers",
    },
}

# Tiers at or above this strictness run in strict mode
# (suspicious-pattern rule and content penalties become active)
STRICT_MODE_THRESHOLD: int = 4

REQUIRED_SCORES: Dict[str, int] = {
    tier: int(profile["required_score"]) for tier, profile in TIER_PROFILES.items()
}

# Maximum recommended duration in seconds; None means unrestricted
MAX_DURATION_SECONDS: Dict[str, Optional[int]] = {
    "all": None,
    "under_16": 3600,
    "under_14": 2400,
    "under_13": 2100,
    "under_12": 1800,
    "under_10": 1200,
    "under_8": 900,
    "under_5": 600,
}

_YOUNG_CATEGORIES: FrozenSet[str] = frozenset({
    "education", "entertainment", "animation", "music", "kids", "family",
})

_PRETEEN_CATEGORIES: FrozenSet[str] = _YOUNG_CATEGORIES | frozenset({
    "gaming", "science", "technology", "howto", "sports",
})

# Category allow-sets; an empty set means every category is acceptable
CATEGORY_ALLOW_SETS: Dict[str, FrozenSet[str]] = {
    "all": frozenset(),
    "under_16": frozenset(),
    "under_14": _PRETEEN_CATEGORIES,
    "under_13": _PRETEEN_CATEGORIES,
    "under_12": _PRETEEN_CATEGORIES,
    "under_10": _YOUNG_CATEGORIES,
    "under_8": _YOUNG_CATEGORIES,
    "under_5": _YOUNG_CATEGORIES,
}

# Reputation cut points (0-100), evaluated top-down; the last entry is the floor
REPUTATION_CUT_POINTS: List[Tuple[int, str]] = [
    (95, "verified_partner"),
    (85, "trusted"),
    (70, "recognized"),
    (40, "neutral"),
    (10, "suspicious"),
    (0, "blocked"),
]
