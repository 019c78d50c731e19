"""Guardian Score calculation and tier threshold policy.

Components:
    ScoreCalculator: Six-factor weighted score (0-1000)
    ContentSignals: Keyword evidence behind the content component
    RatingPolicy: Per-tier required-score check

Usage:
    from guardian_system.scoring import ScoreCalculator, RatingPolicy

    score = ScoreCalculator().compute(item, trust_level, tier)
    allowed = RatingPolicy().is_allowed(score, tier)
"""

from guardian_system.scoring.rating_policy import RatingPolicy
from guardian_system.scoring.score_calculator import ContentSignals, ScoreCalculator

__all__ = [
    "ContentSignals",
    "RatingPolicy",
    "ScoreCalculator",
]
