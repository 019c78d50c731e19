"""Suspicious pattern rule: penalizes manipulative phrasing in strict tiers.

Targets mass-produced "kid bait" (surprise eggs, wrong heads, finger
family mashups, pranks). It never blocks on its own; each distinct
pattern costs 30 points, capped at 100, and the score threshold decides.
"""

from guardian_system.data_management.schemas import ContentItem, ReasonType
from guardian_system.rules.base import SKIP, Continue, Rule, RuleContext, RuleResult
from guardian_system.utils.text_matching import find_phrase_matches

PENALTY_PER_MATCH = 30
MAX_PENALTY = 100


def suspicious_penalty(match_count: int) -> int:
    """Points deducted for ``match_count`` distinct suspicious patterns."""
    return min(MAX_PENALTY, PENALTY_PER_MATCH * match_count)


class SuspiciousPatternRule(Rule):
    """Adjusts the score down when suspicious patterns appear in strict mode."""

    id = "suspicious_pattern"
    name = "Suspicious Pattern Detection"
    priority = 170
    is_decisive = False

    def evaluate(self, content: ContentItem, context: RuleContext) -> RuleResult:
        if not context.strict_mode:
            return SKIP

        matched = find_phrase_matches(content.text_content, context.policy.suspicious_patterns)
        if not matched:
            return SKIP

        penalty = suspicious_penalty(len(matched))
        return Continue(
            score_adjustment=-penalty,
            reason=(
                f"Suspicious pattern penalty -{penalty}: "
                f"{len(matched)} pattern(s) matched ({', '.join(matched)})"
            ),
            reason_type=ReasonType.SUSPICIOUS_PATTERN,
        )
