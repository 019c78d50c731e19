"""Keyword blocklist rule: blocks age-inappropriate terms per tier.

Each tier has its own blocklist; stricter tiers block a superset of what
looser tiers block. Terms match as substrings of the item's lowercased
title, source name and description. The unrestricted tier never blocks.
"""

from loguru import logger

from guardian_system.data_management.schemas import AgeTier, ContentItem, ReasonType
from guardian_system.rules.base import SKIP, Block, Rule, RuleContext, RuleResult
from guardian_system.utils.text_matching import find_substring_matches


class KeywordBlocklistRule(Rule):
    """Blocks content containing any blocklisted term for the target tier."""

    id = "keyword_blocklist"
    name = "Keyword Blocklist Rule"
    priority = 180
    is_decisive = True

    def __init__(self):
        self._logger = logger.bind(component="KeywordBlocklistRule")

    def evaluate(self, content: ContentItem, context: RuleContext) -> RuleResult:
        if context.tier is AgeTier.ALL:
            return SKIP

        blocklist = context.policy.keyword_blocklists[context.tier]
        matched = find_substring_matches(content.text_content, blocklist)
        if not matched:
            return SKIP

        self._logger.debug(
            f"Blocklist hit for {context.tier.value}",
            content_id=content.id,
            matched=matched,
        )
        return Block(
            reason=f"Blocked: Contains inappropriate content for {context.tier.display_name}",
            matched_patterns=frozenset(matched),
            reason_type=ReasonType.KEYWORD_MATCH,
        )
