"""Trusted-source rule: auto-approves verified partners and trusted sources."""

from guardian_system.data_management.schemas import ContentItem
from guardian_system.rules.base import SKIP, Approve, Rule, RuleContext, RuleResult


class TrustedSourceRule(Rule):
    """Approves content whose source trust level is auto-approving.

    Runs first (priority 200) so that a trusted source is decided before
    any blocklist can fire.
    """

    id = "trusted_channel"
    name = "Trusted Channel Rule"
    priority = 200
    is_decisive = True

    def evaluate(self, content: ContentItem, context: RuleContext) -> RuleResult:
        # Blocked sources are rejected before the chain runs
        if context.trust_level.is_blocked:
            return SKIP

        if context.trust_level.auto_approve:
            return Approve(
                reason=(
                    f"Approved: Content from {context.trust_level.display_name.lower()} "
                    f"channel '{content.source_name}'"
                )
            )

        return SKIP
