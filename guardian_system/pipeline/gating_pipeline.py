"""Content gating pipeline: trust -> rules -> score -> threshold -> verdict.

GuardianEngine is the single entry point callers use. One evaluation:

1. Coerce the tier (unknown tiers fail closed to the most restrictive).
2. Read the active PolicyConfig snapshot once.
3. Classify the source. BLOCKED returns a blocked verdict immediately,
   bypassing rules and scoring.
4. Run the rule chain. Approve and Block stop the chain; Continue
   accumulates a score adjustment and an optional reason.
5. Without a decisive outcome, compute the score, apply the adjustment
   and check the tier threshold.

The engine holds no per-call state, so evaluate/filter/filter_and_rank may
be called concurrently from any number of threads.

Usage:
    from guardian_system.pipeline import GuardianEngine

    engine = GuardianEngine()
    verdict = engine.evaluate(item, AgeTier.UNDER_8)
    ranked = engine.filter_and_rank(items, "under_8")
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from guardian_system.classification import TrustClassifier
from guardian_system.config.settings import settings
from guardian_system.data_management.policy_store import PolicyStore
from guardian_system.data_management.schemas import (
    AgeTier,
    ContentItem,
    GuardianScore,
    PolicyConfig,
    ReasonImpact,
    ReasonType,
    TrustLevel,
    Verdict,
    VerdictReason,
)
from guardian_system.rules import (
    Approve,
    Block,
    Continue,
    Rule,
    RuleChain,
    RuleContext,
    default_rules,
)
from guardian_system.scoring import RatingPolicy, ScoreCalculator
from guardian_system.utils.logging import evaluation_context, get_structured_logger

VERSION = "1.0.0"
ENGINE_NAME = "Guardian Engine"

TierLike = Union[AgeTier, str]


@dataclass
class EngineInfo:
    """Static description of a configured engine."""

    name: str
    version: str
    rules_count: int
    rule_names: List[str] = field(default_factory=list)
    policy_version: str = ""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GuardianEngine:
    """Facade over classification, rules, scoring and the tier policy."""

    def __init__(
        self,
        policy_store: Optional[PolicyStore] = None,
        classifier: Optional[TrustClassifier] = None,
        calculator: Optional[ScoreCalculator] = None,
        rating_policy: Optional[RatingPolicy] = None,
        rules: Optional[Iterable[Rule]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize GuardianEngine.

        Args:
            policy_store: Holder of the active policy snapshot. If None, a
                store is loaded from GUARDIAN_POLICY_PATH when set, else
                from the built-in tables.
            classifier: Trust classifier. Default instance if None.
            calculator: Score calculator. Default instance if None.
            rating_policy: Tier threshold policy. Default instance if None.
            rules: Rules to run. ``default_rules()`` if None. Sorted once
                here and never re-sorted.
            clock: Source of ``Verdict.evaluated_at``. UTC now if None.
        """
        self._policy_store = policy_store or PolicyStore.from_settings(settings.policy_path)
        self._classifier = classifier or TrustClassifier()
        self._calculator = calculator or ScoreCalculator()
        self._rating_policy = rating_policy or RatingPolicy()
        self._chain = RuleChain(default_rules() if rules is None else rules)
        self._clock = clock or _utc_now
        self._logger = get_structured_logger(__name__, component="GuardianEngine")

    @property
    def policy_store(self) -> PolicyStore:
        return self._policy_store

    @property
    def rules(self) -> Tuple[Rule, ...]:
        """Rules in evaluation order."""
        return self._chain.rules

    def evaluate(self, content: ContentItem, tier: TierLike) -> Verdict:
        """Evaluate one item for one tier.

        Args:
            content: Item to judge.
            tier: Target tier, as an AgeTier or its name.

        Returns:
            Verdict with score and ordered reason trail. Never raises for a
            well-formed ContentItem: a failing rule yields a blocked verdict.
        """
        tier = AgeTier.coerce(tier)
        policy = self._policy_store.current

        trust_level = self._classifier.classify(content.source_id, content.source_name, policy)
        if trust_level.is_blocked:
            reason = VerdictReason(
                type=ReasonType.BLOCKED_SOURCE,
                message=f"Blocked: Channel '{content.source_name}' is blocked",
                impact=ReasonImpact.CRITICAL,
            )
            return self._verdict(content, False, GuardianScore.blocked(), tier, trust_level, [reason])

        context = RuleContext(tier=tier, trust_level=trust_level, policy=policy)
        reasons: List[VerdictReason] = []
        adjustment = 0

        for rule in self._chain:
            try:
                result = rule.evaluate(content, context)
                if not isinstance(result, (Approve, Block, Continue)):
                    raise TypeError(
                        f"Rule {rule.id} returned {type(result).__name__}, expected a RuleResult"
                    )
            except Exception as e:
                self._logger.exception(
                    "rule_fault",
                    rule_id=rule.id,
                    content_id=content.id,
                    tier=tier.value,
                )
                reasons.append(
                    VerdictReason(
                        type=ReasonType.RULE_FAULT,
                        message=f"Blocked: Rule '{rule.id}' failed ({type(e).__name__})",
                        impact=ReasonImpact.CRITICAL,
                        source_rule_id=rule.id,
                    )
                )
                return self._verdict(content, False, GuardianScore.blocked(), tier, trust_level, reasons)

            if isinstance(result, Approve):
                reasons.append(
                    VerdictReason(
                        type=ReasonType.TRUSTED_SOURCE,
                        message=result.reason or f"Approved by {rule.name}",
                        impact=ReasonImpact.APPROVED,
                        source_rule_id=rule.id,
                    )
                )
                score = self._calculator.compute(content, trust_level, tier, policy)
                return self._verdict(content, True, score, tier, trust_level, reasons)

            if isinstance(result, Block):
                reasons.append(
                    VerdictReason(
                        type=result.reason_type,
                        message=result.reason or f"Blocked by {rule.name}",
                        impact=ReasonImpact.CRITICAL,
                        source_rule_id=rule.id,
                        matched_patterns=sorted(result.matched_patterns),
                    )
                )
                return self._verdict(content, False, GuardianScore.blocked(), tier, trust_level, reasons)

            if result.score_adjustment != 0:
                adjustment += result.score_adjustment
                if result.reason:
                    positive = result.score_adjustment > 0
                    reason_type = result.reason_type or (
                        ReasonType.HIGH_SCORE if positive else ReasonType.LOW_SCORE
                    )
                    reasons.append(
                        VerdictReason(
                            type=reason_type,
                            message=result.reason,
                            impact=ReasonImpact.POSITIVE if positive else ReasonImpact.NEGATIVE,
                            source_rule_id=rule.id,
                        )
                    )

        score = self._calculator.compute(content, trust_level, tier, policy).with_adjustment(adjustment)
        allowed = self._rating_policy.is_allowed(score, tier, policy)
        if not allowed:
            reasons.append(self._rating_policy.low_score_reason(score, tier, policy))

        return self._verdict(content, allowed, score, tier, trust_level, reasons)

    def evaluate_many(self, items: Sequence[ContentItem], tier: TierLike) -> List[Verdict]:
        """Evaluate items for one tier, returning verdicts in input order."""
        tier = AgeTier.coerce(tier)

        with evaluation_context(tier.value):
            verdicts = [self.evaluate(item, tier) for item in items]
            self._logger.info(
                "batch_evaluated",
                total=len(verdicts),
                allowed=sum(1 for verdict in verdicts if verdict.allowed),
            )
        return verdicts

    def filter(self, items: Sequence[ContentItem], tier: TierLike) -> List[ContentItem]:
        """Keep allowed items, preserving input order."""
        verdicts = self.evaluate_many(items, tier)
        return [item for item, verdict in zip(items, verdicts) if verdict.allowed]

    def filter_and_rank(
        self,
        items: Sequence[ContentItem],
        tier: TierLike,
    ) -> List[Tuple[ContentItem, Verdict]]:
        """Keep allowed (item, verdict) pairs, highest score first.

        Equal totals keep their input order.
        """
        verdicts = self.evaluate_many(items, tier)
        allowed = [(item, verdict) for item, verdict in zip(items, verdicts) if verdict.allowed]
        return sorted(allowed, key=lambda pair: pair[1].score.total, reverse=True)

    def engine_info(self) -> EngineInfo:
        return EngineInfo(
            name=ENGINE_NAME,
            version=VERSION,
            rules_count=len(self._chain),
            rule_names=[rule.name for rule in self._chain],
            policy_version=self._policy_store.current.version,
        )

    def _verdict(
        self,
        content: ContentItem,
        allowed: bool,
        score: GuardianScore,
        tier: AgeTier,
        trust_level: TrustLevel,
        reasons: List[VerdictReason],
    ) -> Verdict:
        verdict = Verdict(
            allowed=allowed,
            score=score,
            tier=tier,
            trust_level=trust_level,
            reasons=reasons,
            evaluated_at=self._clock(),
        )
        self._logger.debug(
            "verdict_built",
            content_id=content.id,
            tier=tier.value,
            trust_level=trust_level.value,
            allowed=allowed,
            total=score.total,
            reasons=len(reasons),
        )
        return verdict


def create_engine(policy: Optional[PolicyConfig] = None, **kwargs) -> GuardianEngine:
    """Build an engine around a fresh PolicyStore holding ``policy``.

    Without ``policy`` the engine falls back to GUARDIAN_POLICY_PATH or the
    built-in tables.
    """
    store = PolicyStore(policy) if policy is not None else None
    return GuardianEngine(policy_store=store, **kwargs)
