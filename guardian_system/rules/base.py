"""Rule contract and rule results for the gating chain.

A rule inspects one ContentItem in a RuleContext and returns exactly one of
three result shapes:

| Result   | Effect on the chain                                   |
|----------|-------------------------------------------------------|
| Approve  | Decisive: stop, item allowed (score still reported)   |
| Block    | Decisive: stop, item blocked with a zero score        |
| Continue | Accumulate score_adjustment/reason, run the next rule |

Rules are assembled once into a RuleChain, stable-sorted by priority
(highest first, ties keep registration order), and iterated in that fixed
order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from guardian_system.data_management.schemas import AgeTier, ContentItem, PolicyConfig, ReasonType, TrustLevel


@dataclass(frozen=True)
class Approve:
    """Decisive approval."""

    reason: str


@dataclass(frozen=True)
class Block:
    """Decisive block, citing the evidence that triggered it."""

    reason: str
    matched_patterns: FrozenSet[str] = frozenset()
    reason_type: ReasonType = ReasonType.RULE_TRIGGERED


@dataclass(frozen=True)
class Continue:
    """Non-decisive result; adjusts the score and lets the chain proceed."""

    score_adjustment: int = 0
    reason: Optional[str] = None
    # None: recorded as HIGH_SCORE or LOW_SCORE by the adjustment sign
    reason_type: Optional[ReasonType] = None


RuleResult = Union[Approve, Block, Continue]

# Shared "rule does not apply" result
SKIP = Continue()


@dataclass(frozen=True)
class RuleContext:
    """Inputs shared by every rule for one evaluation.

    Attributes:
        tier: Target age tier.
        trust_level: Trust level resolved for the item's source.
        policy: Policy snapshot for this evaluation.
    """

    tier: AgeTier
    trust_level: TrustLevel
    policy: PolicyConfig = field(default_factory=PolicyConfig.default)

    @property
    def strict_mode(self) -> bool:
        return self.policy.is_strict(self.tier)


class Rule(ABC):
    """
    Base class for gating rules.

    Subclasses set ``id``, ``name``, ``priority`` and ``is_decisive`` as class
    attributes and implement ``evaluate``.

    Priority bands (higher runs first):
        - 200-150: Critical rules (trusted sources, blocklists)
        - 149-100: Primary content rules
        - 99-50: Secondary analysis rules
        - 49-0: Scoring adjustment rules
    """

    id: str = ""
    name: str = ""
    priority: int = 0
    is_decisive: bool = False  # Informational only; the result shape decides

    @abstractmethod
    def evaluate(self, content: ContentItem, context: RuleContext) -> RuleResult:
        """Evaluate this rule for one item."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, priority={self.priority})"


class RuleChain:
    """Fixed, priority-sorted sequence of rules."""

    def __init__(self, rules: Iterable[Rule]):
        # sorted() is stable, so equal priorities keep registration order
        self._rules: Tuple[Rule, ...] = tuple(
            sorted(rules, key=lambda rule: rule.priority, reverse=True)
        )
        ids = [rule.id for rule in self._rules]
        duplicates = sorted({rule_id for rule_id in ids if ids.count(rule_id) > 1})
        if duplicates:
            raise ValueError(f"Duplicate rule ids: {', '.join(duplicates)}")

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def __iter__(self):
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
