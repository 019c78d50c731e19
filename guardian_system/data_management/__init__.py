"""Data management package for the gating engine.

Provides the policy snapshot holder and the schemas:
- PolicyStore: atomic load/swap of the immutable PolicyConfig
- schemas: ContentItem, AgeTier, TrustLevel, GuardianScore, Verdict, PolicyConfig
"""

from guardian_system.data_management.policy_store import PolicyStore

__all__ = [
    "PolicyStore",
]
