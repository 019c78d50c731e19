"""Content gating facade.

Provides the GuardianEngine entry point:
- evaluate: one item, one tier -> Verdict
- filter: allowed items in input order
- filter_and_rank: allowed (item, verdict) pairs, highest score first
"""

from guardian_system.pipeline.gating_pipeline import (
    ENGINE_NAME,
    VERSION,
    EngineInfo,
    GuardianEngine,
    create_engine,
)

__all__ = ["ENGINE_NAME", "VERSION", "EngineInfo", "GuardianEngine", "create_engine"]
