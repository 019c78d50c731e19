"""Policy snapshot holder with load-once, swap-atomically semantics.

Readers take the current snapshot reference without locking; an evaluation
reads it once and uses that snapshot throughout, so it can never observe a
half-applied update. Writers validate a complete new PolicyConfig first and
only then replace the reference under a lock. A failed update leaves the
previous snapshot active.

Usage:
    from guardian_system.data_management.policy_store import PolicyStore

    store = PolicyStore()
    config = store.current
    previous = store.swap(config.updated(blocked_source_ids={"UCbad"}))
"""

import threading
from pathlib import Path
from typing import Optional, Union

import structlog

from guardian_system.data_management.schemas.policy_schema import PolicyConfig


class PolicyStore:
    """Holds the active PolicyConfig snapshot."""

    def __init__(self, initial: Optional[PolicyConfig] = None) -> None:
        """Initialize PolicyStore.

        Args:
            initial: Starting snapshot. Built-in tables are used if None.
        """
        self._config = initial if initial is not None else PolicyConfig.default()
        self._write_lock = threading.Lock()
        self._swap_count = 0
        self._logger = structlog.get_logger().bind(component="PolicyStore")

    @classmethod
    def from_settings(cls, policy_path: Optional[str] = None) -> "PolicyStore":
        """Create a store from a policy file, or the built-in tables if none.

        Raises:
            pydantic.ValidationError: If the file holds an incomplete policy.
        """
        if policy_path:
            return cls(PolicyConfig.from_json_file(policy_path))
        return cls()

    @property
    def current(self) -> PolicyConfig:
        """The active snapshot."""
        return self._config

    @property
    def swap_count(self) -> int:
        return self._swap_count

    def swap(self, new_config: PolicyConfig) -> PolicyConfig:
        """Replace the active snapshot.

        Args:
            new_config: Fully validated replacement snapshot.

        Returns:
            The snapshot that was active before the swap.
        """
        if not isinstance(new_config, PolicyConfig):
            raise TypeError(f"Expected PolicyConfig, got {type(new_config).__name__}")

        with self._write_lock:
            previous = self._config
            self._config = new_config
            self._swap_count += 1

        self._logger.info(
            "policy_swapped",
            previous_version=previous.version,
            version=new_config.version,
            swap_count=self._swap_count,
        )
        return previous

    def load_file(self, path: Union[str, Path]) -> PolicyConfig:
        """Load a JSON policy document and swap it in.

        Raises:
            pydantic.ValidationError: If the document is incomplete; the
                active snapshot is left unchanged.
        """
        try:
            new_config = PolicyConfig.from_json_file(path)
        except Exception as e:
            self._logger.error("policy_load_failed", path=str(path), error=str(e))
            raise
        return self.swap(new_config)

    def save_file(self, path: Union[str, Path]) -> None:
        """Write the active snapshot as JSON."""
        Path(path).write_text(self._config.model_dump_json(indent=2), encoding="utf-8")
        self._logger.debug("policy_saved", path=str(path), version=self._config.version)
