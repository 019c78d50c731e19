"""Tests for PolicyStore snapshot swapping."""

import threading

import pytest
from pydantic import ValidationError

from guardian_system.data_management import PolicyStore
from guardian_system.data_management.schemas import DEFAULT_POLICY_VERSION, PolicyConfig


class TestPolicyStoreSwap:
    """Tests for load-once, swap-atomically semantics."""

    @pytest.fixture
    def store(self):
        return PolicyStore()

    def test_starts_with_builtin_tables(self, store):
        assert store.current.version == DEFAULT_POLICY_VERSION
        assert store.swap_count == 0

    def test_swap_returns_previous(self, store):
        original = store.current
        replacement = original.updated(version="v2")

        previous = store.swap(replacement)

        assert previous is original
        assert store.current is replacement
        assert store.swap_count == 1

    def test_swap_rejects_non_policy(self, store):
        with pytest.raises(TypeError):
            store.swap({"version": "v2"})
        assert store.current.version == DEFAULT_POLICY_VERSION

    def test_held_snapshot_unchanged_by_swap(self, store):
        held = store.current
        store.swap(held.updated(blocked_source_ids={"UCbad"}))

        assert held.blocked_source_ids == frozenset()
        assert store.current.blocked_source_ids == frozenset({"UCbad"})

    def test_concurrent_swaps_leave_complete_snapshot(self, store):
        snapshots = [store.current.updated(version=f"v{i}") for i in range(20)]
        threads = [threading.Thread(target=store.swap, args=(s,)) for s in snapshots]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.swap_count == 20
        assert store.current in snapshots


class TestPolicyStoreFiles:
    """Tests for loading and saving policy documents."""

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "policy.json"
        writer = PolicyStore(PolicyConfig.default().updated(version="saved"))
        writer.save_file(path)

        reader = PolicyStore()
        reader.load_file(path)

        assert reader.current.version == "saved"
        assert reader.swap_count == 1

    def test_failed_load_keeps_previous(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"version": "broken"}', encoding="utf-8")
        store = PolicyStore()
        before = store.current

        with pytest.raises(ValidationError):
            store.load_file(path)

        assert store.current is before
        assert store.swap_count == 0

    def test_from_settings_without_path(self):
        assert PolicyStore.from_settings(None).current.version == DEFAULT_POLICY_VERSION

    def test_from_settings_with_path(self, tmp_path):
        path = tmp_path / "policy.json"
        path.write_text(PolicyConfig.default().updated(version="custom").model_dump_json(), encoding="utf-8")

        assert PolicyStore.from_settings(str(path)).current.version == "custom"
