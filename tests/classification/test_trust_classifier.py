"""Tests for TrustClassifier.

Tests cover:
1. Identity set lookups and resolution order
2. Name fragment matching
3. Unknown identities resolve to NEUTRAL, never BLOCKED
4. Reputation score buckets
5. Per-call policy snapshots
"""

import pytest

from guardian_system.classification import TrustClassifier, TrustVerification
from guardian_system.data_management.schemas import PolicyConfig, TrustLevel

COCOMELON_ID = "UCBnZ16ahKA2DZ_T5W0FPUXg"
TED_ED_ID = "UCsooa4yRKGN_zEE8iknghZA"


@pytest.fixture
def classifier():
    return TrustClassifier()


class TestIdentityClassification:
    """Tests for classify() with the built-in tables."""

    def test_verified_partner_id(self, classifier):
        assert classifier.classify(COCOMELON_ID, "Cocomelon") is TrustLevel.VERIFIED_PARTNER

    def test_trusted_id(self, classifier):
        assert classifier.classify(TED_ED_ID, "TED-Ed") is TrustLevel.TRUSTED

    def test_name_fragment_is_recognized(self, classifier):
        assert classifier.classify("UCunknown", "Sesame Street Español") is TrustLevel.RECOGNIZED

    def test_name_fragment_case_insensitive(self, classifier):
        assert classifier.classify("", "BLIPPI Toys") is TrustLevel.RECOGNIZED

    def test_unknown_source_is_neutral(self, classifier):
        assert classifier.classify("UCunknown", "Random Uploads") is TrustLevel.NEUTRAL

    def test_empty_identity_is_neutral(self, classifier):
        assert classifier.classify("", "") is TrustLevel.NEUTRAL
        assert classifier.classify(None, None) is TrustLevel.NEUTRAL

    def test_id_takes_precedence_over_name(self, classifier):
        assert classifier.classify(TED_ED_ID, "Cocomelon Fan Page") is TrustLevel.TRUSTED


class TestDenylist:
    """Tests for explicit BLOCKED entries."""

    @pytest.fixture
    def policy(self):
        return PolicyConfig.default().updated(blocked_source_ids={"UCbad", COCOMELON_ID})

    def test_blocked_id(self, classifier, policy):
        assert classifier.classify("UCbad", "Anything", policy) is TrustLevel.BLOCKED

    def test_denylist_wins_over_partner(self, classifier, policy):
        assert classifier.classify(COCOMELON_ID, "Cocomelon", policy) is TrustLevel.BLOCKED

    def test_default_snapshot_unaffected(self, classifier):
        assert classifier.classify("UCbad", "Anything") is TrustLevel.NEUTRAL


class TestVerify:
    """Tests for verify() explanations."""

    def test_verification_reason(self, classifier):
        verification = classifier.verify(COCOMELON_ID, "Cocomelon")

        assert isinstance(verification, TrustVerification)
        assert verification.trust_level is TrustLevel.VERIFIED_PARTNER
        assert verification.trust_score == 250
        assert "verified partner" in verification.reasons[0]

    def test_fragment_named_in_reason(self, classifier):
        verification = classifier.verify("", "Official Numberblocks")
        assert "numberblocks" in verification.reasons[0]


class TestReputationScore:
    """Tests for from_reputation_score() buckets."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, TrustLevel.VERIFIED_PARTNER),
            (95, TrustLevel.VERIFIED_PARTNER),
            (94, TrustLevel.TRUSTED),
            (85, TrustLevel.TRUSTED),
            (70, TrustLevel.RECOGNIZED),
            (69, TrustLevel.NEUTRAL),
            (40, TrustLevel.NEUTRAL),
            (39, TrustLevel.SUSPICIOUS),
            (10, TrustLevel.SUSPICIOUS),
            (9, TrustLevel.BLOCKED),
            (0, TrustLevel.BLOCKED),
        ],
    )
    def test_cut_points(self, classifier, score, expected):
        assert classifier.from_reputation_score(score) is expected

    def test_out_of_range_clamped(self, classifier):
        assert classifier.from_reputation_score(150) is TrustLevel.VERIFIED_PARTNER
        assert classifier.from_reputation_score(-20) is TrustLevel.BLOCKED
