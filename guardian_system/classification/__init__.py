"""Source trust classification.

Components:
    TrustClassifier: Resolves a TrustLevel from source identity or reputation
    TrustVerification: Trust level plus the reason it was assigned

Usage:
    from guardian_system.classification import TrustClassifier

    classifier = TrustClassifier()
    level = classifier.classify(item.source_id, item.source_name)
"""

from guardian_system.classification.trust_classifier import (
    TrustClassifier,
    TrustVerification,
)

__all__ = [
    "TrustClassifier",
    "TrustVerification",
]
