"""Phrase matching helpers shared by the rules and the score calculator.

Two matching modes are used:
- substring: plain ``in`` test against lowercased text (blocklists, safe keywords)
- phrase: whole-word regex match (suspicious patterns)

Results are sorted so that verdict reasons are reproducible.
"""

import re
from functools import lru_cache
from typing import FrozenSet, List, Tuple


def find_substring_matches(text: str, terms: FrozenSet[str]) -> List[str]:
    """Return every term contained in ``text`` as a substring, sorted."""
    return sorted(term for term in terms if term and term.lower() in text)


@lru_cache(maxsize=64)
def _compile_phrases(phrases: FrozenSet[str]) -> Tuple[Tuple[str, "re.Pattern[str]"], ...]:
    return tuple(
        (phrase, re.compile(rf"\b{re.escape(phrase.lower())}\b"))
        for phrase in sorted(phrases)
        if phrase
    )


def find_phrase_matches(text: str, phrases: FrozenSet[str]) -> List[str]:
    """Return every phrase found in ``text`` on word boundaries, sorted.

    Args:
        text: Lowercased text to scan.
        phrases: Phrase set; compiled patterns are cached per set.

    Returns:
        Distinct matched phrases.
    """
    return [phrase for phrase, pattern in _compile_phrases(phrases) if pattern.search(text)]
