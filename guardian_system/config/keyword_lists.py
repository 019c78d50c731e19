"""Keyword tables for the blocklist rule and the content score.

Blocklists are built cumulatively: each tier blocks everything the next
looser tier blocks plus its own additions, so a stricter tier's set is
always a superset. Blocklist terms match as plain substrings of the
lowercased text, so terms are chosen to avoid common innocent words
("hell" in "hello", "war" in "award", "kill" in "skills").
"""

from typing import Dict, FrozenSet, List, Tuple

# (tier, additions) from least to most restrictive
_BLOCKLIST_LAYERS: List[Tuple[str, FrozenSet[str]]] = [
    ("all", frozenset()),
    ("under_16", frozenset({
        "sex", "nude", "porn", "adult only", "explicit content",
        "18+", "nsfw", "xxx", "x-rated",
        "torture", "drug use", "suicide method", "self harm",
    })),
    ("under_14", frozenset({
        "adult", "explicit", "mature", "r-rated", "gore",
        "how to watch adult", "bypass age", "age restriction", "restricted content",
    })),
    ("under_13", frozenset()),
    ("under_12", frozenset({
        "horror", "blood", "drug", "alcohol", "murder", "suicide",
        "disturbing", "graphic content", "graphic violence",
    })),
    ("under_10", frozenset({
        "killing", "killer", "guns", "gunfire", "weapon", "death",
        "smoking", "violence", "abuse", "demon", "satan", "uncensored",
        "gone sexual", "slender", "jumpscare", "bloody", "gory",
    })),
    ("under_8", frozenset()),
    ("under_5", frozenset({
        "scary", "fight", "creepy", "nightmare", "evil", "cursed", "monster",
        "zombie", "fnaf", "haunted", "ghost", "scream", "violent", "dark",
        "twisted", "insane", "beer", "wine", "cigarette", "pg-13",
        "prank gone wrong", "hate", "damn", "crap", "stupid", "idiot",
        "clickbait",
    })),
]


def _build_blocklists() -> Dict[str, FrozenSet[str]]:
    blocklists: Dict[str, FrozenSet[str]] = {}
    accumulated: FrozenSet[str] = frozenset()
    for tier, additions in _BLOCKLIST_LAYERS:
        if tier != "all":
            accumulated = accumulated | additions
        blocklists[tier] = accumulated
    return blocklists


# The unrestricted tier never blocks on keywords
KEYWORD_BLOCKLISTS: Dict[str, FrozenSet[str]] = _build_blocklists()

# Each distinct match adds 15 content points (capped at +100)
SAFE_KEYWORDS: FrozenSet[str] = frozenset({
    "kids", "kid", "children", "child", "toddler", "baby", "babies",
    "preschool", "kindergarten", "elementary",
    "nursery", "rhymes", "lullaby", "lullabies",
    "cartoon", "cartoons", "animation", "animated",
    "educational", "learning", "learn", "teach",
    "alphabet", "abc", "numbers", "counting", "123",
    "colors", "shapes", "phonics",
    "sing along", "singalong", "songs for kids",
    "disney", "pixar", "nickelodeon", "nick jr", "pbs kids",
    "playtime", "storytime", "bedtime story", "read aloud",
    "crafts", "diy for kids", "art for kids", "science for kids",
    "family friendly", "kid friendly", "child friendly", "safe for kids",
})

# Any match adds a flat 50 content points
STRONG_SAFE_INDICATORS: FrozenSet[str] = frozenset({
    "cocomelon", "pinkfong", "super simple", "little baby bum",
    "sesame street", "pbs kids", "nick jr", "disney junior",
    "numberblocks", "alphablocks", "bluey", "peppa pig",
    "paw patrol", "blippi", "ms rachel", "hey bear sensory",
    "nursery rhymes", "abc song", "alphabet song",
})

# Manipulative or low-quality phrasing typical of mass-produced kid bait.
# Matched on word boundaries so "irl" never fires inside "girl".
SUSPICIOUS_PATTERNS: FrozenSet[str] = frozenset({
    "surprise egg", "surprise eggs", "surprise toys",
    "wrong heads", "wrong head", "bad baby", "bad babies",
    "learn colors with", "learning colors with",
    "finger family", "daddy finger",
    "johny johny", "johnny johnny",
    "crying baby", "baby crying", "babies crying",
    "injection", "needle", "doctor baby", "baby doctor",
    "pregnant", "pregnancy", "baby born",
    "poop", "pooping", "toilet humor",
    "fart", "farting", "burp", "burping",
    "spider", "spiders", "snake", "snakes",
    "joker elsa", "spiderman elsa", "hulk elsa", "frozen spiderman",
    "in real life", "irl",
    "mukbang", "eating show", "asmr eating",
    "prank", "pranks", "pranking",
    "weird", "try not to laugh",
    "spaghetti face", "noodle face", "food face", "messy eating",
})
