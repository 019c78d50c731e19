"""Source identity tables for trust classification.

Resolution order (first match wins):
1. Blocked source ids (explicit denylist): BLOCKED
2. Verified partner ids: VERIFIED_PARTNER
3. Trusted ids: TRUSTED
4. Trusted name fragments (case-insensitive substring): RECOGNIZED
5. Anything else, including empty identity: NEUTRAL
"""

from typing import FrozenSet

# Premium kid content creators
VERIFIED_PARTNER_IDS: FrozenSet[str] = frozenset({
    "UCBnZ16ahKA2DZ_T5W0FPUXg",  # CoComelon
    "UC4NALVCmcmL5ntpKx19zoJQ",  # Pinkfong
    "UCkQO3QsgTpNTsOw6ujimT5Q",  # Blippi
    "UC-Gm4EN7nNNR3k67J8ywF4A",  # Super Simple Songs
    "UCeirmJxuV9HM9VdG0ykDJhg",  # Little Baby Bum
    "UCPPJnlbQSvdXhFOZXWqangg",  # BabyBus
})

# Established family-friendly and educational sources
TRUSTED_IDS: FrozenSet[str] = frozenset({
    "UC295-Dw_tDNtZXFeAPAQKEw",  # National Geographic Kids
    "UCX6OQ3DkcsbYNE6H8uQQuVA",  # Crash Course
    "UCvGQ8CnL3u7bE5BO8E0ZXzA",  # SciShow Kids
    "UCsooa4yRKGN_zEE8iknghZA",  # TED-Ed
    "UCsXVk37bltHxD1rDPwtNM8Q",  # Kurzgesagt
})

# Empty by default: populated by guardians or remote policy updates
BLOCKED_SOURCE_IDS: FrozenSet[str] = frozenset()

# Lowercase fragments matched against the source display name
TRUSTED_NAME_FRAGMENTS: FrozenSet[str] = frozenset({
    "cocomelon", "coco melon",
    "pinkfong", "baby shark",
    "little baby bum",
    "super simple songs", "super simple",
    "blippi",
    "ms rachel", "songs for littles",
    "dave and ava",
    "bounce patrol",
    "chu chu tv", "chutv",
    "sesame street",
    "pbs kids",
    "national geographic kids", "nat geo kids",
    "ted-ed", "teded",
    "crash course kids",
    "scishow kids",
    "numberblocks", "alphablocks",
    "peppa pig official",
    "paw patrol official",
    "bluey official",
    "disney junior",
    "nick jr",
    "cartoon network",
    "dreamworks tv",
    "hey bear sensory",
    "babybus", "baby bus",
    "little angel",
    "moonbug kids",
    "super jojo",
    "mother goose club",
    "little treehouse",
})
