from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping


@dataclass(frozen=True)
class SynonymTable:
    """
    Ordered canonical key -> surface forms mapping.

    Entry order matters: the resolver stops at the first entry with a hit, so
    overlapping sets (e.g. 소고기 / 쇠고기) resolve to whichever comes first.
    """

    entries: tuple[tuple[str, tuple[str, ...]], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "SynonymTable":
        return cls(tuple((key, tuple(forms)) for key, forms in mapping.items()))


DEFAULT_SYNONYMS = SynonymTable.from_mapping({
    "소고기": ["쇠고기", "소고기", "소고기살"],
    "쇠고기": ["소고기", "쇠고기", "소고기살"],
    "양파": ["양파", "양파(중간)", "양파(작은)"],
    "당근": ["당근", "당근(중간)", "당근(작은)"],
    "감자": ["감자", "감자(중간)", "감자(작은)"],
})

# Matched by bidirectional containment. No entry may itself sit inside a common
# food name (no bare "pepper" or "마늘"). Fragments of an entry, such as "고추"
# or "olive", still classify as seasoning.
DEFAULT_SEASONINGS: tuple[str, ...] = (
    "소금",
    "설탕",
    "후추",
    "간장",
    "식초",
    "식용유",
    "참기름",
    "들기름",
    "올리브오일",
    "고춧가루",
    "고추장",
    "된장",
    "물엿",
    "올리고당",
    "맛술",
    "미림",
    "깨소금",
    "salt",
    "sugar",
    "black pepper",
    "soy sauce",
    "vinegar",
    "olive oil",
    "vegetable oil",
    "sesame oil",
)


@dataclass(frozen=True)
class MatchingConfig:
    synonyms: SynonymTable = field(default_factory=lambda: DEFAULT_SYNONYMS)
    seasonings: tuple[str, ...] = DEFAULT_SEASONINGS
    low_count_threshold: int = 2  # owned counts at or below skip the rate floor
    min_match_rate: float = 50.0
    high_tier_floor: float = 80.0
    perfect_rate: float = 100.0


DEFAULT_MATCHING_CONFIG = MatchingConfig()
