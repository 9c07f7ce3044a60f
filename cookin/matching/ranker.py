from __future__ import annotations

from typing import Iterable

from .config import DEFAULT_MATCHING_CONFIG, MatchingConfig
from .models import RankedRecipes, ScoredRecipe, Tier


def _is_eligible(item: ScoredRecipe, owned_count: int, config: MatchingConfig) -> bool:
    if not item.has_any_ingredient:
        return False
    if owned_count <= config.low_count_threshold:
        return True
    return item.match_rate >= config.min_match_rate


def classify(match_rate: float, config: MatchingConfig = DEFAULT_MATCHING_CONFIG) -> Tier:
    if match_rate >= config.perfect_rate:
        return Tier.perfect
    if match_rate >= config.high_tier_floor:
        return Tier.high
    return Tier.medium


def rank_scored(
    scored: Iterable[ScoredRecipe],
    owned_count: int,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> RankedRecipes:
    """
    Filter scored recipes and split them into perfect / high / medium tiers.

    A recipe needs at least one matched food ingredient. With more than
    ``low_count_threshold`` owned ingredients it also needs
    ``match_rate >= min_match_rate``. Tiers are sorted by match rate,
    highest first; ties keep input order.
    """
    buckets: dict[Tier, list[ScoredRecipe]] = {t: [] for t in Tier}
    for item in scored:
        if not _is_eligible(item, owned_count, config):
            continue
        tier = classify(item.match_rate, config)
        buckets[tier].append(item.model_copy(update={"tier": tier}))

    # sorted() is stable, which keeps equal rates in input order.
    return RankedRecipes(**{
        tier.value: sorted(items, key=lambda s: s.match_rate, reverse=True)
        for tier, items in buckets.items()
    })
