from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from pydantic import ValidationError

from .config import DEFAULT_MATCHING_CONFIG, MatchingConfig
from .matcher import DEFAULT_MATCHER, IngredientMatcher
from .models import RankedRecipes, Recipe, ScoredRecipe
from .ranker import rank_scored
from .scorer import score_recipe

logger = logging.getLogger(__name__)


def _coerce_recipes(recipes: Iterable[Recipe | dict[str, Any]]) -> list[Recipe]:
    out: list[Recipe] = []
    for raw in recipes:
        if isinstance(raw, Recipe):
            out.append(raw)
            continue
        try:
            out.append(Recipe.model_validate(raw))
        except ValidationError:
            logger.warning("Skipping recipe record that failed validation: %r", raw, exc_info=True)
    return out


def score_recipes(
    recipes: Iterable[Recipe | dict[str, Any]],
    owned_ingredients: Sequence[str],
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> list[ScoredRecipe]:
    matcher = DEFAULT_MATCHER if config is DEFAULT_MATCHING_CONFIG else IngredientMatcher(config)
    owned = [o for o in owned_ingredients if o and o.strip()]
    return [
        score_recipe(recipe, owned, config=config, matcher=matcher)
        for recipe in _coerce_recipes(recipes)
    ]


def rank_recipes(
    recipes: Iterable[Recipe | dict[str, Any]],
    owned_ingredients: Sequence[str],
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> RankedRecipes:
    """
    Score every recipe against the owned ingredients and return the
    perfect / high / medium tiers.

    Inputs are never modified. Dicts are validated into ``Recipe``; records
    that cannot be validated are dropped instead of raising.
    """
    owned = [o for o in owned_ingredients if o and o.strip()]
    scored = score_recipes(recipes, owned, config=config)
    ranked = rank_scored(scored, len(owned), config=config)
    logger.debug(
        "Ranked %d recipes for %d owned ingredients: %d perfect, %d high, %d medium",
        len(scored), len(owned), len(ranked.perfect), len(ranked.high), len(ranked.medium),
    )
    return ranked
