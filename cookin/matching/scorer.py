from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from .config import DEFAULT_MATCHING_CONFIG, MatchingConfig
from .matcher import DEFAULT_MATCHER, IngredientMatcher
from .models import IngredientAvailability, Recipe, ScoredRecipe
from .seasoning import is_seasoning

_CENT = Decimal("0.01")


def _matcher_for(config: MatchingConfig) -> IngredientMatcher:
    if config is DEFAULT_MATCHING_CONFIG:
        return DEFAULT_MATCHER
    return IngredientMatcher(config)


def _percent(part: int, whole: int) -> float:
    return float((Decimal(part * 100) / Decimal(whole)).quantize(_CENT, rounding=ROUND_HALF_UP))


def food_ingredient_names(
    recipe: Recipe, config: MatchingConfig = DEFAULT_MATCHING_CONFIG
) -> list[str]:
    """Display names of the recipe's ingredients, seasonings dropped."""
    names = [ing.display_name for ing in recipe.display_ingredients]
    return [n for n in names if not is_seasoning(n, config.seasonings)]


def score_recipe(
    recipe: Recipe,
    owned: Sequence[str],
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
    matcher: IngredientMatcher | None = None,
) -> ScoredRecipe:
    """
    Compute coverage of ``recipe`` by the owned ingredients.

    Returns a new ScoredRecipe wrapping the untouched recipe:
    - nothing owned: rate 0, every food ingredient counts as missing
    - no food ingredients: rate 0, nothing missing
    - otherwise rate = satisfied / food * 100, rounded half up to 2 decimals
    """
    foods = food_ingredient_names(recipe, config)
    owned = list(owned)

    if not owned:
        return ScoredRecipe(recipe=recipe, missing_ingredient_count=len(foods))
    if not foods:
        return ScoredRecipe(recipe=recipe)

    matcher = matcher or _matcher_for(config)
    satisfied = sum(1 for name in foods if matcher.is_satisfied(name, owned))

    return ScoredRecipe(
        recipe=recipe,
        match_rate=_percent(satisfied, len(foods)),
        missing_ingredient_count=len(foods) - satisfied,
        has_any_ingredient=satisfied > 0,
    )


def ingredient_availability(
    recipe: Recipe,
    owned: Sequence[str],
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> list[IngredientAvailability]:
    """Per-ingredient ownership flags for a recipe's detail view."""
    matcher = _matcher_for(config)
    owned = list(owned)
    result: list[IngredientAvailability] = []
    for ing in recipe.display_ingredients:
        name = ing.display_name
        result.append(IngredientAvailability(
            name=name,
            owned=matcher.is_satisfied(name, owned),
            seasoning=is_seasoning(name, config.seasonings),
        ))
    return result
