from __future__ import annotations

from .config import DEFAULT_MATCHING_CONFIG, MatchingConfig
from .normalizer import canonicalize
from .synonyms import SynonymResolver


def is_boundary(ch: str) -> bool:
    """Characters that may delimit a whole ingredient word."""
    return ch.isspace() or ch == ","


def has_bounded_occurrence(needle: str, haystack: str) -> bool:
    """
    True if ``needle`` occurs in ``haystack`` with a boundary (string edge,
    whitespace or comma) directly before and after it.

    Every occurrence is tried, so "파 대파" finds the first "파" even though the
    second one is glued to "대". The scan is literal; no escaping needed.
    """
    if not needle:
        return False
    start = haystack.find(needle)
    while start != -1:
        end = start + len(needle)
        before_ok = start == 0 or is_boundary(haystack[start - 1])
        after_ok = end == len(haystack) or is_boundary(haystack[end])
        if before_ok and after_ok:
            return True
        start = haystack.find(needle, start + 1)
    return False


class IngredientMatcher:
    """Decides whether a recipe ingredient is covered by an owned ingredient."""

    def __init__(self, config: MatchingConfig = DEFAULT_MATCHING_CONFIG) -> None:
        self.config = config
        self._resolver = SynonymResolver(config.synonyms)

    def canonical(self, raw: str | None) -> str:
        return canonicalize(raw, self._resolver)

    def is_matched(self, recipe_ingredient: str | None, owned_ingredient: str | None) -> bool:
        recipe_key = self.canonical(recipe_ingredient)
        owned_key = self.canonical(owned_ingredient)

        if not recipe_key or not owned_key:
            return False
        if recipe_key == owned_key:
            return True

        # Plain containment is not enough: "파" must not match inside "양파".
        if owned_key in recipe_key:
            return has_bounded_occurrence(owned_key, recipe_key)
        if recipe_key in owned_key:
            return has_bounded_occurrence(recipe_key, owned_key)
        return False

    def is_satisfied(self, recipe_ingredient: str | None, owned: list[str]) -> bool:
        return any(self.is_matched(recipe_ingredient, o) for o in owned)


DEFAULT_MATCHER = IngredientMatcher()


def is_matched(
    recipe_ingredient: str | None,
    owned_ingredient: str | None,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> bool:
    matcher = DEFAULT_MATCHER if config is DEFAULT_MATCHING_CONFIG else IngredientMatcher(config)
    return matcher.is_matched(recipe_ingredient, owned_ingredient)
