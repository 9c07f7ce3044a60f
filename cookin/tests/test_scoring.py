from __future__ import annotations

from cookin.matching.models import Ingredient, Recipe, ScoredRecipe, Tier
from cookin.matching.ranker import classify, rank_scored
from cookin.matching.scorer import food_ingredient_names, ingredient_availability, score_recipe


def _recipe(rid: str, *names: str, **extra) -> Recipe:
    return Recipe(id=rid, title=rid, ingredients=[Ingredient(name=n) for n in names], **extra)


def _scored(rid: str, rate: float, has_any: bool = True) -> ScoredRecipe:
    return ScoredRecipe(recipe=Recipe(id=rid), match_rate=rate, has_any_ingredient=has_any)


# ── Scorer ───────────────────────────────────────────────────────────────


class TestScoreRecipe:
    def test_half_match(self):
        s = score_recipe(_recipe("a", "양파", "마늘"), ["양파", "당근"])
        assert s.match_rate == 50.0
        assert s.missing_ingredient_count == 1
        assert s.has_any_ingredient is True

    def test_seasonings_are_excluded(self):
        recipe = _recipe("b", "양파", "당근", "감자", "소고기", "설탕")
        s = score_recipe(recipe, ["양파", "당근", "감자", "소고기"])
        assert s.match_rate == 100.0
        assert s.missing_ingredient_count == 0

    def test_rounds_to_two_decimals(self):
        s = score_recipe(_recipe("c", "양파", "마늘", "두부"), ["양파"])
        assert s.match_rate == 33.33
        assert s.missing_ingredient_count == 2

    def test_ties_round_half_up(self):
        # 1/32 -> 3.125
        s = score_recipe(_recipe("t", "양파", *["두부"] * 31), ["양파"])
        assert s.match_rate == 3.13
        assert s.missing_ingredient_count == 31

    def test_nothing_owned(self):
        s = score_recipe(_recipe("d", "양파", "마늘", "소금"), [])
        assert s.match_rate == 0.0
        assert s.has_any_ingredient is False
        assert s.missing_ingredient_count == 2

    def test_only_seasonings(self):
        s = score_recipe(_recipe("e", "소금", "간장", "참기름"), ["소금", "간장"])
        assert s.match_rate == 0.0
        assert s.has_any_ingredient is False
        assert s.missing_ingredient_count == 0

    def test_no_ingredients_at_all(self):
        s = score_recipe(Recipe(id="f"), ["양파"])
        assert s.match_rate == 0.0
        assert s.has_any_ingredient is False
        assert s.missing_ingredient_count == 0

    def test_translated_ingredients_are_preferred(self):
        recipe = Recipe(
            id="g",
            ingredients=[Ingredient(name="onion"), Ingredient(name="garlic")],
            translated_ingredients=[
                Ingredient(name="onion", translated_name="양파"),
                Ingredient(name="garlic", translated_name="마늘"),
            ],
        )
        s = score_recipe(recipe, ["양파", "마늘"])
        assert s.match_rate == 100.0

    def test_display_name_fallback_chain(self):
        recipe = Recipe(id="h", ingredients=[
            Ingredient(translated_name="", name="", original_name="양파 1개"),
            Ingredient(),
        ])
        s = score_recipe(recipe, ["양파"])
        # The nameless entry is a food ingredient that can never match.
        assert s.match_rate == 50.0
        assert s.missing_ingredient_count == 1

    def test_recipe_is_not_mutated(self):
        recipe = _recipe("i", "양파")
        before = recipe.model_dump()
        s = score_recipe(recipe, ["양파"])
        assert recipe.model_dump() == before
        assert s.recipe == recipe
        assert not hasattr(recipe, "match_rate")

    def test_rate_is_proportional(self):
        names = ["양파", "당근", "감자", "두부", "마늘", "애호박", "달걀"]
        recipe = _recipe("j", *names)
        for k in range(len(names) + 1):
            s = score_recipe(recipe, names[:k] or ["없는재료"])
            assert s.match_rate == round(100 * k / len(names), 2)
            assert 0.0 <= s.match_rate <= 100.0


def test_food_ingredient_names():
    recipe = _recipe("k", "양파", "소금", "양조간장", "두부")
    assert food_ingredient_names(recipe) == ["양파", "두부"]


def test_ingredient_availability():
    recipe = _recipe("l", "양파 1개", "마늘", "소금")
    result = ingredient_availability(recipe, ["양파"])
    assert [(a.name, a.owned, a.seasoning) for a in result] == [
        ("양파 1개", True, False),
        ("마늘", False, False),
        ("소금", False, True),
    ]


# ── Ranker ───────────────────────────────────────────────────────────────


class TestClassify:
    def test_boundaries(self):
        assert classify(100.0) is Tier.perfect
        assert classify(99.99) is Tier.high
        assert classify(80.0) is Tier.high
        assert classify(79.99) is Tier.medium
        assert classify(10.0) is Tier.medium


class TestRankScored:
    def test_requires_any_ingredient(self):
        ranked = rank_scored([_scored("a", 0.0, has_any=False)], owned_count=1)
        assert ranked.total == 0

    def test_low_count_has_no_floor(self):
        ranked = rank_scored([_scored("a", 25.0)], owned_count=2)
        assert [s.recipe.id for s in ranked.medium] == ["a"]

    def test_high_count_applies_floor(self):
        items = [_scored("a", 49.99), _scored("b", 50.0), _scored("c", 75.0)]
        ranked = rank_scored(items, owned_count=3)
        assert [s.recipe.id for s in ranked.medium] == ["c", "b"]

    def test_tiers_and_concatenation_order(self):
        items = [
            _scored("m", 60.0),
            _scored("p", 100.0),
            _scored("h1", 80.0),
            _scored("h2", 90.0),
        ]
        ranked = rank_scored(items, owned_count=4)
        assert [s.recipe.id for s in ranked.perfect] == ["p"]
        assert [s.recipe.id for s in ranked.high] == ["h2", "h1"]
        assert [s.recipe.id for s in ranked.medium] == ["m"]
        assert [s.recipe.id for s in ranked.ordered] == ["p", "h2", "h1", "m"]
        assert [s.tier for s in ranked.ordered] == [Tier.perfect, Tier.high, Tier.high, Tier.medium]

    def test_stable_within_tier(self):
        items = [_scored("x", 50.0), _scored("y", 66.67), _scored("z", 50.0), _scored("w", 50.0)]
        ranked = rank_scored(items, owned_count=1)
        assert [s.recipe.id for s in ranked.medium] == ["y", "x", "z", "w"]

    def test_partition_is_exhaustive_and_disjoint(self):
        rates = [0.0, 12.5, 50.0, 79.99, 80.0, 95.0, 100.0]
        items = [_scored(str(i), r, has_any=r > 0) for i, r in enumerate(rates)]
        ranked = rank_scored(items, owned_count=1)
        ids = [s.recipe.id for s in ranked.ordered]
        assert sorted(ids) == sorted(str(i) for i, r in enumerate(rates) if r > 0)
        assert len(ids) == len(set(ids))

    def test_inputs_not_mutated(self):
        item = _scored("a", 100.0)
        rank_scored([item], owned_count=1)
        assert item.tier is None
