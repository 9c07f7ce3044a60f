from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    # Upstream providers speak camelCase; accept both spellings.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class Ingredient(_WireModel):
    name: str | None = None
    translated_name: str | None = None
    original_name: str | None = None
    amount: str | None = None
    unit: str | None = None

    @property
    def display_name(self) -> str:
        return self.translated_name or self.name or self.original_name or ""


class Recipe(_WireModel):
    id: str
    title: str | None = None
    translated_title: str | None = None
    description: str | None = None
    translated_description: str | None = None
    image_url: str | None = None
    cooking_time: int | None = None
    serving_size: int | None = None
    ingredients: list[Ingredient] | None = None
    translated_ingredients: list[Ingredient] | None = None
    steps: list[str] | None = None
    translated_steps: list[str] | None = None
    recipe_type: str | None = None
    category: str | None = None
    recipe_method: str | None = None
    calories: float | None = None
    weight: str | None = None

    @field_validator("ingredients", "translated_ingredients", mode="before")
    @classmethod
    def _drop_bad_ingredients(cls, v):
        if not isinstance(v, list):
            return v
        return [i for i in v if isinstance(i, (dict, Ingredient))]

    @field_validator("steps", "translated_steps", mode="before")
    @classmethod
    def _drop_bad_steps(cls, v):
        if not isinstance(v, list):
            return v
        return [s for s in v if isinstance(s, str)]

    @property
    def display_ingredients(self) -> list[Ingredient]:
        if self.translated_ingredients is not None:
            return self.translated_ingredients
        return self.ingredients or []

    @property
    def display_title(self) -> str:
        return self.translated_title or self.title or ""


class Tier(str, Enum):
    perfect = "perfect"
    high = "high"
    medium = "medium"


class ScoredRecipe(_WireModel):
    recipe: Recipe
    match_rate: float = Field(default=0.0, ge=0.0, le=100.0)
    missing_ingredient_count: int = Field(default=0, ge=0)
    has_any_ingredient: bool = False
    tier: Tier | None = None


class RankedRecipes(_WireModel):
    perfect: list[ScoredRecipe] = Field(default_factory=list)
    high: list[ScoredRecipe] = Field(default_factory=list)
    medium: list[ScoredRecipe] = Field(default_factory=list)

    @property
    def ordered(self) -> list[ScoredRecipe]:
        return [*self.perfect, *self.high, *self.medium]

    @property
    def total(self) -> int:
        return len(self.perfect) + len(self.high) + len(self.medium)


class IngredientAvailability(_WireModel):
    name: str
    owned: bool
    seasoning: bool


class RankRequest(_WireModel):
    recipes: list[Recipe] = Field(default_factory=list)
    owned_ingredients: list[str] = Field(default_factory=list)


class MatchRequest(_WireModel):
    recipe_ingredient: str
    owned_ingredient: str


class MatchResponse(_WireModel):
    matched: bool
    recipe_canonical: str
    owned_canonical: str
