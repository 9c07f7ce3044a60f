from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..matching.models import RankedRecipes, ScoredRecipe
from ..pantry import OwnedIngredients


class RecipeType(str, Enum):
    korean = "korean"
    western = "western"


class SearchSession(BaseModel):
    owned: OwnedIngredients = Field(default_factory=OwnedIngredients)
    recipe_type: RecipeType = RecipeType.korean
    current_page: int = Field(default=1, ge=1)


class SessionOut(BaseModel):
    owned_ingredients: list[str]
    recipe_type: RecipeType
    current_page: int


class AddIngredientRequest(BaseModel):
    name: str = Field(..., max_length=100)


class RecipeTypeRequest(BaseModel):
    recipe_type: RecipeType


class SearchRequest(BaseModel):
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=50)


class SearchResponse(BaseModel):
    items: list[ScoredRecipe]
    tiers: RankedRecipes
    total: int
    page: int
    total_pages: int
    has_next_page: bool
