from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from ..matching.models import Recipe
from ..translation.ingredient_dictionary import to_english_list

logger = logging.getLogger(__name__)

_PROCESSED_DIR = Path(__file__).resolve().parent.parent / "data" / "processed"
_PROCESSED_JSON = _PROCESSED_DIR / "recipes.json"

_df: pd.DataFrame | None = None
_catalog_path: Path = _PROCESSED_JSON


def _load(path: Path) -> pd.DataFrame:
    # No dtype inference: "weight": "300" must stay a string.
    df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    if df.empty:
        return df

    for column, default in (("recipeType", "korean"), ("ingredients", None)):
        if column not in df.columns:
            df[column] = default

    df["id"] = df["id"].astype(str)
    df["recipeType"] = df["recipeType"].fillna("korean").astype(str).str.lower()

    # Pre-join ingredient text for cheap provider-side filtering
    def _joined(ingredients, key: str) -> str:
        if not isinstance(ingredients, list):
            return ""
        return " ".join(str(i.get(key) or "") for i in ingredients if isinstance(i, dict))

    df["parts_text"] = df["ingredients"].apply(lambda ings: " ".join(
        filter(None, [_joined(ings, "originalName"), _joined(ings, "name")])
    ))
    df["names_lower"] = df["ingredients"].apply(lambda ings: _joined(ings, "name").lower())
    return df


def set_catalog_path(path: Path) -> None:
    """Point the store at another processed catalog and drop the cached one."""
    global _df, _catalog_path
    _catalog_path = Path(path)
    _df = None


def get_dataframe() -> pd.DataFrame:
    """Return the in-memory catalog DataFrame, loading it on first call."""
    global _df
    if _df is None:
        _df = _load(_catalog_path)
    return _df


def _to_recipes(rows: pd.DataFrame) -> list[Recipe]:
    recipes: list[Recipe] = []
    for record in rows.drop(columns=["parts_text", "names_lower"], errors="ignore").to_dict("records"):
        clean = {k: (None if _is_missing(v) else v) for k, v in record.items()}
        try:
            recipes.append(Recipe.model_validate(clean))
        except ValidationError:
            logger.warning("Dropping malformed catalog record %s", clean.get("id"), exc_info=True)
    return recipes


def _is_missing(value) -> bool:
    return not isinstance(value, (list, dict)) and pd.isna(value)


def get_recipe(recipe_id: str) -> Recipe | None:
    df = get_dataframe()
    if df.empty:
        return None
    rows = df[df["id"] == str(recipe_id)]
    recipes = _to_recipes(rows.head(1))
    return recipes[0] if recipes else None


def count_by_type() -> dict[str, int]:
    df = get_dataframe()
    if df.empty:
        return {}
    return {str(k): int(v) for k, v in df["recipeType"].value_counts().sort_index().items()}


def search_recipes(
    owned_ingredients: list[str],
    recipe_type: str = "korean",
    limit: int = 100,
) -> list[Recipe]:
    """
    Candidate recipes for the owned ingredients.

    Korean recipes are kept when their ingredient text contains any owned
    name, falling back to the first ``limit`` recipes when none do. Western
    recipes are queried with the owned names converted to English.
    """
    df = get_dataframe()
    if df.empty:
        return []
    pool = df[df["recipeType"] == recipe_type.lower()]
    if pool.empty:
        return []
    owned = [o.strip() for o in owned_ingredients if o and o.strip()]

    if recipe_type.lower() == "western":
        terms = [t.lower() for t in to_english_list(owned)]
        mask = pool["names_lower"].apply(lambda text: any(t in text for t in terms))
        return _to_recipes(pool[mask].head(limit))

    mask = pool["parts_text"].apply(lambda text: any(o in text for o in owned))
    hits = pool[mask]
    if hits.empty:
        hits = pool
    return _to_recipes(hits.head(limit))
