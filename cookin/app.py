from __future__ import annotations

import math
import os
import uuid

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import ValidationError
from starlette.middleware.sessions import SessionMiddleware

from .matching.engine import rank_recipes
from .matching.matcher import DEFAULT_MATCHER
from .matching.models import (
    IngredientAvailability,
    MatchRequest,
    MatchResponse,
    RankedRecipes,
    RankRequest,
    Recipe,
)
from .matching.scorer import ingredient_availability
from .recipes.data_store import count_by_type, get_recipe, search_recipes
from .session.models import (
    AddIngredientRequest,
    RecipeTypeRequest,
    SearchRequest,
    SearchResponse,
    SearchSession,
    SessionOut,
)
from .session.store import purge_expired, store_delete, store_get, store_set
from .translation.groq_client import translate_recipe

app = FastAPI(title="COOKIN Recipe Matching API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "cookin-secret-change-in-production"),
)

_SESSION_ID_KEY = "sid"


def _session_key(request: Request) -> str:
    sid = request.session.get(_SESSION_ID_KEY)
    if not sid:
        sid = uuid.uuid4().hex
        request.session[_SESSION_ID_KEY] = sid
    return f"search_session:{sid}"


def load_session(request: Request) -> SearchSession:
    """Restore the caller's search session, or start an empty one."""
    raw = store_get(_session_key(request))
    if not raw:
        return SearchSession()
    try:
        return SearchSession.model_validate(raw)
    except ValidationError:
        return SearchSession()


def _save_session(request: Request, state: SearchSession) -> None:
    store_set(_session_key(request), state.model_dump(mode="json"))


def _session_out(state: SearchSession) -> SessionOut:
    return SessionOut(
        owned_ingredients=list(state.owned.items),
        recipe_type=state.recipe_type,
        current_page=state.current_page,
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {"recipe_counts": count_by_type(), "active_sessions": purge_expired()}


# ── Matching engine ──────────────────────────────────────────────────────


@app.post("/rank", response_model=RankedRecipes)
def rank(body: RankRequest) -> RankedRecipes:
    return rank_recipes(body.recipes, body.owned_ingredients)


@app.post("/match", response_model=MatchResponse)
def match(body: MatchRequest) -> MatchResponse:
    return MatchResponse(
        matched=DEFAULT_MATCHER.is_matched(body.recipe_ingredient, body.owned_ingredient),
        recipe_canonical=DEFAULT_MATCHER.canonical(body.recipe_ingredient),
        owned_canonical=DEFAULT_MATCHER.canonical(body.owned_ingredient),
    )


# ── Search session ───────────────────────────────────────────────────────


@app.get("/session", response_model=SessionOut)
def get_session(state: SearchSession = Depends(load_session)) -> SessionOut:
    return _session_out(state)


@app.post("/session/ingredients", response_model=SessionOut)
def add_ingredient(
    body: AddIngredientRequest,
    request: Request,
    state: SearchSession = Depends(load_session),
) -> SessionOut:
    if not body.name.strip():
        raise HTTPException(status_code=422, detail="Ingredient name is blank")
    if not state.owned.add(body.name):
        raise HTTPException(status_code=409, detail=f"'{body.name.strip()}' is already in the list")
    _save_session(request, state)
    return _session_out(state)


@app.delete("/session/ingredients/{name}", response_model=SessionOut)
def remove_ingredient(
    name: str,
    request: Request,
    state: SearchSession = Depends(load_session),
) -> SessionOut:
    if not state.owned.remove(name):
        raise HTTPException(status_code=404, detail=f"'{name}' is not in the list")
    _save_session(request, state)
    return _session_out(state)


@app.put("/session/recipe-type", response_model=SessionOut)
def set_recipe_type(
    body: RecipeTypeRequest,
    request: Request,
    state: SearchSession = Depends(load_session),
) -> SessionOut:
    # Switching cuisine starts a fresh search, like the original toggle.
    if body.recipe_type != state.recipe_type:
        state = SearchSession(recipe_type=body.recipe_type)
        _save_session(request, state)
    return _session_out(state)


@app.delete("/session")
def reset_session(request: Request) -> dict:
    store_delete(_session_key(request))
    return {"status": "reset"}


# ── Search ───────────────────────────────────────────────────────────────


@app.post("/search", response_model=SearchResponse)
def search(
    body: SearchRequest,
    request: Request,
    state: SearchSession = Depends(load_session),
) -> SearchResponse:
    owned = list(state.owned.items)
    if not owned:
        raise HTTPException(status_code=400, detail="Add at least one ingredient before searching")

    candidates = search_recipes(owned, recipe_type=state.recipe_type.value)
    ranked = rank_recipes(candidates, owned)

    ordered = ranked.ordered
    total_pages = math.ceil(len(ordered) / body.page_size) if ordered else 0
    start = (body.page - 1) * body.page_size
    items = ordered[start:start + body.page_size]

    state.current_page = body.page
    _save_session(request, state)

    return SearchResponse(
        items=items,
        tiers=ranked,
        total=len(ordered),
        page=body.page,
        total_pages=total_pages,
        has_next_page=body.page < total_pages,
    )


@app.get("/recipes/{recipe_id}/availability", response_model=list[IngredientAvailability])
def recipe_availability(
    recipe_id: str,
    state: SearchSession = Depends(load_session),
) -> list[IngredientAvailability]:
    recipe = get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return ingredient_availability(recipe, list(state.owned.items))


# ── Translation ──────────────────────────────────────────────────────────


@app.post("/translate/recipe", response_model=Recipe)
def translate(body: Recipe) -> Recipe:
    return translate_recipe(body)
