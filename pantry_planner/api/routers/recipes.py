from __future__ import annotations

import logging

import requests
from fastapi import APIRouter, Depends, HTTPException

from pantry_planner.api.deps import (
    get_current_user,
    get_pantry_store,
    get_planner_config,
    get_recipe_search,
    require_api_key,
)
from pantry_planner.errors import PantryNotResolvedError, RecipeSearchError
from pantry_planner.logging_utils import redact_text
from pantry_planner.schemas.recipes import GuestRecipesIn, PriorityOut, QueryOut, RecipeOut
from pantry_planner.services.pantry import Ingredient, Pantry
from pantry_planner.services.planner import RecipePlanner
from pantry_planner.settings import settings

logger = logging.getLogger("pantry_planner.api.recipes")

router = APIRouter(prefix="/recipes", tags=["recipes"], dependencies=[Depends(require_api_key)])


def _key_ingredient(name: str | None) -> Ingredient | None:
    name = (name or "").strip()
    return Ingredient(name) if name else None


def _run_search(planner: RecipePlanner) -> list[RecipeOut]:
    try:
        recipes = planner.get_recipes()
    except PantryNotResolvedError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except (RecipeSearchError, requests.RequestException) as exc:
        logger.warning("Recipe search failed: %s", redact_text(str(exc)))
        raise HTTPException(status_code=502, detail="Recipe search failed")
    return [RecipeOut.model_validate(r) for r in recipes]


@router.get("", response_model=list[RecipeOut])
def get_recipes(
    user=Depends(get_current_user),
    store=Depends(get_pantry_store),
    search=Depends(get_recipe_search),
    config=Depends(get_planner_config),
):
    # The search term comes from the sorted pantry; a key ingredient only drives /priority.
    planner = RecipePlanner(store, search, config, user=user)
    return _run_search(planner)


@router.post("/guest", response_model=list[RecipeOut])
def get_guest_recipes(
    payload: GuestRecipesIn,
    store=Depends(get_pantry_store),
    search=Depends(get_recipe_search),
    config=Depends(get_planner_config),
):
    pantry = Pantry.from_pairs((i.name, i.expires_on) for i in payload.items)
    planner = RecipePlanner(store, search, config, temp_pantry=pantry)
    return _run_search(planner)


@router.get("/priority", response_model=PriorityOut)
def get_priority(
    key_ingredient: str | None = None,
    user=Depends(get_current_user),
    store=Depends(get_pantry_store),
    search=Depends(get_recipe_search),
    config=Depends(get_planner_config),
):
    planner = RecipePlanner(store, search, config, user=user, key_ingredient=_key_ingredient(key_ingredient))
    ingredient = planner.priority_ingredient()
    return PriorityOut(name=ingredient.name if ingredient else None)


@router.get("/query", response_model=QueryOut)
def get_query(
    user=Depends(get_current_user),
    store=Depends(get_pantry_store),
    search=Depends(get_recipe_search),
    config=Depends(get_planner_config),
):
    planner = RecipePlanner(store, search, config, user=user)
    try:
        query = planner.build_query()
    except PantryNotResolvedError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return QueryOut(
        term=query.term,
        excluded=list(query.excluded),
        url=redact_text(query.to_url(settings.EDAMAM_BASE_URL)),
    )
