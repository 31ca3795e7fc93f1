from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import requests

from pantry_planner.errors import RecipeSearchError
from pantry_planner.settings import Settings, settings as default_settings


logger = logging.getLogger("pantry_planner.recipe_search")


@dataclass(frozen=True)
class RecipeQuery:
    # Already percent-encoded; appended to the URL as-is.
    term: str
    app_id: str
    app_key: str
    excluded: tuple[str, ...] = ()

    def to_params(self) -> list[tuple[str, str]]:
        params = [("q", self.term), ("app_id", self.app_id), ("app_key", self.app_key)]
        params.extend(("excluded", name) for name in self.excluded)
        return params

    def to_query_string(self) -> str:
        return "&".join(f"{k}={v}" for k, v in self.to_params())

    def to_url(self, base_url: str) -> str:
        return f"{base_url}?{self.to_query_string()}"


@dataclass(frozen=True)
class Recipe:
    label: str
    url: str | None = None
    image: str | None = None
    source: str | None = None
    ingredient_lines: tuple[str, ...] = ()
    calories: float | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Recipe":
        if not isinstance(payload, dict) or "label" not in payload:
            raise RecipeSearchError("recipe entry without a label")
        return cls(
            label=str(payload["label"]),
            url=payload.get("url"),
            image=payload.get("image"),
            source=payload.get("source"),
            ingredient_lines=tuple(payload.get("ingredientLines") or ()),
            calories=payload.get("calories"),
            raw=payload,
        )


def parse_recipes(body: Any) -> list[Recipe]:
    hits = body.get("hits") if isinstance(body, dict) else None
    if not isinstance(hits, list):
        raise RecipeSearchError("search response has no 'hits' list")
    recipes = []
    for hit in hits:
        recipe = hit.get("recipe") if isinstance(hit, dict) else None
        recipes.append(Recipe.from_payload(recipe))
    return recipes


class RecipeSearch(Protocol):
    def search(self, query: RecipeQuery) -> list[Recipe]: ...


class EdamamClient:
    """Blocking client for the Edamam recipe search endpoint. No retries."""

    def __init__(
        self,
        base_url: str,
        timeout: float,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, cfg: Settings | None = None) -> "EdamamClient":
        cfg = cfg or default_settings
        return cls(base_url=cfg.EDAMAM_BASE_URL, timeout=cfg.EDAMAM_TIMEOUT_SEC)

    def close(self) -> None:
        self.session.close()

    def search(self, query: RecipeQuery) -> list[Recipe]:
        resp = self.session.get(query.to_url(self.base_url), timeout=self.timeout)
        resp.raise_for_status()
        try:
            body = resp.json()
        except ValueError as exc:
            raise RecipeSearchError("search response is not JSON") from exc
        recipes = parse_recipes(body)
        logger.info("Recipe search returned %s recipes", len(recipes))
        return recipes
