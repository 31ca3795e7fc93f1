from __future__ import annotations

import datetime as dt
import logging
import random
import re
from dataclasses import dataclass
from typing import Protocol, Sequence

from pantry_planner.errors import PantryNotResolvedError, PantryRequiredError
from pantry_planner.logging_utils import RedactFilter
from pantry_planner.models.user import User
from pantry_planner.services.pantry import Ingredient, Pantry, PantryEntry, PantryStore
from pantry_planner.services.recipe_search import Recipe, RecipeQuery, RecipeSearch
from pantry_planner.settings import Settings, settings as default_settings


logger = logging.getLogger("pantry_planner.planner")
logger.addFilter(RedactFilter())

_WHITESPACE = re.compile(r"\s")


class RandomSource(Protocol):
    def choice(self, seq: Sequence): ...


@dataclass(frozen=True)
class PlannerConfig:
    app_id: str
    app_key: str
    staple_terms: tuple[str, ...]

    @classmethod
    def from_settings(cls, cfg: Settings | None = None) -> "PlannerConfig":
        cfg = cfg or default_settings
        return cls(
            app_id=cfg.EDAMAM_APP_ID,
            app_key=cfg.EDAMAM_APP_KEY,
            staple_terms=tuple(cfg.STAPLE_TERMS),
        )


def compare_expiration(a: dt.date | None, b: dt.date | None) -> int:
    """Order dates ascending; a missing date counts as the far future."""
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    return (a > b) - (a < b)


def _expiration_key(entry: PantryEntry) -> tuple[int, dt.date]:
    if entry.expires_on is None:
        return (1, dt.date.min)
    return (0, entry.expires_on)


def encode_term(text: str) -> str:
    # Only whitespace is escaped; other reserved characters such as "&" pass through.
    return _WHITESPACE.sub("%20", text)


class RecipePlanner:
    """Picks the ingredients to cook with and asks the recipe service for matches.

    Built once per request. A registered user's stored pantry always replaces the
    transient pantry handed in by the caller.
    """

    def __init__(
        self,
        store: PantryStore,
        search: RecipeSearch,
        config: PlannerConfig,
        user: User | None = None,
        key_ingredient: Ingredient | None = None,
        temp_pantry: Pantry | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        if user is None and temp_pantry is None:
            raise PantryRequiredError("either a user or a transient pantry is required")
        self.store = store
        self.search = search
        self.config = config
        self.user = user
        self.key_ingredient = key_ingredient
        self.pantry: Pantry | None = temp_pantry
        self.rng = rng or random.Random()
        self.resolve_pantry()

    def resolve_pantry(self) -> None:
        if self.user is not None:
            self.pantry = self.store.get_pantry(self.user)
            if self.pantry is None:
                logger.info("No stored pantry for user %s", self.user.id)

    def ensure_pantry(self) -> Pantry | None:
        if self.pantry is None:
            self.resolve_pantry()
        return self.pantry

    def _require_pantry(self) -> Pantry:
        pantry = self.ensure_pantry()
        if pantry is None:
            raise PantryNotResolvedError("no pantry is available for this request")
        return pantry

    def priority_ingredient(self) -> Ingredient | None:
        if self.key_ingredient is not None:
            return self.key_ingredient

        pantry = self.ensure_pantry()
        if not pantry:
            return None

        entries = pantry.entries
        earliest = entries[0].expires_on
        tied = [entries[0].ingredient]
        for entry in entries[1:]:
            cmp = compare_expiration(entry.expires_on, earliest)
            if cmp < 0:
                earliest = entry.expires_on
                tied = [entry.ingredient]
            elif cmp == 0:
                tied.append(entry.ingredient)
        return self.rng.choice(tied)

    def sorted_by_expiration(self) -> list[Ingredient]:
        pantry = self.ensure_pantry()
        if pantry is None:
            return []
        # sorted() is stable, so equal dates keep pantry order.
        return [e.ingredient for e in sorted(pantry.entries, key=_expiration_key)]

    def exclusion_set(self) -> frozenset[str]:
        pantry = self._require_pantry()
        names = [name.lower() for name in pantry.names()]
        return frozenset(
            term for term in self.config.staple_terms
            if not any(term in name for name in names)
        )

    def build_query(self) -> RecipeQuery:
        self._require_pantry()
        top = self.sorted_by_expiration()[:2]
        term = encode_term(" ".join(i.name for i in top))
        excluded = self.exclusion_set()
        return RecipeQuery(
            term=term,
            app_id=self.config.app_id,
            app_key=self.config.app_key,
            excluded=tuple(t for t in self.config.staple_terms if t in excluded),
        )

    def get_recipes(self) -> list[Recipe]:
        query = self.build_query()
        logger.info("Searching recipes: %s", query.to_query_string())
        return self.search.search(query)

    def missing_ingredient_names(self) -> set[str]:
        pantry = self.ensure_pantry()
        if pantry is None:
            return set()
        have = set(pantry.names())
        return {i.name for i in self.store.get_all_ingredients() if i.name not in have}

    def random_pantry_ingredient_name(self) -> str:
        pantry = self.ensure_pantry()
        if not pantry:
            return ""
        return self.rng.choice(pantry.names())
