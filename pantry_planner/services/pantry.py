from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Protocol

from sqlalchemy.orm import Session

from pantry_planner import crud
from pantry_planner.models.user import User


@dataclass(frozen=True)
class Ingredient:
    name: str


@dataclass(frozen=True)
class PantryEntry:
    ingredient: Ingredient
    expires_on: dt.date | None = None


@dataclass(frozen=True)
class Pantry:
    """Ordered pantry contents; each ingredient carries its own expiration date."""

    entries: tuple[PantryEntry, ...] = field(default_factory=tuple)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, dt.date | None]]) -> "Pantry":
        return cls(tuple(PantryEntry(Ingredient(name), expires_on) for name, expires_on in pairs))

    def ingredients(self) -> list[Ingredient]:
        return [e.ingredient for e in self.entries]

    def expirations(self) -> list[dt.date | None]:
        return [e.expires_on for e in self.entries]

    def names(self) -> list[str]:
        return [e.ingredient.name for e in self.entries]

    def __iter__(self) -> Iterator[PantryEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class PantryStore(Protocol):
    def get_pantry(self, user: User) -> Pantry | None: ...

    def get_all_ingredients(self) -> list[Ingredient]: ...


class SqlPantryStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_pantry(self, user: User) -> Pantry | None:
        if user is None or crud.get_user(self.db, user.id) is None:
            return None
        items = crud.list_pantry_items(self.db, user.id)
        return Pantry(tuple(PantryEntry(Ingredient(i.ingredient.name), i.expires_on) for i in items))

    def get_all_ingredients(self) -> list[Ingredient]:
        return [Ingredient(r.name) for r in crud.list_ingredients(self.db)]
