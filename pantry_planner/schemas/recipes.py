from __future__ import annotations

from pydantic import BaseModel, Field

from pantry_planner.schemas.pantry import PantryItemIn


class GuestRecipesIn(BaseModel):
    items: list[PantryItemIn] = Field(default_factory=list, max_length=200)


class RecipeOut(BaseModel):
    label: str
    url: str | None = None
    image: str | None = None
    source: str | None = None
    ingredient_lines: list[str] = Field(default_factory=list)
    calories: float | None = None

    class Config:
        from_attributes = True


class PriorityOut(BaseModel):
    name: str | None


class QueryOut(BaseModel):
    term: str
    excluded: list[str]
    url: str
