from __future__ import annotations

import datetime as dt
from pydantic import BaseModel, Field, field_validator


class PantryItemIn(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    expires_on: dt.date | None = None

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        v = " ".join(v.split())
        if not v:
            raise ValueError("name must not be empty")
        return v


class PantryItemOut(BaseModel):
    name: str
    expires_on: dt.date | None
    position: int


class PantryOut(BaseModel):
    items: list[PantryItemOut]
