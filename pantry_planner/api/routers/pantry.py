from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from pantry_planner.api.deps import get_current_user, require_api_key
from pantry_planner.db import get_db
from pantry_planner.schemas.pantry import PantryItemIn, PantryItemOut, PantryOut
from pantry_planner import crud

router = APIRouter(prefix="/pantry", tags=["pantry"], dependencies=[Depends(require_api_key)])


def _item_out(item) -> PantryItemOut:
    return PantryItemOut(name=item.ingredient.name, expires_on=item.expires_on, position=item.position)


@router.get("", response_model=PantryOut)
def get_pantry(db: Session = Depends(get_db), user=Depends(get_current_user)):
    items = crud.list_pantry_items(db, user.id)
    return PantryOut(items=[_item_out(i) for i in items])


@router.put("/items", response_model=PantryItemOut)
def upsert_item(payload: PantryItemIn, db: Session = Depends(get_db), user=Depends(get_current_user)):
    item = crud.upsert_pantry_item(db, user.id, name=payload.name, expires_on=payload.expires_on)
    return _item_out(item)


@router.delete("/items/{name}")
def remove_item(name: str, db: Session = Depends(get_db), user=Depends(get_current_user)):
    if not crud.remove_pantry_item(db, user.id, name=name):
        raise HTTPException(status_code=404, detail="Pantry item not found")
    return {"ok": True}
