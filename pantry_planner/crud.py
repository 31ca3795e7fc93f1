from __future__ import annotations

import datetime as dt

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from pantry_planner.models.ingredient import IngredientRecord
from pantry_planner.models.pantry import PantryItem
from pantry_planner.models.user import User
from pantry_planner.security import hash_api_key, issue_api_key


def _norm_name(name: str) -> str:
    return " ".join((name or "").split())


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_or_create_user(db: Session, username: str) -> User:
    user = db.execute(select(User).where(User.username == username)).scalar_one_or_none()
    if user:
        return user
    user = User(username=username)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def rotate_user_api_key(db: Session, user_id: int) -> str:
    user = get_user(db, user_id)
    if not user:
        raise ValueError(f"User {user_id} not found")
    issued = issue_api_key()
    user.api_key_hash = issued.hashed
    user.api_key_prefix = issued.prefix
    user.api_key_last_rotated_at = dt.datetime.utcnow()
    db.add(user)
    db.commit()
    return issued.raw


def get_user_by_api_key(db: Session, raw_key: str) -> User | None:
    hashed = hash_api_key(raw_key)
    return db.execute(select(User).where(User.api_key_hash == hashed)).scalar_one_or_none()


def get_or_create_ingredient(db: Session, name: str) -> IngredientRecord:
    name = _norm_name(name)
    if not name:
        raise ValueError("ingredient name must not be empty")
    record = db.execute(select(IngredientRecord).where(IngredientRecord.name == name)).scalar_one_or_none()
    if record:
        return record
    record = IngredientRecord(name=name)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def list_ingredients(db: Session) -> list[IngredientRecord]:
    return list(db.execute(select(IngredientRecord).order_by(IngredientRecord.name)).scalars())


def list_pantry_items(db: Session, user_id: int) -> list[PantryItem]:
    stmt = (
        select(PantryItem)
        .where(PantryItem.user_id == user_id)
        .order_by(PantryItem.position, PantryItem.id)
    )
    return list(db.execute(stmt).scalars())


def _find_pantry_item(db: Session, user_id: int, name: str) -> PantryItem | None:
    stmt = (
        select(PantryItem)
        .join(IngredientRecord, PantryItem.ingredient_id == IngredientRecord.id)
        .where(PantryItem.user_id == user_id, func.lower(IngredientRecord.name) == _norm_name(name).lower())
    )
    return db.execute(stmt).scalar_one_or_none()


def upsert_pantry_item(db: Session, user_id: int, name: str, expires_on: dt.date | None = None) -> PantryItem:
    item = _find_pantry_item(db, user_id, name)
    if item:
        # Re-adding keeps the original position and refreshes the date.
        item.expires_on = expires_on
    else:
        ingredient = get_or_create_ingredient(db, name)
        last = db.execute(
            select(func.max(PantryItem.position)).where(PantryItem.user_id == user_id)
        ).scalar_one_or_none()
        item = PantryItem(
            user_id=user_id,
            ingredient_id=ingredient.id,
            expires_on=expires_on,
            position=(last + 1) if last is not None else 0,
        )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def remove_pantry_item(db: Session, user_id: int, name: str) -> bool:
    item = _find_pantry_item(db, user_id, name)
    if not item:
        return False
    db.delete(item)
    db.commit()
    return True
