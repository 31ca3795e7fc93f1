import datetime as dt

from conftest import make_session
from pantry_planner import crud
from pantry_planner.services.pantry import Ingredient, Pantry, PantryEntry, SqlPantryStore


class MissingUser:
    id = 999


def test_store_returns_pantry_in_insertion_order():
    SessionLocal = make_session()
    with SessionLocal() as db:
        user = crud.get_or_create_user(db, username="cook")
        crud.upsert_pantry_item(db, user.id, name="Milk", expires_on=dt.date(2024, 1, 10))
        crud.upsert_pantry_item(db, user.id, name="Eggs", expires_on=dt.date(2024, 1, 5))
        crud.upsert_pantry_item(db, user.id, name="Salt")

        pantry = SqlPantryStore(db).get_pantry(user)

    assert pantry.names() == ["Milk", "Eggs", "Salt"]
    assert pantry.expirations() == [dt.date(2024, 1, 10), dt.date(2024, 1, 5), None]


def test_store_returns_none_for_unknown_user():
    SessionLocal = make_session()
    with SessionLocal() as db:
        assert SqlPantryStore(db).get_pantry(MissingUser()) is None


def test_store_returns_empty_pantry_for_user_without_items():
    SessionLocal = make_session()
    with SessionLocal() as db:
        user = crud.get_or_create_user(db, username="new")
        pantry = SqlPantryStore(db).get_pantry(user)
    assert pantry is not None
    assert len(pantry) == 0


def test_upsert_updates_date_and_keeps_position():
    SessionLocal = make_session()
    with SessionLocal() as db:
        user = crud.get_or_create_user(db, username="cook")
        crud.upsert_pantry_item(db, user.id, name="Milk", expires_on=dt.date(2024, 1, 10))
        crud.upsert_pantry_item(db, user.id, name="Eggs")
        crud.upsert_pantry_item(db, user.id, name="milk", expires_on=dt.date(2024, 2, 1))

        items = crud.list_pantry_items(db, user.id)
        assert [i.ingredient.name for i in items] == ["Milk", "Eggs"]
        assert items[0].expires_on == dt.date(2024, 2, 1)


def test_remove_pantry_item_and_catalog_survives():
    SessionLocal = make_session()
    with SessionLocal() as db:
        user = crud.get_or_create_user(db, username="cook")
        crud.upsert_pantry_item(db, user.id, name="Kale")
        assert crud.remove_pantry_item(db, user.id, name="kale") is True
        assert crud.remove_pantry_item(db, user.id, name="kale") is False

        assert crud.list_pantry_items(db, user.id) == []
        assert SqlPantryStore(db).get_all_ingredients() == [Ingredient("Kale")]


def test_pantry_from_pairs_keeps_pairs_together():
    pantry = Pantry.from_pairs([("Eggs", dt.date(2024, 1, 5)), ("Salt", None)])
    assert list(pantry) == [
        PantryEntry(Ingredient("Eggs"), dt.date(2024, 1, 5)),
        PantryEntry(Ingredient("Salt"), None),
    ]
    assert pantry.ingredients() == [Ingredient("Eggs"), Ingredient("Salt")]
