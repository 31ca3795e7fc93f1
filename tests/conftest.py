import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pantry_planner import crud
from pantry_planner.api.deps import get_recipe_search
from pantry_planner.db import get_db
from pantry_planner.main import create_app
from pantry_planner.models.base import Base
from pantry_planner.services.recipe_search import Recipe
from pantry_planner.settings import settings


class FakeSearch:
    def __init__(self, recipes=None, error=None):
        self.recipes = list(recipes or [])
        self.error = error
        self.queries = []

    def search(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.recipes


class FakeStore:
    def __init__(self, pantries=None, catalog=None):
        self.pantries = dict(pantries or {})
        self.catalog = list(catalog or [])
        self.calls = 0

    def get_pantry(self, user):
        self.calls += 1
        return self.pantries.get(user.id)

    def get_all_ingredients(self):
        return list(self.catalog)


class FakeUser:
    def __init__(self, user_id: int = 1):
        self.id = user_id


def make_session():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def fake_search():
    return FakeSearch(recipes=[Recipe(label="Egg fried rice", url="https://example.com/r/1")])


@pytest.fixture()
def test_app(fake_search, monkeypatch):
    monkeypatch.setattr(settings, "API_KEY", None)
    monkeypatch.setattr(settings, "API_KEY_SECRET", "test-secret")
    monkeypatch.setattr(settings, "EDAMAM_APP_ID", "test-id")
    monkeypatch.setattr(settings, "EDAMAM_APP_KEY", "test-key")
    TestingSessionLocal = make_session()

    app = create_app()

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_recipe_search] = lambda: fake_search
    return app, TestingSessionLocal


@pytest.fixture()
def client(test_app):
    app, _ = test_app
    return TestClient(app)


@pytest.fixture()
def auth_headers(test_app):
    _, TestingSessionLocal = test_app
    with TestingSessionLocal() as db:
        user = crud.get_or_create_user(db, username="test")
        token = crud.rotate_user_api_key(db, user.id)
    return {"Authorization": f"Bearer {token}"}
