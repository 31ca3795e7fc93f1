from fastapi import FastAPI

from pantry_planner.api.routers.pantry import router as pantry_router
from pantry_planner.api.routers.recipes import router as recipes_router


def create_app() -> FastAPI:
    app = FastAPI(title="Pantry Recipe Planner API")

    app.include_router(pantry_router)
    app.include_router(recipes_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app
