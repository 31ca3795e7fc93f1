from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_FILES = [PROJECT_ROOT / ".env", ".env"]

DEFAULT_STAPLE_TERMS = [
    "chicken",
    "salmon",
    "beef",
    "lamb",
    "pork",
    "cheese",
    "milk",
    "cream",
    "bread",
    "rice",
    "bean",
    "sausage",
    "noodle",
    "pasta",
    "fish",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILES, extra="ignore")

    # DB
    DATABASE_URL: str = "sqlite:///./data/pantry.db"

    # App
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # API
    API_KEY: str | None = None
    API_KEY_SECRET: str | None = None

    # Recipe search (Edamam)
    EDAMAM_APP_ID: str = ""
    EDAMAM_APP_KEY: str = ""
    EDAMAM_BASE_URL: str = "https://api.edamam.com/search"
    EDAMAM_TIMEOUT_SEC: float = 10.0

    # Staples excluded from search unless already in the pantry
    STAPLE_TERMS: list[str] = list(DEFAULT_STAPLE_TERMS)


settings = Settings()
