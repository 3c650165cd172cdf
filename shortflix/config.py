from pydantic import BaseModel, Field
from functools import lru_cache
from typing import List
import os

from dotenv import load_dotenv

FAVORITES_KEY = "short-flix-favorites"


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseModel):
    api_base_url: str = Field(default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:3000/api"))
    api_prefix: str = Field(default_factory=lambda: os.getenv("API_PREFIX", "/api"))
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    cors_origins: List[str] = Field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))
    favorites_path: str = Field(default_factory=lambda: os.getenv("FAVORITES_PATH", "data/favorites.json"))
    favorites_key: str = FAVORITES_KEY
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    return Settings()
