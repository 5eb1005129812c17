# app/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Supabase Postgres connection string, or sqlite for local use)
      - SESSION_SECRET (HS256 secret used to sign session tokens)

    Required only when STORE_BACKEND=supabase:
      - SUPABASE_URL
      - SUPABASE_KEY (anon key)

    Optional:
      - SUPABASE_SERVICE_ROLE_KEY (bypasses RLS; preferred by the supabase store)
      - HOST_NAMES (comma separated names that get the host role on first login)
    """

    PROJECT_NAME: str = "Chá de Bebê Gift List API"
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Storage
    DATABASE_URL: str
    STORE_BACKEND: Literal["sql", "supabase"] = "sql"

    # Supabase (backend-as-a-service store)
    SUPABASE_URL: str | None = None
    SUPABASE_KEY: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None

    # Session tokens issued by POST /session
    SESSION_SECRET: str
    SESSION_ALG: str = "HS256"
    SESSION_TTL_MINUTES: int = 60 * 24 * 30

    # Host ("mother") accounts
    HOST_NAMES: str = ""

    # Reservation policy
    CLAMP_RESERVATIONS: bool = True
    SEED_GIFT_ITEMS: bool = True

    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def host_names(self) -> set[str]:
        """HOST_NAMES normalized the same way login names are."""
        return {n.strip().lower() for n in self.HOST_NAMES.split(",") if n.strip()}

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
