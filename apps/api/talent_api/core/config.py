from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from apps/api so it works regardless of CWD
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    database_url: str = "postgresql://localhost/talent_directory"
    sql_echo: bool = False

    # Gemini (generateContent REST API); no key => keyword-only smart search
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-pro"
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: float = 12.0

    # Rate limiting (per client IP; multi-instance needs Redis later)
    search_rate_limit: str = "30/minute"

    # CORS (comma-separated origins; * allows all)
    cors_origins: str = "*"

    log_level: str = "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parsed CORS origins for middleware."""
        raw = self.cors_origins.strip()
        return ["*"] if not raw else [o.strip() for o in raw.split(",") if o.strip()]

    @property
    def async_database_url(self) -> str:
        """Database URL rewritten for the asyncpg driver (supports postgres:// from hosted providers)."""
        url = self.database_url
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        if url.startswith("postgresql://") and "asyncpg" not in url:
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url


@lru_cache
def get_settings() -> Settings:
    return Settings()
