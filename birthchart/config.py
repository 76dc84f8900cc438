from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # ─── App ──────────────────────────────
    APP_NAME: str = "birthchart-engine"
    ENV: str = "local"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # ─── HTTP ─────────────────────────────
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]

    # ─── Ephemeris ────────────────────────
    EPHEMERIS_PATH: Optional[str] = None

    # ─── Chart API client ─────────────────
    CHART_API_BASE_URL: str = "http://127.0.0.1:8000"
    CHART_API_TIMEOUT: float = 10.0


settings = Settings()
