"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "CFB Pick'em"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["CFB Pick'em maintainers"]
    PROJECT_URL: str = ""

    DEBUG: bool = False

    # Database
    DATABASE_URL_OVERRIDE: Optional[str] = None
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "pickem"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Pick submission
    SUBMIT_TIMEOUT_SECONDS: float = 10.0
    SESSION_IDLE_TIMEOUT_SECONDS: float = 24 * 60 * 60

    # Pick visibility window (see app.pickem.unlock)
    UNLOCK_TZ_MODE: str = "fixed_offset"
    UNLOCK_UTC_OFFSET_HOURS: int = -5
    UNLOCK_TIMEZONE: str = "America/New_York"
    UNLOCK_WEEKDAY: int = 5
    UNLOCK_HOUR: int = 12

    # Identity: opaque bearer token -> user id
    API_TOKENS: dict[str, str] = {}

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
