"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="CARE_", env_file=".env", extra="ignore", populate_by_name=True
    )

    # Storage paths
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

    @property
    def db_path(self) -> str:
        return os.path.join(self.data_path, "health.db")

    @property
    def upload_dir(self) -> str:
        return os.path.join(self.data_path, "uploads")

    # Auth
    jwt_secret: str = "health-innovate-secret-key"
    jwt_algorithm: str = "HS256"
    token_expire_minutes: int = 60 * 24 * 7

    # Generative AI provider
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("CARE_GEMINI_API_KEY", "GEMINI_API_KEY"),
    )
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    skin_model: str = "gemini-3-flash-preview"
    tts_model: str = "gemini-2.5-flash-preview-tts"
    tts_voice: str = "Kore"
    ai_timeout: float = 60.0

    # Uploads
    max_upload_mb: int = 20

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 3000
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173", "http://localhost:3000"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
