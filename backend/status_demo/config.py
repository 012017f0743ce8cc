"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), single instance per process
    - Port resolves PORT, then NODE_PORT, then 3000
"""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_CLIENT_DIR = Path(__file__).parent / "client"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(
        default=3000, ge=1, le=65535,
        validation_alias=AliasChoices("PORT", "NODE_PORT"),
    )

    # Static client
    client_dir: Path = BUNDLED_CLIENT_DIR

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
