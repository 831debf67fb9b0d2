"""
Helix - Configuration and settings.

HelixSettings is read from the environment (and .env when present).
Only the generation client needs the OpenAI key; catalog and blend
operations work without it.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_DATA_DIR = Path(__file__).parent / "data"


class HelixSettings(BaseSettings):
    """Settings shared by the labs, the CLI and the generation client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenAI (optional until a generation call is made)
    openai_api_key: str | None = None

    # Application
    helix_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Prompt logging
    # HELIX_LOG_PROMPTS=1 - log to local files (dev only)
    helix_log_prompts: bool = False
    helix_prompt_log_dir: Path = Path("prompt_logs")

    # Data + persistence
    helix_data_dir: Path = BUNDLED_DATA_DIR
    helix_store_path: Path = Path(".helix") / "store.json"

    @property
    def is_development(self) -> bool:
        return self.helix_env == "development"

    @property
    def is_production(self) -> bool:
        return self.helix_env == "production"


@lru_cache
def get_settings() -> HelixSettings:
    """Get cached settings instance."""
    return HelixSettings()


class _SettingsProxy:
    """Lazy proxy for settings to avoid loading .env at import time."""

    _instance: HelixSettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)

    def reset(self) -> None:
        """Drop the cached instance (tests, env changes)."""
        get_settings.cache_clear()
        self._instance = None


settings = _SettingsProxy()
