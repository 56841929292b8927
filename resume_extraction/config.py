from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Upper bound on characters fed to the extraction pipeline.
    # None leaves input untouched; the hosting caller decides the budget.
    resume_max_text_chars: Optional[int] = Field(default=None, gt=0)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
