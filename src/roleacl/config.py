"""Library configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (ROLEACL_ prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="ROLEACL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_json: bool = Field(default=False, description="Serialize log records as JSON")

    # Evaluation
    raise_on_cycle: bool = Field(
        default=True,
        description="Raise CyclicInheritance on a parent cycle instead of denying",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
