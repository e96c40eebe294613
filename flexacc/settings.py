"""
Configuration loaded from the environment.

Variables use the ``FLEXACC_`` prefix, e.g. ``FLEXACC_COST_FUNCTION``.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import CostFunction


class Settings(BaseSettings):
    """Evaluation defaults loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="FLEXACC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Edit operation costs used by both evaluators
    cost_function: CostFunction = CostFunction.INS1_DEL1_SUBST1
    # Reproduce the historic one-character-short alignment window
    legacy_bounds: bool = False

    @field_validator("cost_function", mode="before")
    @classmethod
    def _parse_cost_function(cls, value):
        if isinstance(value, str):
            return CostFunction.from_key(value.strip().upper())
        return value


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
