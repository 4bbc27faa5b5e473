"""
Application settings.

Values come from environment variables prefixed with ``OCCURRENCE_MAPPER_``
or from a local ``.env`` file, e.g.::

    OCCURRENCE_MAPPER_DEBUG=true
    OCCURRENCE_MAPPER_DEFAULT_LIMIT=250
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the CLI and flows."""

    model_config = SettingsConfigDict(
        env_prefix="OCCURRENCE_MAPPER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "occurrence-mapper"
    app_env: str = "development"
    debug: bool = False

    gbif_api_base: str = "https://api.gbif.org/v1"

    # GBIF backbone taxon used when no key is given
    default_taxon_key: int = Field(default=3240854, gt=0)
    default_limit: int = Field(default=100, gt=0)
    output_path: Path = Path("occurrence_map.html")


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
