"""
profile_binding.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the processor and API.
- Seed the in-memory profile registry from configuration.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from profile_binding.deployment.manifest import LOGGING_PROFILE


class Settings(BaseSettings):
    """
    - Strict env-driven configuration
    - Defaults safe for local dev
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(env_prefix="PB_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "profile-binding"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Manifest main attribute a deployment uses to opt into a profile.
    profile_attribute: str = LOGGING_PROFILE

    # Profile name -> configuration properties, e.g.
    # PB_PROFILES='{"audit": {"level": "DEBUG", "handler": "file"}}'
    profiles: dict[str, dict[str, str]] = Field(default_factory=dict)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The profile registry is owned outside the processor; `profiles` only seeds the
# in-memory registry used by the bundled management API.
