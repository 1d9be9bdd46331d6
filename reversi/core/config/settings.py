# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

Settings are loaded from environment variables (and an optional ``.env``
file) with sensible defaults. The rules engine itself is pure and never
reads settings; only the engine facade and the game service consult them,
and both accept an explicit Settings instance.

Example:
    >>> from reversi.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reversi.core.enums import Difficulty


class OthelloSettings(BaseSettings):
    """AI opponent and game session configuration.

    Attributes:
        hard_search_depth: Minimax depth used by the hard difficulty tier.
        think_delay_ms: Visible "thinking" pause before an AI turn is played.
        default_difficulty: Difficulty used when a session does not pick one.
        random_seed: Seed for the easy tier's random choice (None = unseeded).
    """

    model_config = SettingsConfigDict(
        env_prefix="OTHELLO_",
        extra="ignore",
    )

    hard_search_depth: int = Field(default=4, ge=1, le=8)
    think_delay_ms: int = Field(default=500, ge=0)
    default_difficulty: Difficulty = Difficulty.MEDIUM
    random_seed: int | None = None


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        othello: AI opponent and session settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"

    othello: OthelloSettings = Field(default_factory=OthelloSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    Useful for testing or dynamic configuration updates.
    """
    get_settings.cache_clear()
