"""Configuration management for the Wolf survival engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from wolf_survival.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.inventory_capacity
    10

Environment Variables:
    WOLF_SURVIVAL_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    WOLF_SURVIVAL_SAVE_DIRECTORY: Directory session files are written to
    WOLF_SURVIVAL_GAME_RANDOM_EVENT_CHANCE: Per-day chance of a random event
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wolf_survival.core.constants import (
    DEFAULT_LOYALTY,
    MAX_INVENTORY_ITEMS,
    REST_ENERGY_GAIN,
    STAT_MAX,
    STAT_MIN,
)
from wolf_survival.core.exceptions import ConfigurationError


StatValue = Annotated[int, Field(ge=STAT_MIN, le=STAT_MAX)]


class GameSettings(BaseSettings):
    """Configuration for game rules and balance.

    Attributes:
        starting_health: Health of a freshly created wolf.
        starting_hunger: Hunger of a freshly created wolf (higher is hungrier).
        starting_energy: Energy of a freshly created wolf.
        starting_reputation: Reputation of a freshly created wolf.
        inventory_capacity: Number of items the wolf can carry.
        rest_energy_gain: Energy restored by resting.
        default_loyalty: Loyalty of newly recruited pack members.
        daily_hunger: Hunger gained each day.
        daily_energy_cost: Energy spent each day.
        starvation_damage: Health lost each day spent at maximum hunger.
        random_event_chance: Probability of a random event each day.
        victory_requires_alive: Whether reaching a victory ending dead
            still counts as a loss.
    """

    model_config = SettingsConfigDict(
        env_prefix="WOLF_SURVIVAL_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    starting_health: StatValue = Field(default=100, description="Starting health")
    starting_hunger: StatValue = Field(default=20, description="Starting hunger")
    starting_energy: StatValue = Field(default=100, description="Starting energy")
    starting_reputation: StatValue = Field(default=50, description="Starting reputation")
    inventory_capacity: int = Field(
        default=MAX_INVENTORY_ITEMS,
        ge=1,
        le=MAX_INVENTORY_ITEMS,
        description="Maximum items carried",
    )
    rest_energy_gain: int = Field(
        default=REST_ENERGY_GAIN, ge=0, le=STAT_MAX, description="Energy per rest"
    )
    default_loyalty: int = Field(
        default=DEFAULT_LOYALTY, description="Loyalty of new pack members"
    )
    daily_hunger: int = Field(default=5, ge=0, le=STAT_MAX, description="Hunger gained per day")
    daily_energy_cost: int = Field(
        default=5,
        ge=0,
        le=STAT_MAX,
        description="Energy spent per day",
    )
    starvation_damage: int = Field(
        default=10,
        ge=0,
        le=STAT_MAX,
        description="Health lost per day at maximum hunger",
    )
    random_event_chance: float = Field(
        default=0.25,
        ge=0.0,
        le=1.0,
        description="Per-day random event probability",
    )
    victory_requires_alive: bool = Field(
        default=True,
        description="Dead wolves cannot win",
    )

    @model_validator(mode="after")
    def validate_starting_health(self) -> "GameSettings":
        """Ensure a new game does not start with a dead wolf.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If starting_health is zero.
        """
        if self.starting_health <= STAT_MIN:
            raise ConfigurationError(
                "starting_health must be greater than zero",
                config_key="starting_health",
            )
        return self


class StorageSettings(BaseSettings):
    """Configuration for session file storage.

    Attributes:
        save_directory: Directory that relative save names resolve against.
        save_extension: Suffix appended to save names without one.
    """

    model_config = SettingsConfigDict(
        env_prefix="WOLF_SURVIVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    save_directory: Path = Field(
        default=Path("saves"),
        description="Directory for session files",
    )
    save_extension: str = Field(
        default=".json",
        pattern=r"^\.[A-Za-z0-9]+$",
        description="Session file suffix",
    )

    def resolve_save_path(self, name: str | Path) -> Path:
        """Resolve a save name into a concrete file path.

        Absolute paths and paths with a directory component are used as
        given; bare names land in save_directory. A missing suffix is
        filled in with save_extension.

        Args:
            name: Save slot name or path.

        Returns:
            The path the session file lives at.
        """
        path = Path(name)
        if not path.suffix:
            path = path.with_suffix(self.save_extension)
        if path.is_absolute() or path.parent != Path("."):
            return path
        return self.save_directory / path


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Log at DEBUG level regardless of log_level.
        log_level: Application logging level.
        log_json: Emit JSON log lines instead of console output.
        log_file: Optional file that receives the logs instead of stderr.
        game: Game rule settings.
        storage: Session storage settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="WOLF_SURVIVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Wolf Survival", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Force DEBUG logging")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(default=False, description="Emit JSON log lines")
    log_file: Path | None = Field(default=None, description="Append logs to this file")

    game: GameSettings = Field(default_factory=GameSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "StorageSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
