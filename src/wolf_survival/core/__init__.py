"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        WolfSurvivalError: Base exception for all engine errors.
        GameEngineError: Story, event, history and action misuse.
        SaveFileError: Session file could not be written or read.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from wolf_survival.core.config import (
    GameSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from wolf_survival.core.exceptions import (
    ConfigurationError,
    EmptyEventQueueError,
    EmptyHistoryError,
    GameEngineError,
    InvalidGameStateError,
    SaveFileError,
    StorageError,
    StoryNodeNotFoundError,
    UnknownActionError,
    WolfSurvivalError,
)
from wolf_survival.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "WolfSurvivalError",
    # Game engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    "StoryNodeNotFoundError",
    "EmptyEventQueueError",
    "EmptyHistoryError",
    "UnknownActionError",
    # Storage exceptions
    "StorageError",
    "SaveFileError",
    # Configuration
    "ConfigurationError",
    "Settings",
    "GameSettings",
    "StorageSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
