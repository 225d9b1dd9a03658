"""Pytest configuration and shared fixtures.

This module provides common fixtures for the Wolf survival test suite.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from wolf_survival.core.config import GameSettings, StorageSettings
    from wolf_survival.engine.game_engine import GameEngine
    from wolf_survival.models.player import Wolf


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from wolf_survival.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def game_settings() -> GameSettings:
    """Default game rules with random events switched off.

    Returns:
        GameSettings instance.
    """
    from wolf_survival.core.config import GameSettings

    return GameSettings(random_event_chance=0.0)


@pytest.fixture
def storage_settings(tmp_path: Path) -> StorageSettings:
    """Storage settings pointing at a temporary save directory.

    Returns:
        StorageSettings instance.
    """
    from wolf_survival.core.config import StorageSettings

    return StorageSettings(save_directory=tmp_path / "saves")


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def wolf() -> Wolf:
    """Create a wolf with mid-range stats so clamping does not interfere.

    Returns:
        Wolf instance.
    """
    from wolf_survival.models.player import Wolf

    return Wolf(health=60, hunger=50, energy=50, reputation=50)


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Create a seeded random source for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def engine(
    game_settings: GameSettings,
    storage_settings: StorageSettings,
    rng: random.Random,
) -> GameEngine:
    """Create a deterministic engine on the start screen.

    Returns:
        GameEngine instance.
    """
    from wolf_survival.engine.game_engine import GameEngine

    return GameEngine(game_settings, storage=storage_settings, rng=rng)


@pytest.fixture
def playing_engine(engine: GameEngine) -> GameEngine:
    """Create a deterministic engine that has left the start screen.

    Returns:
        GameEngine instance in the PLAYING state.
    """
    engine.update_game_loop()
    return engine
