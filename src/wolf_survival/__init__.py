"""Wolf Survival - in-memory game-state engine for a narrative survival game.

A lone wolf manages its stats, inventory and pack while working through a
branching story and reacting to prioritized events. The UI loop is not
part of this package: it drives GameEngine one tick at a time and reads
state back through its accessors.

Example:
    >>> from wolf_survival import Choice, GameEngine, ItemType
    >>>
    >>> engine = GameEngine()
    >>> engine.player.inventory.add_item("Berry", ItemType.FOOD, 20, "Sweet")
    True
    >>> engine.update_game_loop()
    <GameState.PLAYING: 'playing'>
    >>> engine.choose(Choice.A)
    >>> state = engine.update_game_loop()      # day 2, at the river
    >>> snapshot = engine.undo_last_move()     # back to day 1
    >>> path = engine.save_to_file("slot1")

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 models for the wolf, items, story nodes, events
        and saved sessions.
    content: The default story tree and the random-event deck.
    engine: StoryTree, EventManager, actions and GameEngine.
    storage: JSON session files.
"""

from __future__ import annotations

# Core
from wolf_survival.core.config import Settings, get_settings
from wolf_survival.core.exceptions import WolfSurvivalError
from wolf_survival.core.logging import configure_logging, get_logger

# Models
from wolf_survival.models import (
    Choice,
    GameEvent,
    GameSnapshot,
    GameState,
    Inventory,
    Item,
    ItemType,
    Pack,
    PackMember,
    Role,
    SessionRecord,
    Stat,
    StoryNode,
    Wolf,
)

# Engine
from wolf_survival.engine import EventManager, GameEngine, StoryTree


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "WolfSurvivalError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Choice",
    "GameEvent",
    "GameSnapshot",
    "GameState",
    "Inventory",
    "Item",
    "ItemType",
    "Pack",
    "PackMember",
    "Role",
    "SessionRecord",
    "Stat",
    "StoryNode",
    "Wolf",
    # Engine
    "EventManager",
    "GameEngine",
    "StoryTree",
]
