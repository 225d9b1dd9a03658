"""Game engine module for the Wolf survival game.

Submodules:
    story_tree: Navigation over the branching story
    events: Priority-ordered event queue
    actions: Registry of queueable multi-turn actions
    game_engine: Session controller with undo history and save/load

Example:
    >>> from wolf_survival.engine import GameEngine
    >>> engine = GameEngine()
    >>> engine.update_game_loop()
    <GameState.PLAYING: 'playing'>
"""

from __future__ import annotations

from wolf_survival.engine.actions import (
    ActionDefinition,
    action,
    execute_action,
    get_action,
    get_all_actions,
    is_known_action,
)
from wolf_survival.engine.events import EventManager
from wolf_survival.engine.game_engine import GameEngine
from wolf_survival.engine.story_tree import StoryTree


__all__ = [
    # Story
    "StoryTree",
    # Events
    "EventManager",
    # Actions
    "ActionDefinition",
    "action",
    "execute_action",
    "get_action",
    "get_all_actions",
    "is_known_action",
    # Session
    "GameEngine",
]
