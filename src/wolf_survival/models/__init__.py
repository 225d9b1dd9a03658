"""Pydantic V2 data models for the Wolf survival engine.

Submodules:
    enums: Closed variant sets (Stat, ItemType, Role, GameState, Choice)
    player: Wolf, Inventory, Item, Pack, PackMember
    story: StoryNode
    events: GameEvent
    session: GameSnapshot and the persisted SessionRecord
"""

from __future__ import annotations

from wolf_survival.models.enums import Choice, GameState, ItemType, Role, Stat
from wolf_survival.models.events import GameEvent
from wolf_survival.models.player import (
    Inventory,
    Item,
    Pack,
    PackMember,
    Wolf,
    clamp_stat,
)
from wolf_survival.models.session import GameSnapshot, SessionRecord
from wolf_survival.models.story import StoryNode


__all__ = [
    # Enumerations
    "Choice",
    "GameState",
    "ItemType",
    "Role",
    "Stat",
    # Player
    "Inventory",
    "Item",
    "Pack",
    "PackMember",
    "Wolf",
    "clamp_stat",
    # Story
    "StoryNode",
    # Events
    "GameEvent",
    # Session
    "GameSnapshot",
    "SessionRecord",
]
