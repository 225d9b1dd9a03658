"""Enumeration types for the Wolf survival engine.

These closed sets drive every branch in the engine: item categories map
onto the stat they affect, pack roles label recruits, and GameState is
the session's lifecycle.
"""

from __future__ import annotations

from enum import StrEnum


class Stat(StrEnum):
    """The four integer attributes of the player wolf."""

    HEALTH = "health"
    HUNGER = "hunger"
    ENERGY = "energy"
    REPUTATION = "reputation"


class ItemType(StrEnum):
    """Categories of carried items.

    Each category affects exactly one stat when the item is used.
    """

    FOOD = "food"
    HERB = "herb"
    TOOL = "tool"
    KEY_ITEM = "key_item"

    @property
    def affected_stat(self) -> Stat:
        """Get the stat an item of this category acts on.

        Returns:
            The Stat the item's effect value is applied to.
        """
        item_stats: dict[ItemType, Stat] = {
            ItemType.FOOD: Stat.HUNGER,
            ItemType.HERB: Stat.HEALTH,
            ItemType.TOOL: Stat.ENERGY,
            ItemType.KEY_ITEM: Stat.REPUTATION,
        }
        return item_stats[self]


class Role(StrEnum):
    """Roles a recruited pack member can fill."""

    HUNTER = "hunter"
    SCOUT = "scout"
    GUARD = "guard"
    NONE = "none"


class GameState(StrEnum):
    """Lifecycle of a game session."""

    START_SCREEN = "start_screen"
    PLAYING = "playing"
    EVENT_TRIGGERED = "event_triggered"
    GAMEOVER = "gameover"
    VICTORY = "victory"

    @property
    def is_terminal(self) -> bool:
        """Check whether the session has finished.

        Returns:
            True for GAMEOVER and VICTORY.
        """
        return self in (GameState.GAMEOVER, GameState.VICTORY)


class Choice(StrEnum):
    """The two options offered at every story node."""

    A = "a"
    """Follow the left branch."""

    B = "b"
    """Follow the right branch."""


__all__ = [
    "Stat",
    "ItemType",
    "Role",
    "GameState",
    "Choice",
]
