"""Session models: undo snapshots and the persisted session record.

A GameSnapshot deliberately captures only the day, the three survival
stats and the story position. Undoing a move therefore never rolls back
the inventory, the pack or reputation.

SessionRecord is the on-disk contract. It is written as a single JSON
document::

    {
      "format_version": 1,
      "day": 4,
      "state": "playing",
      "story_node_id": 3,
      "wolf": {"health": 80, "hunger": 35, "energy": 70, "reputation": 55,
               "inventory": {"items": [...], "capacity": 10},
               "pack": {"members": [...]}},
      "history": [{"day": 3, "health": 90, ...}, ...],
      "action_queue": ["rest", "hunt"],
      "pending_events": [{"title": "...", "priority": 1, ...}, ...]
    }

history is stored bottom-to-top (the last entry is the next undo) and
pending_events in service order.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from wolf_survival.core.constants import FIRST_DAY, SAVE_FORMAT_VERSION
from wolf_survival.models.enums import GameState
from wolf_survival.models.events import GameEvent
from wolf_survival.models.player import StatValue, Wolf


class GameSnapshot(BaseModel):
    """Partial capture of a session used for undo."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    day: int = Field(ge=FIRST_DAY)
    health: StatValue
    hunger: StatValue
    energy: StatValue
    story_node_id: int = Field(ge=0)


class SessionRecord(BaseModel):
    """Everything needed to rebuild a playable session."""

    model_config = ConfigDict(extra="forbid")

    format_version: Literal[1] = SAVE_FORMAT_VERSION
    day: int = Field(ge=FIRST_DAY)
    state: GameState
    story_node_id: int = Field(ge=0)
    wolf: Wolf
    history: list[GameSnapshot] = Field(default_factory=list)
    action_queue: list[str] = Field(default_factory=list)
    pending_events: list[GameEvent] = Field(default_factory=list)


__all__ = [
    "GameSnapshot",
    "SessionRecord",
]
