"""Authored game content: the default story tree and the random-event deck."""

from __future__ import annotations

from wolf_survival.content.events import EVENT_DECK
from wolf_survival.content.story import build_default_story


__all__ = [
    "EVENT_DECK",
    "build_default_story",
]
