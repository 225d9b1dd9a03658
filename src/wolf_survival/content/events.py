"""Random event deck.

Each entry holds the keyword arguments of a GameEvent. Deltas are raw:
a positive hunger_delta makes the wolf hungrier.
"""

from __future__ import annotations

from typing import Any


EVENT_DECK: tuple[dict[str, Any], ...] = (
    {
        "title": "Hunter's Trap",
        "description": "Steel jaws snap shut on your foreleg.",
        "priority": 1,
        "health_delta": -20,
        "energy_delta": -10,
    },
    {
        "title": "Forest Fire",
        "description": "Smoke fills the valley and you run until your lungs burn.",
        "priority": 1,
        "health_delta": -10,
        "energy_delta": -25,
    },
    {
        "title": "Blizzard",
        "description": "You curl up against the storm and wait it out.",
        "priority": 2,
        "hunger_delta": 10,
        "energy_delta": -15,
    },
    {
        "title": "Rival Challenge",
        "description": "A young wolf tests you at the border of your range.",
        "priority": 2,
        "health_delta": -5,
        "reputation_delta": 10,
    },
    {
        "title": "Abandoned Carcass",
        "description": "Ravens lead you to an elk the hunters left behind.",
        "priority": 3,
        "hunger_delta": -20,
    },
    {
        "title": "Quiet Night",
        "description": "The moon is bright and nothing stirs.",
        "priority": 3,
        "energy_delta": 10,
    },
)


__all__ = ["EVENT_DECK"]
