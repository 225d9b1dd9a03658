"""Game-wide constants for the Wolf survival engine."""

from __future__ import annotations

# =============================================================================
# Stat Bounds
# =============================================================================

STAT_MIN = 0
"""Lowest value any stat (health, hunger, energy, reputation) can hold."""

STAT_MAX = 100
"""Highest value any stat can hold."""

# =============================================================================
# Inventory & Pack
# =============================================================================

MAX_INVENTORY_ITEMS = 10
"""Hard ceiling on the number of items a wolf can carry."""

DEFAULT_LOYALTY = 50
"""Starting loyalty of a newly recruited pack member."""

# =============================================================================
# Player Mechanics
# =============================================================================

REST_ENERGY_GAIN = 30
"""Energy restored by a single rest."""

# =============================================================================
# Story & Session
# =============================================================================

ROOT_NODE_ID = 0
"""Id of the story node every new session starts on."""

FIRST_DAY = 1
"""Day counter value for a fresh session."""

SAVE_FORMAT_VERSION = 1
"""Version tag written into every session file."""


__all__ = [
    "STAT_MIN",
    "STAT_MAX",
    "MAX_INVENTORY_ITEMS",
    "DEFAULT_LOYALTY",
    "REST_ENERGY_GAIN",
    "ROOT_NODE_ID",
    "FIRST_DAY",
    "SAVE_FORMAT_VERSION",
]
