"""Multi-turn actions the wolf can queue.

Actions are registered by name with the @action decorator. The engine
keeps a FIFO queue of action names and runs one per day. Each action
mutates the wolf and returns a short description of what happened.

Actions:
    rest: Recover energy
    hunt: Spend energy to relieve hunger
    forage: Gather berries into the inventory
    patrol: Mark territory to raise reputation
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from wolf_survival.core.config import GameSettings
from wolf_survival.core.exceptions import UnknownActionError
from wolf_survival.core.logging import get_logger
from wolf_survival.models.enums import ItemType, Stat
from wolf_survival.models.player import Wolf


logger = get_logger(__name__)

ActionFunc = Callable[[Wolf, GameSettings], str]


# =============================================================================
# Action Registry
# =============================================================================


@dataclass(frozen=True)
class ActionDefinition:
    """A registered action.

    Attributes:
        name: Identifier used in the action queue.
        description: Human-readable description.
        function: Callable applying the action to the wolf.
    """

    name: str
    description: str
    function: ActionFunc


_action_registry: dict[str, ActionDefinition] = {}


def action(*, description: str, name: str | None = None) -> Callable[[ActionFunc], ActionFunc]:
    """Decorator registering a function as a queueable action.

    Args:
        description: Human-readable description.
        name: Identifier; defaults to the function name.

    Returns:
        Decorator returning the function unchanged.
    """

    def decorator(func: ActionFunc) -> ActionFunc:
        action_name = name or func.__name__
        _action_registry[action_name] = ActionDefinition(
            name=action_name,
            description=description,
            function=func,
        )
        return func

    return decorator


def get_action(name: str) -> ActionDefinition:
    """Look up a registered action.

    Raises:
        UnknownActionError: If no action has that name.
    """
    try:
        return _action_registry[name]
    except KeyError:
        raise UnknownActionError(
            f"Unknown action: {name}",
            action=name,
            details={"known_actions": sorted(_action_registry)},
        ) from None


def get_all_actions() -> list[ActionDefinition]:
    return list(_action_registry.values())


def is_known_action(name: str) -> bool:
    return name in _action_registry


def execute_action(name: str, wolf: Wolf, settings: GameSettings) -> str:
    """Run a registered action against the wolf.

    Returns:
        Description of the outcome.

    Raises:
        UnknownActionError: If no action has that name.
    """
    definition = get_action(name)
    outcome = definition.function(wolf, settings)
    logger.info("Action executed", action=name, outcome=outcome)
    return outcome


# =============================================================================
# Actions
# =============================================================================

HUNT_ENERGY_COST = 15
HUNT_FOOD = 25
FORAGE_ENERGY_COST = 5
FORAGE_BERRY_VALUE = 10
PATROL_ENERGY_COST = 10
PATROL_REPUTATION = 5


@action(description="Sleep through the day to recover energy")
def rest(wolf: Wolf, settings: GameSettings) -> str:
    restored = wolf.rest(settings.rest_energy_gain)
    return f"Rested and recovered {restored} energy"


@action(description="Hunt for prey, spending energy to relieve hunger")
def hunt(wolf: Wolf, settings: GameSettings) -> str:
    wolf.adjust_stat(Stat.ENERGY, -HUNT_ENERGY_COST)
    relieved = wolf.feed(HUNT_FOOD)
    return f"Hunted and relieved {relieved} hunger"


@action(description="Gather wild berries for later")
def forage(wolf: Wolf, settings: GameSettings) -> str:
    wolf.adjust_stat(Stat.ENERGY, -FORAGE_ENERGY_COST)
    if wolf.inventory.add_item(
        "Wild Berries",
        ItemType.FOOD,
        FORAGE_BERRY_VALUE,
        "Sour but filling",
    ):
        return "Foraged some wild berries"
    return "Found berries but had no room to carry them"


@action(description="Patrol and scent-mark the territory")
def patrol(wolf: Wolf, settings: GameSettings) -> str:
    wolf.adjust_stat(Stat.ENERGY, -PATROL_ENERGY_COST)
    gained = wolf.adjust_stat(Stat.REPUTATION, PATROL_REPUTATION)
    return f"Patrolled the border and gained {gained} reputation"


__all__ = [
    "ActionDefinition",
    "action",
    "get_action",
    "get_all_actions",
    "is_known_action",
    "execute_action",
]
