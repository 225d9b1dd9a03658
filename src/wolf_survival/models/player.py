"""Player state models: the wolf, its inventory and its pack.

The wolf exclusively owns one Inventory and one Pack. The inventory
never keeps a reference back to its owner; using an item takes the
player as an explicit argument.

Every stat lives in [STAT_MIN, STAT_MAX]. Mutating methods clamp into
that range, so the validators on the fields only ever reject data that
arrives from outside (a hand-edited session file, a bad constructor
call).

Example:
    >>> wolf = Wolf()
    >>> wolf.inventory.add_item("Berry", ItemType.FOOD, 20, "A handful of berries")
    True
    >>> wolf.inventory.use_item("Berry", wolf)
    True
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from wolf_survival.core.constants import (
    DEFAULT_LOYALTY,
    MAX_INVENTORY_ITEMS,
    REST_ENERGY_GAIN,
    STAT_MAX,
    STAT_MIN,
)
from wolf_survival.core.logging import get_logger
from wolf_survival.models.enums import ItemType, Role, Stat


logger = get_logger(__name__)

StatValue = Annotated[int, Field(ge=STAT_MIN, le=STAT_MAX, description="Stat value (0-100)")]


def clamp_stat(value: int) -> int:
    """Clamp a raw value into the stat range.

    Example:
        >>> clamp_stat(140)
        100
        >>> clamp_stat(-5)
        0
    """
    return max(STAT_MIN, min(STAT_MAX, value))


class PlayerModel(BaseModel):
    """Base class for mutable player-state models."""

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="forbid",
    )


# =============================================================================
# Inventory
# =============================================================================


class Item(PlayerModel):
    """A carried item.

    Attributes:
        name: Identifier used for lookups (first match wins).
        item_type: Category, which decides the affected stat.
        effect_value: Signed benefit applied when the item is used.
        description: Display text.
    """

    name: str = Field(min_length=1, description="Item name")
    item_type: ItemType = Field(description="Item category")
    effect_value: int = Field(default=0, description="Signed benefit applied on use")
    description: str = Field(default="", description="Display text")


class Inventory(PlayerModel):
    """Bounded, insertion-ordered collection of items.

    Adds beyond capacity fail without mutating the inventory. Lookups
    scan from the front, so when two items share a name the oldest one
    is used or removed first.
    """

    items: list[Item] = Field(default_factory=list)
    capacity: int = Field(default=MAX_INVENTORY_ITEMS, ge=1, le=MAX_INVENTORY_ITEMS)

    @model_validator(mode="after")
    def validate_within_capacity(self) -> "Inventory":
        """Reject inventories holding more items than their capacity."""
        if len(self.items) > self.capacity:
            raise ValueError(
                f"Inventory holds {len(self.items)} items but capacity is {self.capacity}"
            )
        return self

    def __len__(self) -> int:
        return len(self.items)

    def is_full(self) -> bool:
        """Check whether another item can be added."""
        return len(self.items) >= self.capacity

    def add_item(
        self,
        name: str,
        item_type: ItemType,
        effect_value: int,
        description: str = "",
    ) -> bool:
        """Append a new item to the end of the inventory.

        Args:
            name: Item name.
            item_type: Item category.
            effect_value: Signed benefit applied when used.
            description: Display text.

        Returns:
            True if the item was added, False if the inventory is full
            or the item is invalid.
        """
        if self.is_full():
            logger.warning("Inventory full", item=name, capacity=self.capacity)
            return False

        try:
            item = Item(
                name=name,
                item_type=item_type,
                effect_value=effect_value,
                description=description,
            )
        except ValidationError as exc:
            logger.warning("Invalid item rejected", item=name, errors=exc.error_count())
            return False

        self.items.append(item)
        logger.info(
            "Item added", item=item.name, item_type=item.item_type.value, count=len(self.items)
        )
        return True

    def find_item(self, name: str) -> Item | None:
        """Get the first item with the given name, if any."""
        for item in self.items:
            if item.name == name:
                return item
        return None

    def use_item(self, name: str, player: Wolf) -> bool:
        """Consume an item, applying its effect to the player.

        Args:
            name: Name of the item to use.
            player: The wolf the effect is applied to.

        Returns:
            True if an item was found and consumed, False otherwise.
        """
        for index, item in enumerate(self.items):
            if item.name == name:
                player.apply_item_effect(item.item_type, item.effect_value)
                self.items.pop(index)
                logger.info(
                    "Item used",
                    item=name,
                    stat=item.item_type.affected_stat.value,
                    effect=item.effect_value,
                )
                return True

        logger.warning("Item not found", item=name)
        return False

    def remove_item(self, name: str) -> None:
        """Remove the first item with the given name; absent names are ignored."""
        for index, item in enumerate(self.items):
            if item.name == name:
                self.items.pop(index)
                logger.info("Item removed", item=name, count=len(self.items))
                return

    def to_summary(self) -> str:
        """Render a plain-text listing of the carried items."""
        if not self.items:
            return f"Inventory (0/{self.capacity}): empty"
        lines = [f"Inventory ({len(self.items)}/{self.capacity}):"]
        for item in self.items:
            line = f"- {item.name} [{item.item_type.value}] {item.effect_value:+d}"
            if item.description:
                line += f": {item.description}"
            lines.append(line)
        return "\n".join(lines)


# =============================================================================
# Pack
# =============================================================================


class PackMember(PlayerModel):
    """A wolf recruited into the player's pack."""

    name: str = Field(min_length=1, description="Member name")
    role: Role = Field(default=Role.NONE, description="Pack role")
    loyalty: int = Field(default=DEFAULT_LOYALTY, description="Loyalty (unbounded)")


class Pack(PlayerModel):
    """Ordered collection of recruited members. There is no size limit."""

    members: list[PackMember] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.members)

    def recruit(self, name: str, role: Role, loyalty: int = DEFAULT_LOYALTY) -> PackMember:
        """Append a new member to the end of the pack.

        Returns:
            The recruited member.
        """
        member = PackMember(name=name, role=role, loyalty=loyalty)
        self.members.append(member)
        logger.info(
            "Pack member recruited",
            member=member.name,
            role=member.role.value,
            size=len(self.members),
        )
        return member

    def get_member(self, name: str) -> PackMember | None:
        """Get the first member with the given name, if any."""
        for member in self.members:
            if member.name == name:
                return member
        return None

    def to_summary(self) -> str:
        """Render a plain-text listing of the pack."""
        if not self.members:
            return "Pack: alone"
        lines = [f"Pack ({len(self.members)}):"]
        lines.extend(
            f"- {m.name} ({m.role.value}, loyalty {m.loyalty})" for m in self.members
        )
        return "\n".join(lines)


# =============================================================================
# Wolf
# =============================================================================


class Wolf(PlayerModel):
    """The player character.

    Hunger counts upwards: 0 is sated, 100 is starving. The wolf is
    alive while health is above zero.
    """

    health: StatValue = Field(default=STAT_MAX, description="Health")
    hunger: StatValue = Field(default=STAT_MIN, description="Hunger (higher is hungrier)")
    energy: StatValue = Field(default=STAT_MAX, description="Energy")
    reputation: StatValue = Field(default=50, description="Standing among wolves")

    inventory: Inventory = Field(default_factory=Inventory)
    pack: Pack = Field(default_factory=Pack)

    def is_alive(self) -> bool:
        return self.health > STAT_MIN

    def get_stat(self, stat: Stat) -> int:
        return getattr(self, stat.value)

    def update_stats(self, health: int, hunger: int, energy: int, reputation: int) -> None:
        """Overwrite all four stats (clamped), rather than adjusting them."""
        self.health = clamp_stat(health)
        self.hunger = clamp_stat(hunger)
        self.energy = clamp_stat(energy)
        self.reputation = clamp_stat(reputation)

    def adjust_stat(self, stat: Stat, delta: int) -> int:
        """Add a signed delta to one stat, clamping the result.

        Returns:
            The change actually applied after clamping.
        """
        before = self.get_stat(stat)
        after = clamp_stat(before + delta)
        setattr(self, stat.value, after)
        return after - before

    def apply_deltas(
        self,
        *,
        health: int = 0,
        hunger: int = 0,
        energy: int = 0,
        reputation: int = 0,
    ) -> None:
        """Apply raw signed deltas to several stats at once."""
        self.adjust_stat(Stat.HEALTH, health)
        self.adjust_stat(Stat.HUNGER, hunger)
        self.adjust_stat(Stat.ENERGY, energy)
        self.adjust_stat(Stat.REPUTATION, reputation)

    def apply_item_effect(self, item_type: ItemType, effect_value: int) -> None:
        """Apply an item's benefit to the stat its category targets.

        Food relieves hunger (hunger goes down); every other category
        raises its stat.
        """
        stat = item_type.affected_stat
        if stat is Stat.HUNGER:
            self.adjust_stat(Stat.HUNGER, -effect_value)
        else:
            self.adjust_stat(stat, effect_value)

    def rest(self, amount: int = REST_ENERGY_GAIN) -> int:
        """Recover energy, capped at the stat maximum.

        Returns:
            Energy actually restored.
        """
        if amount <= 0:
            return 0
        restored = self.adjust_stat(Stat.ENERGY, amount)
        logger.debug("Wolf rested", restored=restored, energy=self.energy)
        return restored

    def feed(self, amount: int) -> int:
        """Reduce hunger, never below zero.

        Returns:
            Hunger actually relieved.
        """
        if amount <= 0:
            return 0
        return -self.adjust_stat(Stat.HUNGER, -amount)

    def heal(self, amount: int) -> int:
        """Restore health, capped at the stat maximum.

        Returns:
            Health actually restored.
        """
        if amount <= 0:
            return 0
        return self.adjust_stat(Stat.HEALTH, amount)

    def take_damage(self, amount: int) -> int:
        """Reduce health, never below zero. The wolf dies at zero health.

        Returns:
            Damage actually dealt.
        """
        if amount <= 0:
            return 0
        dealt = -self.adjust_stat(Stat.HEALTH, -amount)
        if not self.is_alive():
            logger.info("Wolf has died", damage=amount)
        return dealt

    def recruit_member(
        self,
        name: str,
        role: Role,
        loyalty: int = DEFAULT_LOYALTY,
    ) -> PackMember:
        """Recruit a new member into the pack."""
        return self.pack.recruit(name, role, loyalty)


__all__ = [
    "StatValue",
    "clamp_stat",
    "Item",
    "Inventory",
    "PackMember",
    "Pack",
    "Wolf",
]
