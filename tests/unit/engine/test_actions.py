"""Tests for the multi-turn action registry."""

from __future__ import annotations

import pytest

from wolf_survival.core.config import GameSettings
from wolf_survival.core.exceptions import UnknownActionError
from wolf_survival.engine.actions import (
    execute_action,
    get_action,
    get_all_actions,
    is_known_action,
)
from wolf_survival.models.enums import ItemType
from wolf_survival.models.player import Wolf


class TestRegistry:
    """Tests for action lookup."""

    def test_builtin_actions_registered(self) -> None:
        names = {definition.name for definition in get_all_actions()}
        assert {"rest", "hunt", "forage", "patrol"} <= names

    def test_get_action(self) -> None:
        definition = get_action("rest")
        assert definition.name == "rest"
        assert definition.description

    def test_unknown_action(self) -> None:
        assert is_known_action("fly") is False
        with pytest.raises(UnknownActionError) as exc_info:
            get_action("fly")
        assert exc_info.value.details["action"] == "fly"


class TestActions:
    """Tests for each built-in action's effect."""

    def test_rest(self, wolf: Wolf, game_settings: GameSettings) -> None:
        outcome = execute_action("rest", wolf, game_settings)
        assert wolf.energy == 80
        assert "30" in outcome

    def test_hunt(self, wolf: Wolf, game_settings: GameSettings) -> None:
        execute_action("hunt", wolf, game_settings)
        assert wolf.energy == 35
        assert wolf.hunger == 25

    def test_forage(self, wolf: Wolf, game_settings: GameSettings) -> None:
        execute_action("forage", wolf, game_settings)
        item = wolf.inventory.find_item("Wild Berries")
        assert item is not None
        assert item.item_type is ItemType.FOOD
        assert wolf.energy == 45

    def test_forage_with_full_inventory(self, wolf: Wolf, game_settings: GameSettings) -> None:
        """Test foraging with no room leaves the inventory unchanged."""
        for i in range(10):
            wolf.inventory.add_item(f"Bone {i}", ItemType.TOOL, 1)

        outcome = execute_action("forage", wolf, game_settings)

        assert wolf.inventory.find_item("Wild Berries") is None
        assert "no room" in outcome

    def test_patrol(self, wolf: Wolf, game_settings: GameSettings) -> None:
        execute_action("patrol", wolf, game_settings)
        assert wolf.reputation == 55
        assert wolf.energy == 40
