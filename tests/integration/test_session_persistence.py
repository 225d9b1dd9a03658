"""Integration tests for saving and loading sessions."""

from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from wolf_survival.core.config import GameSettings, StorageSettings
from wolf_survival.core.exceptions import SaveFileError
from wolf_survival.engine.game_engine import GameEngine
from wolf_survival.models.enums import Choice, GameState, ItemType, Role


@pytest.fixture
def busy_engine(playing_engine: GameEngine) -> GameEngine:
    """Create an engine with something in every part of the session."""
    playing_engine.choose(Choice.A)
    playing_engine.update_game_loop()
    playing_engine.player.inventory.add_item("Yarrow", ItemType.HERB, 15, "Bitter leaves")
    playing_engine.player.recruit_member("Ash", Role.SCOUT, 70)
    playing_engine.queue_action("rest")
    playing_engine.queue_action("patrol")
    playing_engine.events.add_event("Blizzard", "Snow", 2, energy_delta=-20)
    playing_engine.events.add_event("Hunter's Trap", "Steel", 1, health_delta=-15)
    return playing_engine


def _fresh_engine(storage_settings: StorageSettings) -> GameEngine:
    return GameEngine(
        GameSettings(random_event_chance=0.0),
        storage=storage_settings,
        rng=random.Random(0),
    )


class TestRoundTrip:
    """Tests for a save followed by a load into another engine."""

    def test_everything_survives(
        self, busy_engine: GameEngine, storage_settings: StorageSettings
    ) -> None:
        """Test a reloaded session matches the saved one field for field."""
        path = busy_engine.save_to_file("slot1")
        other = _fresh_engine(storage_settings)

        other.load_from_file("slot1")

        assert path == storage_settings.save_directory / "slot1.json"
        assert other.day == busy_engine.day == 2
        assert other.state is busy_engine.state
        assert other.current_node.node_id == 1
        assert other.player == busy_engine.player
        assert other.player.inventory.find_item("Yarrow").item_type is ItemType.HERB
        assert other.player.pack.get_member("Ash").loyalty == 70
        assert other.history_depth == busy_engine.history_depth
        assert other.pending_actions == ["rest", "patrol"]
        assert [e.title for e in other.events.pending_events()] == ["Hunter's Trap", "Blizzard"]

    def test_reloaded_session_keeps_playing(
        self, busy_engine: GameEngine, storage_settings: StorageSettings
    ) -> None:
        busy_engine.save_to_file("slot1")
        other = _fresh_engine(storage_settings)
        other.load_from_file("slot1")

        assert other.update_game_loop() is GameState.EVENT_TRIGGERED
        assert other.pending_actions == ["patrol"]

        other.undo_last_move()
        other.undo_last_move()
        assert other.day == 1
        assert other.current_node.node_id == 0

    def test_file_is_json(self, busy_engine: GameEngine) -> None:
        path = busy_engine.save_to_file("slot1")

        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["format_version"] == 1
        assert data["story_node_id"] == 1
        assert data["action_queue"] == ["rest", "patrol"]
        assert data["wolf"]["inventory"]["items"][0]["item_type"] == "herb"

    def test_explicit_path(self, busy_engine: GameEngine, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "run.json"

        assert busy_engine.save_to_file(target) == target
        assert target.exists()

    def test_overwrite_leaves_no_temp_files(self, busy_engine: GameEngine) -> None:
        busy_engine.save_to_file("slot1")
        busy_engine.update_game_loop()
        path = busy_engine.save_to_file("slot1")

        assert [p.name for p in path.parent.iterdir()] == ["slot1.json"]


class TestLoadFailures:
    """Tests that a failed load leaves the session untouched."""

    def _assert_untouched(self, engine: GameEngine) -> None:
        assert engine.day == 2
        assert engine.current_node.node_id == 1
        assert engine.player.inventory.find_item("Yarrow") is not None
        assert engine.pending_actions == ["rest", "patrol"]
        assert len(engine.events) == 2

    def test_missing_file(self, busy_engine: GameEngine) -> None:
        with pytest.raises(SaveFileError):
            busy_engine.load_from_file("nope")
        self._assert_untouched(busy_engine)

    def test_corrupt_file(self, busy_engine: GameEngine) -> None:
        path = busy_engine.save_to_file("slot1")
        path.write_text("{ this is not json", encoding="utf-8")

        with pytest.raises(SaveFileError) as exc_info:
            busy_engine.load_from_file("slot1")

        assert exc_info.value.details["path"] == str(path)
        self._assert_untouched(busy_engine)

    def test_unsupported_version(self, busy_engine: GameEngine) -> None:
        path = busy_engine.save_to_file("slot1")
        data = json.loads(path.read_text(encoding="utf-8"))
        data["format_version"] = 2
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(SaveFileError):
            busy_engine.load_from_file("slot1")
        self._assert_untouched(busy_engine)

    def test_unknown_story_node(self, busy_engine: GameEngine) -> None:
        """Test a save pointing outside the story is rejected."""
        path = busy_engine.save_to_file("slot1")
        data = json.loads(path.read_text(encoding="utf-8"))
        data["story_node_id"] = 99
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(SaveFileError) as exc_info:
            busy_engine.load_from_file("slot1")

        assert exc_info.value.details["missing_node_ids"] == [99]
        self._assert_untouched(busy_engine)

    def test_unknown_action(self, busy_engine: GameEngine) -> None:
        path = busy_engine.save_to_file("slot1")
        data = json.loads(path.read_text(encoding="utf-8"))
        data["action_queue"] = ["howl"]
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(SaveFileError):
            busy_engine.load_from_file("slot1")
        self._assert_untouched(busy_engine)

    def test_stat_out_of_range(self, busy_engine: GameEngine) -> None:
        path = busy_engine.save_to_file("slot1")
        data = json.loads(path.read_text(encoding="utf-8"))
        data["wolf"]["health"] = 250
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(SaveFileError):
            busy_engine.load_from_file("slot1")
        self._assert_untouched(busy_engine)


class TestSaveFailures:
    """Tests for unwritable destinations."""

    def test_parent_is_a_file(self, busy_engine: GameEngine, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(SaveFileError):
            busy_engine.save_to_file(blocker / "slot.json")
        assert busy_engine.day == 2
        assert blocker.is_file()
