"""Tests for the exception hierarchy."""

from __future__ import annotations

from wolf_survival.core.exceptions import (
    ConfigurationError,
    EmptyEventQueueError,
    EmptyHistoryError,
    GameEngineError,
    InvalidGameStateError,
    SaveFileError,
    StorageError,
    StoryNodeNotFoundError,
    UnknownActionError,
    WolfSurvivalError,
)


class TestWolfSurvivalError:
    """Tests for the base exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = WolfSurvivalError("Something broke")
        assert exc.message == "Something broke"
        assert exc.details == {}
        assert str(exc) == "Something broke"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = WolfSurvivalError("Broken", details={"day": 3, "node": "river"})
        assert "day=3" in str(exc)
        assert "node='river'" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        exc = WolfSurvivalError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "WolfSurvivalError" in repr_str
        assert "Test" in repr_str


class TestGameEngineExceptions:
    """Tests for game engine exceptions."""

    def test_story_node_not_found(self) -> None:
        """Test StoryNodeNotFoundError keeps the id, including zero."""
        exc = StoryNodeNotFoundError("Missing", node_id=0)
        assert exc.details["node_id"] == 0

    def test_invalid_game_state(self) -> None:
        """Test InvalidGameStateError with state context."""
        exc = InvalidGameStateError(
            "Bad state",
            current_state="gameover",
            expected_states=["playing"],
        )
        assert exc.details["current_state"] == "gameover"
        assert exc.details["expected_states"] == ["playing"]

    def test_unknown_action(self) -> None:
        """Test UnknownActionError records the action."""
        exc = UnknownActionError("Nope", action="fly")
        assert exc.details["action"] == "fly"

    def test_inheritance(self) -> None:
        """Test game engine exception inheritance chain."""
        for exc_type in (
            InvalidGameStateError,
            StoryNodeNotFoundError,
            EmptyEventQueueError,
            EmptyHistoryError,
            UnknownActionError,
        ):
            exc = exc_type("Error")
            assert isinstance(exc, GameEngineError)
            assert isinstance(exc, WolfSurvivalError)


class TestOtherExceptions:
    """Tests for storage and configuration exceptions."""

    def test_save_file_error(self) -> None:
        """Test SaveFileError with path context."""
        exc = SaveFileError("Unreadable", path="saves/slot1.json")
        assert exc.details["path"] == "saves/slot1.json"
        assert isinstance(exc, StorageError)
        assert isinstance(exc, WolfSurvivalError)

    def test_configuration_error(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad value", config_key="daily_hunger")
        assert exc.details["config_key"] == "daily_hunger"
