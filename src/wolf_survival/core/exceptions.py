"""Custom exception hierarchy for the Wolf survival engine.

Every error the engine raises inherits from WolfSurvivalError, so the
driver loop can catch one type at its boundary while still telling the
failure kinds apart. Misuse of the data structures (unknown story node,
empty event queue, empty undo history) is raised as a typed exception;
inventory capacity and unknown item names are reported as boolean
results by the inventory itself.

Example:
    >>> from wolf_survival.core.exceptions import StoryNodeNotFoundError
    >>> raise StoryNodeNotFoundError("No such node", node_id=42)
"""

from __future__ import annotations

from typing import Any


class WolfSurvivalError(Exception):
    """Base exception for all Wolf survival errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Domain Exceptions
# =============================================================================


class GameEngineError(WolfSurvivalError):
    """Base exception for all game engine errors.

    Raised when the story tree, event queue, undo history or action
    queue is used in a way its current contents do not allow.
    """


class InvalidGameStateError(GameEngineError):
    """Raised when an operation is not allowed in the current GameState."""

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current state identifier.
            expected_states: List of states that would have been valid.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


class StoryNodeNotFoundError(GameEngineError):
    """Raised when no story node carries the requested id.

    The story position is left unchanged when this is raised.
    """

    def __init__(
        self,
        message: str,
        *,
        node_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the error with the id that was looked up.

        Args:
            message: Human-readable error description.
            node_id: The story node id that could not be found.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if node_id is not None:
            combined_details["node_id"] = node_id
        super().__init__(message, details=combined_details)


class EmptyEventQueueError(GameEngineError):
    """Raised when peeking at or processing an empty event queue."""


class EmptyHistoryError(GameEngineError):
    """Raised when undoing with no snapshots on the history stack."""


class UnknownActionError(GameEngineError):
    """Raised when queueing an action identifier that is not registered."""

    def __init__(
        self,
        message: str,
        *,
        action: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the error with the rejected action identifier.

        Args:
            message: Human-readable error description.
            action: The unknown action identifier.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if action:
            combined_details["action"] = action
        super().__init__(message, details=combined_details)


# =============================================================================
# Storage Domain Exceptions
# =============================================================================


class StorageError(WolfSurvivalError):
    """Base exception for persistence errors."""


class SaveFileError(StorageError):
    """Raised when a session file cannot be written, read or parsed.

    A load that raises this error leaves the engine's in-memory
    session untouched.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize save file error with path context.

        Args:
            message: Human-readable error description.
            path: Path of the session file involved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if path:
            combined_details["path"] = path
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(WolfSurvivalError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


__all__ = [
    "WolfSurvivalError",
    # Game engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    "StoryNodeNotFoundError",
    "EmptyEventQueueError",
    "EmptyHistoryError",
    "UnknownActionError",
    # Storage exceptions
    "StorageError",
    "SaveFileError",
    # Configuration exceptions
    "ConfigurationError",
]
