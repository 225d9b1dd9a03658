"""Game session controller.

GameEngine owns the wolf, the story tree, the event queue, the day
counter, a FIFO queue of multi-turn actions and a LIFO stack of undo
snapshots. The external driver loop calls update_game_loop() once per
tick and reads state back through the accessors.

Undo is partial by contract: a snapshot holds the day, health, hunger,
energy and story position only. Inventory, pack, reputation, the action
queue and the event queue are not rolled back.

Example:
    >>> engine = GameEngine()
    >>> engine.update_game_loop()          # START_SCREEN -> PLAYING
    <GameState.PLAYING: 'playing'>
    >>> engine.choose(Choice.A)
    >>> engine.queue_action("hunt")
    >>> state = engine.update_game_loop()  # day 2, river
    >>> snapshot = engine.undo_last_move()  # back to day 1 at the root
"""

from __future__ import annotations

import random
from collections import deque
from pathlib import Path

from wolf_survival.core.config import GameSettings, StorageSettings, get_settings
from wolf_survival.core.constants import FIRST_DAY, STAT_MAX
from wolf_survival.core.exceptions import (
    EmptyHistoryError,
    InvalidGameStateError,
    SaveFileError,
    UnknownActionError,
)
from wolf_survival.core.logging import get_logger
from wolf_survival.engine.actions import execute_action, is_known_action
from wolf_survival.engine.events import EventManager
from wolf_survival.engine.story_tree import StoryTree
from wolf_survival.models.enums import Choice, GameState, Role, Stat
from wolf_survival.models.events import GameEvent
from wolf_survival.models.player import Inventory, PackMember, Wolf
from wolf_survival.models.session import GameSnapshot, SessionRecord
from wolf_survival.models.story import StoryNode
from wolf_survival.storage.session_file import read_session, write_session


logger = get_logger(__name__)


class GameEngine:
    """Drive a single game session.

    Attributes:
        settings: Game rule settings in effect.
        storage: Session file settings.
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        storage: StorageSettings | None = None,
        rng: random.Random | None = None,
        story_root: StoryNode | None = None,
    ) -> None:
        """Initialize the engine and start a fresh session.

        Args:
            settings: Game rules; loaded from the environment if omitted.
            storage: Session file settings; loaded from the environment
                if omitted.
            rng: Random source for random events.
            story_root: Root of a custom story tree; the default story is
                used if omitted.
        """
        self.settings = settings if settings is not None else get_settings().game
        self.storage = storage if storage is not None else get_settings().storage
        self._rng = rng or random.Random()
        self._story_root = story_root
        self.init_game()

    # -------------------------------------------------------------------------
    # Session setup
    # -------------------------------------------------------------------------

    def _new_wolf(self) -> Wolf:
        return Wolf(
            health=self.settings.starting_health,
            hunger=self.settings.starting_hunger,
            energy=self.settings.starting_energy,
            reputation=self.settings.starting_reputation,
            inventory=Inventory(capacity=self.settings.inventory_capacity),
        )

    def init_game(self) -> None:
        """Reset everything to a fresh session on the start screen."""
        self._player = self._new_wolf()
        self._story = StoryTree(self._story_root)
        self._events = EventManager()
        self._history: list[GameSnapshot] = []
        self._action_queue: deque[str] = deque()
        self._pending_choice: Choice | None = None
        self._day = FIRST_DAY
        self._state = GameState.START_SCREEN
        logger.info("New game initialized", day=self._day)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def player(self) -> Wolf:
        return self._player

    @property
    def story(self) -> StoryTree:
        return self._story

    @property
    def events(self) -> EventManager:
        return self._events

    @property
    def day(self) -> int:
        return self._day

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_node(self) -> StoryNode:
        return self._story.get_current_node()

    @property
    def history_depth(self) -> int:
        return len(self._history)

    @property
    def pending_actions(self) -> list[str]:
        return list(self._action_queue)

    @property
    def pending_choice(self) -> Choice | None:
        return self._pending_choice

    # -------------------------------------------------------------------------
    # Player commands
    # -------------------------------------------------------------------------

    def _require_active(self, command: str) -> None:
        if self._state.is_terminal:
            raise InvalidGameStateError(
                f"Cannot {command} after the game has ended",
                current_state=self._state.value,
                expected_states=[
                    GameState.START_SCREEN.value,
                    GameState.PLAYING.value,
                    GameState.EVENT_TRIGGERED.value,
                ],
            )

    def start_game(self) -> None:
        """Leave the start screen.

        Raises:
            InvalidGameStateError: If the game has already started.
        """
        if self._state is not GameState.START_SCREEN:
            raise InvalidGameStateError(
                "Game has already started",
                current_state=self._state.value,
                expected_states=[GameState.START_SCREEN.value],
            )
        self._state = GameState.PLAYING
        logger.info("Game started", day=self._day)

    def choose(self, choice: Choice) -> None:
        """Record the player's story choice for the next day.

        Raises:
            InvalidGameStateError: If the game has ended.
        """
        self._require_active("choose")
        self._pending_choice = Choice(choice)
        logger.debug("Choice recorded", choice=self._pending_choice.value)

    def queue_action(self, name: str) -> None:
        """Append a multi-turn action to the action queue.

        Raises:
            UnknownActionError: If the action is not registered.
            InvalidGameStateError: If the game has ended.
        """
        self._require_active("queue actions")
        if not is_known_action(name):
            raise UnknownActionError(f"Unknown action: {name}", action=name)
        self._action_queue.append(name)
        logger.debug("Action queued", action=name, pending=len(self._action_queue))

    def trigger_random_event(self) -> GameEvent:
        """Queue a random event drawn with the engine's random source."""
        return self._events.trigger_random_event(self._rng)

    def recruit_member(self, name: str, role: Role, loyalty: int | None = None) -> PackMember:
        """Recruit a pack member, defaulting loyalty from the game settings.

        Raises:
            InvalidGameStateError: If the game has ended.
        """
        self._require_active("recruit")
        if loyalty is None:
            loyalty = self.settings.default_loyalty
        return self._player.recruit_member(name, role, loyalty)

    # -------------------------------------------------------------------------
    # Undo history
    # -------------------------------------------------------------------------

    def save_state(self) -> GameSnapshot:
        """Push a snapshot of day, survival stats and story position.

        Returns:
            The snapshot pushed onto the history stack.
        """
        snapshot = GameSnapshot(
            day=self._day,
            health=self._player.health,
            hunger=self._player.hunger,
            energy=self._player.energy,
            story_node_id=self._story.current_node_id,
        )
        self._history.append(snapshot)
        logger.debug("State saved", day=self._day, depth=len(self._history))
        return snapshot

    def undo_last_move(self) -> GameSnapshot:
        """Restore the most recent snapshot.

        Only day, health, hunger, energy and story position are restored.
        A finished game whose restored wolf is alive and away from an
        ending resumes play.

        Returns:
            The snapshot that was restored.

        Raises:
            EmptyHistoryError: If there is nothing to undo.
        """
        if not self._history:
            raise EmptyHistoryError("No moves to undo")

        snapshot = self._history.pop()
        self._story.set_current_node(snapshot.story_node_id)
        self._player.update_stats(
            snapshot.health,
            snapshot.hunger,
            snapshot.energy,
            self._player.reputation,
        )
        self._day = snapshot.day
        self._pending_choice = None

        if self._state.is_terminal:
            self._state = self._resolve_outcome() or GameState.PLAYING

        logger.info(
            "Move undone",
            day=self._day,
            node_id=snapshot.story_node_id,
            depth=len(self._history),
        )
        return snapshot

    # -------------------------------------------------------------------------
    # Game loop
    # -------------------------------------------------------------------------

    def update_game_loop(self) -> GameState:
        """Advance the session by one tick.

        START_SCREEN moves to PLAYING. A PLAYING tick plays out one day:
        the recorded choice moves the story, one queued action runs, the
        wolf gets hungrier and more tired, and a random event may fire.
        An EVENT_TRIGGERED tick processes the most urgent pending event.
        Both push an undo snapshot first. Finished games do not change.

        Returns:
            The state after the tick.
        """
        if self._state is GameState.START_SCREEN:
            self.start_game()
            return self._state

        if self._state.is_terminal:
            return self._state

        self.save_state()
        if self._state is GameState.EVENT_TRIGGERED:
            self._process_event_tick()
        else:
            self._play_day()

        outcome = self._resolve_outcome()
        if outcome is not None:
            self._state = outcome
            logger.info(
                "Game over",
                outcome=outcome.value,
                day=self._day,
                node_id=self._story.current_node_id,
            )
        return self._state

    def _process_event_tick(self) -> None:
        if self._events.has_pending_events():
            self._events.process_next_event(self._player)
        if not self._events.has_pending_events():
            self._state = GameState.PLAYING

    def _play_day(self) -> None:
        if self._pending_choice is not None:
            self._story.choose(self._pending_choice)
            self._pending_choice = None

        if self._action_queue:
            execute_action(self._action_queue.popleft(), self._player, self.settings)

        self._day += 1
        self._apply_daily_upkeep()

        if self._rng.random() < self.settings.random_event_chance:
            self.trigger_random_event()

        if self._events.has_pending_events():
            self._state = GameState.EVENT_TRIGGERED

        logger.info(
            "Day advanced",
            day=self._day,
            health=self._player.health,
            hunger=self._player.hunger,
            energy=self._player.energy,
            node_id=self._story.current_node_id,
        )

    def _apply_daily_upkeep(self) -> None:
        self._player.adjust_stat(Stat.HUNGER, self.settings.daily_hunger)
        self._player.adjust_stat(Stat.ENERGY, -self.settings.daily_energy_cost)
        if self._player.hunger >= STAT_MAX:
            self._player.take_damage(self.settings.starvation_damage)
            logger.warning("Wolf is starving", health=self._player.health)

    def _resolve_outcome(self) -> GameState | None:
        """Work out whether the session has ended, and how."""
        alive = self._player.is_alive()
        node = self._story.get_current_node()
        if node.is_ending and node.is_victory and (alive or not self.settings.victory_requires_alive):
            return GameState.VICTORY
        if not alive or node.is_ending:
            return GameState.GAMEOVER
        return None

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def to_record(self) -> SessionRecord:
        """Capture the whole session as a SessionRecord."""
        return SessionRecord(
            day=self._day,
            state=self._state,
            story_node_id=self._story.current_node_id,
            wolf=self._player.model_copy(deep=True),
            history=list(self._history),
            action_queue=list(self._action_queue),
            pending_events=self._events.pending_events(),
        )

    def save_to_file(self, path: str | Path) -> Path:
        """Write the whole session to a file.

        Args:
            path: Save slot name or file path.

        Returns:
            The file written.

        Raises:
            SaveFileError: If the file cannot be written.
        """
        target = self.storage.resolve_save_path(path)
        return write_session(target, self.to_record())

    def restore_record(self, record: SessionRecord, *, source: str | None = None) -> None:
        """Replace the session with the contents of a record.

        The record is checked against this engine's story and action
        registry before anything is changed.

        Raises:
            SaveFileError: If the record refers to unknown story nodes or
                actions.
        """
        referenced_ids = {record.story_node_id, *(s.story_node_id for s in record.history)}
        missing = sorted(i for i in referenced_ids if self._story.find_node(i) is None)
        if missing:
            raise SaveFileError(
                "Session refers to story nodes that do not exist",
                path=source,
                details={"missing_node_ids": missing},
            )
        unknown = [name for name in record.action_queue if not is_known_action(name)]
        if unknown:
            raise SaveFileError(
                "Session refers to unknown actions",
                path=source,
                details={"unknown_actions": unknown},
            )

        events = EventManager()
        for event in record.pending_events:
            events.push_event(event)

        self._player = record.wolf.model_copy(deep=True)
        self._events = events
        self._history = list(record.history)
        self._action_queue = deque(record.action_queue)
        self._pending_choice = None
        self._day = record.day
        self._state = record.state
        self._story.set_current_node(record.story_node_id)
        logger.info(
            "Session restored",
            day=self._day,
            state=self._state.value,
            node_id=record.story_node_id,
        )

    def load_from_file(self, path: str | Path) -> None:
        """Replace the session with one read from a file.

        Loading is all-or-nothing: on any failure the current session is
        left exactly as it was.

        Args:
            path: Save slot name or file path.

        Raises:
            SaveFileError: If the file is missing, unreadable, corrupt or
                inconsistent with this engine's story.
        """
        source = self.storage.resolve_save_path(path)
        record = read_session(source)
        self.restore_record(record, source=str(source))


__all__ = ["GameEngine"]
