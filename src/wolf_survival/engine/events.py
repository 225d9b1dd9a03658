"""Priority-ordered event queue.

Events are served by ascending priority. Events of equal priority are
served in the order they were added, using a monotonically increasing
sequence number as the heap's secondary key.
"""

from __future__ import annotations

import heapq
import itertools
import random
from typing import TYPE_CHECKING

from wolf_survival.content.events import EVENT_DECK
from wolf_survival.core.exceptions import EmptyEventQueueError
from wolf_survival.core.logging import get_logger
from wolf_survival.models.events import GameEvent


if TYPE_CHECKING:
    from wolf_survival.models.player import Wolf

logger = get_logger(__name__)


class EventManager:
    """Queue of pending events, most urgent first."""

    def __init__(self) -> None:
        """Initialize an empty event queue."""
        self._heap: list[tuple[int, int, GameEvent]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def has_pending_events(self) -> bool:
        return bool(self._heap)

    def push_event(self, event: GameEvent) -> GameEvent:
        """Queue an already-built event.

        Returns:
            The queued event.
        """
        heapq.heappush(self._heap, (event.priority, next(self._sequence), event))
        logger.info(
            "Event queued",
            title=event.title,
            priority=event.priority,
            pending=len(self._heap),
        )
        return event

    def add_event(
        self,
        title: str,
        description: str,
        priority: int,
        *,
        health_delta: int = 0,
        hunger_delta: int = 0,
        energy_delta: int = 0,
        reputation_delta: int = 0,
    ) -> GameEvent:
        """Build and queue an event.

        Args:
            title: Short headline.
            description: Narrative text.
            priority: Urgency, 1 being the most urgent.
            health_delta: Raw change to health when processed.
            hunger_delta: Raw change to hunger when processed.
            energy_delta: Raw change to energy when processed.
            reputation_delta: Raw change to reputation when processed.

        Returns:
            The queued event.
        """
        event = GameEvent(
            title=title,
            description=description,
            priority=priority,
            health_delta=health_delta,
            hunger_delta=hunger_delta,
            energy_delta=energy_delta,
            reputation_delta=reputation_delta,
        )
        return self.push_event(event)

    def peek_next_event(self) -> GameEvent:
        """Get the most urgent event without removing it.

        Raises:
            EmptyEventQueueError: If no events are pending.
        """
        if not self._heap:
            raise EmptyEventQueueError("No pending events to peek at")
        return self._heap[0][2]

    def process_next_event(self, player: Wolf) -> GameEvent:
        """Remove the most urgent event and apply it to the wolf.

        Args:
            player: The wolf the event acts on.

        Returns:
            The processed event.

        Raises:
            EmptyEventQueueError: If no events are pending.
        """
        if not self._heap:
            raise EmptyEventQueueError("No pending events to process")

        _, _, event = heapq.heappop(self._heap)
        event.apply(player)
        logger.info(
            "Event processed",
            title=event.title,
            priority=event.priority,
            health=player.health,
            hunger=player.hunger,
            energy=player.energy,
        )
        return event

    def trigger_random_event(self, rng: random.Random | None = None) -> GameEvent:
        """Draw an event from the deck and queue it.

        Args:
            rng: Random source; a fresh unseeded one is used if omitted.

        Returns:
            The queued event.
        """
        rng = rng or random.Random()
        template = rng.choice(EVENT_DECK)
        return self.push_event(GameEvent(**template))

    def pending_events(self) -> list[GameEvent]:
        """Get all pending events in the order they would be served."""
        return [entry[2] for entry in sorted(self._heap)]

    def clear(self) -> None:
        self._heap.clear()


__all__ = ["EventManager"]
