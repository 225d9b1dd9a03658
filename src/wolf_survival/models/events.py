"""Game event model.

Events are served most-urgent first: priority 1 beats priority 2.
Processing an event applies its stat deltas to the wolf.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field


if TYPE_CHECKING:
    from wolf_survival.models.player import Wolf


class GameEvent(BaseModel):
    """Something that happens to the wolf.

    Attributes:
        title: Short headline.
        description: Narrative text.
        priority: Urgency, 1 being the most urgent.
        health_delta: Raw change to health.
        hunger_delta: Raw change to hunger (positive makes the wolf hungrier).
        energy_delta: Raw change to energy.
        reputation_delta: Raw change to reputation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = Field(min_length=1, description="Event headline")
    description: str = Field(default="", description="Event narrative")
    priority: int = Field(ge=1, description="Urgency (1 = most urgent)")
    health_delta: int = Field(default=0)
    hunger_delta: int = Field(default=0)
    energy_delta: int = Field(default=0)
    reputation_delta: int = Field(default=0)

    def apply(self, player: Wolf) -> None:
        """Apply this event's stat deltas to the wolf (clamped)."""
        player.apply_deltas(
            health=self.health_delta,
            hunger=self.hunger_delta,
            energy=self.energy_delta,
            reputation=self.reputation_delta,
        )


__all__ = ["GameEvent"]
