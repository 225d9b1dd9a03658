"""Story node model for the branching narrative.

A story is a strict binary tree: every node either offers two choices
and owns both children, or is an ending with no children. Nodes are
frozen once built.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StoryNode(BaseModel):
    """A single scenario in the story tree.

    Attributes:
        node_id: Identifier, unique across one tree.
        scenario_text: Narrative shown while the wolf is at this node.
        choice_a_text: Label of the left branch.
        choice_b_text: Label of the right branch.
        left: Consequence of choice A.
        right: Consequence of choice B.
        is_ending: Whether this node ends the story.
        ending_text: Final narrative for an ending.
        is_victory: Whether an ending is a win rather than a loss.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    node_id: int = Field(ge=0, description="Unique node id")
    scenario_text: str = Field(description="Scenario narrative")
    choice_a_text: str = Field(default="", description="Label for choice A")
    choice_b_text: str = Field(default="", description="Label for choice B")
    left: StoryNode | None = Field(default=None, description="Child for choice A")
    right: StoryNode | None = Field(default=None, description="Child for choice B")
    is_ending: bool = Field(default=False, description="Terminal node")
    ending_text: str = Field(default="", description="Ending narrative")
    is_victory: bool = Field(default=False, description="Ending counts as a win")

    @model_validator(mode="after")
    def validate_shape(self) -> "StoryNode":
        """Endings have no children; every other node has both."""
        if self.is_ending:
            if self.left is not None or self.right is not None:
                raise ValueError(f"Ending node {self.node_id} cannot have children")
        else:
            if self.left is None or self.right is None:
                raise ValueError(f"Story node {self.node_id} needs both a left and a right child")
            if self.is_victory:
                raise ValueError(f"Only ending nodes can be victories (node {self.node_id})")
        return self

    def child_for(self, *, left: bool) -> StoryNode | None:
        return self.left if left else self.right


__all__ = ["StoryNode"]
