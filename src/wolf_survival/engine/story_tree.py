"""Story navigation over a fixed binary tree of StoryNodes.

The tree is built once and never modified; only the current position
moves. Choice A moves left and choice B moves right. Ending nodes are
terminal: moving from one is a silent no-op.
"""

from __future__ import annotations

from collections.abc import Iterator

from wolf_survival.content.story import build_default_story
from wolf_survival.core.exceptions import GameEngineError, StoryNodeNotFoundError
from wolf_survival.core.logging import get_logger
from wolf_survival.models.enums import Choice
from wolf_survival.models.story import StoryNode


logger = get_logger(__name__)


class StoryTree:
    """Track the wolf's position in the story.

    Attributes:
        root: The first scenario of the story.
    """

    def __init__(self, root: StoryNode | None = None) -> None:
        """Initialize the tree.

        Args:
            root: Root of a prebuilt tree. The default story is built
                when omitted.

        Raises:
            GameEngineError: If two nodes share an id.
        """
        self._root = root if root is not None else build_default_story()
        self._check_unique_ids()
        self._current = self._root
        logger.debug("StoryTree initialized", root_id=self._root.node_id)

    @classmethod
    def build_tree(cls) -> StoryTree:
        """Create a tree holding the default story."""
        return cls(build_default_story())

    @property
    def root(self) -> StoryNode:
        return self._root

    def _walk(self) -> Iterator[StoryNode]:
        """Yield every node depth-first, left before right."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _check_unique_ids(self) -> None:
        seen: set[int] = set()
        for node in self._walk():
            if node.node_id in seen:
                raise GameEngineError(
                    f"Duplicate story node id: {node.node_id}",
                    details={"node_id": node.node_id},
                )
            seen.add(node.node_id)

    def node_ids(self) -> list[int]:
        """Get every node id in depth-first order."""
        return [node.node_id for node in self._walk()]

    def find_node(self, node_id: int) -> StoryNode | None:
        """Depth-first search for the node with the given id."""
        for node in self._walk():
            if node.node_id == node_id:
                return node
        return None

    def get_current_node(self) -> StoryNode:
        return self._current

    @property
    def current_node_id(self) -> int:
        return self._current.node_id

    def set_current_node(self, node_id: int) -> StoryNode:
        """Jump to the node with the given id (used when restoring a session).

        Args:
            node_id: Id of the node to move to.

        Returns:
            The new current node.

        Raises:
            StoryNodeNotFoundError: If no node has that id. The current
                position is unchanged.
        """
        node = self.find_node(node_id)
        if node is None:
            raise StoryNodeNotFoundError(
                f"No story node with id {node_id}",
                node_id=node_id,
            )
        self._current = node
        logger.debug("Story position set", node_id=node_id)
        return node

    def reset(self) -> None:
        """Return to the root."""
        self._current = self._root

    def is_at_ending(self) -> bool:
        return self._current.is_ending

    def _move(self, *, left: bool) -> StoryNode:
        if self._current.is_ending:
            logger.debug("Story move ignored at ending", node_id=self._current.node_id)
            return self._current

        child = self._current.child_for(left=left)
        if child is not None:
            logger.info(
                "Story advanced",
                from_node=self._current.node_id,
                to_node=child.node_id,
                choice="A" if left else "B",
            )
            self._current = child
        return self._current

    def move_to_left(self) -> StoryNode:
        """Take choice A. No-op at an ending.

        Returns:
            The current node after the move.
        """
        return self._move(left=True)

    def move_to_right(self) -> StoryNode:
        """Take choice B. No-op at an ending.

        Returns:
            The current node after the move.
        """
        return self._move(left=False)

    def choose(self, choice: Choice) -> StoryNode:
        """Take the branch matching a player choice."""
        if Choice(choice) is Choice.A:
            return self.move_to_left()
        return self.move_to_right()


__all__ = ["StoryTree"]
