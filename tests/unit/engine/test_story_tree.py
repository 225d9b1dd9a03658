"""Tests for story navigation."""

from __future__ import annotations

import pytest

from wolf_survival.core.exceptions import GameEngineError, StoryNodeNotFoundError
from wolf_survival.engine.story_tree import StoryTree
from wolf_survival.models.enums import Choice
from wolf_survival.models.story import StoryNode


@pytest.fixture
def tree() -> StoryTree:
    """Create a tree holding the default story."""
    return StoryTree.build_tree()


class TestNavigation:
    """Tests for left/right traversal."""

    def test_starts_at_root(self, tree: StoryTree) -> None:
        assert tree.current_node_id == 0
        assert tree.is_at_ending() is False

    def test_left_then_right(self, tree: StoryTree) -> None:
        """Test A then B lands on root.left.right."""
        expected = tree.root.left.right

        tree.move_to_left()
        node = tree.move_to_right()

        assert node is expected
        assert tree.current_node_id == 4
        assert tree.is_at_ending() is True

    def test_moves_from_ending_are_noops(self, tree: StoryTree) -> None:
        """Test an ending node is terminal."""
        tree.move_to_left()
        tree.move_to_right()
        ending = tree.get_current_node()

        assert tree.move_to_left() is ending
        assert tree.move_to_right() is ending
        assert tree.current_node_id == 4

    def test_choose(self, tree: StoryTree) -> None:
        """Test choices map A to left and B to right."""
        tree.choose(Choice.B)
        assert tree.current_node_id == 2
        tree.choose(Choice.A)
        assert tree.current_node_id == 7

    def test_reset(self, tree: StoryTree) -> None:
        tree.move_to_right()
        tree.reset()
        assert tree.current_node_id == 0


class TestSetCurrentNode:
    """Tests for jumping to a node by id."""

    def test_jump(self, tree: StoryTree) -> None:
        node = tree.set_current_node(7)
        assert node.node_id == 7
        assert tree.get_current_node().choice_a_text == "Fight the bear"

    def test_unknown_id(self, tree: StoryTree) -> None:
        """Test an unknown id raises and leaves the position unchanged."""
        tree.move_to_left()

        with pytest.raises(StoryNodeNotFoundError) as exc_info:
            tree.set_current_node(99)

        assert exc_info.value.details["node_id"] == 99
        assert tree.current_node_id == 1


class TestTreeStructure:
    """Tests for tree-wide lookups and validation."""

    def test_node_ids_depth_first(self, tree: StoryTree) -> None:
        assert tree.node_ids() == [0, 1, 3, 5, 6, 4, 2, 7, 9, 10, 8]

    def test_find_node(self, tree: StoryTree) -> None:
        assert tree.find_node(10).is_victory is True
        assert tree.find_node(42) is None

    def test_duplicate_ids_rejected(self) -> None:
        """Test a tree with repeated ids is refused."""
        root = StoryNode(
            node_id=0,
            scenario_text="start",
            left=StoryNode(node_id=1, scenario_text="a", is_ending=True),
            right=StoryNode(node_id=1, scenario_text="b", is_ending=True),
        )
        with pytest.raises(GameEngineError):
            StoryTree(root)

    def test_custom_root(self) -> None:
        root = StoryNode(
            node_id=0,
            scenario_text="start",
            left=StoryNode(node_id=1, scenario_text="a", is_ending=True, is_victory=True),
            right=StoryNode(node_id=2, scenario_text="b", is_ending=True),
        )
        tree = StoryTree(root)
        tree.move_to_left()
        assert tree.get_current_node().is_victory is True
