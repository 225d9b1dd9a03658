"""The default story: a lone wolf looking for a new territory.

Layout (A goes left, B goes right)::

                          0 exile
                 /                    \\
           1 river                  2 mountains
          /        \\                /          \\
     3 deer herd  4 rival pack*   7 cave      8 the pass (loss)
      /      \\                   /      \\
  5 (loss)  6 (win)          9 (loss)  10 (win)

* node 4 is a victory ending.
"""

from __future__ import annotations

from wolf_survival.core.constants import ROOT_NODE_ID
from wolf_survival.models.story import StoryNode


def _ending(node_id: int, scenario: str, ending: str, *, victory: bool) -> StoryNode:
    return StoryNode(
        node_id=node_id,
        scenario_text=scenario,
        is_ending=True,
        ending_text=ending,
        is_victory=victory,
    )


def build_default_story() -> StoryNode:
    """Build the default story tree and return its root."""
    chase_alone = _ending(
        5,
        "You break from cover and charge the herd on your own.",
        "A stag's hoof catches your ribs. Limping and hungry, you never "
        "recover the strength to hunt again.",
        victory=False,
    )
    wait_for_night = _ending(
        6,
        "You lie in the reeds until the moon rises and the herd settles.",
        "Your patience feeds you for a week. Other lone wolves smell the "
        "kill and follow you; a new pack forms around you.",
        victory=True,
    )
    deer_herd = StoryNode(
        node_id=3,
        scenario_text="A herd of deer grazes in the river meadow, a limping "
        "yearling at its edge.",
        choice_a_text="Chase the herd now",
        choice_b_text="Wait for nightfall",
        left=chase_alone,
        right=wait_for_night,
    )
    rival_pack = _ending(
        4,
        "You walk openly into the rival pack's clearing and bare your teeth "
        "at their alpha.",
        "The alpha respects your nerve. You are welcomed as kin and given a "
        "place at the hunt.",
        victory=True,
    )
    river = StoryNode(
        node_id=1,
        scenario_text="The river runs fast with snowmelt. You smell deer "
        "upstream, and the scent-marks of another pack.",
        choice_a_text="Track the deer",
        choice_b_text="Approach the rival pack",
        left=deer_herd,
        right=rival_pack,
    )

    fight_bear = _ending(
        9,
        "You stand your ground as the bear wakes.",
        "The bear is twice your size and in no mood to share. The cave "
        "becomes your grave.",
        victory=False,
    )
    slip_away = _ending(
        10,
        "You rest quietly and leave before the bear stirs.",
        "Beyond the ridge lies an empty valley full of game. It is yours "
        "now.",
        victory=True,
    )
    cave = StoryNode(
        node_id=7,
        scenario_text="A dry cave shelters you from the wind, but something "
        "large is sleeping at the back.",
        choice_a_text="Fight the bear",
        choice_b_text="Slip away at dawn",
        left=fight_bear,
        right=slip_away,
    )
    the_pass = _ending(
        8,
        "You push on over the high pass as the clouds close in.",
        "The blizzard buries the trail. You do not see the spring.",
        victory=False,
    )
    mountains = StoryNode(
        node_id=2,
        scenario_text="The mountain air is thin and cold. Snow is already "
        "falling on the peaks.",
        choice_a_text="Shelter in a cave",
        choice_b_text="Cross the pass",
        left=cave,
        right=the_pass,
    )

    return StoryNode(
        node_id=ROOT_NODE_ID,
        scenario_text="Driven from your birth pack, you wake alone at the "
        "edge of the forest.",
        choice_a_text="Follow the river north",
        choice_b_text="Climb into the mountains",
        left=river,
        right=mountains,
    )


__all__ = ["build_default_story"]
