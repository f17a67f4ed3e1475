# input_mapper.py - Input Mapping
"""
Turns classifier labels and key state into player changes.

Labels are first canonicalized into a Lane so that game logic never sees
the raw class names (which may come in English or Korean).
"""

from enum import IntEnum

from config import LANE_COUNT
from entities import Player


class Lane(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


# Checked in this order (exact match first, then containment)
LANE_TOKENS: tuple[tuple[Lane, tuple[str, ...]], ...] = (
    (Lane.LEFT, ("left", "왼쪽")),
    (Lane.RIGHT, ("right", "오른쪽")),
    (Lane.CENTER, ("center", "centre", "정면")),
)


def canonical_lane(label: str | None) -> Lane | None:
    """Map a classifier label to a Lane, or None if it is not recognised."""
    if not label:
        return None
    text = label.strip().casefold()
    if not text:
        return None
    for lane, tokens in LANE_TOKENS:
        if text in tokens:
            return lane
    for lane, tokens in LANE_TOKENS:
        if any(token in text for token in tokens):
            return lane
    return None


def lane_x(lane: int, field_width: float, player_width: float) -> float:
    """Left edge that centres a player of the given width in a lane."""
    lane_width = field_width / LANE_COUNT
    return lane_width * lane + (lane_width - player_width) / 2


class LaneMapper:
    """Snaps the catcher's basket to the lane named by the last label."""

    def __init__(self, field_width: float) -> None:
        self.field_width = field_width

    def snap(self, player: Player, lane: Lane) -> None:
        player.lane = int(lane)
        player.x = lane_x(lane, self.field_width, player.width)

    def apply(self, player: Player, label: str | None) -> bool:
        """Move the player for a label; returns False for ignored labels."""
        lane = canonical_lane(label)
        if lane is None:
            return False
        self.snap(player, lane)
        return True


class AscendSignal:
    """Held / released state of the runner's jump control."""

    def __init__(self) -> None:
        self.held = False

    def press(self) -> None:
        self.held = True

    def release(self) -> None:
        self.held = False
