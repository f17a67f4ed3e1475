# entities.py - Game Objects
"""
Player and moving objects shared by both games.
"""

from dataclasses import dataclass
from enum import Enum


class ObjectKind(str, Enum):
    OBSTACLE = "obstacle"  # runner cactus
    BONUS = "bonus"  # coin / banknote
    HAZARD = "hazard"  # catcher scammer


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def overlaps(self, other: "Rect") -> bool:
        """Axis-aligned bounding box test (touching edges do not count)."""
        return (self.x < other.x + other.width and
                self.x + self.width > other.x and
                self.y < other.y + other.height and
                self.y + self.height > other.y)


@dataclass
class Player:
    x: float
    y: float
    width: float
    height: float
    z: float = 0.0  # Lift height (runner)
    lane: int = 1  # Current lane (catcher)

    @property
    def hitbox(self) -> Rect:
        # Lift is judged separately against the clearance, so the box stays on the ground
        return Rect(self.x, self.y, self.width, self.height)


@dataclass
class MovingObject:
    kind: ObjectKind
    key: str
    x: float
    y: float
    width: float
    height: float
    speed: float = 0.0  # px/sec, fixed at spawn
    value: int = 0

    @property
    def hitbox(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)
