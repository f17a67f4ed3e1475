# session.py - Session State
"""
The per-playthrough aggregate, the feedback events it produces, and the
read-only snapshot handed to the render sink every frame.
"""

from dataclasses import dataclass, field
from enum import Enum

from entities import MovingObject, ObjectKind, Player, Rect


class FeedbackEvent(str, Enum):
    """Discrete triggers for the audio/feedback sink."""

    BONUS_COLLECTED = "bonus_collected"
    OBSTACLE_HIT = "obstacle_hit"
    HAZARD_HIT = "hazard_hit"
    LEVEL_UP = "level_up"
    SESSION_ENDED = "session_ended"


@dataclass
class GameSession:
    """Everything that changes during one playthrough. Rebuilt on every start."""

    player: Player
    warning_cap: int
    current_speed: float = 0.0
    spawn_interval_ms: float = 0.0
    score: int = 0
    level: int = 1
    warnings: int = 0
    progress: float = 0.0  # Runner distance
    time_remaining: int | None = None  # Catcher countdown (seconds)
    objects: list[MovingObject] = field(default_factory=list)

    def add_score(self, points: int) -> None:
        if points > 0:  # Score never goes down
            self.score += points


@dataclass(frozen=True)
class ObjectView:
    kind: ObjectKind
    key: str
    value: int
    rect: Rect


@dataclass(frozen=True)
class Snapshot:
    """What the render sink needs for one frame."""

    variant: str
    active: bool
    player: Rect
    lift: float
    lane: int
    objects: tuple[ObjectView, ...]
    score: int
    level: int
    progress: float
    warnings: int
    warning_cap: int
    time_remaining: int | None

    @property
    def danger(self) -> bool:
        """One more hit ends the run."""
        return self.warnings >= self.warning_cap - 1

    @classmethod
    def capture(cls, variant: str, session: GameSession, active: bool) -> "Snapshot":
        return cls(
            variant=variant,
            active=active,
            player=session.player.hitbox,
            lift=session.player.z,
            lane=session.player.lane,
            objects=tuple(ObjectView(o.kind, o.key, o.value, o.hitbox) for o in session.objects),
            score=session.score,
            level=session.level,
            progress=session.progress,
            warnings=session.warnings,
            warning_cap=session.warning_cap,
            time_remaining=session.time_remaining,
        )
