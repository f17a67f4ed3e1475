# config.py
import os
from dataclasses import dataclass, replace
from enum import Enum

# Dossiers de base
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
ASSETS_DIR = os.path.join(BASE_DIR, "assets")

# Dimensions of the window and of the playfield canvas
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 560
PLAYFIELD_WIDTH = 400
PLAYFIELD_HEIGHT = 400

# Frame cadence (~60 FPS) and countdown period
FRAME_DELAY_MS = 16
COUNTDOWN_PERIOD_MS = 1000

# Difficulty of the game (multiplier applied to base speeds)
DIFFICULTIES = {
    "Easy": {"speed": 0.8},
    "Normal": {"speed": 1.0},
    "Hard": {"speed": 1.25},
}

LANE_COUNT = 3


def asset_path(name: str) -> str:
    """path to an image, ex: 5000won.png."""
    return os.path.join(ASSETS_DIR, name)


class HazardPolicy(str, Enum):
    """What a scammer hit does in the catcher game."""

    FATAL = "fatal"  # session ends immediately
    WARNING = "warning"  # counts toward the warning cap instead


@dataclass(frozen=True)
class SpawnEntry:
    """One row of a weighted spawn table."""

    key: str
    kind: str  # ObjectKind value
    weight: float
    value: int = 0  # points awarded for bonuses
    base_speed: float = 0.0  # px/sec, catcher only


# --------- Runner (cactus run) --------- #
RUNNER_SPAWN_TABLE = (
    SpawnEntry("cactus", "obstacle", 0.7),
    SpawnEntry("coin", "bonus", 0.3, value=1000),
)


@dataclass(frozen=True)
class RunnerTuning:
    width: float = PLAYFIELD_WIDTH
    height: float = PLAYFIELD_HEIGHT
    ground_margin: float = 50  # ground line sits this far above the bottom

    player_x: float = 50
    player_size: float = 40
    object_size: float = 40

    base_speed: float = 200.0  # px/sec
    speed_gain: float = 1.5  # px/sec per unit of distance
    distance_scale: float = 0.01  # distance units per px travelled

    base_interval_ms: float = 1500.0
    interval_decay: float = 10.0  # ms per unit of distance
    interval_floor_ms: float = 600.0

    cluster_chance: float = 0.3
    cluster_min: int = 2
    cluster_max: int = 3
    cluster_spacing: float = 30.0

    lift_rate: float = 600.0  # px/sec, both directions
    lift_max: float = 120.0
    clearance: float = 20.0  # lift at/above this clears a cactus

    warning_cap: int = 5
    spawn_table: tuple = RUNNER_SPAWN_TABLE

    @property
    def ground_y(self) -> float:
        return self.height - self.ground_margin

    @classmethod
    def for_difficulty(cls, name: str) -> "RunnerTuning":
        settings = DIFFICULTIES.get(name, DIFFICULTIES["Normal"])  # Default to Normal
        base = cls()
        return replace(base, base_speed=base.base_speed * settings["speed"])


# --------- Catcher (catch the money) --------- #
# Weights sum to 1 with the scammer at 10%. The older 0.6/0.2/0.15/0.04/0.1
# table summed to 1.09; see "Catcher spawn weights" in DESIGN.md.
CATCHER_SPAWN_TABLE = (
    SpawnEntry("1k", "bonus", 0.5, value=1000, base_speed=100),
    SpawnEntry("5k", "bonus", 0.25, value=5000, base_speed=150),
    SpawnEntry("10k", "bonus", 0.1, value=10000, base_speed=200),
    SpawnEntry("50k", "bonus", 0.05, value=50000, base_speed=300),
    SpawnEntry("scammer", "hazard", 0.1, base_speed=200),
)


@dataclass(frozen=True)
class CatcherTuning:
    width: float = PLAYFIELD_WIDTH
    height: float = PLAYFIELD_HEIGHT

    player_width: float = 60
    player_height: float = 30
    player_top_margin: float = 40  # basket top sits this far above the bottom

    item_width: float = 30
    item_height: float = 15
    spawn_y: float = -30

    speed_multiplier: float = 1.0
    level_speed_gain: float = 0.1
    level_threshold: int = 50000  # points per level

    base_interval_ms: float = 1000.0
    interval_decay: float = 50.0  # ms per level
    interval_floor_ms: float = 400.0

    time_limit: int = 60  # seconds
    warning_cap: int = 3  # only reachable under HazardPolicy.WARNING
    hazard_policy: HazardPolicy = HazardPolicy.FATAL
    spawn_table: tuple = CATCHER_SPAWN_TABLE

    @property
    def player_y(self) -> float:
        return self.height - self.player_top_margin

    @classmethod
    def for_difficulty(cls, name: str) -> "CatcherTuning":
        settings = DIFFICULTIES.get(name, DIFFICULTIES["Normal"])
        return replace(cls(), speed_multiplier=settings["speed"])


# Optional banknote images (placeholders are drawn when missing)
ITEM_IMAGES = {
    "1k": "1000won.png",
    "5k": "5000won.png",
    "10k": "10000won.png",
    "50k": "50000won.png",
}
