# spawner.py - Spawn Scheduling
"""
Time-accumulating spawn scheduler plus the batch factories of both games.
"""

import logging
import random
from typing import Callable, Sequence

from config import LANE_COUNT, CatcherTuning, RunnerTuning, SpawnEntry
from difficulty import catcher_object_speed
from entities import MovingObject, ObjectKind

logger = logging.getLogger(__name__)


def weighted_choice(table: Sequence[SpawnEntry], draw: float) -> SpawnEntry:
    """
    Pick an entry from a weighted table using a uniform draw in [0, 1).

    The first entry whose cumulative weight exceeds the scaled draw wins,
    so equal weights resolve in table order.
    """
    if not table:
        raise ValueError("spawn table is empty")
    total = sum(entry.weight for entry in table)
    target = draw * total
    acc = 0.0
    for entry in table:
        acc += entry.weight
        if target < acc:
            return entry
    return table[-1]  # Float rounding at the top of the range


class SpawnScheduler:
    """Emits one spawn batch each time the accumulated time passes the interval."""

    def __init__(self, interval_ms: float,
                 make_batch: Callable[[], list[MovingObject]],
                 next_interval: Callable[[], float]) -> None:
        self.interval_ms = interval_ms
        self.accumulated_ms = 0.0
        self._make_batch = make_batch
        self._next_interval = next_interval

    def tick(self, dt: float) -> list[MovingObject]:
        """Advance by dt seconds; return the new objects (usually none)."""
        if dt <= 0:
            return []
        self.accumulated_ms += dt * 1000
        if self.accumulated_ms <= self.interval_ms:
            return []

        batch = self._make_batch()
        self.accumulated_ms = 0.0
        self.interval_ms = self._next_interval()  # Difficulty may have moved on
        logger.debug("spawned %s, next in %.0f ms", [o.key for o in batch], self.interval_ms)
        return batch


# ------------------------------------------------------------------ #
# BATCH FACTORIES
# ------------------------------------------------------------------ #
def runner_batch(tuning: RunnerTuning, rng=random) -> list[MovingObject]:
    """Cactus (sometimes a cluster of 2-3) or coin, entering at the right edge."""
    entry = weighted_choice(tuning.spawn_table, rng.random())
    kind = ObjectKind(entry.kind)

    count = 1
    if kind is ObjectKind.OBSTACLE and rng.random() < tuning.cluster_chance:
        count = rng.randint(tuning.cluster_min, tuning.cluster_max)

    size = tuning.object_size
    return [
        MovingObject(kind=kind, key=entry.key,
                     x=tuning.width + i * tuning.cluster_spacing,
                     y=tuning.ground_y - size,
                     width=size, height=size, value=entry.value)
        for i in range(count)
    ]


def lane_center(lane: int, width: float) -> float:
    lane_width = width / LANE_COUNT
    return lane_width * lane + lane_width / 2


def catcher_batch(tuning: CatcherTuning, level: int, rng=random) -> list[MovingObject]:
    """One falling item in a random lane, its speed scaled by level."""
    entry = weighted_choice(tuning.spawn_table, rng.random())
    lane = rng.randrange(LANE_COUNT)
    return [MovingObject(
        kind=ObjectKind(entry.kind), key=entry.key,
        x=lane_center(lane, tuning.width) - tuning.item_width / 2,
        y=tuning.spawn_y,
        width=tuning.item_width, height=tuning.item_height,
        speed=catcher_object_speed(entry.base_speed, level, tuning),
        value=entry.value,
    )]
