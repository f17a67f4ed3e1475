# difficulty.py - Difficulty Progression
"""
Pure functions mapping progress (runner distance, catcher level) to object
speed and spawn interval.
"""

from config import CatcherTuning, RunnerTuning


# --------- Runner --------- #
def runner_speed(progress: float, tuning: RunnerTuning) -> float:
    """Scroll speed grows linearly with distance, without a cap."""
    return tuning.base_speed + progress * tuning.speed_gain


def runner_spawn_interval(progress: float, tuning: RunnerTuning) -> float:
    """Spawn interval shrinks with distance down to the floor."""
    return max(tuning.interval_floor_ms,
               tuning.base_interval_ms - progress * tuning.interval_decay)


def runner_distance_step(speed: float, dt: float, tuning: RunnerTuning) -> float:
    """Distance covered in one frame at the given scroll speed."""
    return speed * dt * tuning.distance_scale


# --------- Catcher --------- #
def catcher_object_speed(base_speed: float, level: int, tuning: CatcherTuning) -> float:
    """Fall speed of a new item: its type's base speed scaled by level."""
    return base_speed * tuning.speed_multiplier * (1 + level * tuning.level_speed_gain)


def catcher_spawn_interval(level: int, tuning: CatcherTuning) -> float:
    return max(tuning.interval_floor_ms,
               tuning.base_interval_ms - level * tuning.interval_decay)


def level_for_score(score: int, level: int, tuning: CatcherTuning) -> int:
    """
    Return the level after a score change.

    The level goes up each time the score passes level * threshold, so a
    single large pickup can skip several levels.
    """
    while score > level * tuning.level_threshold:
        level += 1
    return level
