from __future__ import annotations

import pytest
from conftest import ScriptedRandom

from config import CatcherTuning, RunnerTuning, SpawnEntry
from entities import MovingObject, ObjectKind
from spawner import SpawnScheduler, catcher_batch, lane_center, runner_batch, weighted_choice

TABLE = (SpawnEntry("obstacle", "obstacle", 0.7), SpawnEntry("bonus", "bonus", 0.3))


def test_weighted_choice_picks_first_bucket_over_the_draw() -> None:
    assert weighted_choice(TABLE, 0.5).key == "obstacle"
    assert weighted_choice(TABLE, 0.75).key == "bonus"
    assert weighted_choice(TABLE, 0.0).key == "obstacle"


def test_weighted_choice_ties_resolve_in_table_order() -> None:
    table = (SpawnEntry("a", "bonus", 0.5), SpawnEntry("b", "bonus", 0.5))
    assert weighted_choice(table, 0.25).key == "a"
    assert weighted_choice(table, 0.9999999).key == "b"


def test_weighted_choice_rejects_empty_table() -> None:
    with pytest.raises(ValueError):
        weighted_choice((), 0.3)


def _one(key: str = "x") -> list[MovingObject]:
    return [MovingObject(kind=ObjectKind.BONUS, key=key, x=0, y=0, width=1, height=1)]


def test_scheduler_emits_after_interval_and_refreshes_it() -> None:
    intervals = iter([900.0, 800.0])
    sched = SpawnScheduler(1000.0, make_batch=_one, next_interval=lambda: next(intervals))

    assert sched.tick(0.5) == []
    assert sched.tick(0.5) == []  # exactly at the interval is not past it
    batch = sched.tick(0.001)
    assert [o.key for o in batch] == ["x"]
    assert sched.accumulated_ms == 0.0
    assert sched.interval_ms == 900.0


def test_scheduler_ignores_non_positive_dt() -> None:
    sched = SpawnScheduler(10.0, make_batch=_one, next_interval=lambda: 10.0)
    assert sched.tick(0.0) == []
    assert sched.tick(-5.0) == []
    assert sched.accumulated_ms == 0.0


def test_scheduler_emits_at_most_one_batch_per_tick() -> None:
    sched = SpawnScheduler(100.0, make_batch=_one, next_interval=lambda: 100.0)
    assert len(sched.tick(10.0)) == 1  # a long frame still gives one batch
    assert sched.accumulated_ms == 0.0


def test_runner_cluster_of_three_cacti() -> None:
    t = RunnerTuning()
    objs = runner_batch(t, ScriptedRandom(draws=[0.5, 0.1], ints=[3]))
    assert [o.kind for o in objs] == [ObjectKind.OBSTACLE] * 3
    assert [o.x for o in objs] == [400, 430, 460]
    assert all(o.y == t.ground_y - t.object_size for o in objs)


def test_runner_single_cactus_when_cluster_roll_fails() -> None:
    objs = runner_batch(RunnerTuning(), ScriptedRandom(draws=[0.5, 0.9]))
    assert len(objs) == 1
    assert objs[0].key == "cactus"


def test_runner_coin_never_clusters() -> None:
    rng = ScriptedRandom(draws=[0.75, 0.0], ints=[3])
    objs = runner_batch(RunnerTuning(), rng)
    assert len(objs) == 1
    assert objs[0].kind is ObjectKind.BONUS
    assert objs[0].value == 1000


def test_catcher_item_is_centred_in_its_lane_with_level_speed() -> None:
    t = CatcherTuning()
    (obj,) = catcher_batch(t, level=1, rng=ScriptedRandom(draws=[0.0], ints=[2]))
    assert obj.key == "1k"
    assert obj.x == pytest.approx(lane_center(2, t.width) - 15)
    assert obj.y == -30
    assert obj.speed == pytest.approx(110)


def test_catcher_table_can_yield_the_scammer() -> None:
    (obj,) = catcher_batch(CatcherTuning(), level=3, rng=ScriptedRandom(draws=[0.95], ints=[0]))
    assert obj.kind is ObjectKind.HAZARD
    assert obj.speed == pytest.approx(200 * 1.3)
