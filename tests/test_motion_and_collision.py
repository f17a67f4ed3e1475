from __future__ import annotations

import pytest
from conftest import Recorder, cactus_at, coin_at, note_at, scammer_at

from collision import resolve_catcher, resolve_runner
from config import CatcherTuning, HazardPolicy, RunnerTuning
from entities import Player, Rect
from lifecycle import EndReason
from motion import advance_catcher, advance_runner, update_lift
from session import FeedbackEvent, GameSession


def runner_session(cap: int = 5) -> GameSession:
    return GameSession(player=Player(x=50, y=310, width=40, height=40), warning_cap=cap)


def catcher_session() -> GameSession:
    return GameSession(player=Player(x=170, y=360, width=60, height=30), warning_cap=3, time_remaining=60)


# --------- motion --------- #
def test_runner_objects_scroll_left_and_cull_past_the_edge() -> None:
    objs = [cactus_at(100, 310), cactus_at(-30, 310), coin_at(5, 310)]
    culled = advance_runner(objs, speed=200, dt=0.1)
    assert culled == 1
    assert [o.x for o in objs] == pytest.approx([80, -15])


def test_catcher_objects_fall_at_their_own_speed() -> None:
    slow, fast = note_at(0, 0), note_at(100, 390)
    slow.speed, fast.speed = 100, 300
    objs = [slow, fast]
    assert advance_catcher(objs, dt=0.1, floor_y=400) == 1
    assert objs == [slow]
    assert slow.y == pytest.approx(10)


def test_lift_is_triangular_and_clamped() -> None:
    p = Player(x=0, y=0, width=1, height=1)
    heights = []
    for held in (True, True, True, False, False, False):
        update_lift(p, held, dt=0.1, rate=600, z_max=120)
        heights.append(p.z)
    assert heights == pytest.approx([60, 120, 120, 60, 0, 0])


def test_rect_overlap_excludes_touching_edges() -> None:
    a = Rect(0, 0, 10, 10)
    assert a.overlaps(Rect(5, 5, 10, 10))
    assert not a.overlaps(Rect(10, 0, 10, 10))
    assert not a.overlaps(Rect(0, 10, 10, 10))


# --------- runner resolution --------- #
def test_obstacle_at_clearance_is_avoided_and_stays() -> None:
    s = runner_session()
    s.player.z = 20
    s.objects.append(cactus_at(60, 310))
    events = Recorder()

    assert resolve_runner(s, RunnerTuning(), events) is None
    assert s.warnings == 0
    assert len(s.objects) == 1
    assert events.items == []


def test_obstacle_one_unit_below_clearance_is_a_hit() -> None:
    s = runner_session()
    s.player.z = 19
    s.objects.append(cactus_at(60, 310))
    events = Recorder()

    resolve_runner(s, RunnerTuning(), events)
    assert s.warnings == 1
    assert s.objects == []
    assert events.items == [FeedbackEvent.OBSTACLE_HIT]


def test_coin_is_collected_even_mid_jump() -> None:
    s = runner_session()
    s.player.z = 120
    s.objects.append(coin_at(60, 310))
    events = Recorder()

    resolve_runner(s, RunnerTuning(), events)
    assert s.score == 1000
    assert s.objects == []
    assert events.items == [FeedbackEvent.BONUS_COLLECTED]


def test_non_overlapping_objects_are_left_alone() -> None:
    s = runner_session()
    s.objects.extend([cactus_at(200, 310), coin_at(300, 310)])
    resolve_runner(s, RunnerTuning(), Recorder())
    assert s.score == 0
    assert s.warnings == 0
    assert len(s.objects) == 2


def test_resolution_stops_exactly_at_the_warning_cap() -> None:
    s = runner_session(cap=5)
    s.warnings = 4
    s.objects.extend([cactus_at(55, 310), cactus_at(60, 310)])

    assert resolve_runner(s, RunnerTuning(), Recorder()) is EndReason.WARNINGS
    assert s.warnings == 5
    assert len(s.objects) == 1


def test_neighbours_are_all_resolved_during_removal() -> None:
    s = runner_session()
    s.objects.extend([coin_at(50, 310), coin_at(55, 310), coin_at(60, 310), cactus_at(300, 310)])
    resolve_runner(s, RunnerTuning(), Recorder())
    assert s.score == 3000
    assert [o.key for o in s.objects] == ["cactus"]


# --------- catcher resolution --------- #
def test_banknote_adds_its_value() -> None:
    s = catcher_session()
    s.objects.append(note_at(185, 365, value=5000, key="5k"))
    resolve_catcher(s, CatcherTuning(), Recorder())
    assert s.score == 5000
    assert s.level == 1


def test_crossing_the_threshold_levels_up() -> None:
    s = catcher_session()
    s.objects.extend([note_at(185, 365, 50000, "50k"), note_at(190, 365, 50000, "50k")])
    events = Recorder()
    resolve_catcher(s, CatcherTuning(), events)
    assert s.score == 100000
    assert s.level == 2
    assert events.items.count(FeedbackEvent.LEVEL_UP) == 1


def test_scammer_is_fatal_by_default() -> None:
    s = catcher_session()
    s.objects.extend([note_at(300, 365), scammer_at(185, 365)])
    events = Recorder()
    assert resolve_catcher(s, CatcherTuning(), events) is EndReason.HAZARD
    assert events.items == [FeedbackEvent.HAZARD_HIT]
    assert [o.key for o in s.objects] == ["1k"]
    assert s.warnings == 0


def test_scammer_counts_as_warning_under_warning_policy() -> None:
    tuning = CatcherTuning(hazard_policy=HazardPolicy.WARNING)
    s = catcher_session()
    s.objects.append(scammer_at(185, 365))
    assert resolve_catcher(s, tuning, Recorder()) is None
    assert s.warnings == 1
    assert s.objects == []


def test_item_above_the_basket_is_not_caught() -> None:
    s = catcher_session()
    s.objects.append(note_at(185, 100))
    resolve_catcher(s, CatcherTuning(), Recorder())
    assert s.score == 0
    assert len(s.objects) == 1
