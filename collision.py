# collision.py - Collision Detection and Resolution
"""
AABB checks between the player and every live object, with per-kind rules.

Both resolvers walk the object list back to front so removals never skip
a neighbour, and stop as soon as the session has to end.
"""

from typing import Callable

from config import CatcherTuning, HazardPolicy, RunnerTuning
from difficulty import level_for_score
from entities import ObjectKind
from lifecycle import EndReason
from session import FeedbackEvent, GameSession

Emit = Callable[[FeedbackEvent], None]


def _hit_warning(session: GameSession, index: int, event: FeedbackEvent, emit: Emit) -> EndReason | None:
    del session.objects[index]
    session.warnings += 1
    emit(event)
    if session.warnings >= session.warning_cap:
        return EndReason.WARNINGS
    return None


def resolve_runner(session: GameSession, tuning: RunnerTuning, emit: Emit) -> EndReason | None:
    """
    Cactus: a hit only when the lift is below the clearance (a cleared
    cactus stays in play). Coin: collected at any lift height.
    """
    player_box = session.player.hitbox
    for i in range(len(session.objects) - 1, -1, -1):
        obj = session.objects[i]
        if not player_box.overlaps(obj.hitbox):
            continue

        if obj.kind is ObjectKind.OBSTACLE:
            if session.player.z >= tuning.clearance:
                continue  # Jumped over it
            reason = _hit_warning(session, i, FeedbackEvent.OBSTACLE_HIT, emit)
            if reason is not None:
                return reason
        elif obj.kind is ObjectKind.BONUS:
            del session.objects[i]
            session.add_score(obj.value)
            emit(FeedbackEvent.BONUS_COLLECTED)
    return None


def resolve_catcher(session: GameSession, tuning: CatcherTuning, emit: Emit) -> EndReason | None:
    """Banknote: add its value (may level up). Scammer: per hazard policy."""
    player_box = session.player.hitbox
    for i in range(len(session.objects) - 1, -1, -1):
        obj = session.objects[i]
        if not player_box.overlaps(obj.hitbox):
            continue

        if obj.kind is ObjectKind.HAZARD:
            if tuning.hazard_policy is HazardPolicy.WARNING:
                reason = _hit_warning(session, i, FeedbackEvent.HAZARD_HIT, emit)
                if reason is not None:
                    return reason
                continue
            del session.objects[i]
            emit(FeedbackEvent.HAZARD_HIT)
            return EndReason.HAZARD

        if obj.kind is ObjectKind.BONUS:
            del session.objects[i]
            session.add_score(obj.value)
            emit(FeedbackEvent.BONUS_COLLECTED)
            new_level = level_for_score(session.score, session.level, tuning)
            if new_level != session.level:
                session.level = new_level
                emit(FeedbackEvent.LEVEL_UP)
    return None
