from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import pytest

from config import CatcherTuning, RunnerTuning
from entities import MovingObject, ObjectKind

NO_SPAWN_MS = 1e12


class FakeScheduler:
    """In-memory stand-in for Tk's after/after_cancel with a manual clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self._seq = 0
        self.pending: dict[str, tuple[float, int, Callable[[], None]]] = {}

    def after(self, ms: int, func: Callable[[], None]) -> str:
        self._seq += 1
        after_id = f"after#{self._seq}"
        self.pending[after_id] = (self.now + ms, self._seq, func)
        return after_id

    def after_cancel(self, after_id: str) -> None:
        self.pending.pop(after_id, None)

    def now_ms(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        """Run every callback due within the next `ms` milliseconds, in order."""
        target = self.now + ms
        while True:
            due = [(when, seq, key) for key, (when, seq, _) in self.pending.items() if when <= target]
            if not due:
                break
            when, _, key = min(due)
            _, _, func = self.pending.pop(key)
            self.now = when
            func()
        self.now = target


class ScriptedRandom:
    """Random source returning scripted values (falls back to 0.99 / minimum)."""

    def __init__(self, draws: list[float] | None = None, ints: list[int] | None = None) -> None:
        self.draws = list(draws or [])
        self.ints = list(ints or [])

    def random(self) -> float:
        return self.draws.pop(0) if self.draws else 0.99

    def randint(self, a: int, b: int) -> int:
        return self.ints.pop(0) if self.ints else a

    def randrange(self, stop: int) -> int:
        return self.ints.pop(0) if self.ints else 0


@dataclass
class Recorder:
    items: list[Any] = field(default_factory=list)

    def __call__(self, item: Any) -> None:
        self.items.append(item)


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def quiet_runner_tuning() -> RunnerTuning:
    """Runner tuning whose scheduler never spawns on its own."""
    return RunnerTuning(base_interval_ms=NO_SPAWN_MS, interval_floor_ms=NO_SPAWN_MS)


@pytest.fixture()
def quiet_catcher_tuning() -> CatcherTuning:
    return CatcherTuning(base_interval_ms=NO_SPAWN_MS, interval_floor_ms=NO_SPAWN_MS)


def cactus_at(x: float, y: float, size: float = 40) -> MovingObject:
    return MovingObject(kind=ObjectKind.OBSTACLE, key="cactus", x=x, y=y, width=size, height=size)


def coin_at(x: float, y: float, value: int = 1000, size: float = 40) -> MovingObject:
    return MovingObject(kind=ObjectKind.BONUS, key="coin", x=x, y=y, width=size, height=size, value=value)


def note_at(x: float, y: float, value: int = 1000, key: str = "1k") -> MovingObject:
    return MovingObject(kind=ObjectKind.BONUS, key=key, x=x, y=y, width=30, height=15, value=value)


def scammer_at(x: float, y: float) -> MovingObject:
    return MovingObject(kind=ObjectKind.HAZARD, key="scammer", x=x, y=y, width=30, height=15)
