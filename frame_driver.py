# frame_driver.py - Frame Loop and Countdown
"""
Self-rescheduling callbacks on a tkinter-style scheduler.

Any object with after(ms, func) -> id and after_cancel(id) works; in the
application that is the Tk root window.
"""

import time
from typing import Any, Callable, Protocol

from clock import FrameClock
from config import COUNTDOWN_PERIOD_MS, FRAME_DELAY_MS


class Scheduler(Protocol):
    def after(self, ms: int, func: Callable[[], None]) -> Any: ...

    def after_cancel(self, id: Any) -> None: ...


def perf_ms() -> float:
    return time.perf_counter() * 1000.0


class FrameDriver:
    """Runs update(dt) then render() about 60 times per second until stopped."""

    def __init__(self, scheduler: Scheduler,
                 update: Callable[[float], None],
                 render: Callable[[], None],
                 now_ms: Callable[[], float] = perf_ms,
                 delay_ms: int = FRAME_DELAY_MS) -> None:
        self.scheduler = scheduler
        self.update = update
        self.render = render
        self.now_ms = now_ms
        self.delay_ms = delay_ms
        self.clock = FrameClock()
        self.running = False
        self._after_id = None

    def start(self) -> None:
        if self.running:
            return
        self.running = True
        self.clock.reset()  # First frame moves nothing
        self._after_id = self.scheduler.after(0, self._frame)

    def stop(self) -> None:
        self.running = False
        if self._after_id is not None:
            self.scheduler.after_cancel(self._after_id)
            self._after_id = None

    def _frame(self) -> None:
        self._after_id = None
        if not self.running:
            return

        dt = self.clock.tick(self.now_ms())
        self.update(dt)
        self.render()  # Draw even the frame that ended the game

        # update() may have stopped us
        if self.running:
            self._after_id = self.scheduler.after(self.delay_ms, self._frame)


class CountdownTimer:
    """Calls on_tick() once per period until stopped, independently of frames."""

    def __init__(self, scheduler: Scheduler, on_tick: Callable[[], None],
                 period_ms: int = COUNTDOWN_PERIOD_MS) -> None:
        self.scheduler = scheduler
        self.on_tick = on_tick
        self.period_ms = period_ms
        self.running = False
        self._after_id = None

    def start(self) -> None:
        if self.running:
            return
        self.running = True
        self._after_id = self.scheduler.after(self.period_ms, self._fire)

    def stop(self) -> None:
        self.running = False
        if self._after_id is not None:
            self.scheduler.after_cancel(self._after_id)
            self._after_id = None

    def _fire(self) -> None:
        self._after_id = None
        if not self.running:
            return
        self.on_tick()
        if self.running:
            self._after_id = self.scheduler.after(self.period_ms, self._fire)
