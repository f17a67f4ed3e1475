# arcade.py - Shared Game Core
"""
Base class for both mini-games.

Owns one GameSession at a time, the lifecycle state machine and the frame
driver. Subclasses provide new_session(), new_spawner() and step(dt).
Calls into the outside world (render, feedback, summary sinks) are
guarded so a failing sink can never break the frame loop.
"""

import logging
import random
from typing import Callable

from frame_driver import FrameDriver, Scheduler, perf_ms
from lifecycle import EndReason, GameSummary, LifecycleStateMachine
from session import FeedbackEvent, GameSession, Snapshot
from spawner import SpawnScheduler

logger = logging.getLogger(__name__)

RenderSink = Callable[[Snapshot], None]
FeedbackSink = Callable[[FeedbackEvent], None]
SummarySink = Callable[[GameSummary], None]


class ArcadeGame:
    """Lifecycle, frame loop and sink plumbing common to every variant."""

    variant = "arcade"

    def __init__(self, scheduler: Scheduler, tuning,
                 on_render: RenderSink | None = None,
                 on_event: FeedbackSink | None = None,
                 on_summary: SummarySink | None = None,
                 rng=random,
                 now_ms: Callable[[], float] = perf_ms) -> None:
        self.scheduler = scheduler
        self.tuning = tuning
        self.rng = rng
        self.on_render = on_render
        self.on_event = on_event
        self.on_summary = on_summary

        self.lifecycle = LifecycleStateMachine(self.variant)
        self.driver = FrameDriver(scheduler, self.update, self.render, now_ms=now_ms)
        self.lifecycle.on_stop(self.driver.stop)

        self.session: GameSession = self.new_session()
        self.spawner: SpawnScheduler = self.new_spawner()
        self.last_summary: GameSummary | None = None

    # --------- Hooks for subclasses --------- #
    def new_session(self) -> GameSession:
        raise NotImplementedError

    def new_spawner(self) -> SpawnScheduler:
        raise NotImplementedError

    def step(self, dt: float) -> None:
        """Advance one frame of an active session (dt > 0)."""
        raise NotImplementedError

    def on_started(self) -> None:
        """Called after a fresh session is in place and before the first frame."""

    def on_label(self, label: str) -> None:
        """Classifier label for this frame. Ignored by default."""

    # --------- Lifecycle --------- #
    @property
    def is_active(self) -> bool:
        return self.lifecycle.active

    def start(self) -> None:
        """Begin a fresh session. Does nothing while one is running."""
        if not self.lifecycle.start():
            return
        self.session = self.new_session()
        self.spawner = self.new_spawner()
        self.last_summary = None
        self.on_started()
        self.driver.start()

    def stop(self) -> GameSummary | None:
        """Manual stop. Safe to call when idle."""
        return self.end(EndReason.MANUAL)

    def end(self, reason: EndReason) -> GameSummary | None:
        """Single exit path for every way a session can finish."""
        summary = self.lifecycle.stop(self.session, reason)
        if summary is None:
            return None
        self.last_summary = summary
        self.emit(FeedbackEvent.SESSION_ENDED)
        self._call_sink(self.on_summary, summary)
        return summary

    # --------- Frame --------- #
    def update(self, dt: float) -> None:
        if not self.is_active or dt <= 0:
            return
        self.step(dt)

    def snapshot(self) -> Snapshot:
        return Snapshot.capture(self.variant, self.session, self.is_active)

    def render(self) -> None:
        if self.on_render is not None:
            self._call_sink(self.on_render, self.snapshot())

    def emit(self, event: FeedbackEvent) -> None:
        self._call_sink(self.on_event, event)

    def _call_sink(self, sink, payload) -> None:
        if sink is None:
            return
        try:
            sink(payload)
        except Exception:
            logger.exception("%s: sink %r failed on %r", self.variant, sink, payload)
