# catcher.py - Catch the Money
"""
Banknotes fall down three lanes; the basket jumps to the lane named by the
classifier. Catching the scammer ends the game, and so does the countdown.
"""

from arcade import ArcadeGame
from collision import resolve_catcher
from config import CatcherTuning
from difficulty import catcher_spawn_interval
from entities import Player
from frame_driver import CountdownTimer
from input_mapper import Lane, LaneMapper, lane_x
from lifecycle import check_terminal
from motion import advance_catcher
from session import GameSession
from spawner import SpawnScheduler, catcher_batch


class CatcherGame(ArcadeGame):
    variant = "catcher"

    def __init__(self, scheduler, tuning: CatcherTuning | None = None, **kwargs) -> None:
        super().__init__(scheduler, tuning or CatcherTuning(), **kwargs)
        self.lanes = LaneMapper(self.tuning.width)
        self.countdown = CountdownTimer(scheduler, self._on_countdown)
        self.lifecycle.on_stop(self.countdown.stop)

    def new_session(self) -> GameSession:
        t = self.tuning
        player = Player(x=lane_x(Lane.CENTER, t.width, t.player_width), y=t.player_y,
                        width=t.player_width, height=t.player_height, lane=int(Lane.CENTER))
        return GameSession(player=player, warning_cap=t.warning_cap,
                           spawn_interval_ms=t.base_interval_ms,
                           time_remaining=t.time_limit)

    def new_spawner(self) -> SpawnScheduler:
        return SpawnScheduler(
            interval_ms=self.session.spawn_interval_ms,
            make_batch=lambda: catcher_batch(self.tuning, self.session.level, self.rng),
            next_interval=lambda: catcher_spawn_interval(self.session.level, self.tuning),
        )

    def on_started(self) -> None:
        self.countdown.start()

    # --------- Input --------- #
    def on_label(self, label: str) -> None:
        if not self.is_active:
            return
        self.lanes.apply(self.session.player, label)  # Unknown labels are ignored

    # --------- Countdown (runs between frames) --------- #
    def _on_countdown(self) -> None:
        if not self.is_active:
            return
        s = self.session
        s.time_remaining = max(0, s.time_remaining - 1)
        reason = check_terminal(s)
        if reason is not None:
            self.end(reason)

    # --------- Frame --------- #
    def step(self, dt: float) -> None:
        s, t = self.session, self.tuning

        s.objects.extend(self.spawner.tick(dt))
        s.spawn_interval_ms = self.spawner.interval_ms

        advance_catcher(s.objects, dt, t.height)

        pending = resolve_catcher(s, t, self.emit)
        reason = check_terminal(s, pending)
        if reason is not None:
            self.end(reason)
