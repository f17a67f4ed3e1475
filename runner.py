# runner.py - Cactus Run
"""
Side-scrolling runner: cacti and coins come in from the right, the player
stays at a fixed x and lifts off the ground while the ascend signal is held.
Five unavoided cacti end the run.
"""

from arcade import ArcadeGame
from collision import resolve_runner
from config import RunnerTuning
from difficulty import runner_distance_step, runner_spawn_interval, runner_speed
from entities import Player
from input_mapper import AscendSignal
from lifecycle import check_terminal
from motion import advance_runner, update_lift
from session import GameSession
from spawner import SpawnScheduler, runner_batch


class RunnerGame(ArcadeGame):
    variant = "runner"

    def __init__(self, scheduler, tuning: RunnerTuning | None = None, **kwargs) -> None:
        self.ascend = AscendSignal()
        super().__init__(scheduler, tuning or RunnerTuning(), **kwargs)
        self.lifecycle.on_stop(self.ascend.release)  # No stuck key on the next run

    def new_session(self) -> GameSession:
        t = self.tuning
        player = Player(x=t.player_x, y=t.ground_y - t.player_size,
                        width=t.player_size, height=t.player_size)
        return GameSession(player=player, warning_cap=t.warning_cap,
                           current_speed=runner_speed(0.0, t),
                           spawn_interval_ms=runner_spawn_interval(0.0, t))

    def new_spawner(self) -> SpawnScheduler:
        return SpawnScheduler(
            interval_ms=self.session.spawn_interval_ms,
            make_batch=lambda: runner_batch(self.tuning, self.rng),
            next_interval=lambda: runner_spawn_interval(self.session.progress, self.tuning),
        )

    def on_started(self) -> None:
        self.ascend.release()

    # --------- Input --------- #
    def set_ascend(self, held: bool) -> None:
        """Keyboard (space) or gesture signal for the jump."""
        if self.is_active:
            if held:
                self.ascend.press()
            else:
                self.ascend.release()

    # --------- Frame --------- #
    def step(self, dt: float) -> None:
        s, t = self.session, self.tuning

        # 1. Difficulty follows distance, not wall-clock time
        s.progress += runner_distance_step(s.current_speed, dt, t)
        s.current_speed = runner_speed(s.progress, t)

        # 2. Spawning
        s.objects.extend(self.spawner.tick(dt))
        s.spawn_interval_ms = self.spawner.interval_ms

        # 3. Motion
        update_lift(s.player, self.ascend.held, dt, t.lift_rate, t.lift_max)
        advance_runner(s.objects, s.current_speed, dt)

        # 4. Collisions, then terminal check
        pending = resolve_runner(s, t, self.emit)
        reason = check_terminal(s, pending)
        if reason is not None:
            self.end(reason)
