# clock.py - Frame Timing
"""
Converts successive frame timestamps into elapsed seconds.
"""


class FrameClock:
    """Delta-time source for the frame loop (frame-rate independence)."""

    def __init__(self) -> None:
        self.last_ms: float | None = None  # No frame seen yet

    def reset(self) -> None:
        """Forget the previous frame so the next tick is a no-op."""
        self.last_ms = None

    def tick(self, now_ms: float) -> float:
        """
        Return seconds elapsed since the previous tick.

        The first tick after construction or reset() returns 0.0, and a
        timestamp older than the previous one is clamped to 0.0.
        """
        last = self.last_ms
        self.last_ms = now_ms
        if last is None:
            return 0.0
        return max(0.0, (now_ms - last) / 1000.0)
