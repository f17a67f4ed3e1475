# lifecycle.py - Session Lifecycle
"""
Idle/Active state machine shared by both games.

Every way a session can end (stop button, hazard, warning cap, countdown)
goes through LifecycleStateMachine.stop(), which cancels pending callbacks,
builds the summary and hands it to the listener exactly once.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from session import GameSession

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


class EndReason(str, Enum):
    MANUAL = "manual"
    HAZARD = "hazard"
    WARNINGS = "warnings"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class GameSummary:
    """Final counters of a finished session."""

    variant: str
    reason: EndReason
    score: int
    progress: float
    level: int
    warnings: int
    warning_cap: int
    time_remaining: int | None

    @classmethod
    def from_session(cls, variant: str, reason: EndReason, session: GameSession) -> "GameSummary":
        return cls(variant=variant, reason=reason, score=session.score,
                   progress=session.progress, level=session.level,
                   warnings=session.warnings, warning_cap=session.warning_cap,
                   time_remaining=session.time_remaining)


def check_terminal(session: GameSession, pending: EndReason | None = None) -> EndReason | None:
    """Return why the session must end now, or None to keep playing."""
    if pending is not None:
        return pending
    if session.warnings >= session.warning_cap:
        return EndReason.WARNINGS
    if session.time_remaining is not None and session.time_remaining <= 0:
        return EndReason.TIMEOUT
    return None


class LifecycleStateMachine:
    """Owns the Idle/Active state of one game variant."""

    def __init__(self, variant: str) -> None:
        self.variant = variant
        self.state = SessionState.IDLE
        self._cancel_hooks: list[Callable[[], None]] = []

    @property
    def active(self) -> bool:
        return self.state is SessionState.ACTIVE

    def on_stop(self, hook: Callable[[], None]) -> None:
        """Register a callback run synchronously on every Active -> Idle transition."""
        self._cancel_hooks.append(hook)

    def start(self) -> bool:
        """Enter Active. Returns False (and does nothing) if already active."""
        if self.active:
            return False
        self.state = SessionState.ACTIVE
        logger.debug("%s: idle -> active", self.variant)
        return True

    def stop(self, session: GameSession, reason: EndReason = EndReason.MANUAL) -> GameSummary | None:
        """
        Leave Active and summarize the session.

        Returns None without touching anything when already idle, so a
        repeated stop never produces a second summary.
        """
        if not self.active:
            return None
        self.state = SessionState.IDLE
        for hook in self._cancel_hooks:
            hook()
        summary = GameSummary.from_session(self.variant, reason, session)
        logger.info("%s ended (%s): score=%d progress=%.1f warnings=%d/%d",
                    self.variant, reason.value, summary.score, summary.progress,
                    summary.warnings, summary.warning_cap)
        return summary
