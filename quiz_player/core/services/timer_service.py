"""Countdown timers for per-question and whole-session time limits.

Architecture note:
    The timer never talks to Qt directly. It asks a ``TickScheduler`` for a
    repeating one-second tick and counts down on each tick. The desktop app
    passes a QTimer-backed scheduler while tests pass a virtual one they can
    advance by hand, so expiry behaviour is exercised without real waiting.
    Pausing cancels the tick subscription and resuming requests a new one,
    which means a partially elapsed second is not charged.
"""

from __future__ import annotations

from enum import Enum, auto
import logging
from typing import Callable, Protocol

from quiz_player.constants.quiz_constants import TICK_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class TickScheduler(Protocol):
    def schedule_repeating(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> TickHandle: ...


class TimerState(Enum):
    IDLE = auto()
    RUNNING = auto()
    PAUSED = auto()
    EXPIRED = auto()


class CountdownTimer:
    """Second-granularity countdown with pause/resume and a single expiry callback."""

    def __init__(
        self,
        name: str,
        scheduler: TickScheduler,
        on_expired: Callable[[], None],
        on_tick: Callable[[int], None] | None = None,
    ) -> None:
        self.name = name
        self._scheduler = scheduler
        self._on_expired = on_expired
        self._on_tick = on_tick
        self._state = TimerState.IDLE
        self._duration_seconds: int | None = None
        self._remaining_seconds: int = 0
        self._handle: TickHandle | None = None
        self._expiry_fired = False

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def duration_seconds(self) -> int | None:
        return self._duration_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def elapsed_seconds(self) -> int:
        if self._duration_seconds is None:
            return 0
        return self._duration_seconds - self._remaining_seconds

    def is_running(self) -> bool:
        return self._state is TimerState.RUNNING

    def start(self, duration_seconds: int) -> None:
        """Arm the timer. Re-arming discards any previous countdown."""
        if duration_seconds <= 0:
            raise ValueError("Timer duration must be a positive number of seconds.")
        self._release_handle()
        self._duration_seconds = duration_seconds
        self._remaining_seconds = duration_seconds
        self._expiry_fired = False
        self._state = TimerState.RUNNING
        self._handle = self._scheduler.schedule_repeating(TICK_INTERVAL_SECONDS, self._tick)
        logger.debug("Timer %s started for %ss", self.name, duration_seconds)

    def pause(self) -> None:
        if self._state is not TimerState.RUNNING:
            return
        self._release_handle()
        self._state = TimerState.PAUSED
        logger.debug("Timer %s paused with %ss left", self.name, self._remaining_seconds)

    def resume(self) -> None:
        if self._state is not TimerState.PAUSED:
            return
        self._state = TimerState.RUNNING
        self._handle = self._scheduler.schedule_repeating(TICK_INTERVAL_SECONDS, self._tick)
        logger.debug("Timer %s resumed with %ss left", self.name, self._remaining_seconds)

    def cancel(self) -> None:
        self._release_handle()
        self._state = TimerState.IDLE
        self._duration_seconds = None
        self._remaining_seconds = 0

    def _tick(self) -> None:
        if self._state is not TimerState.RUNNING:
            return
        self._remaining_seconds = max(0, self._remaining_seconds - 1)
        if self._remaining_seconds > 0:
            if self._on_tick is not None:
                self._on_tick(self._remaining_seconds)
            return

        self._release_handle()
        self._state = TimerState.EXPIRED
        if self._expiry_fired:
            return
        self._expiry_fired = True
        logger.debug("Timer %s expired", self.name)
        self._on_expired()

    def _release_handle(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
