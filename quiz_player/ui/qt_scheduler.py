"""QTimer-backed tick scheduler for the countdown timers."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class QtTickHandle:
    """Stops and releases the QTimer behind one repeating tick."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        if self._timer is None:
            return
        timer, self._timer = self._timer, None
        timer.stop()
        # May run inside the timer's own timeout signal, so defer deletion.
        timer.deleteLater()


class QtTickScheduler:
    """Schedules repeating callbacks on the Qt event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._owner = parent if parent is not None else QObject()

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> QtTickHandle:
        timer = QTimer(self._owner)
        timer.setInterval(max(1, int(interval_seconds * 1000)))
        timer.timeout.connect(callback)
        timer.start()
        return QtTickHandle(timer)
