from __future__ import annotations

import pytest

pytest.importorskip("pytestqt")

from quiz_player.core.services.timer_service import CountdownTimer, TimerState
from quiz_player.ui.qt_scheduler import QtTickScheduler


def test_repeating_tick_until_cancelled(qtbot):
    ticks = []
    scheduler = QtTickScheduler()
    handle = scheduler.schedule_repeating(0.01, lambda: ticks.append(1))
    assert handle.active

    qtbot.waitUntil(lambda: len(ticks) >= 3, timeout=2000)
    handle.cancel()
    assert not handle.active

    count = len(ticks)
    qtbot.wait(50)
    assert len(ticks) == count


def test_cancel_from_inside_callback(qtbot):
    ticks = []
    holder = {}

    def on_tick():
        ticks.append(1)
        holder["handle"].cancel()

    scheduler = QtTickScheduler()
    holder["handle"] = scheduler.schedule_repeating(0.01, on_tick)
    qtbot.waitUntil(lambda: bool(ticks), timeout=2000)
    qtbot.wait(50)
    assert ticks == [1]


def test_countdown_expires_on_qt_event_loop(qtbot, monkeypatch):
    monkeypatch.setattr("quiz_player.core.services.timer_service.TICK_INTERVAL_SECONDS", 0.01)
    expired = []
    timer = CountdownTimer("question", QtTickScheduler(), on_expired=lambda: expired.append(1))
    timer.start(3)

    qtbot.waitUntil(lambda: bool(expired), timeout=2000)
    assert timer.state is TimerState.EXPIRED
    assert expired == [1]
