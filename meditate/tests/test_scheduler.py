"""Tests for TimerHandle and the QTimer-backed scheduler."""

import pytest
from PyQt6.QtCore import QEventLoop, Qt, QTimer

from meditate.engine.scheduler import QtScheduler, TimerHandle


def _spin(ms: int, until=None):
    """Run the Qt event loop for up to *ms* milliseconds."""
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    if until is not None:
        poll = QTimer()
        poll.setInterval(5)
        poll.timeout.connect(lambda: until() and loop.quit())
        poll.start()
    loop.exec()


def test_one_shot_handle_fires_once():
    calls = []
    handle = TimerHandle(interval_s=1.0, callback=lambda: calls.append(1))
    handle.fire()
    handle.fire()
    assert calls == [1]
    assert handle.active is False
    assert handle.fire_count == 1


def test_periodic_handle_stays_active():
    calls = []
    handle = TimerHandle(interval_s=1.0, callback=lambda: calls.append(1), repeating=True)
    handle.fire()
    handle.fire()
    assert calls == [1, 1]
    assert handle.active is True


@pytest.mark.ui
def test_schedule_once_fires_and_releases_timer(qapp):
    scheduler = QtScheduler()
    fired = []
    handle = scheduler.schedule_once(0.02, lambda: fired.append(True))
    assert scheduler.pending == 1
    _spin(1000, until=lambda: bool(fired))
    assert fired == [True]
    assert handle.active is False
    assert scheduler.pending == 0


@pytest.mark.ui
def test_cancel_prevents_fire(qapp):
    scheduler = QtScheduler()
    fired = []
    handle = scheduler.schedule_once(0.02, lambda: fired.append(True))
    scheduler.cancel(handle)
    scheduler.cancel(handle)
    scheduler.cancel(None)
    _spin(100)
    assert fired == []
    assert handle.active is False
    assert scheduler.pending == 0


@pytest.mark.ui
def test_periodic_fires_repeatedly_until_cancelled(qapp):
    scheduler = QtScheduler()
    ticks = []
    handle = scheduler.schedule_periodic(0.01, lambda: ticks.append(1))
    _spin(2000, until=lambda: len(ticks) >= 3)
    assert len(ticks) >= 3
    scheduler.cancel(handle)
    count = len(ticks)
    _spin(60)
    assert len(ticks) == count


def test_periodic_rejects_non_positive_interval(qapp):
    with pytest.raises(ValueError):
        QtScheduler().schedule_periodic(0, lambda: None)


@pytest.mark.ui
def test_cancel_all(qapp):
    scheduler = QtScheduler()
    handles = [scheduler.schedule_once(10, lambda: None) for _ in range(3)]
    scheduler.cancel_all()
    assert scheduler.pending == 0
    assert not any(h.active for h in handles)


@pytest.mark.ui
def test_one_shot_uses_precise_timer(qapp):
    scheduler = QtScheduler()
    once = scheduler.schedule_once(60, lambda: None)
    ticker = scheduler.schedule_periodic(1.0, lambda: None)
    assert scheduler._timers[once].timerType() == Qt.TimerType.PreciseTimer
    assert scheduler._timers[ticker].timerType() != Qt.TimerType.PreciseTimer
    scheduler.cancel_all()
