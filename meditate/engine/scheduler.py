"""Scheduling primitives for periodic tickers and one-shot deferred callbacks.

Callers hold the returned :class:`TimerHandle` and pass it back to
``cancel``. ``QtScheduler`` runs callbacks on the Qt event loop of the
thread that created it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from PyQt6.QtCore import QObject, Qt, QTimer

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TimerHandle:
    """Cancellable handle for a scheduled callback."""

    interval_s: float
    callback: Callable[[], None]
    repeating: bool = False
    active: bool = True
    fire_count: int = 0

    def fire(self) -> None:
        """Run the callback; one-shot handles go inactive before it runs."""
        if not self.active:
            return
        if not self.repeating:
            self.active = False
        self.fire_count += 1
        self.callback()


class Scheduler(Protocol):
    def schedule_periodic(self, interval_s: float, callback: Callable[[], None]) -> TimerHandle: ...

    def schedule_once(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle: ...

    def cancel(self, handle: Optional[TimerHandle]) -> None: ...


def _to_ms(seconds: float) -> int:
    return max(0, int(round(float(seconds) * 1000.0)))


class QtScheduler:
    """QTimer-backed scheduler. Owns each QTimer until it fires or is cancelled."""

    def __init__(self, parent: Optional[QObject] = None):
        self._parent = parent
        self._timers: dict[TimerHandle, QTimer] = {}

    @property
    def pending(self) -> int:
        return len(self._timers)

    def schedule_periodic(self, interval_s: float, callback: Callable[[], None]) -> TimerHandle:
        if interval_s <= 0:
            raise ValueError(f"interval_s must be positive, got {interval_s}")
        handle = TimerHandle(interval_s=float(interval_s), callback=callback, repeating=True)
        self._start(handle)
        return handle

    def schedule_once(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(interval_s=max(0.0, float(delay_s)), callback=callback)
        self._start(handle)
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if handle is None:
            return
        handle.active = False
        timer = self._timers.pop(handle, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()
            logger.debug("[scheduler] cancelled %s timer (%.1fs)",
                         "periodic" if handle.repeating else "one-shot", handle.interval_s)

    def cancel_all(self) -> None:
        for handle in list(self._timers):
            self.cancel(handle)

    def _start(self, handle: TimerHandle) -> None:
        timer = QTimer(self._parent)
        timer.setSingleShot(not handle.repeating)
        timer.setInterval(_to_ms(handle.interval_s))
        if not handle.repeating:
            # Coarse timers may drift by up to 5% which is seconds for long sessions
            timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.timeout.connect(lambda: self._on_timeout(handle))
        self._timers[handle] = timer
        timer.start()

    def _on_timeout(self, handle: TimerHandle) -> None:
        if not handle.repeating:
            timer = self._timers.pop(handle, None)
            if timer is not None:
                timer.deleteLater()
        handle.fire()
