"""Session Presentation Adapter.

Pulls remaining time from a PlaybackSessionController once per second and
formats it for display. Also owns the cosmetic pulse animation of the player
page, which runs from screen entry and ignores session state.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from .controller import PlaybackSessionController, RemainingTime

if TYPE_CHECKING:
    from ..engine.scheduler import Scheduler, TimerHandle

TICK_INTERVAL_S = 1.0


def format_remaining(remaining: RemainingTime) -> str:
    return f"{remaining.minutes} min {remaining.seconds} sec"


@dataclass(frozen=True)
class PulseAnimation:
    """Autoreversing ease-in-out oscillation from ``low`` to ``high`` and back.

    One leg (low to high, or high to low) takes ``period_s`` seconds.
    """

    low: float
    high: float
    period_s: float

    def value(self, t: float) -> float:
        if self.period_s <= 0:
            return self.low
        legs = max(0.0, t) / self.period_s
        leg = int(legs)
        frac = legs - leg
        eased = 0.5 - 0.5 * math.cos(math.pi * frac)
        if leg % 2:
            eased = 1.0 - eased
        return self.low + (self.high - self.low) * eased


INNER_PULSE = PulseAnimation(low=0.9, high=1.1, period_s=1.0)
OUTER_PULSE = PulseAnimation(low=0.8, high=1.2, period_s=1.5)


class SessionPresentationAdapter:
    """Samples the controller on a periodic ticker and publishes display text."""

    def __init__(
        self,
        controller: PlaybackSessionController,
        scheduler: Scheduler,
        *,
        clock: Optional[Callable[[], float]] = None,
        on_update: Optional[Callable[[str], None]] = None,
        interval_s: float = TICK_INTERVAL_S,
    ):
        self.controller = controller
        self.scheduler = scheduler
        self.clock = clock or controller.clock or time.monotonic
        self.on_update = on_update
        self.interval_s = interval_s
        self.text = format_remaining(RemainingTime(0, 0))
        self.logger = logging.getLogger(__name__)
        self._ticker: Optional[TimerHandle] = None
        self._animation_origin: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._ticker is not None

    def start(self) -> None:
        """Begin ticking and start the pulse animation; renders once immediately."""
        if self._ticker is not None:
            return
        self._animation_origin = self.clock()
        self._ticker = self.scheduler.schedule_periodic(self.interval_s, self.tick)
        self.tick()

    def stop(self) -> None:
        ticker, self._ticker = self._ticker, None
        self.scheduler.cancel(ticker)

    def tick(self) -> str:
        now = self.clock()
        self.text = format_remaining(self.controller.remaining_time(now))
        if self.on_update is not None:
            self.on_update(self.text)
        return self.text

    def pulse_scales(self, now: Optional[float] = None) -> tuple[float, float]:
        """(inner circle, outer ring) scale factors for the current animation phase."""
        if self._animation_origin is None:
            return INNER_PULSE.low, OUTER_PULSE.low
        if now is None:
            now = self.clock()
        t = now - self._animation_origin
        return INNER_PULSE.value(t), OUTER_PULSE.value(t)
