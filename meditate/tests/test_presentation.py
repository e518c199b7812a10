"""Tests for the SessionPresentationAdapter and pulse animation."""

import pytest

from meditate.session import (
    PlaybackSessionController,
    PulseAnimation,
    RemainingTime,
    SessionPresentationAdapter,
    format_remaining,
)
from meditate.session.presentation import INNER_PULSE, OUTER_PULSE


@pytest.fixture
def controller(audio, scheduler, clock):
    return PlaybackSessionController(audio, scheduler, clock=clock)


def test_format_remaining():
    assert format_remaining(RemainingTime(15, 0)) == "15 min 0 sec"
    assert format_remaining(RemainingTime(0, 9)) == "0 min 9 sec"


def test_renders_immediately_and_every_second(controller, scheduler, clock):
    texts = []
    adapter = SessionPresentationAdapter(controller, scheduler, clock=clock, on_update=texts.append)
    controller.start("Deep Meditation to Relax", 15)
    adapter.start()
    assert texts == ["15 min 0 sec"]

    scheduler.advance(1)
    scheduler.advance(1)
    assert texts[1:] == ["14 min 59 sec", "14 min 58 sec"]
    assert adapter.text == "14 min 58 sec"


def test_countdown_reaches_zero_and_stays_there(controller, scheduler, clock):
    texts = []
    adapter = SessionPresentationAdapter(controller, scheduler, clock=clock, on_update=texts.append)
    controller.start("Deep Meditation to Relax", 15)
    adapter.start()
    scheduler.advance(905)
    assert texts[-1] == "0 min 0 sec"
    assert "0 min 1 sec" in texts
    assert all("-" not in t for t in texts)
    # One initial render plus one per second
    assert len(texts) == 906


def test_stop_cancels_ticker(controller, scheduler, clock):
    texts = []
    adapter = SessionPresentationAdapter(controller, scheduler, clock=clock, on_update=texts.append)
    controller.start("Deep Meditation to Relax", 15)
    adapter.start()
    assert adapter.running
    adapter.stop()
    assert not adapter.running
    scheduler.advance(10)
    assert texts == ["15 min 0 sec"]
    # Second stop is harmless
    adapter.stop()


def test_start_twice_keeps_one_ticker(controller, scheduler, clock):
    adapter = SessionPresentationAdapter(controller, scheduler, clock=clock)
    adapter.start()
    adapter.start()
    assert len(scheduler.pending) == 1


def test_idle_controller_shows_zero(controller, scheduler, clock):
    adapter = SessionPresentationAdapter(controller, scheduler, clock=clock)
    adapter.start()
    assert adapter.text == "0 min 0 sec"


class TestPulseAnimation:

    def test_legs_autoreverse(self):
        anim = PulseAnimation(low=0.9, high=1.1, period_s=1.0)
        assert anim.value(0.0) == pytest.approx(0.9)
        assert anim.value(0.5) == pytest.approx(1.0)
        assert anim.value(1.0) == pytest.approx(1.1)
        assert anim.value(1.5) == pytest.approx(1.0)
        assert anim.value(2.0) == pytest.approx(0.9)

    def test_ease_in_out_is_slow_at_ends(self):
        anim = PulseAnimation(low=0.0, high=1.0, period_s=1.0)
        assert anim.value(0.1) < 0.1
        assert anim.value(0.9) > 0.9

    def test_stays_within_bounds(self):
        for i in range(0, 60):
            t = i * 0.137
            assert OUTER_PULSE.low - 1e-9 <= OUTER_PULSE.value(t) <= OUTER_PULSE.high + 1e-9

    def test_adapter_pulse_independent_of_session(self, controller, scheduler, clock):
        adapter = SessionPresentationAdapter(controller, scheduler, clock=clock)
        assert adapter.pulse_scales() == (INNER_PULSE.low, OUTER_PULSE.low)
        adapter.start()
        # No session running, animation still moves
        clock.now += 0.75
        inner, outer = adapter.pulse_scales()
        assert inner == pytest.approx(INNER_PULSE.value(0.75))
        assert outer == pytest.approx(OUTER_PULSE.value(0.75))
        assert INNER_PULSE.low < inner < INNER_PULSE.high
