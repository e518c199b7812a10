"""Offscreen UI tests: home → duration → player navigation and session teardown."""

import pytest

from meditate.session import SessionEventType, SessionStatus
from meditate.ui.main_window import MainWindow
from meditate.ui.pages import DurationPage, HomePage, PlayerPage, DURATION_OPTIONS
from meditate.ui.widgets import PulsingCircles

pytestmark = pytest.mark.ui


@pytest.fixture
def window(qapp, audio, scheduler, clock):
    win = MainWindow(audio, scheduler=scheduler, clock=clock)
    yield win
    win.pop_to_root()
    win.deleteLater()


def _open_player(window, title="Deep Meditation to Relax", minutes=15):
    window.home_page.cards[window.catalog.titles().index(title)].click()
    duration = window.current_page
    duration.select_minutes(minutes)
    duration.play_button.click()
    return window.current_page


def test_home_lists_catalog(window):
    assert isinstance(window.current_page, HomePage)
    assert window.depth == 1
    assert [card.title for card in window.home_page.cards] == window.catalog.titles()


def test_card_opens_duration_page(window):
    window.home_page.cards[1].click()
    page = window.current_page
    assert isinstance(page, DurationPage)
    assert page.title == "Complete Focus of Mind"
    assert page.selected_minutes == 15
    assert sorted(page.segments) == list(DURATION_OPTIONS)


def test_duration_page_rejects_unlisted_minutes(window):
    window.home_page.cards[0].click()
    with pytest.raises(ValueError):
        window.current_page.select_minutes(20)


def test_back_from_duration_page(window):
    window.home_page.cards[0].click()
    assert window.pop_page() is True
    assert isinstance(window.current_page, HomePage)
    # Root is never popped
    assert window.pop_page() is False


def test_player_starts_session_and_counts_down(window, audio, scheduler):
    page = _open_player(window, "Deep Sleep of Mind", 30)
    assert isinstance(page, PlayerPage)
    assert window.depth == 3
    assert page.playing_label.text() == "Playing: Deep Sleep of Mind"
    assert page.controller.state is SessionStatus.PLAYING
    assert audio.loaded == ["relax4"]
    assert page.time_label.text() == "Time left: 30 min 0 sec"

    scheduler.advance(61)
    assert page.time_label.text() == "Time left: 28 min 59 sec"


def test_auto_stop_pops_player(window, audio, scheduler):
    ended = []
    window.event_emitter.subscribe(SessionEventType.SESSION_END, ended.append)
    page = _open_player(window, minutes=15)
    scheduler.advance(900)
    assert isinstance(window.current_page, DurationPage)
    assert window.depth == 2
    assert page.controller.state is SessionStatus.IDLE
    assert audio.active == []
    assert len(audio.stop_calls) == 1
    assert len(ended) == 1
    # Ticker cancelled at teardown: nothing left scheduled
    assert scheduler.pending == []


def test_stop_button_pops_and_cancels(window, audio, scheduler):
    page = _open_player(window, minutes=60)
    scheduler.advance(10)
    page.stop_button.click()
    assert isinstance(window.current_page, DurationPage)
    assert audio.active == []
    assert scheduler.pending == []
    scheduler.advance(3600)
    assert window.depth == 2
    assert len(audio.stop_calls) == 1


def test_missing_asset_shows_error_and_stop_leaves(window, audio, scheduler):
    audio.missing.add("relax1")
    page = _open_player(window, "Deep Meditation to Relax", 15)
    assert page.controller.state is SessionStatus.IDLE
    assert not page.error_label.isHidden()
    assert page.error_label.text() == "Audio file not found."
    page.stop_button.click()
    assert isinstance(window.current_page, DurationPage)
    assert scheduler.pending == []


def test_close_tears_down_running_session(window, audio, scheduler):
    _open_player(window, minutes=45)
    window.pop_to_root()
    assert window.depth == 1
    assert audio.active == []
    assert scheduler.pending == []


def test_pulsing_circles_scales(qapp):
    circles = PulsingCircles()
    assert circles.scales() == (0.9, 0.8)
    circles.set_scales(1.05, 1.1)
    assert circles.scales() == (1.05, 1.1)
    circles.deleteLater()


def test_scheduler_failure_shows_error(window, audio, scheduler, monkeypatch):
    def broken(delay_s, callback):
        raise RuntimeError("timer backend unavailable")

    monkeypatch.setattr(scheduler, "schedule_once", broken)
    page = _open_player(window, minutes=15)
    assert page.controller.state is SessionStatus.IDLE
    assert audio.active == []
    assert page.error_label.text() == "Playback could not start."
    page.stop_button.click()
    assert isinstance(window.current_page, DurationPage)
