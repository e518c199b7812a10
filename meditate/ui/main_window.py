"""Main window: a navigation stack of pages.

Home (track list) → Duration picker → Player. Pages are pushed on top of
each other and popped when they navigate back; a popped page is torn down
and deleted.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from PyQt6.QtWidgets import QMainWindow, QStackedWidget

from .pages import BasePage, DurationPage, HomePage, PlayerPage
from ..engine.audio import AudioBackend
from ..engine.scheduler import QtScheduler, Scheduler
from ..session import SessionEventEmitter, TrackCatalog
from .. import __app_name__


class MainWindow(QMainWindow):
    """Owns the shared services and the page stack."""

    def __init__(
        self,
        audio_backend: AudioBackend,
        *,
        scheduler: Optional[Scheduler] = None,
        catalog: Optional[TrackCatalog] = None,
        clock: Callable[[], float] = time.monotonic,
        event_emitter: Optional[SessionEventEmitter] = None,
    ):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.audio_backend = audio_backend
        self.scheduler = scheduler if scheduler is not None else QtScheduler(self)
        self.catalog = catalog or TrackCatalog()
        self.clock = clock
        self.event_emitter = event_emitter or SessionEventEmitter()

        self.setWindowTitle(__app_name__)
        self.resize(420, 760)

        self.stack = QStackedWidget(self)
        self.stack.setObjectName("NavigationStack")
        self.setCentralWidget(self.stack)

        self.home_page = HomePage(self)
        self.home_page.track_selected.connect(self.open_duration_page)
        self.push_page(self.home_page)

    # ===== Navigation =====

    @property
    def current_page(self) -> Optional[BasePage]:
        page = self.stack.currentWidget()
        return page if isinstance(page, BasePage) else None

    @property
    def depth(self) -> int:
        return self.stack.count()

    def push_page(self, page: BasePage) -> None:
        previous = self.current_page
        if previous is not None:
            previous.on_hide()
        self.stack.addWidget(page)
        self.stack.setCurrentWidget(page)
        self.logger.debug("push %s (depth=%d)", type(page).__name__, self.depth)
        page.on_show()

    def pop_page(self, page: Optional[BasePage] = None) -> bool:
        """Pop the top page (only if it is *page*, when given). The root page is never popped."""
        top = self.current_page
        if top is None or self.depth <= 1:
            return False
        if page is not None and page is not top:
            return False
        self.stack.removeWidget(top)
        top.on_teardown()
        top.deleteLater()
        self.logger.debug("pop %s (depth=%d)", type(top).__name__, self.depth)
        new_top = self.current_page
        if new_top is not None:
            new_top.on_show()
        return True

    def pop_to_root(self) -> None:
        while self.pop_page():
            pass

    def open_duration_page(self, title: str) -> DurationPage:
        page = DurationPage(self, title)
        page.play_requested.connect(self.open_player_page)
        self.push_page(page)
        return page

    def open_player_page(self, title: str, minutes: int) -> PlayerPage:
        page = PlayerPage(self, title, minutes)
        self.push_page(page)
        return page

    # ===== Qt events =====

    def closeEvent(self, event):  # type: ignore[override]
        self.pop_to_root()
        super().closeEvent(event)
