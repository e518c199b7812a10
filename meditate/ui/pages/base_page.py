"""Base page class for the navigation stack.

Provides standard lifecycle hooks for all pages.
"""
from __future__ import annotations

from typing import TYPE_CHECKING
from PyQt6.QtWidgets import QWidget

if TYPE_CHECKING:
    from ..main_window import MainWindow


class BasePage(QWidget):
    """Base class for pages pushed onto the MainWindow navigation stack.

    Provides:
    - Lifecycle hooks (on_show when the page becomes top of stack,
      on_hide when it is covered, on_teardown when it is popped)
    - Access to the main window and its shared services
    """

    def __init__(self, main_window: MainWindow):
        super().__init__(main_window)
        self.main_window = main_window
        self.setObjectName("Page")

    def on_show(self):
        """Called when the page becomes the top of the stack."""
        pass

    def on_hide(self):
        """Called when another page is pushed over this one."""
        pass

    def on_teardown(self):
        """Called once when the page is popped off the stack."""
        pass

    # === Convenient access to shared services ===

    @property
    def catalog(self):
        return self.main_window.catalog

    @property
    def audio_backend(self):
        return self.main_window.audio_backend

    @property
    def scheduler(self):
        return self.main_window.scheduler

    @property
    def event_emitter(self):
        return self.main_window.event_emitter

    def navigate_back(self):
        self.main_window.pop_page(self)
