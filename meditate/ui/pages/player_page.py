"""
Player page - runs one timed session.

Starts the PlaybackSessionController when first shown, renders the
remaining time from the SessionPresentationAdapter, animates the pulsing
circles, and pops itself when the session ends.
"""
from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout

from .base_page import BasePage
from ..widgets import PulsingCircles
from ...exceptions import AssetUnavailable
from ...session import PlaybackSessionController, SessionPresentationAdapter

ANIMATION_INTERVAL_MS = 16  # ~60 Hz


class PlayerPage(BasePage):
    """Looping playback with countdown. No Back button; Stop is the only way out."""

    def __init__(self, main_window, title: str, duration_minutes: int):
        super().__init__(main_window)
        self.logger = logging.getLogger(__name__)
        self.title = title
        self.duration_minutes = duration_minutes
        self._started = False
        self._torn_down = False

        self.controller = PlaybackSessionController(
            self.audio_backend,
            self.scheduler,
            catalog=self.catalog,
            clock=main_window.clock,
            on_dismiss=self._on_dismiss,
            event_emitter=self.event_emitter,
        )
        self.adapter = SessionPresentationAdapter(
            self.controller,
            self.scheduler,
            clock=main_window.clock,
            on_update=self._on_time_text,
        )

        self.animation_timer = QTimer(self)
        self.animation_timer.setInterval(ANIMATION_INTERVAL_MS)
        self.animation_timer.timeout.connect(self._animate)

        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 50, 16, 50)
        layout.setSpacing(20)

        self.playing_label = QLabel(f"Playing: {self.title}")
        self.playing_label.setObjectName("Subtitle")
        self.playing_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.playing_label.setWordWrap(True)
        layout.addWidget(self.playing_label)

        self.circles = PulsingCircles(self)
        layout.addWidget(self.circles, 1)

        self.time_label = QLabel(f"Time left: {self.adapter.text}")
        self.time_label.setObjectName("TimeLeft")
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.time_label)

        self.error_label = QLabel("")
        self.error_label.setObjectName("Error")
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        layout.addStretch(1)

        self.stop_button = QPushButton("Stop")
        self.stop_button.setObjectName("StopButton")
        self.stop_button.clicked.connect(self._on_stop_clicked)
        layout.addWidget(self.stop_button, 0, Qt.AlignmentFlag.AlignHCenter)

    # ===== Lifecycle =====

    def on_show(self):
        if self._started:
            return
        self._started = True
        try:
            self.controller.start(self.title, self.duration_minutes)
        except AssetUnavailable as exc:
            self.logger.warning("Playback unavailable for %r: %s", self.title, exc)
            self.error_label.setText("Audio file not found.")
            self.error_label.show()
        except Exception as e:
            self.logger.exception("Could not start session for %r: %s", self.title, e)
            self.error_label.setText("Playback could not start.")
            self.error_label.show()
        self.adapter.start()
        self.animation_timer.start()

    def on_teardown(self):
        if self._torn_down:
            return
        self._torn_down = True
        self.animation_timer.stop()
        self.adapter.stop()
        self.controller.close()

    # ===== Handlers =====

    def _on_stop_clicked(self):
        # When nothing is playing there is no dismissal; leave directly
        if not self.controller.stop(dismiss=True):
            self.navigate_back()

    def _on_dismiss(self):
        self.navigate_back()

    def _on_time_text(self, text: str):
        self.time_label.setText(f"Time left: {text}")

    def _animate(self):
        self.circles.set_scales(*self.adapter.pulse_scales())
