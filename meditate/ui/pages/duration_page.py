"""Duration page - segmented picker for the session length."""
from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QButtonGroup, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from .base_page import BasePage

DURATION_OPTIONS = (15, 30, 45, 60)
DEFAULT_DURATION = 15


class DurationPage(BasePage):
    """Shows the chosen track and emits play_requested(title, minutes)."""

    play_requested = pyqtSignal(str, int)

    def __init__(self, main_window, title: str):
        super().__init__(main_window)
        self.title = title
        self.segments: dict[int, QPushButton] = {}
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 16)
        layout.setSpacing(30)

        back = QPushButton("‹ Back")
        back.setObjectName("BackButton")
        back.clicked.connect(self.navigate_back)
        layout.addWidget(back, 0, Qt.AlignmentFlag.AlignLeft)

        title = QLabel(self.title)
        title.setObjectName("Title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setWordWrap(True)
        layout.addWidget(title)

        subtitle = QLabel("Select Meditation Time")
        subtitle.setObjectName("Subtitle")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(subtitle)

        # Exclusive checkable buttons act as a segmented control
        self.group = QButtonGroup(self)
        self.group.setExclusive(True)
        row = QHBoxLayout()
        row.setSpacing(0)
        for minutes in DURATION_OPTIONS:
            btn = QPushButton(f"{minutes} min")
            btn.setObjectName("Segment")
            btn.setCheckable(True)
            self.group.addButton(btn, minutes)
            row.addWidget(btn)
            self.segments[minutes] = btn
        self.segments[DEFAULT_DURATION].setChecked(True)
        layout.addLayout(row)

        self.play_button = QPushButton("Play")
        self.play_button.setObjectName("PlayButton")
        self.play_button.clicked.connect(self._on_play)
        layout.addWidget(self.play_button)

        layout.addStretch(1)

    @property
    def selected_minutes(self) -> int:
        checked = self.group.checkedId()
        return checked if checked in DURATION_OPTIONS else DEFAULT_DURATION

    def select_minutes(self, minutes: int):
        if minutes not in self.segments:
            raise ValueError(f"unsupported duration {minutes}; choose from {DURATION_OPTIONS}")
        self.segments[minutes].setChecked(True)

    def _on_play(self):
        self.play_requested.emit(self.title, self.selected_minutes)
