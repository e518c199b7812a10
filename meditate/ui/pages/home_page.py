"""Home page - one card per catalog track."""
from __future__ import annotations

import logging
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QVBoxLayout, QLabel

from .base_page import BasePage
from ..widgets import TrackCard


class HomePage(BasePage):
    """Track list. Emits track_selected(title) when a card is clicked."""

    track_selected = pyqtSignal(str)

    def __init__(self, main_window):
        super().__init__(main_window)
        self.logger = logging.getLogger(__name__)
        self.cards: list[TrackCard] = []
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 40, 16, 16)
        layout.setSpacing(30)

        heading = QLabel("For a better YOU!")
        heading.setObjectName("Heading")
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(heading)

        for title in self.catalog.titles():
            card = TrackCard(title, self)
            card.clicked.connect(lambda _checked=False, t=title: self._on_card_clicked(t))
            layout.addWidget(card)
            self.cards.append(card)

        layout.addStretch(1)

    def _on_card_clicked(self, title: str):
        self.logger.debug("Track selected: %s", title)
        self.track_selected.emit(title)
