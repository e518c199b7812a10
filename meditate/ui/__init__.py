"""PyQt6 user interface for Meditate."""

from .main_window import MainWindow
from .widgets import PulsingCircles, TrackCard

__all__ = ['MainWindow', 'PulsingCircles', 'TrackCard']
