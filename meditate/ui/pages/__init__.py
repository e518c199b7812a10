"""Navigation pages: track list, duration picker, player."""

from .base_page import BasePage
from .home_page import HomePage
from .duration_page import DurationPage, DURATION_OPTIONS
from .player_page import PlayerPage

__all__ = ['BasePage', 'HomePage', 'DurationPage', 'DURATION_OPTIONS', 'PlayerPage']
