"""
Session management for Meditate.

Core Components:
- TrackCatalog: title to audio asset lookup
- PlaybackSessionController: start/stop/auto-stop of one timed looping session
- SessionPresentationAdapter: once-per-second remaining-time text and pulse animation
- SessionEventEmitter: lifecycle event bus
"""

from .catalog import (
    Track,
    TrackCatalog,
    DEFAULT_TRACKS,
)

from .controller import (
    PlaybackSessionController,
    RemainingTime,
    Session,
    SessionStatus,
    StopReason,
)

from .events import (
    SessionEventType,
    SessionEvent,
    SessionEventEmitter
)

from .presentation import (
    SessionPresentationAdapter,
    PulseAnimation,
    format_remaining,
)

__all__ = [
    # Catalog
    'Track',
    'TrackCatalog',
    'DEFAULT_TRACKS',

    # Controller
    'PlaybackSessionController',
    'RemainingTime',
    'Session',
    'SessionStatus',
    'StopReason',

    # Event system
    'SessionEventType',
    'SessionEvent',
    'SessionEventEmitter',

    # Presentation
    'SessionPresentationAdapter',
    'PulseAnimation',
    'format_remaining',
]
