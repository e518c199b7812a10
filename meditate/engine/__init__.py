"""Engine module for Meditate: audio playback and scheduling."""

from .audio import AudioBackend, AudioEngine, AudioHandle
from .scheduler import QtScheduler, Scheduler, TimerHandle

__all__ = [
    'AudioBackend', 'AudioEngine', 'AudioHandle',
    'QtScheduler', 'Scheduler', 'TimerHandle',
]
