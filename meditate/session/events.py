"""Session event system for broadcasting session state changes.

Lets the playback controller announce lifecycle changes without knowing who
listens (player page, CLI, logs).

Usage:
    emitter = SessionEventEmitter()
    emitter.subscribe(SessionEventType.SESSION_START, lambda evt: print(evt.data))
    emitter.emit(SessionEvent(SessionEventType.SESSION_START, data={"title": "Deep Sleep of Mind"}))
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Any, Optional
import logging
import time


class SessionEventType(Enum):
    """Types of events that can occur during a playback session."""

    SESSION_START = auto()     # Playback started
    SESSION_END = auto()       # Duration elapsed, auto-stopped
    SESSION_STOP = auto()      # Stopped manually before the duration elapsed
    ERROR = auto()             # Session could not start


@dataclass
class SessionEvent:
    """Represents a session event with optional payload data.

    Attributes:
        event_type: Type of event that occurred
        data: Optional dictionary with event-specific data
        timestamp: Optional timestamp (set by emitter when missing)
    """
    event_type: SessionEventType
    data: Optional[dict[str, Any]] = None
    timestamp: Optional[float] = None

    def __str__(self) -> str:
        if self.data:
            data_str = ", ".join(f"{k}={v}" for k, v in self.data.items())
            return f"SessionEvent({self.event_type.name}, {data_str})"
        return f"SessionEvent({self.event_type.name})"


class SessionEventEmitter:
    """Event bus for session state changes.

    Supports multiple subscribers per event type. A subscriber that raises is
    logged and skipped; remaining subscribers still receive the event.
    """

    def __init__(self):
        self._subscribers: dict[SessionEventType, list[Callable[[SessionEvent], None]]] = {}
        self.logger = logging.getLogger(__name__)

    def subscribe(
        self,
        event_type: SessionEventType,
        callback: Callable[[SessionEvent], None]
    ) -> None:
        """Subscribe to a specific event type.

        Args:
            event_type: Type of event to listen for
            callback: Function to call when event occurs (receives SessionEvent)
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)
            self.logger.debug(f"[events] Subscribed to {event_type.name} (total={len(callbacks)})")

    def unsubscribe(
        self,
        event_type: SessionEventType,
        callback: Callable[[SessionEvent], None]
    ) -> None:
        """Unsubscribe from a specific event type."""
        callbacks = self._subscribers.get(event_type)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)
            self.logger.debug(f"[events] Unsubscribed from {event_type.name} (total={len(callbacks)})")

    def emit(self, event: SessionEvent) -> None:
        """Emit an event to all subscribed callbacks."""
        if event.timestamp is None:
            event.timestamp = time.time()

        self.logger.debug(f"[events] Emitting: {event}")

        # Copy so a callback may unsubscribe itself mid-delivery
        for callback in list(self._subscribers.get(event.event_type, ())):
            try:
                callback(event)
            except Exception as e:
                self.logger.error(f"[events] Callback error for {event.event_type.name}: {e}", exc_info=True)

    def clear_all(self) -> None:
        """Remove all event subscribers (useful for testing/cleanup)."""
        self._subscribers.clear()
        self.logger.debug("[events] Cleared all subscribers")
