"""
Playback Session Controller - lifecycle of one timed, looping audio session.

Responsibilities:
- Resolve the chosen title through the TrackCatalog
- Acquire and loop the audio asset for the session
- Schedule the one-shot auto-stop at the end of the chosen duration
- Stop on request (idempotent), always cancelling the auto-stop first
- Report remaining time as a pure function of session state and a clock value

State machine:
    IDLE --start() ok--> PLAYING --stop() / auto-stop--> IDLE
    IDLE --start() raises AssetUnavailable--> IDLE

Usage:
    controller = PlaybackSessionController(audio, scheduler, on_dismiss=page.close)
    controller.start("Deep Sleep of Mind", 30)
    controller.remaining_time()   # RemainingTime(minutes=30, seconds=0)
    controller.stop(dismiss=True)
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, NamedTuple, Optional

from .catalog import Track, TrackCatalog
from .events import SessionEventEmitter, SessionEvent, SessionEventType
from ..exceptions import AssetUnavailable

if TYPE_CHECKING:
    from ..engine.audio import AudioBackend
    from ..engine.scheduler import Scheduler, TimerHandle


class SessionStatus(Enum):
    """Session execution states."""
    IDLE = auto()       # No active session
    PLAYING = auto()    # Audio looping, auto-stop pending
    STOPPED = auto()    # Ended session record (controller is IDLE again)


class StopReason(Enum):
    ELAPSED = "elapsed"
    MANUAL = "manual"


class RemainingTime(NamedTuple):
    minutes: int
    seconds: int

    def __str__(self) -> str:
        return f"{self.minutes} min {self.seconds} sec"


@dataclass
class Session:
    """
    One timed run bound to a track and duration.

    Attributes:
        track: Track being played (caller's title, resolved asset)
        duration_seconds: Total session length, always > 0
        started_at: Clock value when playback began
        status: PLAYING while active, STOPPED once ended
        stopped_at: Clock value when the session ended
        stop_reason: Why the session ended
    """
    track: Track
    duration_seconds: int
    started_at: float
    status: SessionStatus = SessionStatus.PLAYING
    stopped_at: Optional[float] = None
    stop_reason: Optional[StopReason] = None

    def elapsed(self, now: float) -> float:
        return max(0.0, now - self.started_at)

    def remaining_seconds(self, now: float) -> float:
        return max(self.duration_seconds - self.elapsed(now), 0.0)


def remaining_time_from_seconds(remaining: float) -> RemainingTime:
    """Split a non-negative second count into whole minutes and leftover seconds."""
    remaining = max(float(remaining), 0.0)
    return RemainingTime(int(remaining // 60), int(remaining % 60))


class PlaybackSessionController:
    """
    Owns the audio handle and auto-stop callback of at most one session.

    Scoped to one presentation of the player page: create it on entry,
    call ``close()`` at teardown.
    """

    def __init__(
        self,
        audio_backend: AudioBackend,
        scheduler: Scheduler,
        *,
        catalog: Optional[TrackCatalog] = None,
        clock: Callable[[], float] = time.monotonic,
        on_dismiss: Optional[Callable[[], None]] = None,
        event_emitter: Optional[SessionEventEmitter] = None,
    ):
        """
        Args:
            audio_backend: load/play/stop capability for audio assets
            scheduler: schedule_once/cancel capability for the auto-stop
            catalog: title lookup (defaults to the built-in four tracks)
            clock: monotonic seconds source, injectable for tests
            on_dismiss: called when the hosting view should navigate back
            event_emitter: bus for lifecycle events (a private one if omitted)
        """
        self.audio = audio_backend
        self.scheduler = scheduler
        self.catalog = catalog or TrackCatalog()
        self.clock = clock
        self.on_dismiss = on_dismiss
        self.event_emitter = event_emitter or SessionEventEmitter()

        self.logger = logging.getLogger(__name__)

        self._session: Optional[Session] = None
        self._last_session: Optional[Session] = None
        self._audio_handle: Any = None
        self._auto_stop: Optional[TimerHandle] = None

    # ===== State =====

    @property
    def state(self) -> SessionStatus:
        return SessionStatus.PLAYING if self._session is not None else SessionStatus.IDLE

    @property
    def session(self) -> Optional[Session]:
        """The active session, or None when idle."""
        return self._session

    @property
    def last_session(self) -> Optional[Session]:
        """The active session, else the most recently stopped one."""
        return self._session or self._last_session

    def is_playing(self) -> bool:
        return self._session is not None

    # ===== Lifecycle =====

    def start(self, title: str, duration_minutes: int) -> Session:
        """
        Start looping the track for *duration_minutes*.

        Raises:
            ValueError: duration_minutes is not positive
            AssetUnavailable: the audio could not be loaded or played;
                the controller stays IDLE
            Exception: whatever the scheduler raised; audio is released
                and the controller stays IDLE
        """
        if duration_minutes <= 0:
            raise ValueError(f"duration_minutes must be positive, got {duration_minutes}")

        if self._session is not None:
            self.logger.info("[session] start() while playing; stopping current session first")
            self._stop(StopReason.MANUAL)

        track = self.catalog.track_for(title)
        if track.title not in self.catalog.titles():
            self.logger.info("[session] Unknown title %r, falling back to asset %s", title, track.asset_id)

        handle = None
        try:
            handle = self.audio.load(track.asset_id)
            self.audio.play(handle, loop_forever=True)
        except AssetUnavailable as exc:
            if handle is not None:
                self.audio.stop(handle)
            self.logger.warning("[session] Cannot start %r: %s", track.title, exc)
            self.event_emitter.emit(SessionEvent(
                SessionEventType.ERROR,
                data={"title": track.title, "asset_id": track.asset_id, "error": str(exc)},
            ))
            raise

        duration_seconds = int(duration_minutes) * 60
        session = Session(track=track, duration_seconds=duration_seconds, started_at=self.clock())
        # State is committed only once the auto-stop exists
        try:
            auto_stop = self.scheduler.schedule_once(
                duration_seconds, lambda: self._on_duration_elapsed(session)
            )
        except Exception:
            self.logger.exception("[session] Could not schedule auto-stop for %r", track.title)
            self.audio.stop(handle)
            raise
        self._session = session
        self._audio_handle = handle
        self._auto_stop = auto_stop

        self.logger.info("[session] Started %r (asset=%s, %d min)",
                         track.title, track.asset_id, duration_minutes)
        self.event_emitter.emit(SessionEvent(
            SessionEventType.SESSION_START,
            data={"title": track.title, "asset_id": track.asset_id,
                  "duration_seconds": duration_seconds},
        ))
        return session

    def stop(self, *, dismiss: bool = False) -> bool:
        """
        Stop the active session. Safe to call when idle.

        Args:
            dismiss: also fire the dismissal signal when a session was stopped

        Returns:
            True when a session was actually stopped
        """
        stopped = self._stop(StopReason.MANUAL)
        if stopped and dismiss:
            self._notify_dismiss()
        return stopped

    def close(self) -> None:
        """Teardown hook for the owning view."""
        self._stop(StopReason.MANUAL)

    def _stop(self, reason: StopReason) -> bool:
        session = self._session
        if session is None:
            return False
        self._session = None

        # Cancel before releasing audio so a pending auto-stop cannot run a second stop
        auto_stop, self._auto_stop = self._auto_stop, None
        self.scheduler.cancel(auto_stop)

        handle, self._audio_handle = self._audio_handle, None
        if handle is not None:
            self.audio.stop(handle)

        now = self.clock()
        session.status = SessionStatus.STOPPED
        session.stopped_at = now
        session.stop_reason = reason
        self._last_session = session

        elapsed = session.elapsed(now)
        self.logger.info("[session] Stopped %r after %.1fs (%s)", session.track.title, elapsed, reason.value)
        event_type = SessionEventType.SESSION_END if reason is StopReason.ELAPSED else SessionEventType.SESSION_STOP
        self.event_emitter.emit(SessionEvent(
            event_type,
            data={"title": session.track.title, "elapsed_seconds": round(elapsed, 3),
                  "reason": reason.value},
        ))
        return True

    def _on_duration_elapsed(self, session: Session) -> None:
        if self._session is not session:
            self.logger.debug("[session] Ignoring stale auto-stop for %r", session.track.title)
            return
        # Already fired; nothing left to cancel
        self._auto_stop = None
        self._stop(StopReason.ELAPSED)
        self._notify_dismiss()

    def _notify_dismiss(self) -> None:
        if self.on_dismiss is not None:
            self.on_dismiss()

    # ===== Timing =====

    def remaining_time(self, now: Optional[float] = None) -> RemainingTime:
        """Remaining time of the current session, clamped at (0, 0)."""
        session = self._session
        if session is None:
            return RemainingTime(0, 0)
        if now is None:
            now = self.clock()
        return remaining_time_from_seconds(session.remaining_seconds(now))
