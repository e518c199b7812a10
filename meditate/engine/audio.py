# meditate/engine/audio.py
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol

import pygame

from ..exceptions import AssetUnavailable

SUPPORTED_EXTENSIONS = (".mp3", ".ogg", ".wav")


def find_asset_file(audio_dir: str | Path, asset_id: str) -> Optional[Path]:
    """First existing <audio_dir>/<asset_id><ext>, in SUPPORTED_EXTENSIONS order."""
    for ext in SUPPORTED_EXTENSIONS:
        candidate = Path(audio_dir) / f"{asset_id}{ext}"
        if candidate.is_file():
            return candidate
    return None


@dataclass(eq=False)
class AudioHandle:
    """A loaded asset plus the mixer channel it plays on (None when silent)."""
    asset_id: str
    path: Path
    sound: Any
    channel: Any = None

    @property
    def playing(self) -> bool:
        return self.channel is not None


class AudioBackend(Protocol):
    def load(self, asset_id: str) -> Any: ...

    def play(self, handle: Any, loop_forever: bool = True) -> None: ...

    def stop(self, handle: Any) -> None: ...


class AudioEngine:
    """
    pygame mixer backend. Every asset is fully loaded as a Sound so each
    session owns its own channel; nothing goes through the global music stream.
    """
    def __init__(self, audio_dir: str | Path):
        self.audio_dir = Path(audio_dir)
        self.init_ok = False
        self._log = logging.getLogger(__name__)
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.pre_init(44100, -16, 2, 512)
                pygame.mixer.init()
            self.init_ok = True
            self._log.info("pygame mixer initialized (audio_dir=%s)", self.audio_dir)
        except Exception as e:
            self._log.error("audio init failed: %s", e)

    def find_asset(self, asset_id: str) -> Optional[Path]:
        return find_asset_file(self.audio_dir, asset_id)

    # -------- loading --------------------------------------------------------
    def load(self, asset_id: str) -> AudioHandle:
        if not self.init_ok:
            raise AssetUnavailable(asset_id, "audio mixer not initialized")
        path = self.find_asset(asset_id)
        if path is None:
            raise AssetUnavailable(asset_id, f"no audio file in {self.audio_dir}")
        try:
            sound = pygame.mixer.Sound(str(path))
        except Exception as e:
            raise AssetUnavailable(asset_id, f"cannot decode {path.name}: {e}") from e
        self._log.debug("loaded %s from %s", asset_id, path)
        return AudioHandle(asset_id=asset_id, path=path, sound=sound)

    # -------- playback -------------------------------------------------------
    def play(self, handle: AudioHandle, loop_forever: bool = True) -> None:
        if handle.channel is not None:
            return
        try:
            channel = handle.sound.play(loops=-1 if loop_forever else 0)
        except pygame.error as e:
            raise AssetUnavailable(handle.asset_id, f"cannot play {handle.path.name}: {e}") from e
        if channel is None:
            raise AssetUnavailable(handle.asset_id, "no free mixer channel")
        handle.channel = channel
        self._log.info("playing %s (loop_forever=%s)", handle.asset_id, loop_forever)

    def stop(self, handle: Optional[AudioHandle]) -> None:
        if handle is None or handle.channel is None:
            return
        channel, handle.channel = handle.channel, None
        try:
            channel.stop()
        except Exception as e:
            self._log.warning("stop error for %s: %s", handle.asset_id, e)
        self._log.info("stopped %s", handle.asset_id)
