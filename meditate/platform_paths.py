"""Platform-specific paths and environment configuration.

User data (logs) lives in a per-user directory; audio assets default to the
directory shipped inside the package. Both can be overridden through the
environment:

    MEDITATE_DATA_DIR   per-user data directory
    MEDITATE_AUDIO_DIR  directory holding <asset_id>.mp3/.ogg/.wav files
"""

from __future__ import annotations

import os
from pathlib import Path


DATA_DIR_ENV = "MEDITATE_DATA_DIR"
AUDIO_DIR_ENV = "MEDITATE_AUDIO_DIR"
DEBUG_ENV = "MEDITATE_DEBUG"
LOG_MODE_ENV = "MEDITATE_LOG_MODE"

_TRUTHY = {"1", "true", "yes", "on"}


def is_windows() -> bool:
    return os.name == "nt"


def env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def get_user_data_dir(app_name: str = "Meditate") -> Path:
    """Return a persistent per-user data directory.

    Windows: %APPDATA%\\Meditate, elsewhere ~/.meditate
    """
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    if is_windows():
        base = os.getenv("APPDATA")
        if base:
            return Path(base) / app_name
        return Path.home() / "AppData" / "Roaming" / app_name
    return Path.home() / f".{app_name.lower()}"


def get_bundled_audio_dir() -> Path:
    return Path(__file__).resolve().parent / "assets" / "audio"


def get_audio_dir(override: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the audio asset directory: explicit argument, then env, then bundled."""
    if override:
        return Path(override).expanduser()
    from_env = os.environ.get(AUDIO_DIR_ENV)
    if from_env:
        return Path(from_env).expanduser()
    return get_bundled_audio_dir()
