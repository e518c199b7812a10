"""Logging setup shared by the CLI and the GUI bootstrap.

One rotating file in the per-user data directory plus an optional console
stream. Verbosity comes from an explicit level and a :class:`LogMode`
preset; :func:`resolve_logging_options` fills gaps from the environment.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
from enum import Enum
from pathlib import Path
from typing import Optional

from .platform_paths import DEBUG_ENV, LOG_MODE_ENV, env_flag, get_user_data_dir


DEFAULT_LOG_FILENAME = "meditate.log"
DEFAULT_LEVEL = "WARNING"
PLAIN_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUPS = 3


class LogMode(str, Enum):
    """Verbosity presets layered on top of the level."""

    QUIET = "quiet"     # console shows WARNING and above only
    NORMAL = "normal"
    DEBUG = "debug"     # everything goes to DEBUG


_LOG_MODE: LogMode = LogMode.NORMAL


def get_default_log_dir() -> Path:
    """Per-user data directory, or cwd when it cannot be created."""
    path = get_user_data_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        return Path.cwd()
    return path


def get_default_log_path() -> Path:
    return get_default_log_dir() / DEFAULT_LOG_FILENAME


def _parse_log_mode(mode: LogMode | str | None) -> LogMode:
    if isinstance(mode, LogMode):
        return mode
    if not mode:
        return LogMode.NORMAL
    try:
        return LogMode(mode.strip().lower())
    except ValueError:
        return LogMode.NORMAL


def set_log_mode(mode: LogMode | str | None) -> LogMode:
    """Remember the active preset; unknown names fall back to NORMAL."""
    global _LOG_MODE
    _LOG_MODE = _parse_log_mode(mode)
    return _LOG_MODE


def get_log_mode() -> LogMode:
    return _LOG_MODE


def is_quiet_logging_enabled() -> bool:
    return _LOG_MODE is LogMode.QUIET


def resolve_logging_options(
    level: Optional[str] = None,
    mode: Optional[str] = None,
) -> tuple[str, LogMode]:
    """Pick level and mode: explicit value, then MEDITATE_DEBUG / MEDITATE_LOG_MODE, then defaults."""
    if level is None:
        level = "DEBUG" if env_flag(DEBUG_ENV) else DEFAULT_LEVEL
    if mode is None:
        mode = os.environ.get(LOG_MODE_ENV)
    return level, _parse_log_mode(mode)


class JsonFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, message (and exc_info when present)."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonFormatter()
    return logging.Formatter(fmt=PLAIN_FORMAT, datefmt=DATE_FORMAT)


def _to_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _is_console(handler: logging.Handler) -> bool:
    # FileHandler subclasses StreamHandler
    return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)


def _attach_handlers(logger: logging.Logger, log_path: Path, formatter: logging.Formatter,
                     add_console: bool) -> None:
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS, encoding="utf-8"
        )
    except OSError as e:
        logging.getLogger(__name__).debug("file logging disabled (%s): %s", log_path, e)
    else:
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    if add_console:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)


def setup_logging(
    *,
    level: str | int = "INFO",
    log_file: Optional[str | Path] = None,
    json_format: bool = False,
    logger_name: Optional[str] = None,
    log_mode: LogMode | str | None = None,
    add_console: bool = True,
) -> logging.Logger:
    """Configure *logger_name* (root by default) and return it.

    Handlers are attached on the first call only; later calls re-apply
    levels to the existing handlers. ``json_format`` switches both handlers
    to :class:`JsonFormatter`.
    """
    file_level = _to_level(level)
    mode = set_log_mode(log_mode) if log_mode is not None else get_log_mode()
    if mode is LogMode.DEBUG:
        file_level = logging.DEBUG
    console_level = max(logging.WARNING, file_level) if mode is LogMode.QUIET else file_level

    logger = logging.getLogger(logger_name) if logger_name else logging.getLogger()
    if not logger.handlers:
        log_path = Path(log_file) if log_file else get_default_log_path()
        _attach_handlers(logger, log_path, _make_formatter(json_format), add_console)

    logger.setLevel(file_level)
    for handler in logger.handlers:
        handler.setLevel(console_level if _is_console(handler) else file_level)
    return logger
