"""Meditate command-line interface.

Argparse-based CLI that initializes logging early. Exposed via
``python -m meditate`` and the ``meditate`` console script.

Commands:
    gui        launch the window (default)
    tracks     list the track catalog
    play       run one timed session headless, printing the countdown
    selftest   import-and-init smoke test
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import signal
import sys
from typing import Optional

# Keep pygame's banner off stdout so `tracks --json` stays machine-readable
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from .logging_utils import setup_logging, get_default_log_path, resolve_logging_options, LogMode
from .platform_paths import get_audio_dir
from .session.catalog import TrackCatalog
from .session.presentation import format_remaining
from .engine.audio import find_asset_file
from .exceptions import AssetUnavailable
from . import __version__

DURATION_CHOICES = (15, 30, 45, 60)


def _add_logging_args(parser: argparse.ArgumentParser, default: object = None) -> None:
    # None means "not given"; main() falls back to MEDITATE_DEBUG / MEDITATE_LOG_MODE
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=default,
        help="Set log level (default: WARNING, DEBUG when MEDITATE_DEBUG=1)",
    )
    parser.add_argument(
        "--log-mode",
        choices=[mode.value for mode in LogMode],
        default=default,
        help="Logging preset: quiet suppresses console info, debug forces DEBUG "
             "(default: $MEDITATE_LOG_MODE or normal)",
    )
    parser.add_argument(
        "--log-file",
        default=default,
        help=f"Path to log file (default: {get_default_log_path()})",
    )
    parser.add_argument(
        "--log-format",
        choices=["plain", "json"],
        default=default,
        help="plain text lines or one JSON object per line (default: plain)",
    )


def _build_logging_parent(default: object = None) -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    _add_logging_args(parent, default)
    return parent


def build_parser() -> argparse.ArgumentParser:
    parent = _build_logging_parent()
    # Subcommand copies only set a value when the flag is given after the subcommand
    sub_parent = _build_logging_parent(argparse.SUPPRESS)
    parser = argparse.ArgumentParser(
        prog="meditate",
        description="Timed, looping meditation audio sessions",
        parents=[parent],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    gui = sub.add_parser("gui", parents=[sub_parent], help="Launch the desktop window (default)")
    gui.add_argument("--audio-dir", default=None, help="Directory holding the audio assets")

    tracks = sub.add_parser("tracks", parents=[sub_parent], help="List the track catalog")
    tracks.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    tracks.add_argument("--audio-dir", default=None, help="Directory checked for asset files")

    play = sub.add_parser("play", parents=[sub_parent], help="Run one timed session without the GUI")
    play.add_argument("--track", required=True, help="Track title (unknown titles fall back to the first track)")
    play.add_argument("--minutes", type=int, choices=DURATION_CHOICES, default=15,
                      help="Session length in minutes (default: 15)")
    play.add_argument("--audio-dir", default=None, help="Directory holding the audio assets")

    sub.add_parser("selftest", parents=[sub_parent], help="Import-and-init smoke test")
    return parser


def _cli_tracks(as_json: bool, audio_dir: Optional[str]) -> int:
    catalog = TrackCatalog()
    resolved_dir = get_audio_dir(audio_dir)
    rows = []
    for track in catalog:
        path = find_asset_file(resolved_dir, track.asset_id)
        rows.append({
            "title": track.title,
            "asset_id": track.asset_id,
            "available": path is not None,
            "path": str(path) if path else None,
        })
    if as_json:
        print(json.dumps(rows, indent=2))
        return 0
    width = max(len(r["title"]) for r in rows)
    for r in rows:
        status = "ok" if r["available"] else "missing"
        print(f"{r['title']:<{width}}  {r['asset_id']:<8} {status}")
    return 0


def _cli_play(title: str, minutes: int, audio_dir: Optional[str]) -> int:
    """Run one session on a QCoreApplication. Returns process exit code."""
    from PyQt6.QtCore import QCoreApplication
    from .engine.audio import AudioEngine
    from .engine.scheduler import QtScheduler
    from .session import (
        PlaybackSessionController,
        SessionEventType,
        SessionPresentationAdapter,
        StopReason,
    )
    from .session.controller import remaining_time_from_seconds

    log = logging.getLogger(__name__)
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    scheduler = QtScheduler()
    audio = AudioEngine(get_audio_dir(audio_dir))
    controller = PlaybackSessionController(audio, scheduler, on_dismiss=app.quit)
    controller.event_emitter.subscribe(
        SessionEventType.SESSION_END, lambda evt: log.info("Session complete: %s", evt)
    )
    adapter = SessionPresentationAdapter(
        controller,
        scheduler,
        on_update=lambda text: print(f"\rTime left: {text}    ", end="", flush=True),
    )

    try:
        session = controller.start(title, minutes)
    except AssetUnavailable as exc:
        print(f"Audio file not found: {exc}", file=sys.stderr)
        return 1

    print(f"Playing: {session.track.title} ({minutes} min). Ctrl+C to stop.")
    # The one-second ticker hands control back to Python, so SIGINT is serviced promptly
    previous = signal.signal(signal.SIGINT, lambda *_: controller.stop(dismiss=True))
    adapter.start()
    try:
        app.exec()
    finally:
        adapter.stop()
        controller.close()
        signal.signal(signal.SIGINT, previous)
        print()
    last = controller.last_session
    if last is not None and last.stopped_at is not None:
        if last.stop_reason is StopReason.ELAPSED:
            print("Session complete.")
        else:
            remaining = remaining_time_from_seconds(last.remaining_seconds(last.stopped_at))
            print(f"Stopped with {format_remaining(remaining)} left.")
    return 0


def selftest() -> int:
    """Fast import-and-init smoke test. Returns exit code."""
    try:
        import PyQt6  # noqa: F401  # Ensure UI deps import
        import pygame  # noqa: F401
        from .session import PlaybackSessionController, TrackCatalog as _Catalog  # noqa: F401
        from .ui.main_window import MainWindow  # noqa: F401

        if len(_Catalog()) != 4:
            raise RuntimeError("Track catalog is incomplete")

        msg = "Selftest OK: imports + catalog available"
        logging.getLogger(__name__).info(msg)
        print(msg)
        return 0
    except Exception as e:
        logging.getLogger(__name__).error("Selftest failed: %s", e)
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging before doing any work; flags win over the environment
    level, mode = resolve_logging_options(args.log_level, args.log_mode)
    setup_logging(
        level=level,
        log_file=args.log_file,
        json_format=(args.log_format == "json"),
        log_mode=mode,
        add_console=True,
    )

    cmd = args.command or "gui"
    if cmd == "gui":
        # Import lazily so non-GUI commands never create a QApplication
        from .app import run as run_gui
        return run_gui(getattr(args, "audio_dir", None))
    if cmd == "tracks":
        return _cli_tracks(args.json, args.audio_dir)
    if cmd == "play":
        return _cli_play(args.track, args.minutes, args.audio_dir)
    if cmd == "selftest":
        return selftest()
    parser.error(f"unknown command {cmd!r}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
