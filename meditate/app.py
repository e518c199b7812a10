import sys, os
import asyncio
import logging
import qasync
from PyQt6.QtWidgets import QApplication
from .ui.main_window import MainWindow
from .engine.audio import AudioEngine
from .qss import QSS
from . import __app_name__, __version__
from .logging_utils import resolve_logging_options, setup_logging
from .platform_paths import get_audio_dir


def run(audio_dir: str | os.PathLike[str] | None = None) -> int:
    # Ensure logging is configured when launching GUI directly
    if not logging.getLogger().handlers:
        level, mode = resolve_logging_options()
        setup_logging(level=level, add_console=True, log_mode=mode)
    log = logging.getLogger(__name__)
    log.info("%s %s starting", __app_name__, __version__)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(__app_name__)
    app.setStyleSheet(QSS)

    # qasync loop so the Qt event loop drives asyncio as well
    loop = qasync.QEventLoop(app)
    asyncio.set_event_loop(loop)

    audio = AudioEngine(get_audio_dir(audio_dir))
    win = MainWindow(audio)
    app.aboutToQuit.connect(win.pop_to_root)
    win.show()

    with loop:
        loop.run_forever()
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
