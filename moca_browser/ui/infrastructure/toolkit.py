"""Qt launch routines used by the launcher.

``launch`` is the standard windowed start. ``launch_headless`` boots the same
application on the offscreen platform plugin with software rendering, so it
works without a display server.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from PySide6.QtCore import QCoreApplication, Qt
from PySide6.QtWidgets import QApplication

from moca_browser.launcher.flags import HeadlessFlags
from moca_browser.ui.infrastructure.application import create_application, run_event_loop

if TYPE_CHECKING:
    from moca_browser.launcher.launcher import AppFactory

log = logging.getLogger(__name__)


class QtToolkit:
    def __init__(self, run: Callable[[QApplication], int] = run_event_loop) -> None:
        self._run = run

    def launch(self, factory: AppFactory, argv: Sequence[str] | None = None) -> int:
        app = create_application(argv)
        return self._start(app, factory)

    def launch_headless(
        self,
        factory: AppFactory,
        flags: HeadlessFlags,
        argv: Sequence[str] | None = None,
    ) -> int:
        if QCoreApplication.instance() is None:
            # Application attributes only take effect before the instance exists.
            if flags.uses_software_rendering:
                QCoreApplication.setAttribute(Qt.ApplicationAttribute.AA_UseSoftwareOpenGL)
        else:
            log.debug("QApplication already exists; headless platform arguments are ignored")
        args = list(sys.argv if argv is None else argv) + flags.qt_arguments()
        app = create_application(args)
        return self._start(app, factory)

    def _start(self, app: QApplication, factory: AppFactory) -> int:
        window = factory()
        window.show()
        log.debug("Started %s on platform %s", type(window).__name__, app.platformName())
        return self._run(app)
