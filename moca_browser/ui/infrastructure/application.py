"""
QApplication setup: High DPI, organization and app name for QSettings.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import cast

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from moca_browser.config import APP_NAME, ORGANIZATION_NAME
from moca_browser.core.version import get_build_info


def create_application(argv: Sequence[str] | None = None) -> QApplication:
    """Create and configure QApplication. Call before any Qt widgets.

    Qt allows one application object per process; an existing one is returned as is.
    High DPI: Qt 6 scales automatically on 4K/mixed-DPI; PassThrough keeps fractional scaling.
    """
    existing = QApplication.instance()
    if existing is not None:
        return cast(QApplication, existing)
    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(list(sys.argv if argv is None else argv))
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationVersion(get_build_info()["version"])
    return app


def run_event_loop(app: QApplication) -> int:
    """Run the event loop. Does not return until the app quits."""
    return app.exec()
