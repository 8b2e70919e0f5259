"""
QSettings wrapper: browser window geometry and last visited URL.
"""
from __future__ import annotations

from typing import cast

from PySide6.QtCore import QByteArray, QSettings

from moca_browser.config import APP_NAME, ORGANIZATION_NAME


class AppSettings:
    """Window and navigation persistence via QSettings (platform-specific path)."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._q = qsettings if qsettings is not None else QSettings(ORGANIZATION_NAME, APP_NAME)

    # --- Main window ---
    def get_main_window_geometry(self) -> QByteArray | None:
        return cast(QByteArray | None, self._q.value("mainWindow/geometry", None, QByteArray))

    def set_main_window_geometry(self, geometry: QByteArray) -> None:
        self._q.setValue("mainWindow/geometry", geometry)

    # --- Navigation ---
    def get_last_url(self) -> str | None:
        value = self._q.value("navigation/lastUrl", "", str)
        return str(value) or None

    def set_last_url(self, url: str) -> None:
        self._q.setValue("navigation/lastUrl", url)

    def sync(self) -> None:
        self._q.sync()
