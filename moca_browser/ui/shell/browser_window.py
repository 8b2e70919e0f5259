"""
Browser shell: address bar, history navigation and a rich text view.

Renders local HTML documents (``file:`` URLs, plain paths, ``about:blank``).
Remote pages are fetched by the crawler, not by this window.
"""
from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QByteArray, QUrl
from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import QLineEdit, QMainWindow, QStatusBar, QTextBrowser, QToolBar

from moca_browser.config import APP_NAME, DEFAULT_START_URL, DEFAULT_WINDOW_SIZE
from moca_browser.core.version import get_version_string
from moca_browser.launcher.flags import is_headless_mode
from moca_browser.ui.infrastructure.settings import AppSettings

log = logging.getLogger(__name__)

BLANK_URL = "about:blank"


def to_qurl(url: str) -> QUrl | None:
    """Resolve user input to a loadable URL; ``None`` for schemes the shell cannot load."""
    text = url.strip()
    if not text or text == BLANK_URL:
        return QUrl(BLANK_URL)
    qurl = QUrl(text)
    if qurl.scheme() == "file":
        return qurl
    # Windows drive letters parse as a one-letter scheme.
    if not qurl.scheme() or len(qurl.scheme()) == 1:
        return QUrl.fromLocalFile(str(Path(text).expanduser().resolve()))
    return None


class BrowserWindow(QMainWindow):
    """Main browser window; geometry and last URL are persisted unless headless."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        start_url: str | None = None,
        headless: bool | None = None,
    ) -> None:
        super().__init__()
        # None: follow the MOCA_HEADLESS flag of the process environment.
        self._headless = is_headless_mode() if headless is None else headless
        self._current_url = BLANK_URL
        self._settings = settings if settings is not None else AppSettings()
        self._base_title = f"{APP_NAME} - {get_version_string()}"
        self.setWindowTitle(self._base_title)
        self.resize(*DEFAULT_WINDOW_SIZE)

        self._view = QTextBrowser(self)
        self._view.setOpenLinks(True)
        self._view.setOpenExternalLinks(False)
        self._view.sourceChanged.connect(self._on_source_changed)
        self.setCentralWidget(self._view)

        self._address = QLineEdit(self)
        self._address.setPlaceholderText("Path or file:// URL")
        self._address.returnPressed.connect(self._on_address_entered)

        toolbar = QToolBar("Navigation", self)
        toolbar.setMovable(False)
        for text, slot, key in (
            ("Back", self._view.backward, QKeySequence.StandardKey.Back),
            ("Forward", self._view.forward, QKeySequence.StandardKey.Forward),
            ("Reload", self._view.reload, QKeySequence.StandardKey.Refresh),
        ):
            action = QAction(text, self)
            action.setShortcuts(key)
            action.triggered.connect(slot)
            toolbar.addAction(action)
        toolbar.addWidget(self._address)
        self.addToolBar(toolbar)

        self.setStatusBar(QStatusBar(self))

        if not self._headless:
            self._restore_geometry()
        initial = start_url or self._settings.get_last_url() or DEFAULT_START_URL
        self.load(initial)

    @property
    def view(self) -> QTextBrowser:
        return self._view

    def current_url(self) -> str:
        return self._current_url

    def load(self, url: str) -> bool:
        """Navigate to ``url``. Returns False (and reports it) when the URL cannot be loaded."""
        qurl = to_qurl(url)
        if qurl is None:
            self.show_message(f"Unsupported URL: {url}")
            log.warning("Unsupported URL %s", url, extra={"url": url})
            return False
        if qurl.toString() == BLANK_URL:
            self._view.clear()
            self._view.clearHistory()
            self._address.setText(BLANK_URL)
            self._current_url = BLANK_URL
            self.setWindowTitle(self._base_title)
            return True
        local = qurl.toLocalFile()
        if local and not Path(local).is_file():
            self.show_message(f"File not found: {local}")
            log.warning("File not found %s", local, extra={"url": url})
            return False
        if self._view.source() == qurl:
            # setSource ignores the URL it already shows, even after about:blank cleared it.
            self._view.reload()
        else:
            self._view.setSource(qurl)
        return True

    def show_message(self, text: str) -> None:
        self.statusBar().showMessage(text, 5000)

    def _on_address_entered(self) -> None:
        self.load(self._address.text())

    def _on_source_changed(self, url: QUrl) -> None:
        self._current_url = url.toString()
        self._address.setText(self._current_url)
        title = self._view.documentTitle()
        self.setWindowTitle(f"{title} - {APP_NAME}" if title else self._base_title)
        log.debug("Loaded %s", url.toString(), extra={"url": url.toString()})

    def _restore_geometry(self) -> None:
        geom = self._settings.get_main_window_geometry()
        if isinstance(geom, QByteArray) and not geom.isEmpty():
            self.restoreGeometry(geom)

    def _save_state(self) -> None:
        self._settings.set_main_window_geometry(self.saveGeometry())
        self._settings.set_last_url(self.current_url())
        self._settings.sync()

    def closeEvent(self, event: QCloseEvent) -> None:
        if not self._headless:
            self._save_state()
        super().closeEvent(event)
