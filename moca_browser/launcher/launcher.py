"""Start the browser application in normal or headless mode.

The launcher only chooses a path and delegates. Whatever the toolkit raises
reaches the caller untouched.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Callable, MutableMapping
from typing import TYPE_CHECKING, Protocol

from moca_browser.launcher.flags import HeadlessFlags

if TYPE_CHECKING:
    from PySide6.QtWidgets import QWidget

log = logging.getLogger(__name__)

AppFactory = Callable[[], "QWidget"]


class Toolkit(Protocol):
    def launch(self, factory: AppFactory) -> int: ...

    def launch_headless(self, factory: AppFactory, flags: HeadlessFlags) -> int: ...


class Launcher:
    """Branch-and-delegate launcher for a single application factory.

    ``environ`` receives the headless flags; it defaults to ``os.environ``
    because Qt reads its platform settings from the process environment.
    """

    def __init__(
        self,
        factory: AppFactory,
        *,
        toolkit: Toolkit | None = None,
        flags: HeadlessFlags | None = None,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        if toolkit is None:
            from moca_browser.ui.infrastructure.toolkit import QtToolkit

            toolkit = QtToolkit()
        self._factory = factory
        self._toolkit = toolkit
        self._flags = flags if flags is not None else HeadlessFlags()
        self._environ = environ if environ is not None else os.environ

    @property
    def flags(self) -> HeadlessFlags:
        return self._flags

    def launch(self, headless: bool) -> int:
        """Run the application until it exits and return the event loop exit code."""
        if headless:
            log.info("Launching in headless mode", extra={"headless": True})
            self._flags.apply(self._environ)
            return self._toolkit.launch_headless(self._factory, self._flags)
        log.info("Launching with a visible display", extra={"headless": False})
        return self._toolkit.launch(self._factory)


def launch(
    headless: bool,
    factory: AppFactory | None = None,
    *,
    toolkit: Toolkit | None = None,
    flags: HeadlessFlags | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> int:
    """Launch ``factory`` (the browser window by default)."""
    if factory is None:
        from moca_browser.ui.shell.browser_window import BrowserWindow

        factory = functools.partial(BrowserWindow, headless=headless)
    return Launcher(factory, toolkit=toolkit, flags=flags, environ=environ).launch(headless)
