"""Infrastructure: Qt application bootstrap, launch routines, settings, error boundary.

Keep this package import lightweight: do not import Qt GUI modules at import time.
Headless CI environments may have PySide6 installed but miss runtime GUI libs
(e.g. ``libGL.so.1``); the lazy exports below defer Qt initialization until used.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "create_application",
    "run_event_loop",
    "QtToolkit",
    "install_error_boundary",
    "AppSettings",
]

_EXPORTS = {
    "create_application": "moca_browser.ui.infrastructure.application",
    "run_event_loop": "moca_browser.ui.infrastructure.application",
    "QtToolkit": "moca_browser.ui.infrastructure.toolkit",
    "install_error_boundary": "moca_browser.ui.infrastructure.error_boundary",
    "AppSettings": "moca_browser.ui.infrastructure.settings",
}


def __getattr__(name: str) -> Any:
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)
