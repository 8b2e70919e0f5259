"""Browser launcher: normal or headless startup of the Qt application."""

from moca_browser.launcher.flags import HEADLESS_ENV_KEYS, HeadlessFlags, is_headless_mode
from moca_browser.launcher.launcher import AppFactory, Launcher, Toolkit, launch

__all__ = [
    "AppFactory",
    "HEADLESS_ENV_KEYS",
    "HeadlessFlags",
    "Launcher",
    "Toolkit",
    "is_headless_mode",
    "launch",
]
