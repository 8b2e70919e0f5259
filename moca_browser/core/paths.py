"""Where the browser keeps its runtime state (currently logs).

``MOCA_STATE_DIR`` wins when set. Otherwise a source checkout writes to
``<project>/.app_state`` and an installed build to the per-user data dir.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from moca_browser.config import PROJECT_ROOT

log = logging.getLogger(__name__)

STATE_DIR_ENV = "MOCA_STATE_DIR"
_USER_DIR_NAME = "moca_browser"


def _is_writable_dir(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        return False
    return os.access(path, os.W_OK)


def user_data_dir() -> Path:
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return (base / _USER_DIR_NAME).resolve()


def get_app_state_dir() -> Path:
    override = os.environ.get(STATE_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    proj_dir = PROJECT_ROOT / ".app_state"
    if _is_writable_dir(proj_dir):
        return proj_dir
    log.debug("%s is not writable; using the user data dir", proj_dir)
    return user_data_dir()


def get_logs_dir(state_dir: Path | None = None) -> Path:
    logs_dir = (state_dir or get_app_state_dir()) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir
