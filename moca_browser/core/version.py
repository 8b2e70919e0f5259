"""Version of the running browser build.

``MOCA_VERSION`` / ``MOCA_GIT_SHA`` / ``MOCA_BUILD_DATE`` are injected by the
packaging scripts. Without them the version of the installed ``moca-browser``
distribution is used, and a source checkout that was never installed reports
``0.0.0-dev``.
"""

from __future__ import annotations

import os
from importlib import metadata

DISTRIBUTION_NAME = "moca-browser"
DEV_VERSION = "0.0.0-dev"


def installed_version() -> str | None:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return None


def get_build_info() -> dict[str, str]:
    version = os.getenv("MOCA_VERSION", "").strip() or installed_version() or DEV_VERSION
    return {
        "version": version,
        "git_sha": os.getenv("MOCA_GIT_SHA", "").strip() or "dev",
        "build_date": os.getenv("MOCA_BUILD_DATE", "").strip(),
    }


def get_version_string() -> str:
    """Short form for ``--version`` and the window title, e.g. ``v0.1.0 (abc1234)``."""
    info = get_build_info()
    details = ", ".join(part for part in (info["git_sha"], info["build_date"]) if part)
    return f"v{info['version']} ({details})"
