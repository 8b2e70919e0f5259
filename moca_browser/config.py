"""Application configuration and constants.

Holds the project root, application identity used by Qt/QSettings, window
defaults and the optional YAML launch configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from moca_browser.core.errors import InfrastructureError, ValidationError
from moca_browser.launcher.flags import HeadlessFlags

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Qt application identity (also the QSettings scope)
APP_NAME = "Moca Browser"
ORGANIZATION_NAME = "Moca"

# Browser shell
DEFAULT_WINDOW_SIZE = (1024, 768)
DEFAULT_START_URL = "about:blank"


@dataclass(frozen=True, slots=True)
class LaunchConfig:
    headless: bool = False
    start_url: str | None = None
    flags: HeadlessFlags = field(default_factory=HeadlessFlags)


def _parse_launch_config(data: Mapping[str, Any]) -> LaunchConfig:
    unknown = set(data) - {"headless", "start_url", "flags"}
    if unknown:
        raise ValidationError(f"Unknown launch config keys: {', '.join(sorted(map(str, unknown)))}")

    headless = data.get("headless", False)
    if not isinstance(headless, bool):
        raise ValidationError(f"'headless' must be true or false, got {headless!r}")

    start_url = data.get("start_url")
    if start_url is not None and not isinstance(start_url, str):
        raise ValidationError(f"'start_url' must be a string, got {start_url!r}")

    raw_flags = data.get("flags")
    if raw_flags is None:
        raw_flags = {}
    if not isinstance(raw_flags, Mapping):
        raise ValidationError("'flags' must be a mapping of flag name to value")

    return LaunchConfig(
        headless=headless,
        start_url=start_url,
        flags=HeadlessFlags.from_mapping(raw_flags),
    )


def load_launch_config(path: Path | str | None = None) -> LaunchConfig:
    """Load launch options from a YAML file; no path means defaults."""
    if path is None:
        return LaunchConfig()
    p = Path(path)
    if not p.is_file():
        raise ValidationError(f"Launch config not found: {p}")
    try:
        with open(p, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValidationError(f"Launch config is not valid YAML: {p}", cause=e) from e
    except OSError as e:
        raise InfrastructureError(f"Cannot read launch config: {p}", cause=e) from e
    if not isinstance(data, Mapping):
        raise ValidationError(f"Launch config must be a mapping: {p}")
    return _parse_launch_config(data)
