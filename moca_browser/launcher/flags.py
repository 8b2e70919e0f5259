"""Headless rendering flags.

Qt picks its platform plugin and rendering backend from the process
environment when the QApplication is created, so the flags must be in place
before the launch call. ``HeadlessFlags`` describes them explicitly; the
launcher decides where they are written.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, fields

from moca_browser.core.errors import ValidationError

HEADLESS_MODE_KEY = "MOCA_HEADLESS"
WINDOWING_BACKEND_KEY = "QT_QPA_PLATFORM"
HEADLESS_PLATFORM_KEY = "QT_QPA_OFFSCREEN_NO_GLX"
RENDER_ORDER_KEY = "QT_QUICK_BACKEND"

HEADLESS_ENV_KEYS = (
    HEADLESS_MODE_KEY,
    WINDOWING_BACKEND_KEY,
    HEADLESS_PLATFORM_KEY,
    RENDER_ORDER_KEY,
)

_SOFTWARE_RENDER_ORDERS = frozenset({"software", "sw"})
_TRUTHY = frozenset({"1", "true", "yes"})


@dataclass(frozen=True, slots=True)
class HeadlessFlags:
    """Environment flags selecting an offscreen, software-rendered Qt runtime."""

    headless_mode: str = "true"
    windowing_backend: str = "offscreen"
    headless_platform: str = "1"
    render_order: str = "software"

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> HeadlessFlags:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValidationError(f"Unknown headless flags: {', '.join(sorted(map(str, unknown)))}")
        for name, value in data.items():
            if not isinstance(value, str) or not value:
                raise ValidationError(f"Headless flag {name!r} must be a non-empty string")
        mode = data.get("headless_mode")
        if mode is not None and str(mode).strip().lower() not in _TRUTHY:
            raise ValidationError(
                f"Headless flag 'headless_mode' must be one of {', '.join(sorted(_TRUTHY))}, got {mode!r}"
            )
        return cls(**data)  # type: ignore[arg-type]

    def as_environ(self) -> dict[str, str]:
        return {
            HEADLESS_MODE_KEY: self.headless_mode,
            WINDOWING_BACKEND_KEY: self.windowing_backend,
            HEADLESS_PLATFORM_KEY: self.headless_platform,
            RENDER_ORDER_KEY: self.render_order,
        }

    def apply(self, environ: MutableMapping[str, str]) -> None:
        """Write the four flags into ``environ``. Nothing is read back or cleared."""
        environ.update(self.as_environ())

    def qt_arguments(self) -> list[str]:
        """Command line form of the platform selection understood by QApplication."""
        return ["-platform", self.windowing_backend]

    @property
    def uses_software_rendering(self) -> bool:
        return self.render_order.lower() in _SOFTWARE_RENDER_ORDERS


def is_headless_mode(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get(HEADLESS_MODE_KEY, "").strip().lower() in _TRUTHY
