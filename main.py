"""
Entry point for the Moca browser.

Run: python main.py [--headless] [--url PATH] [--config launch.yaml]
Requires: pip install -e .
"""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

from moca_browser.config import LaunchConfig, load_launch_config
from moca_browser.core.errors import AppError
from moca_browser.core.observability.logging_config import setup_logging
from moca_browser.core.version import get_version_string
from moca_browser.launcher import AppFactory, launch
from moca_browser.ui.infrastructure import install_error_boundary

if TYPE_CHECKING:
    from PySide6.QtWidgets import QWidget

log = logging.getLogger("moca_browser.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="moca-browser", description="Moca browser launcher")
    parser.add_argument(
        "--headless",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="run without a visible display (offscreen platform, software rendering)",
    )
    parser.add_argument("--url", help="page to open: file path or file:// URL")
    parser.add_argument("--config", help="YAML launch config (headless, start_url, flags)")
    parser.add_argument("--log-level", help="logging level, overrides LOG_LEVEL")
    parser.add_argument("--version", action="version", version=get_version_string())
    return parser


def resolve_config(args: argparse.Namespace) -> LaunchConfig:
    """Merge the config file with command line overrides (command line wins)."""
    cfg = load_launch_config(args.config)
    headless = cfg.headless if args.headless is None else args.headless
    start_url = args.url if args.url is not None else cfg.start_url
    return LaunchConfig(headless=headless, start_url=start_url, flags=cfg.flags)


def browser_factory(start_url: str | None, headless: bool = False) -> AppFactory:
    def _factory() -> QWidget:
        from moca_browser.ui.shell import BrowserWindow

        return BrowserWindow(start_url=start_url, headless=headless)

    return _factory


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)
    install_error_boundary()
    try:
        cfg = resolve_config(args)
    except AppError as e:
        log.error("Invalid launch configuration: %s", e)
        return 2

    return launch(cfg.headless, browser_factory(cfg.start_url, cfg.headless), flags=cfg.flags)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
