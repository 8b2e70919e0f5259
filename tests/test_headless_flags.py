from __future__ import annotations

import pytest

from moca_browser.core.errors import ValidationError
from moca_browser.launcher.flags import HEADLESS_ENV_KEYS, HeadlessFlags, is_headless_mode


def test_as_environ_has_exactly_the_four_keys() -> None:
    env = HeadlessFlags().as_environ()
    assert tuple(env) == HEADLESS_ENV_KEYS


def test_apply_overwrites_previous_values_only_for_its_keys() -> None:
    env = {"QT_QPA_PLATFORM": "xcb", "HOME": "/home/u"}
    HeadlessFlags().apply(env)
    assert env["QT_QPA_PLATFORM"] == "offscreen"
    assert env["HOME"] == "/home/u"


def test_qt_arguments_select_windowing_backend() -> None:
    assert HeadlessFlags().qt_arguments() == ["-platform", "offscreen"]
    assert HeadlessFlags(windowing_backend="minimal").qt_arguments() == ["-platform", "minimal"]


@pytest.mark.parametrize(
    ("order", "expected"),
    [("software", True), ("sw", True), ("SW", True), ("opengl", False)],
)
def test_uses_software_rendering(order: str, expected: bool) -> None:
    assert HeadlessFlags(render_order=order).uses_software_rendering is expected


def test_from_mapping_keeps_defaults_for_missing_fields() -> None:
    flags = HeadlessFlags.from_mapping({"render_order": "sw"})
    assert flags == HeadlessFlags(render_order="sw")


def test_from_mapping_rejects_unknown_flag() -> None:
    with pytest.raises(ValidationError, match="prism_order"):
        HeadlessFlags.from_mapping({"prism_order": "sw"})


@pytest.mark.parametrize("value", [1, "", None, True])
def test_from_mapping_rejects_non_string_values(value) -> None:
    with pytest.raises(ValidationError):
        HeadlessFlags.from_mapping({"headless_platform": value})


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ({}, False),
        ({"MOCA_HEADLESS": "true"}, True),
        ({"MOCA_HEADLESS": "1"}, True),
        ({"MOCA_HEADLESS": " Yes "}, True),
        ({"MOCA_HEADLESS": "false"}, False),
    ],
)
def test_is_headless_mode(env: dict[str, str], expected: bool) -> None:
    assert is_headless_mode(env) is expected


def test_is_headless_mode_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("MOCA_HEADLESS", "true")
    assert is_headless_mode() is True
    monkeypatch.delenv("MOCA_HEADLESS")
    assert is_headless_mode() is False


@pytest.mark.parametrize("mode", ["on", "false", "0"])
def test_from_mapping_rejects_headless_mode_that_reads_as_off(mode: str) -> None:
    with pytest.raises(ValidationError, match="headless_mode"):
        HeadlessFlags.from_mapping({"headless_mode": mode})


@pytest.mark.parametrize("mode", ["1", "yes", "TRUE"])
def test_accepted_headless_mode_is_seen_as_headless(mode: str) -> None:
    flags = HeadlessFlags.from_mapping({"headless_mode": mode})
    assert is_headless_mode(flags.as_environ()) is True


def test_unknown_non_string_flag_key_is_validation_error() -> None:
    with pytest.raises(ValidationError, match="Unknown headless flags: 1"):
        HeadlessFlags.from_mapping({1: "sw"})  # type: ignore[dict-item]
