from __future__ import annotations

import pytest

from moca_browser.core import version


@pytest.fixture(autouse=True)
def _clear_build_env(monkeypatch) -> None:
    for name in ("MOCA_VERSION", "MOCA_GIT_SHA", "MOCA_BUILD_DATE"):
        monkeypatch.delenv(name, raising=False)


def test_source_checkout_reports_dev_version(monkeypatch) -> None:
    monkeypatch.setattr(version, "installed_version", lambda: None)
    assert version.get_build_info() == {"version": "0.0.0-dev", "git_sha": "dev", "build_date": ""}
    assert version.get_version_string() == "v0.0.0-dev (dev)"


def test_installed_distribution_version_is_used(monkeypatch) -> None:
    monkeypatch.setattr(version, "installed_version", lambda: "0.1.0")
    assert version.get_version_string() == "v0.1.0 (dev)"


def test_build_metadata_from_environment_wins(monkeypatch) -> None:
    monkeypatch.setattr(version, "installed_version", lambda: "0.1.0")
    monkeypatch.setenv("MOCA_VERSION", "0.3.1")
    monkeypatch.setenv("MOCA_GIT_SHA", "abc1234")
    monkeypatch.setenv("MOCA_BUILD_DATE", "2026-10-01")
    assert version.get_version_string() == "v0.3.1 (abc1234, 2026-10-01)"


def test_blank_values_fall_back(monkeypatch) -> None:
    monkeypatch.setattr(version, "installed_version", lambda: None)
    monkeypatch.setenv("MOCA_VERSION", "  ")
    monkeypatch.setenv("MOCA_GIT_SHA", "")
    assert version.get_version_string() == "v0.0.0-dev (dev)"
