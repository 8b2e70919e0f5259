from __future__ import annotations

from pathlib import Path

from moca_browser.core import paths


def test_state_dir_override_from_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MOCA_STATE_DIR", str(tmp_path / "state"))
    assert paths.get_app_state_dir() == (tmp_path / "state").resolve()


def test_project_dir_used_when_writable(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("MOCA_STATE_DIR", raising=False)
    monkeypatch.setattr(paths, "PROJECT_ROOT", tmp_path)
    assert paths.get_app_state_dir() == tmp_path / ".app_state"
    assert (tmp_path / ".app_state").is_dir()


def test_falls_back_to_user_data_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("MOCA_STATE_DIR", raising=False)
    monkeypatch.setattr(paths, "_is_writable_dir", lambda path: False)
    monkeypatch.setattr(paths, "user_data_dir", lambda: tmp_path / "user")
    assert paths.get_app_state_dir() == tmp_path / "user"


def test_logs_dir_is_created_under_state_dir(tmp_path: Path) -> None:
    logs = paths.get_logs_dir(tmp_path)
    assert logs == tmp_path / "logs"
    assert logs.is_dir()
