"""
Tests for database location resolution.
"""

import sys
from pathlib import Path

import pytest

from todo_notes.config import (
    APP_NAME,
    DATABASE_FILENAME,
    default_database_path,
    resolve_database_path,
)


def test_default_path_uses_user_data_dir(monkeypatch, tmp_path) -> None:
    captured = {}

    def _fake_user_data_dir(name: str, appauthor=None) -> str:
        captured["name"] = name
        return str(tmp_path / name)

    monkeypatch.setattr("todo_notes.config.platformdirs.user_data_dir", _fake_user_data_dir)

    assert default_database_path() == tmp_path / APP_NAME / DATABASE_FILENAME
    assert captured["name"] == "to_do_notes"


@pytest.mark.skipif(sys.platform != "linux", reason="XDG layout is Linux-only")
def test_default_path_is_xdg_data_home_not_config(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    path = default_database_path()

    assert path == tmp_path / ".local" / "share" / "to_do_notes" / "data"
    assert ".config" not in path.parts


def test_resolve_prefers_override(tmp_path) -> None:
    override = tmp_path / "custom.db"

    assert resolve_database_path(override) == override


def test_resolve_expands_user_home(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert resolve_database_path(Path("~/notes.db")) == tmp_path / "notes.db"


def test_resolve_without_override_falls_back_to_default() -> None:
    assert resolve_database_path(None) == default_database_path()
