"""
Shared pytest configuration for the to-do notes test suite.

This file centralizes reusable testing utilities so that:
    • storage tests run against a throwaway SQLite file
    • creation timestamps are deterministic
    • menu tests can script standard input line by line
    • CLI tests share a single CliRunner factory
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List

import pytest
from typer.testing import CliRunner

from todo_notes.storage import NoteStore


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_path):
    """Location of a not-yet-created database file inside tmp_path."""
    return tmp_path / "to_do_notes" / "data"


# ---------------------------------------------------------------------------
# Fixture: fixed_clock
# ---------------------------------------------------------------------------
@pytest.fixture
def fixed_clock():
    """
    Deterministic clock for NoteStore.

    Exposes:
        • calling it → 2024-01-01T12:00:00Z, then one minute later each call
        • .issued   → every datetime handed out so far
    """

    class FixedClock:
        def __init__(self) -> None:
            self.start = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
            self.issued: List[datetime] = []

        def __call__(self) -> datetime:
            value = self.start + timedelta(minutes=len(self.issued))
            self.issued.append(value)
            return value

    return FixedClock()


@pytest.fixture
def store(db_path, fixed_clock):
    """An initialized NoteStore backed by a temporary SQLite file."""
    note_store = NoteStore.open(db_path, clock=fixed_clock)
    yield note_store
    note_store.close()


# ---------------------------------------------------------------------------
# Fixture: scripted_input
# ---------------------------------------------------------------------------
@pytest.fixture
def scripted_input(monkeypatch):
    """
    Replace builtins.input with a scripted sequence of lines.

    Usage:
        scripted_input(["c", "title", "content", "q"])

    When the script runs out, input() raises EOFError like a closed stdin.
    """

    def _install(lines: Iterable[str]) -> None:
        remaining = iter(lines)

        def _fake_input(prompt: str = "") -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", _fake_input)

    return _install
