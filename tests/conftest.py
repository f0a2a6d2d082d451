"""Fixtures shared by every test package."""

import pytest


@pytest.fixture(autouse=True)
def taskboard_home(tmp_path, monkeypatch):
    """Keep the preferences file out of the real home directory."""
    home = tmp_path / "taskboard-home"
    monkeypatch.setenv("TASKBOARD_HOME", str(home))
    monkeypatch.delenv("TASKBOARD_POLL_INTERVAL", raising=False)
    return home
