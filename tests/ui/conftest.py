"""Fixtures for UI tests."""

import pytest

from taskboard.model.ticket import create_ticket
from taskboard.session import BoardSession


@pytest.fixture
def board_path(tmp_path):
    """A JSON board file.

    Structure:
    - To Do: Alpha, Beta
    - In Progress: (empty)
    - Done: Gamma
    """
    session = BoardSession(tmp_path / "board.json")
    session.create()
    session.apply(create_ticket, "Alpha", "Has a description")
    session.apply(create_ticket, "Beta")
    session.apply(create_ticket, "Gamma", status="done")
    return session.path
