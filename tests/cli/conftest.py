"""Shared fixtures for CLI tests."""

import pytest

from taskboard.model.ticket import create_ticket
from taskboard.session import BoardSession


@pytest.fixture
def board_file(tmp_path):
    """A JSON board with two tickets in To Do: "First ticket" then "Second ticket"."""
    session = BoardSession(tmp_path / "board.json")
    session.create()
    session.apply(create_ticket, "First ticket", "Description one.")
    session.apply(create_ticket, "Second ticket", "Description two.")
    return session.path


@pytest.fixture
def ticket_ids(board_file):
    """IDs of the board_file tickets, in column order."""
    session = BoardSession(board_file)
    board = session.open()
    return [t.id for t in board.column("todo").tickets]
