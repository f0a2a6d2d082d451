"""Tests for BoardSession: load, apply, save, poll, dispose."""

import json
import logging
import os

import pytest

from taskboard.errors import FormatError, ParseError, ValidationError
from taskboard.model.column import rename_column
from taskboard.model.loader import decode_json
from taskboard.model.ticket import create_ticket, delete_ticket, move_ticket
from taskboard.session import BoardSession


def _bump_mtime(path):
    """Push mtime forward so a rewrite is visible even on coarse clocks."""
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))


@pytest.fixture
def session(tmp_path):
    s = BoardSession(tmp_path / "board.json")
    s.create()
    return s


def test_format_from_suffix(tmp_path):
    assert BoardSession(tmp_path / "a.json").format == "json"
    assert BoardSession(tmp_path / "a.csv").format == "csv"


def test_unsupported_suffix(tmp_path):
    with pytest.raises(FormatError):
        BoardSession(tmp_path / "a.md")


def test_create_writes_default_board(session):
    data = json.loads(session.path.read_text())
    assert [c["id"] for c in data["columns"]] == ["todo", "in-progress", "done"]
    assert session.board.all_tickets() == []


def test_open_reads_file(tmp_path):
    path = tmp_path / "board.csv"
    path.write_text("id,title,description,status,createdAt,updatedAt\nticket-1,A,,done,,\n")
    session = BoardSession(path)
    board = session.open()
    assert [t.id for t in board.column("done").tickets] == ["ticket-1"]


def test_open_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        BoardSession(tmp_path / "nope.json").open()


def test_open_failure_keeps_board(session):
    before = session.board
    session.path.write_text("{broken")
    with pytest.raises(ParseError):
        session.open()
    assert session.board is before


def test_apply_persists(session):
    board = session.apply(create_ticket, "Write tests")
    on_disk = decode_json(session.path.read_text())
    assert on_disk == board
    assert session.board is board


def test_apply_noop_does_not_write(session):
    mtime = session.path.stat().st_mtime_ns
    board = session.board
    assert session.apply(move_ticket, "ticket-missing", "done", 0) is board
    assert session.path.stat().st_mtime_ns == mtime


def test_apply_in_call_order(session):
    session.apply(create_ticket, "First")
    session.apply(create_ticket, "Second")
    (first, second) = session.board.column("todo").tickets
    session.apply(move_ticket, second.id, "todo", 0)
    session.apply(delete_ticket, first.id)
    assert [t.title for t in session.board.column("todo").tickets] == ["Second"]
    assert [t.title for t in session.board.column("deleted").tickets] == ["First"]


def test_apply_error_leaves_board(session):
    before = session.board
    with pytest.raises(ValidationError):
        session.apply(create_ticket, "x", status="deleted")
    assert session.board is before


def test_apply_before_open(tmp_path):
    with pytest.raises(RuntimeError):
        BoardSession(tmp_path / "board.json").apply(create_ticket, "x")


def test_poll_ignores_own_writes(session):
    session.apply(create_ticket, "Mine")
    assert session.poll() is False


def test_poll_picks_up_external_change(session):
    other = BoardSession(session.path)
    other.open()
    other.apply(rename_column, "todo", "Backlog")
    _bump_mtime(session.path)

    assert session.poll() is True
    assert session.board.column("todo").name == "Backlog"
    assert session.poll() is False


def test_poll_last_writer_wins(session):
    session.apply(create_ticket, "Local")
    session.path.write_text(json.dumps([{"id": "ticket-1", "title": "External"}]))
    _bump_mtime(session.path)

    assert session.poll() is True
    assert [t.title for t in session.board.all_tickets()] == ["External"]


def test_poll_touch_without_change(session):
    _bump_mtime(session.path)
    assert session.poll() is False


def test_poll_bad_file_keeps_board(session, caplog):
    session.apply(create_ticket, "Keep me")
    before = session.board
    session.path.write_text("{broken")
    _bump_mtime(session.path)

    with caplog.at_level(logging.WARNING):
        assert session.poll() is False
    assert session.board is before
    assert "could not reload" in caplog.text
    # The same broken file isn't reported again.
    assert session.poll() is False


def test_poll_missing_file(session, caplog):
    session.path.unlink()
    with caplog.at_level(logging.WARNING):
        assert session.poll() is False
    assert "disappeared" in caplog.text
    assert session.board is not None


def test_custom_logger(tmp_path, caplog):
    log = logging.getLogger("test.session")
    with caplog.at_level(logging.INFO, logger="test.session"):
        BoardSession(tmp_path / "board.json", logger=log).create()
    assert any(r.name == "test.session" and "created" in r.getMessage() for r in caplog.records)


def test_dispose(session):
    session.dispose()
    assert session.closed
    with pytest.raises(RuntimeError):
        session.apply(create_ticket, "x")
    with pytest.raises(RuntimeError):
        session.poll()
    with pytest.raises(RuntimeError):
        session.save()
