"""Tests for the board data model and record repair."""

from taskboard.ids import is_ticket_id
from taskboard.models import (
    Board,
    Column,
    Ticket,
    TicketStatus,
    coerce_position,
    ensure_ticket,
    new_board,
)


def test_status_parse():
    assert TicketStatus.parse("in-progress") is TicketStatus.IN_PROGRESS
    assert TicketStatus.parse(TicketStatus.DONE) is TicketStatus.DONE
    assert TicketStatus.parse("blocked") is None
    assert TicketStatus.parse(None) is None
    assert TicketStatus.parse(["todo"]) is None


def test_new_board_has_working_columns():
    board = new_board()
    assert [c.id for c in board.columns] == [TicketStatus.TODO, TicketStatus.IN_PROGRESS, TicketStatus.DONE]
    assert [c.name for c in board.columns] == ["To Do", "In Progress", "Done"]
    assert all(c.tickets == [] for c in board.columns)


def test_ensure_column_inserts_in_canonical_order():
    board = Board(columns=[Column(TicketStatus.TODO), Column(TicketStatus.DONE)])
    board.ensure_column(TicketStatus.DELETED)
    board.ensure_column(TicketStatus.IN_PROGRESS)
    assert [c.id.value for c in board.columns] == ["todo", "in-progress", "done", "deleted"]


def test_ensure_column_returns_existing():
    board = new_board()
    assert board.ensure_column(TicketStatus.TODO) is board.columns[0]
    assert len(board.columns) == 3


def test_visible_columns_hide_deleted():
    board = new_board()
    board.ensure_column(TicketStatus.DELETED)
    assert [c.id for c in board.visible_columns()] == [TicketStatus.TODO, TicketStatus.IN_PROGRESS, TicketStatus.DONE]


def test_find_ticket_includes_hidden():
    board = new_board()
    board.ensure_column(TicketStatus.DELETED).tickets.append(Ticket("ticket-1", status=TicketStatus.DELETED))
    assert board.find_ticket("ticket-1").status is TicketStatus.DELETED
    assert board.find_ticket("ticket-2") is None
    assert board.ticket_ids() == {"ticket-1"}


def test_ensure_ticket_empty_record():
    ticket = ensure_ticket({})
    assert is_ticket_id(ticket.id)
    assert ticket.status is TicketStatus.TODO
    assert ticket.title == ""
    assert ticket.description == ""
    assert ticket.created_at.endswith("Z")
    assert ticket.updated_at.endswith("Z")


def test_ensure_ticket_keeps_valid_fields():
    record = {
        "id": "ticket-7",
        "title": "Write docs",
        "description": "All of them",
        "status": "done",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
        "position": 2500,
    }
    ticket = ensure_ticket(record)
    assert ticket == Ticket(
        id="ticket-7",
        title="Write docs",
        description="All of them",
        status=TicketStatus.DONE,
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-02T00:00:00Z",
        position=2500.0,
    )


def test_ensure_ticket_unknown_status_is_todo():
    assert ensure_ticket({"status": "archived"}).status is TicketStatus.TODO


def test_ensure_ticket_replaces_bad_id():
    assert ensure_ticket({"id": "42"}).id != "42"


def test_ensure_ticket_duplicate_gets_fresh_id():
    taken: set[str] = set()
    first = ensure_ticket({"id": "ticket-1"}, taken)
    second = ensure_ticket({"id": "ticket-1"}, taken)
    assert first.id == "ticket-1"
    assert second.id != "ticket-1"
    assert taken == {first.id, second.id}


def test_ensure_ticket_fresh_ids_distinct_in_one_pass():
    taken: set[str] = set()
    ids = [ensure_ticket({}, taken).id for _ in range(20)]
    assert len(set(ids)) == 20


def test_ensure_ticket_stringifies_text():
    ticket = ensure_ticket({"title": 12, "description": None})
    assert ticket.title == "12"
    assert ticket.description == ""


def test_coerce_position():
    assert coerce_position(3) == 3.0
    assert coerce_position(1.5) == 1.5
    assert coerce_position("3") is None
    assert coerce_position(True) is None
    assert coerce_position(float("nan")) is None
    assert coerce_position(float("inf")) is None


def test_coerce_position_huge_int():
    assert coerce_position(10**400) is None


def test_ensure_ticket_huge_position_is_repaired():
    ticket = ensure_ticket({"id": "ticket-1", "position": 10**400})
    assert ticket.id == "ticket-1"
    assert ticket.position == 0.0
