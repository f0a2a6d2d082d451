"""Tests for decoding board files."""

import json
import sys

import pytest

from taskboard.errors import FormatError, ParseError, ValidationError
from taskboard.ids import is_ticket_id
from taskboard.model.loader import decode, decode_csv, decode_json
from taskboard.models import TicketStatus
from tests.model.conftest import _ids, _positions

HEADER = "id,title,description,status,createdAt,updatedAt"
STAMP = "2024-01-01T00:00:00Z"


def _ticket(ticket_id, title="T", status="todo", **extra):
    return {
        "id": ticket_id,
        "title": title,
        "description": "",
        "status": status,
        "createdAt": STAMP,
        "updatedAt": STAMP,
        **extra,
    }


# --- JSON ---


def test_decode_json_invalid():
    with pytest.raises(ParseError):
        decode_json("{not json")


def test_decode_json_columns_document():
    doc = {
        "columns": [
            {"id": "todo", "name": "Backlog", "tickets": [_ticket("ticket-1", position=1000)]},
            {"id": "in-progress", "name": "Doing", "tickets": []},
            {"id": "done", "name": "Done", "tickets": [_ticket("ticket-2", status="done", position=5)]},
        ]
    }
    board = decode_json(json.dumps(doc))
    assert [c.name for c in board.columns] == ["Backlog", "Doing", "Done"]
    assert _ids(board, "todo") == ["ticket-1"]
    assert board.column("done").tickets[0].position == 5


def test_decode_json_column_decides_status():
    doc = {"columns": [{"id": "done", "name": "Done", "tickets": [_ticket("ticket-1", status="todo")]}]}
    board = decode_json(json.dumps(doc))
    assert board.find_ticket("ticket-1").status is TicketStatus.DONE


def test_decode_json_adds_missing_working_columns():
    board = decode_json(json.dumps({"columns": []}))
    assert [c.id.value for c in board.columns] == ["todo", "in-progress", "done"]


def test_decode_json_keeps_deleted_column():
    doc = {"columns": [{"id": "deleted", "name": "Deleted", "tickets": [_ticket("ticket-1", status="deleted")]}]}
    board = decode_json(json.dumps(doc))
    assert [c.id.value for c in board.columns] == ["todo", "in-progress", "done", "deleted"]
    assert board.column("deleted").hidden


def test_decode_json_repairs_ids_across_columns():
    doc = {
        "columns": [
            {"id": "todo", "tickets": [{"id": "ticket-1"}, {"title": "no id"}]},
            {"id": "done", "tickets": [{"id": "ticket-1"}]},
        ]
    }
    board = decode_json(json.dumps(doc))
    ids = [t.id for t in board.all_tickets()]
    assert ids[0] == "ticket-1"
    assert len(set(ids)) == 3
    assert all(is_ticket_id(i) for i in ids)


def test_decode_json_missing_positions_synthesized():
    doc = {"columns": [{"id": "todo", "tickets": [{"id": "ticket-1"}, {"id": "ticket-2"}]}]}
    board = decode_json(json.dumps(doc))
    assert _positions(board.column("todo")) == [1000, 2000]


def test_decode_json_sorts_by_position():
    doc = {
        "columns": [
            {
                "id": "todo",
                "tickets": [_ticket("ticket-1", position=3000), _ticket("ticket-2", position=1000)],
            }
        ]
    }
    board = decode_json(json.dumps(doc))
    assert _ids(board, "todo") == ["ticket-2", "ticket-1"]
    assert _positions(board.column("todo")) == [1000, 3000]


def test_decode_json_duplicate_positions_renumbered_in_order():
    doc = {
        "columns": [
            {
                "id": "todo",
                "tickets": [_ticket("ticket-1", position=1000), _ticket("ticket-2", position=1000)],
            }
        ]
    }
    board = decode_json(json.dumps(doc))
    assert _ids(board, "todo") == ["ticket-1", "ticket-2"]
    assert _positions(board.column("todo")) == [1000, 2000]


def test_decode_json_unknown_column_rebucketed():
    doc = {"columns": [{"id": "blocked", "tickets": [_ticket("ticket-1", status="in-progress")]}]}
    board = decode_json(json.dumps(doc))
    assert board.column("blocked") is None
    assert _ids(board, "in-progress") == ["ticket-1"]


def test_decode_json_legacy_list():
    records = [
        _ticket("ticket-1", status="todo"),
        _ticket("ticket-2", status="done"),
        {"title": "bare"},
    ]
    board = decode_json(json.dumps(records))
    assert _ids(board, "todo")[0] == "ticket-1"
    assert len(board.column("todo").tickets) == 2
    assert _ids(board, "done") == ["ticket-2"]
    assert _positions(board.column("todo")) == [1000, 2000]


def test_decode_json_legacy_deleted_gets_hidden_column():
    board = decode_json(json.dumps([_ticket("ticket-1", status="deleted")]))
    assert _ids(board, "deleted") == ["ticket-1"]
    assert board.column("todo").tickets == []


def test_decode_json_legacy_skips_non_objects():
    board = decode_json(json.dumps([1, "x", None, _ticket("ticket-1")]))
    assert [t.id for t in board.all_tickets()] == ["ticket-1"]


def test_decode_json_huge_position_gets_synthesized():
    text = '{"columns": [{"id": "todo", "tickets": [{"id": "ticket-1", "position": 1' + "0" * 400 + "}]}]}"
    board = decode_json(text)
    assert _ids(board, "todo") == ["ticket-1"]
    assert _positions(board.column("todo")) == [1000]


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no integer digit limit")
def test_decode_json_overlong_number_is_parse_error():
    with pytest.raises(ParseError):
        decode_json('[{"title": "x", "position": ' + "9" * 5000 + "}]")


def test_decode_json_deep_nesting_is_parse_error():
    with pytest.raises(ParseError):
        decode_json("[" * 100_000 + "]" * 100_000)


def test_decode_json_scalar_yields_empty_board():
    board = decode_json("42")
    assert [c.id.value for c in board.columns] == ["todo", "in-progress", "done"]
    assert board.all_tickets() == []


# --- CSV ---


def test_decode_csv_empty():
    board = decode_csv("\n\n")
    assert len(board.columns) == 3
    assert board.all_tickets() == []


def test_decode_csv_missing_headers():
    with pytest.raises(ValidationError) as exc:
        decode_csv("id,title,status\n")
    assert exc.value.missing == ["description", "createdAt", "updatedAt"]
    assert "description" in str(exc.value)


def test_decode_csv_generates_missing_id():
    text = f"{HEADER}\n,Fix bug,,todo,{STAMP},{STAMP}\n"
    board = decode_csv(text)
    (ticket,) = board.all_tickets()
    assert ticket.title == "Fix bug"
    assert ticket.status is TicketStatus.TODO
    assert is_ticket_id(ticket.id)
    assert board.column("todo").tickets == [ticket]


def test_decode_csv_positions_in_file_order():
    text = f"{HEADER}\nticket-1,A,,todo,,\nticket-2,B,,done,,\nticket-3,C,,todo,,\n"
    board = decode_csv(text)
    assert _ids(board, "todo") == ["ticket-1", "ticket-3"]
    assert _positions(board.column("todo")) == [1000, 2000]
    assert _positions(board.column("done")) == [1000]


def test_decode_csv_crlf_and_short_rows():
    text = f"{HEADER}\r\nticket-1,Only title\r\n\r\n"
    board = decode_csv(text)
    ticket = board.find_ticket("ticket-1")
    assert ticket.title == "Only title"
    assert ticket.description == ""
    assert ticket.created_at.endswith("Z")


def test_decode_csv_header_order_free():
    text = "title,id,status,description,updatedAt,createdAt\nHello,ticket-9,done,,,\n"
    board = decode_csv(text)
    assert _ids(board, "done") == ["ticket-9"]


def test_decode_csv_bom_and_padded_headers():
    text = "\ufeffid, title,description,status,createdAt,updatedAt\nticket-1,X,,todo,,\n"
    assert decode_csv(text).find_ticket("ticket-1").title == "X"


def test_decode_csv_multiline_field():
    text = f'{HEADER}\nticket-1,"a, ""b""\nc",,todo,,\n'
    assert decode_csv(text).find_ticket("ticket-1").title == 'a, "b"\nc'


def test_decode_csv_deleted_row():
    text = f"{HEADER}\nticket-1,Gone,,deleted,,\n"
    board = decode_csv(text)
    assert _ids(board, "deleted") == ["ticket-1"]


# --- dispatch ---


def test_decode_dispatch():
    assert decode("[]", "json").all_tickets() == []
    assert decode("", "csv").all_tickets() == []


def test_decode_unknown_format():
    with pytest.raises(FormatError):
        decode("", "xml")
