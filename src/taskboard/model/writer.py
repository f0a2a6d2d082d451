"""Encode a Board into board file text."""

import json

from taskboard.errors import FormatError
from taskboard.model.loader import REQUIRED_HEADERS
from taskboard.models import Board, Column, Ticket
from taskboard.parser import format_line


def _number(value: float) -> int | float:
    """Write integral keys as ints so files stay tidy."""
    return int(value) if float(value).is_integer() else value


def ticket_to_dict(ticket: Ticket) -> dict:
    return {
        "id": ticket.id,
        "title": ticket.title,
        "description": ticket.description,
        "status": ticket.status.value,
        "createdAt": ticket.created_at,
        "updatedAt": ticket.updated_at,
        "position": _number(ticket.position),
    }


def column_to_dict(column: Column) -> dict:
    return {
        "id": column.id.value,
        "name": column.name,
        "tickets": [ticket_to_dict(t) for t in column.tickets],
    }


def board_to_dict(board: Board) -> dict:
    """Convert a board to plain JSON-ready data, hidden column included."""
    return {"columns": [column_to_dict(c) for c in board.columns]}


def encode_json(board: Board) -> str:
    return json.dumps(board_to_dict(board), indent=2, ensure_ascii=False) + "\n"


def _csv_row(ticket: Ticket) -> list[str]:
    return [
        ticket.id,
        ticket.title,
        ticket.description,
        ticket.status.value,
        ticket.created_at,
        ticket.updated_at,
    ]


def encode_csv(board: Board) -> str:
    """Encode as CSV: header row, then one row per ticket in board order.

    Positions and column names are not part of this format.
    """
    lines = [",".join(REQUIRED_HEADERS)]
    lines.extend(format_line(_csv_row(t)) for t in board.all_tickets())
    return "\n".join(lines) + "\n"


ENCODERS = {
    "json": encode_json,
    "csv": encode_csv,
}


def encode(board: Board, fmt: str) -> str:
    """Encode board in the named format ("json" or "csv")."""
    try:
        encoder = ENCODERS[fmt]
    except KeyError:
        raise FormatError(f"Unsupported board format: {fmt!r}")
    return encoder(board)
