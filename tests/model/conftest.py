"""Shared test helpers for model tests."""

from taskboard.models import Board, Column, Ticket, TicketStatus, new_board

STAMP = "2024-01-01T00:00:00.000Z"


def _make_ticket(ticket_id, title="", status="todo", position=0.0, description=""):
    """Helper to build a Ticket with fixed timestamps."""
    return Ticket(
        id=ticket_id,
        title=title or ticket_id,
        description=description,
        status=TicketStatus(status),
        created_at=STAMP,
        updated_at=STAMP,
        position=float(position),
    )


def _make_board(**columns):
    """Helper to build a board from column id → list of (id, position) pairs.

    Keyword names use underscores for dashes: in_progress=[...].
    """
    board = new_board()
    for key, entries in columns.items():
        status = TicketStatus(key.replace("_", "-"))
        column = board.ensure_column(status)
        column.tickets = [_make_ticket(tid, status=status.value, position=pos) for tid, pos in entries]
    return board


def _ids(board: Board, column_id: str) -> list[str]:
    return [t.id for t in board.column(column_id).tickets]


def _positions(column: Column) -> list[float]:
    return [t.position for t in column.tickets]
