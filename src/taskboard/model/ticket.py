"""Ticket mutation operations for taskboard boards.

Each operation takes a Board and returns a new Board; the input is never
modified. When the ticket (or destination) can't be found the input board
is returned as-is, so stale drag events from the view are harmless.
"""

from copy import deepcopy

from taskboard.errors import ValidationError
from taskboard.ids import generate_id, utc_now
from taskboard.model.positions import (
    append_position,
    fits_between,
    insert_position,
    renumber,
    sort_tickets,
)
from taskboard.models import WORKING_STATUSES, Board, Column, Ticket, TicketStatus


def _ticket_id(ticket: Ticket | str) -> str:
    return ticket.id if isinstance(ticket, Ticket) else ticket


def _pop_ticket(column: Column, ticket_id: str) -> Ticket:
    index = next(i for i, t in enumerate(column.tickets) if t.id == ticket_id)
    return column.tickets.pop(index)


def find_ticket_column(board: Board, ticket_id: str) -> Column | None:
    """Find the column containing a ticket, hidden column included."""
    for col in board.columns:
        if any(t.id == ticket_id for t in col.tickets):
            return col
    return None


def find_ticket(board: Board, ticket_id: str) -> Ticket | None:
    return board.find_ticket(ticket_id)


def create_ticket(
    board: Board,
    title: str,
    description: str = "",
    status: TicketStatus | str = TicketStatus.TODO,
) -> Board:
    """Append a new ticket to the column matching status.

    The new ticket gets a fresh id, both timestamps set to now, and a key
    after every existing ticket, so it is the last ticket of its column.
    """
    target = TicketStatus.parse(status)
    if target not in WORKING_STATUSES:
        raise ValidationError(f"Cannot create a ticket with status '{status}'")

    new = deepcopy(board)
    column = new.ensure_column(target)
    now = utc_now()
    ticket = Ticket(
        id=generate_id(new.ticket_ids()),
        title=title,
        description=description,
        status=target,
        created_at=now,
        updated_at=now,
        position=append_position(column.tickets),
    )
    column.tickets.append(ticket)
    column.tickets = sort_tickets(column.tickets)
    return new


def delete_ticket(board: Board, ticket: Ticket | str) -> Board:
    """Soft-delete a ticket into the hidden deleted column."""
    ticket_id = _ticket_id(ticket)
    source = find_ticket_column(board, ticket_id)
    if source is None or source.hidden:
        return board

    new = deepcopy(board)
    moved = _pop_ticket(new.column(source.id), ticket_id)
    trash = new.ensure_column(TicketStatus.DELETED)
    moved.status = TicketStatus.DELETED
    moved.updated_at = utc_now()
    moved.position = append_position(trash.tickets)
    trash.tickets.append(moved)
    return new


def update_ticket(
    board: Board,
    ticket: Ticket | str,
    title: str | None = None,
    description: str | None = None,
    status: TicketStatus | str | None = None,
) -> Board:
    """Edit ticket fields; a new status moves it to the end of that column.

    updated_at is refreshed only when a field actually changes. Raises
    ValidationError for an unrecognized status.
    """
    target = None
    if status is not None:
        target = TicketStatus.parse(status)
        if target is None:
            raise ValidationError(f"Unknown status '{status}'")

    ticket_id = _ticket_id(ticket)
    source = find_ticket_column(board, ticket_id)
    if source is None:
        return board

    new = deepcopy(board)
    column = new.column(source.id)
    current = next(t for t in column.tickets if t.id == ticket_id)
    changed = False

    if title is not None and title != current.title:
        current.title = title
        changed = True
    if description is not None and description != current.description:
        current.description = description
        changed = True
    if target is not None and target is not column.id:
        _pop_ticket(column, ticket_id)
        dest = new.ensure_column(target)
        current.status = target
        current.position = append_position(dest.tickets)
        dest.tickets.append(current)
        changed = True

    if not changed:
        return board
    current.updated_at = utc_now()
    return new


def move_ticket(board: Board, ticket_id: str, column_id: TicketStatus | str, index: int) -> Board:
    """Move a ticket to index within the destination column.

    index counts positions among the destination's tickets with the moved
    ticket taken out, and is clamped to the column. The new key is the
    midpoint of the neighbours; if float precision has run out there, the
    destination is renumbered first. Status follows the destination column.
    """
    target = TicketStatus.parse(column_id)
    if target is None or board.column(target) is None:
        return board
    source = find_ticket_column(board, ticket_id)
    if source is None:
        return board

    old_index = next(i for i, t in enumerate(source.tickets) if t.id == ticket_id)
    new = deepcopy(board)
    moved = _pop_ticket(new.column(source.id), ticket_id)
    dest = new.column(target)
    index = max(0, min(index, len(dest.tickets)))
    if dest.id is source.id and index == old_index:
        return board

    position = insert_position(dest.tickets, index)
    if not fits_between(dest.tickets, index, position):
        dest.tickets = renumber(dest.tickets)
        position = insert_position(dest.tickets, index)

    moved.position = position
    moved.status = target
    moved.updated_at = utc_now()
    dest.tickets.insert(index, moved)
    dest.tickets = sort_tickets(dest.tickets)
    return new
