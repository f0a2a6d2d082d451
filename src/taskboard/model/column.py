"""Column mutation operations for taskboard boards."""

from copy import deepcopy

from taskboard.model.positions import POSITION_STEP, renumber
from taskboard.models import Board, TicketStatus


def rename_column(board: Board, column_id: TicketStatus | str, name: str) -> Board:
    """Change a column's display name. Tickets and timestamps are untouched."""
    column = board.column(column_id)
    if column is None or column.name == name:
        return board
    new = deepcopy(board)
    new.column(column.id).name = name
    return new


def rebalance_column(board: Board, column_id: TicketStatus | str, step: float = POSITION_STEP) -> Board:
    """Renumber a column's keys to step, 2*step, ... keeping its order.

    Restores room between keys after many drops into the same gap.
    """
    column = board.column(column_id)
    if column is None:
        return board
    new = deepcopy(board)
    target = new.column(column.id)
    target.tickets = renumber(target.tickets, step)
    return new
