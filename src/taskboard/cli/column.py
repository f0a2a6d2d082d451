"""Handlers for 'taskboard column' commands."""

from taskboard.cli._common import (
    build_column_summaries,
    error,
    find_column,
    format_column_line,
    open_session_or_die,
    output_json,
    output_result,
    remember,
)
from taskboard.model.column import rebalance_column, rename_column
from taskboard.models import WORKING_STATUSES, TicketStatus
from taskboard.state import DEFAULT_COLUMN_ORDER, State


def column_list(args) -> int:
    """List all columns."""
    session = open_session_or_die(args)
    items = build_column_summaries(session.board)

    if args.json:
        output_json(items)
    else:
        for c in items:
            print(format_column_line(c))

    return 0


def column_rename(args) -> int:
    """Rename a column."""
    session = open_session_or_die(args)
    col = find_column(session.board, args.id, args.json)

    old_name = col.name
    session.apply(rename_column, col.id, args.new_name)
    remember(session)

    output_result(
        {"id": col.id.value, "old_name": old_name, "new_name": args.new_name},
        f'Renamed column "{old_name}" to "{args.new_name}"',
        args.json,
    )

    return 0


def column_rebalance(args) -> int:
    """Renumber a column's ticket positions evenly."""
    session = open_session_or_die(args)
    col = find_column(session.board, args.id, args.json)

    board = session.apply(rebalance_column, col.id)
    remember(session)

    tickets = board.column(col.id).tickets
    output_result(
        {"id": col.id.value, "positions": [t.position for t in tickets]},
        f'Rebalanced column "{col.name}" ({len(tickets)} tickets)',
        args.json,
    )

    return 0


def column_order(args) -> int:
    """Show or set the display order of the board's columns."""
    state = State()
    if args.ids:
        unknown = [c for c in args.ids if TicketStatus.parse(c) not in WORKING_STATUSES]
        if unknown:
            error(f"Unknown column(s): {', '.join(unknown)}", args.json)
        order = list(dict.fromkeys(args.ids))
        # Unlisted columns keep their default place after the listed ones.
        order += [c for c in DEFAULT_COLUMN_ORDER if c not in order]
        state.column_order = order

    order = state.column_order
    if args.json:
        output_json({"order": order})
    else:
        print(" ".join(order))

    return 0
