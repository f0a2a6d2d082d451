"""Handlers for 'taskboard ticket' commands."""

from taskboard.cli._common import (
    column_ref,
    error,
    find_column,
    find_ticket,
    open_session_or_die,
    output_json,
    output_result,
    remember,
)
from taskboard.errors import ValidationError
from taskboard.model.ticket import (
    create_ticket,
    delete_ticket,
    find_ticket_column,
    move_ticket,
    update_ticket,
)
from taskboard.model.writer import ticket_to_dict


def ticket_list(args) -> int:
    """List tickets grouped by column."""
    session = open_session_or_die(args)
    board = session.board

    if args.column:
        columns = [find_column(board, args.column, args.json)]
    elif getattr(args, "all", False):
        columns = board.columns
    else:
        columns = board.visible_columns()

    if args.json:
        items = [
            {"id": t.id, "title": t.title, "column": column_ref(col)}
            for col in columns
            for t in col.tickets
        ]
        output_json(items)
    else:
        for col in columns:
            print(f"{col.id.value}  {col.name}")
            for t in col.tickets:
                print(f"  {t.id}  {t.title}")

    return 0


def ticket_get(args) -> int:
    """Show one ticket."""
    session = open_session_or_die(args)
    ticket = find_ticket(session.board, args.id, args.json)
    col = find_ticket_column(session.board, ticket.id)

    if args.json:
        data = ticket_to_dict(ticket)
        data["column"] = column_ref(col)
        output_json(data)
    else:
        print(f"{ticket.title}  [{col.name}]")
        print(f"id: {ticket.id}")
        print(f"created: {ticket.created_at}")
        print(f"updated: {ticket.updated_at}")
        if ticket.description:
            print()
            print(ticket.description)

    return 0


def ticket_add(args) -> int:
    """Create a new ticket."""
    session = open_session_or_die(args)
    before = session.board.ticket_ids()

    try:
        board = session.apply(create_ticket, args.title, args.description, args.status)
    except ValidationError as e:
        error(str(e), args.json)
    remember(session)

    (ticket_id,) = board.ticket_ids() - before
    col = find_ticket_column(board, ticket_id)
    output_result(
        {"id": ticket_id, "title": args.title, "column": column_ref(col)},
        f"Created ticket {ticket_id} in {col.name}",
        args.json,
    )

    return 0


def ticket_update(args) -> int:
    """Edit a ticket's title, description or status."""
    session = open_session_or_die(args)
    find_ticket(session.board, args.id, args.json)

    try:
        board = session.apply(
            update_ticket,
            args.id,
            title=args.title,
            description=args.description,
            status=args.status,
        )
    except ValidationError as e:
        error(str(e), args.json)
    remember(session)

    ticket = board.find_ticket(args.id)
    output_result(ticket_to_dict(ticket), f"Updated ticket {args.id}", args.json)

    return 0


def ticket_move(args) -> int:
    """Move a ticket to a column, optionally at a position."""
    session = open_session_or_die(args)
    find_ticket(session.board, args.id, args.json)
    target = find_column(session.board, args.column, args.json)

    # CLI uses 1-indexed positions, model uses 0-indexed
    index = args.position - 1 if args.position is not None else len(target.tickets)
    session.apply(move_ticket, args.id, target.id, index)
    remember(session)

    output_result(
        {"id": args.id, "column": column_ref(target)},
        f"Moved ticket {args.id} to {target.name}",
        args.json,
    )

    return 0


def ticket_delete(args) -> int:
    """Soft-delete a ticket into the hidden deleted column."""
    session = open_session_or_die(args)
    find_ticket(session.board, args.id, args.json)

    session.apply(delete_ticket, args.id)
    remember(session)

    output_result({"id": args.id}, f"Deleted ticket {args.id}", args.json)

    return 0
