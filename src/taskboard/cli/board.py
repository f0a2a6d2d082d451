"""Handlers for 'taskboard board' commands."""

from taskboard.cli._common import (
    build_column_summaries,
    format_column_line,
    open_session_or_die,
    output_json,
    output_result,
)
from taskboard.state import State


def board_summary(args) -> int:
    """Show board summary: file name, columns, ticket counts."""
    session = open_session_or_die(args)
    title = session.path.name
    columns = build_column_summaries(session.board)

    if args.json:
        output_json({"title": title, "path": str(session.path), "format": session.format, "columns": columns})
    else:
        print(title)
        for c in columns:
            print(format_column_line(c, indent="  "))

    return 0


def board_recent(args) -> int:
    """List recently opened board files, newest first."""
    state = State()
    if args.clear:
        state.clear()
        output_result({"cleared": True}, "Forgot recent boards", args.json)
        return 0

    recent = state.recent_files
    if args.json:
        output_json(recent)
    else:
        for path in recent:
            print(path)

    return 0
