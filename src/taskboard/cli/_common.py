"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path

from taskboard.errors import TaskboardError
from taskboard.models import Board, Column, Ticket
from taskboard.session import BoardSession
from taskboard.state import State


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(message)s",
            stream=sys.stderr,
            level=logging.DEBUG,
        )


def board_path(args) -> Path:
    """The board file named by --file, else the last opened one. Exit 1 if neither."""
    path = getattr(args, "file", None) or State().last_opened_file
    if not path:
        error("No board file given. Pass --file or run 'taskboard init FILE'.", args.json)
    return Path(path).resolve()


def open_session_or_die(args) -> BoardSession:
    """Open the board session for args. Exit 1 with message on failure."""
    path = board_path(args)
    try:
        session = BoardSession(path)
        session.open()
    except FileNotFoundError:
        error(f"Board file '{path}' not found.", args.json)
    except (TaskboardError, OSError, UnicodeDecodeError) as e:
        error(f"{path}: {e}", args.json)
    return session


def remember(session: BoardSession) -> None:
    """Record the session's file as the last one opened."""
    State().last_opened_file = str(session.path)


def find_column(board: Board, col_id: str, json_mode: bool) -> Column:
    """Lookup column by id. Exit 1 listing available columns if not found."""
    col = board.column(col_id)
    if col is not None:
        return col
    available = [f"  {c.id.value}  {c.name}" for c in board.columns]
    msg = f"Column '{col_id}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_ticket(board: Board, ticket_id: str, json_mode: bool) -> Ticket:
    """Lookup ticket by ID. Exit 1 if not found."""
    ticket = board.find_ticket(ticket_id)
    if ticket is not None:
        return ticket
    error(f"Ticket '{ticket_id}' not found.", json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def column_ref(col: Column) -> dict:
    return {"id": col.id.value, "name": col.name}


def build_column_summaries(board: Board) -> list[dict]:
    """Build column summary dicts from board, hidden column included."""
    return [
        {
            "id": col.id.value,
            "name": col.name,
            "tickets": len(col.tickets),
            "hidden": col.hidden,
        }
        for col in board.columns
    ]


def format_column_line(c: dict, indent: str = "") -> str:
    """Format a column summary dict as a text line."""
    hidden = "  (hidden)" if c["hidden"] else ""
    tickets = "ticket" if c["tickets"] == 1 else "tickets"
    return f"{indent}{c['id']:<12} {c['name']:<16} {c['tickets']} {tickets}{hidden}"
