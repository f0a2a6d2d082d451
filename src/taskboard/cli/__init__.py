"""CLI argument parser and dispatch for taskboard."""

import argparse

from taskboard.cli.board import board_recent, board_summary
from taskboard.cli.column import column_list, column_order, column_rebalance, column_rename
from taskboard.cli.init import init_board
from taskboard.cli.ticket import (
    ticket_add,
    ticket_delete,
    ticket_get,
    ticket_list,
    ticket_move,
    ticket_update,
)
from taskboard.cli.web import web

STATUS_CHOICES = ["todo", "in-progress", "done"]


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", "-f", help="Board file (default: last opened)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("--verbose", "-v", action="store_true", help="Log to stderr")

    parser = argparse.ArgumentParser(
        prog="taskboard",
        description="File-backed kanban board",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Create a board file", parents=[common])
    init_p.add_argument("path", help="Board file to create (.json or .csv)")
    init_p.set_defaults(func=init_board)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show board summary", parents=[common])
    board_summary_p.set_defaults(func=board_summary)

    board_recent_p = board_verbs.add_parser("recent", help="List recently opened boards", parents=[common])
    board_recent_p.add_argument("--clear", action="store_true", help="Forget recent boards and preferences")
    board_recent_p.set_defaults(func=board_recent)

    # board with no verb = summary
    board_p.set_defaults(func=board_summary)

    # --- ticket ---
    ticket_p = nouns.add_parser("ticket", help="Ticket operations", parents=[common])
    ticket_verbs = ticket_p.add_subparsers(dest="verb")

    ticket_list_p = ticket_verbs.add_parser("list", help="List tickets", parents=[common])
    ticket_list_p.add_argument("--column", dest="column", help="Filter by column ID")
    ticket_list_p.add_argument("--all", action="store_true", help="Include deleted tickets")
    ticket_list_p.set_defaults(func=ticket_list)

    ticket_get_p = ticket_verbs.add_parser("get", help="Show a ticket", parents=[common])
    ticket_get_p.add_argument("id", help="Ticket ID")
    ticket_get_p.set_defaults(func=ticket_get)

    ticket_add_p = ticket_verbs.add_parser("add", help="Create a ticket", parents=[common])
    ticket_add_p.add_argument("title", help="Ticket title")
    ticket_add_p.add_argument("--description", default="", help="Ticket description")
    ticket_add_p.add_argument("--status", default="todo", choices=STATUS_CHOICES, help="Initial status")
    ticket_add_p.set_defaults(func=ticket_add)

    ticket_update_p = ticket_verbs.add_parser("update", help="Edit a ticket", parents=[common])
    ticket_update_p.add_argument("id", help="Ticket ID")
    ticket_update_p.add_argument("--title", help="New title")
    ticket_update_p.add_argument("--description", help="New description")
    ticket_update_p.add_argument("--status", choices=STATUS_CHOICES, help="New status")
    ticket_update_p.set_defaults(func=ticket_update)

    ticket_move_p = ticket_verbs.add_parser("move", help="Move a ticket", parents=[common])
    ticket_move_p.add_argument("id", help="Ticket ID")
    ticket_move_p.add_argument("--column", dest="column", required=True, help="Target column ID")
    ticket_move_p.add_argument("--position", type=int, help="Position in column (1-indexed)")
    ticket_move_p.set_defaults(func=ticket_move)

    ticket_delete_p = ticket_verbs.add_parser("delete", help="Delete a ticket", parents=[common])
    ticket_delete_p.add_argument("id", help="Ticket ID")
    ticket_delete_p.set_defaults(func=ticket_delete)

    # ticket with no verb = list
    ticket_p.set_defaults(func=ticket_list, column=None, all=False)

    # --- column ---
    col_p = nouns.add_parser("column", help="Column operations", parents=[common])
    col_verbs = col_p.add_subparsers(dest="verb")

    col_list_p = col_verbs.add_parser("list", help="List columns", parents=[common])
    col_list_p.set_defaults(func=column_list)

    col_rename_p = col_verbs.add_parser("rename", help="Rename a column", parents=[common])
    col_rename_p.add_argument("id", help="Column ID")
    col_rename_p.add_argument("new_name", help="New column name")
    col_rename_p.set_defaults(func=column_rename)

    col_rebalance_p = col_verbs.add_parser("rebalance", help="Renumber ticket positions", parents=[common])
    col_rebalance_p.add_argument("id", help="Column ID")
    col_rebalance_p.set_defaults(func=column_rebalance)

    col_order_p = col_verbs.add_parser("order", help="Show or set column display order", parents=[common])
    col_order_p.add_argument("ids", nargs="*", help="Column IDs, leftmost first")
    col_order_p.set_defaults(func=column_order)

    # column with no verb = list
    col_p.set_defaults(func=column_list)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve board in browser", parents=[common])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8617, help="Port (default: 8617)")
    web_p.set_defaults(func=web)

    return parser
