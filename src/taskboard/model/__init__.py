"""Board codecs and mutation operations."""

from taskboard.model.column import rebalance_column, rename_column
from taskboard.model.loader import decode, decode_csv, decode_json
from taskboard.model.positions import append_position, insert_position, renumber
from taskboard.model.ticket import (
    create_ticket,
    delete_ticket,
    find_ticket,
    find_ticket_column,
    move_ticket,
    update_ticket,
)
from taskboard.model.writer import encode, encode_csv, encode_json

__all__ = [
    "append_position",
    "create_ticket",
    "decode",
    "decode_csv",
    "decode_json",
    "delete_ticket",
    "encode",
    "encode_csv",
    "encode_json",
    "find_ticket",
    "find_ticket_column",
    "insert_position",
    "move_ticket",
    "rebalance_column",
    "rename_column",
    "renumber",
    "update_ticket",
]
