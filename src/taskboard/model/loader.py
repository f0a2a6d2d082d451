"""Decode board files into a Board."""

import json
from collections.abc import Mapping
from typing import Any

from taskboard.errors import FormatError, ParseError, ValidationError
from taskboard.model.positions import (
    POSITION_STEP,
    append_position,
    is_strictly_ordered,
    renumber,
    sort_tickets,
)
from taskboard.models import Board, Ticket, TicketStatus, coerce_position, ensure_ticket, new_board
from taskboard.parser import parse_line, split_records

REQUIRED_HEADERS = ("id", "title", "description", "status", "createdAt", "updatedAt")


def _records(value: Any) -> list[Mapping]:
    """Keep only the mapping entries of a JSON list."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _bucket(tickets: list[Ticket]) -> Board:
    """Place tickets into columns by status, keyed 1000, 2000, ... in input order.

    Records already marked deleted get the hidden deleted column.
    """
    board = new_board()
    for ticket in tickets:
        column = board.ensure_column(ticket.status)
        ticket.position = float(POSITION_STEP * (len(column.tickets) + 1))
        column.tickets.append(ticket)
    return board


def _normalize_order(board: Board) -> None:
    """Sort each column by key, renumbering only if keys are not strictly increasing."""
    for column in board.columns:
        column.tickets = sort_tickets(column.tickets)
        if not is_strictly_ordered(column.tickets):
            column.tickets = renumber(column.tickets)


def _board_from_document(data: Mapping) -> Board:
    """Rebuild a board from a ``{"columns": [...]}`` document.

    The containing column decides each ticket's status. Columns with
    unknown ids are dropped and their tickets appended by their own status.
    Missing working columns are added empty.
    """
    board = new_board()
    taken: set[str] = set()
    strays: list[Ticket] = []

    for raw_column in _records(data.get("columns")):
        raw_tickets = _records(raw_column.get("tickets"))
        tickets = [ensure_ticket(raw, taken) for raw in raw_tickets]

        status = TicketStatus.parse(raw_column.get("id"))
        if status is None:
            strays.extend(tickets)
            continue

        column = board.ensure_column(status)
        name = raw_column.get("name")
        if isinstance(name, str) and name:
            column.name = name

        last = max((t.position for t in column.tickets), default=0)
        for raw, ticket in zip(raw_tickets, tickets):
            position = coerce_position(raw.get("position"))
            if position is None:
                position = last + POSITION_STEP
            last = position
            ticket.status = status
            ticket.position = position
            column.tickets.append(ticket)

    for ticket in strays:
        column = board.ensure_column(ticket.status)
        ticket.position = append_position(column.tickets)
        column.tickets.append(ticket)

    _normalize_order(board)
    return board


def decode_json(text: str) -> Board:
    """Decode a JSON board document.

    Accepts the board form ``{"columns": [...]}`` and the legacy form, a
    bare array of ticket records. Raises ParseError on invalid JSON.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise ParseError(f"Invalid JSON: {e}") from e

    if isinstance(data, Mapping) and "columns" in data:
        return _board_from_document(data)

    taken: set[str] = set()
    tickets = [ensure_ticket(raw, taken) for raw in _records(data)]
    return _bucket(tickets)


def decode_csv(text: str) -> Board:
    """Decode a CSV board file.

    Positions are not stored in this format; tickets are keyed in file
    order. Raises ValidationError naming every missing required header.
    """
    records = split_records(text.lstrip("\ufeff"))
    if not records:
        return new_board()

    headers = [h.strip() for h in parse_line(records[0])]
    missing = [h for h in REQUIRED_HEADERS if h not in headers]
    if missing:
        raise ValidationError(f"Missing required headers: {', '.join(missing)}", missing=missing)

    taken: set[str] = set()
    tickets = []
    for record in records[1:]:
        values = parse_line(record)
        row = {header: values[i] if i < len(values) else "" for i, header in enumerate(headers)}
        tickets.append(ensure_ticket(row, taken))
    return _bucket(tickets)


DECODERS = {
    "json": decode_json,
    "csv": decode_csv,
}


def decode(text: str, fmt: str) -> Board:
    """Decode text in the named format ("json" or "csv")."""
    try:
        decoder = DECODERS[fmt]
    except KeyError:
        raise FormatError(f"Unsupported board format: {fmt!r}")
    return decoder(text)
