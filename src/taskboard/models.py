"""Data models for taskboard boards."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from taskboard.ids import generate_id, is_ticket_id, utc_now


class TicketStatus(str, Enum):
    """Ticket status, doubling as the id of the column holding the ticket."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    DELETED = "deleted"

    @classmethod
    def parse(cls, value: Any) -> "TicketStatus | None":
        """Return the status named by value, or None if unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (TypeError, ValueError):
            return None


WORKING_STATUSES: tuple[TicketStatus, ...] = (
    TicketStatus.TODO,
    TicketStatus.IN_PROGRESS,
    TicketStatus.DONE,
)

CANONICAL_ORDER: tuple[TicketStatus, ...] = (*WORKING_STATUSES, TicketStatus.DELETED)

DEFAULT_COLUMN_NAMES: dict[TicketStatus, str] = {
    TicketStatus.TODO: "To Do",
    TicketStatus.IN_PROGRESS: "In Progress",
    TicketStatus.DONE: "Done",
    TicketStatus.DELETED: "Deleted",
}


@dataclass
class Ticket:
    """A single task record."""

    id: str
    title: str = ""
    description: str = ""
    status: TicketStatus = TicketStatus.TODO
    created_at: str = ""
    updated_at: str = ""
    position: float = 0.0


@dataclass
class Column:
    """A named bucket of tickets sharing one status."""

    id: TicketStatus
    name: str = ""
    tickets: list[Ticket] = field(default_factory=list)

    @property
    def hidden(self) -> bool:
        return self.id is TicketStatus.DELETED


@dataclass
class Board:
    """The full board state."""

    columns: list[Column] = field(default_factory=list)

    def column(self, column_id: Any) -> Column | None:
        """Find a column by status id."""
        status = TicketStatus.parse(column_id)
        for col in self.columns:
            if col.id is status:
                return col
        return None

    def ensure_column(self, status: TicketStatus) -> Column:
        """Return the column for status, creating it in canonical order if missing."""
        col = self.column(status)
        if col is not None:
            return col
        col = Column(id=status, name=DEFAULT_COLUMN_NAMES[status])
        rank = CANONICAL_ORDER.index(status)
        index = sum(1 for c in self.columns if CANONICAL_ORDER.index(c.id) < rank)
        self.columns.insert(index, col)
        return col

    def visible_columns(self) -> list[Column]:
        return [c for c in self.columns if not c.hidden]

    def all_tickets(self) -> list[Ticket]:
        """Every ticket in column order, then ticket order."""
        return [t for col in self.columns for t in col.tickets]

    def ticket_ids(self) -> set[str]:
        return {t.id for t in self.all_tickets()}

    def find_ticket(self, ticket_id: str) -> Ticket | None:
        for ticket in self.all_tickets():
            if ticket.id == ticket_id:
                return ticket
        return None


def new_board() -> Board:
    """A fresh board with the three working columns, all empty."""
    return Board(columns=[Column(id=s, name=DEFAULT_COLUMN_NAMES[s]) for s in WORKING_STATUSES])


def coerce_position(value: Any) -> float | None:
    """Return value as a finite float position, or None if it isn't one."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _timestamp(value: Any, default: str) -> str:
    return value if isinstance(value, str) and value.strip() else default


def ensure_ticket(record: Mapping[str, Any], taken: set[str] | None = None) -> Ticket:
    """Repair a loose, possibly incomplete record into a valid Ticket.

    Never raises. A missing, malformed or already-taken id is replaced by a
    freshly generated one; the accepted id is added to ``taken`` so later
    records in the same pass cannot collide with it. Missing text fields
    become "", unknown statuses become todo, and missing timestamps become
    now. Positions are copied when numeric and left at 0 otherwise; callers
    that care (the decoders) synthesize them.
    """
    if taken is None:
        taken = set()

    ticket_id = record.get("id")
    if not is_ticket_id(ticket_id) or ticket_id in taken:
        ticket_id = generate_id(taken)
    taken.add(ticket_id)

    now = utc_now()
    position = coerce_position(record.get("position"))

    return Ticket(
        id=ticket_id,
        title=_text(record.get("title")),
        description=_text(record.get("description")),
        status=TicketStatus.parse(record.get("status")) or TicketStatus.TODO,
        created_at=_timestamp(record.get("createdAt"), now),
        updated_at=_timestamp(record.get("updatedAt"), now),
        position=position if position is not None else 0.0,
    )
