"""Fractional ordering keys for tickets within a column.

Tickets carry a float ``position``; inserting between two tickets takes the
midpoint of their keys, so a drop never renumbers the rest of the column.
"""

from dataclasses import replace
from operator import attrgetter

from taskboard.models import Ticket

POSITION_STEP = 1000


def append_position(tickets: list[Ticket]) -> float:
    """Key for a ticket appended after every existing one.

    [] → 1000, [1000, 2000] → 3000
    """
    return max((t.position for t in tickets), default=0) + POSITION_STEP


def insert_position(tickets: list[Ticket], index: int) -> float:
    """Key for a ticket inserted at index into tickets (which exclude it).

    The key is the midpoint between the neighbour before the slot (0 at the
    head) and the neighbour at the slot (before + 2000 at the tail).

    [1000, 2000] at 1 → 1500, [1000] at 0 → 500, [1000] at 1 → 2000
    """
    index = max(0, min(index, len(tickets)))
    following = tickets[index].position if index < len(tickets) else None

    if index > 0:
        prev = tickets[index - 1].position
    elif following is not None and following <= 0:
        # Head of a column whose keys went non-positive: 0 would sort after.
        prev = following - 2 * POSITION_STEP
    else:
        prev = 0

    nxt = following if following is not None else prev + 2 * POSITION_STEP
    return prev + (nxt - prev) / 2


def fits_between(tickets: list[Ticket], index: int, position: float) -> bool:
    """Whether position sorts strictly between the neighbours of slot index.

    False once repeated midpoints have exhausted float precision.
    """
    index = max(0, min(index, len(tickets)))
    if index > 0 and not tickets[index - 1].position < position:
        return False
    if index < len(tickets) and not position < tickets[index].position:
        return False
    return True


def sort_tickets(tickets: list[Ticket]) -> list[Ticket]:
    """Stable ascending sort by position; equal keys keep their order."""
    return sorted(tickets, key=attrgetter("position"))


def is_strictly_ordered(tickets: list[Ticket]) -> bool:
    return all(a.position < b.position for a, b in zip(tickets, tickets[1:]))


def renumber(tickets: list[Ticket], step: float = POSITION_STEP) -> list[Ticket]:
    """Reset keys to step, 2*step, ... keeping the current order."""
    return [replace(t, position=float(step * (i + 1))) for i, t in enumerate(tickets)]
