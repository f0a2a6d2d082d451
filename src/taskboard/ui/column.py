"""Column widgets for taskboard UI."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Rule, Static

from taskboard.models import Column, TicketStatus
from taskboard.ui.drag import DropTarget, TicketPlaceholder
from taskboard.ui.static import TicketText
from taskboard.ui.ticket import AddTicket, TicketWidget


class ColumnWidget(DropTarget, Vertical):
    """A single column on the board."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: auto;
        min-height: 100%;
        min-width: 25;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget #column-title {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnWidget #column-title:hover {
        background: $boost;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    class RenameRequested(Message):
        """Posted when the column header is clicked."""

        def __init__(self, column: Column):
            super().__init__()
            self.column = column

    def __init__(self, column: Column):
        super().__init__(id=f"column-{column.id.value}")
        self.column = column
        self._placeholder: TicketPlaceholder | None = None

    @property
    def column_id(self) -> TicketStatus:
        return self.column.id

    def compose(self) -> ComposeResult:
        yield TicketText(f"{self.column.name} ({len(self.column.tickets)})", id="column-title")
        yield Rule()
        for ticket in self.column.tickets:
            yield TicketWidget(ticket)
        yield AddTicket(self.column.id)

    async def update_column(self, column: Column) -> None:
        """Show a new snapshot of the column."""
        self.column = column
        self._placeholder = None
        await self.recompose()

    # -- DropTarget: column accepting ticket drops --

    def drag_over(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, TicketWidget):
            return False
        self._ensure_placeholder(self._insert_before(draggable, y))
        return True

    def drag_away(self, draggable) -> None:
        self._remove_placeholder()

    def try_drop(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, TicketWidget):
            return False
        index = self._model_index(draggable, self._insert_before(draggable, y))
        self._remove_placeholder()
        self.post_message(TicketWidget.MoveRequested(draggable.ticket_id, self.column.id, index))
        return True

    def _insert_before(self, draggable, screen_y: int) -> Static:
        """The widget a ticket dropped at screen_y would land in front of."""
        for ticket in self.query(TicketWidget):
            if ticket is draggable:
                continue
            if screen_y < ticket.region.y + ticket.region.height // 2:
                return ticket
        return self.query_one(AddTicket)

    def _model_index(self, draggable, insert_before: Static) -> int:
        """Index among the column's tickets, not counting the dragged one."""
        index = 0
        for child in self.children:
            if child is insert_before:
                break
            if isinstance(child, TicketWidget) and child is not draggable:
                index += 1
        return index

    def _ensure_placeholder(self, insert_before: Static) -> None:
        if self._placeholder is None or self._placeholder.parent is not self:
            self._remove_placeholder()
            self._placeholder = TicketPlaceholder()
            self.mount(self._placeholder, before=insert_before)
            return
        children = list(self.children)
        if children.index(self._placeholder) + 1 != children.index(insert_before):
            self.move_child(self._placeholder, before=insert_before)

    def _remove_placeholder(self) -> None:
        if self._placeholder is not None and self._placeholder.parent is not None:
            self._placeholder.remove()
        self._placeholder = None

    # -- Other column behavior --

    def on_click(self, event) -> None:
        title = self.query_one("#column-title", TicketText)
        if title.region.contains(event.screen_x, event.screen_y):
            event.stop()
            self.post_message(self.RenameRequested(self.column))

    def on_key(self, event) -> None:
        """Arrow key navigation and shift+arrow ticket movement."""
        if event.key not in (
            "up",
            "down",
            "left",
            "right",
            "shift+up",
            "shift+down",
            "shift+left",
            "shift+right",
        ):
            return

        focused = self.screen.focused
        focusable = [c for c in self.children if c.can_focus]
        if focused not in focusable:
            return

        idx = focusable.index(focused)

        if event.key == "up" and idx > 0:
            focusable[idx - 1].focus()
        elif event.key == "down" and idx < len(focusable) - 1:
            focusable[idx + 1].focus()
        elif event.key in ("left", "right"):
            target = self._neighbour(-1 if event.key == "left" else 1)
            if target is not None:
                target_focusable = [c for c in target.children if c.can_focus]
                if target_focusable:
                    target_focusable[min(idx, len(target_focusable) - 1)].focus()
        elif isinstance(focused, TicketWidget):
            self._move_ticket(focused, event.key)

        event.prevent_default()
        event.stop()

    def _neighbour(self, direction: int) -> "ColumnWidget | None":
        siblings = [c for c in self.parent.children if isinstance(c, ColumnWidget)]
        new_idx = siblings.index(self) + direction
        if 0 <= new_idx < len(siblings):
            return siblings[new_idx]
        return None

    def _move_ticket(self, ticket: TicketWidget, key: str) -> None:
        """Ask to move a ticket one slot via shift+arrow."""
        ids = [t.id for t in self.column.tickets]
        idx = ids.index(ticket.ticket_id)

        if key in ("shift+up", "shift+down"):
            new_idx = idx + (-1 if key == "shift+up" else 1)
            if 0 <= new_idx < len(ids):
                self.post_message(TicketWidget.MoveRequested(ticket.ticket_id, self.column.id, new_idx))
        else:
            target = self._neighbour(-1 if key == "shift+left" else 1)
            if target is not None:
                index = min(idx, len(target.column.tickets))
                self.post_message(TicketWidget.MoveRequested(ticket.ticket_id, target.column.id, index))
