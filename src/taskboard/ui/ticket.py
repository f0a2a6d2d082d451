"""Ticket widgets for taskboard UI."""

from textual.app import ComposeResult
from textual.message import Message
from textual.widgets import Static

from taskboard.models import Ticket, TicketStatus
from taskboard.ui.constants import ICON_ADD, ICON_DESCRIPTION
from taskboard.ui.drag import DraggableMixin, DragGhost
from taskboard.ui.static import TicketText


class TicketWidget(DraggableMixin, Static, can_focus=True):
    """A single ticket in a column.

    Holds a snapshot of its Ticket; the board screen rebuilds the widget
    whenever the board changes, so it never mutates anything itself.
    """

    BINDINGS = [
        ("space", "open_ticket"),
        ("enter", "open_ticket"),
        ("delete", "delete_ticket"),
    ]

    class EditRequested(Message):
        """Posted when the ticket should be opened for editing."""

        def __init__(self, ticket: Ticket):
            super().__init__()
            self.ticket = ticket

    class DeleteRequested(Message):
        """Posted when the ticket should be soft-deleted."""

        def __init__(self, ticket: Ticket):
            super().__init__()
            self.ticket = ticket

    class MoveRequested(Message):
        """Posted when the ticket should move to index within a column."""

        def __init__(self, ticket_id: str, column_id: TicketStatus, index: int):
            super().__init__()
            self.ticket_id = ticket_id
            self.column_id = column_id
            self.index = index

    DEFAULT_CSS = """
    TicketWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    TicketWidget:focus {
        background: $primary;
    }
    TicketWidget.dragging {
        display: none;
    }
    TicketWidget #ticket-footer {
        width: 100%;
        height: 1;
        color: $text-muted;
    }
    """

    def __init__(self, ticket: Ticket):
        Static.__init__(self)
        self._init_draggable()
        self.ticket = ticket

    @property
    def ticket_id(self) -> str:
        return self.ticket.id

    def compose(self) -> ComposeResult:
        yield TicketText(self.ticket.title or self.ticket.id, id="ticket-title")
        footer = ICON_DESCRIPTION if self.ticket.description else ""
        yield TicketText(footer, id="ticket-footer")

    def draggable_make_ghost(self):
        return DragGhost(self.ticket.title or self.ticket.id)

    def draggable_clicked(self) -> None:
        self.post_message(self.EditRequested(self.ticket))

    def action_open_ticket(self) -> None:
        self.draggable_clicked()

    def action_delete_ticket(self) -> None:
        self.post_message(self.DeleteRequested(self.ticket))


class AddTicket(Static, can_focus=True):
    """The "+" slot at the bottom of a column."""

    BINDINGS = [
        ("space", "add_ticket"),
        ("enter", "add_ticket"),
    ]

    class AddRequested(Message):
        """Posted when a new ticket should be created in a column."""

        def __init__(self, column_id: TicketStatus):
            super().__init__()
            self.column_id = column_id

    DEFAULT_CSS = """
    AddTicket {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        border: dashed $surface-lighten-2;
        text-align: center;
        color: $text-muted;
    }
    AddTicket:focus {
        background: $primary;
        color: $text;
    }
    """

    def __init__(self, column_id: TicketStatus):
        super().__init__(ICON_ADD)
        self.column_id = column_id

    def on_click(self, event) -> None:
        event.stop()
        self.action_add_ticket()

    def action_add_ticket(self) -> None:
        self.post_message(self.AddRequested(self.column_id))
