"""Board screen showing the columns and their tickets."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer

from taskboard.errors import TaskboardError
from taskboard.model.column import rename_column
from taskboard.model.ticket import create_ticket, delete_ticket, move_ticket, update_ticket
from taskboard.models import Column
from taskboard.session import BoardSession
from taskboard.state import State, poll_interval
from taskboard.ui.column import ColumnWidget
from taskboard.ui.prompt import ConfirmScreen, TextPromptScreen, TicketEditScreen
from taskboard.ui.static import QuitButton, TicketText
from taskboard.ui.ticket import AddTicket, TicketWidget


def ordered_columns(columns: list[Column], order: list[str]) -> list[Column]:
    """Sort columns by a preferred id order; ids not listed keep their place at the end."""
    rank = {column_id: i for i, column_id in enumerate(order)}
    return sorted(columns, key=lambda c: rank.get(c.id.value, len(rank)))


class BoardScreen(Screen):
    """Main board screen showing all visible columns."""

    CSS = """
    BoardScreen {
        layers: base overlay;
    }
    #board-header {
        height: 1;
        background: $panel;
    }
    #board-title {
        width: 1fr;
        padding: 0 1;
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel_drag", "Cancel drag", show=False),
        ("ctrl+s", "save", "Save"),
    ]

    def __init__(self, session: BoardSession):
        super().__init__()
        self.session = session
        self._active_draggable = None

    @property
    def board(self):
        return self.session.board

    def compose(self) -> ComposeResult:
        with Horizontal(id="board-header"):
            yield TicketText(self.session.path.name, id="board-title")
            yield QuitButton()

        with Horizontal(id="columns"):
            for column in ordered_columns(self.board.visible_columns(), State().column_order):
                yield ColumnWidget(column)

        yield Footer()

    def on_mount(self) -> None:
        self.call_after_refresh(self._focus_ticket, None)
        self.set_interval(poll_interval(), self._poll_tick)

    def _focus_ticket(self, ticket_id: str | None) -> None:
        """Focus a ticket by id, or the first focusable thing on the board."""
        if ticket_id is not None:
            for widget in self.query(TicketWidget):
                if widget.ticket_id == ticket_id:
                    widget.focus()
                    return
        for col in self.query(ColumnWidget):
            focusable = [c for c in col.children if c.can_focus]
            if focusable:
                focusable[0].focus()
                return

    async def _poll_tick(self) -> None:
        """Reload when another process rewrote the board file."""
        if self._active_draggable is not None or self.session.closed:
            return
        if self.session.poll():
            focused = self.focused
            keep = focused.ticket_id if isinstance(focused, TicketWidget) else None
            await self.render_board(keep)
            self.notify("Board reloaded from disk")

    async def render_board(self, focus_id: str | None = None) -> None:
        """Rebuild every column from the session's current board."""
        for widget in self.query(ColumnWidget):
            column = self.board.column(widget.column_id)
            if column is not None:
                await widget.update_column(column)
        self._focus_ticket(focus_id)

    async def _apply(self, operation, *args, focus_id: str | None = None, **kwargs) -> None:
        """Run a board operation through the session and redraw."""
        try:
            self.session.apply(operation, *args, **kwargs)
        except (TaskboardError, OSError) as e:
            self.notify(str(e), severity="error")
            return
        await self.render_board(focus_id)

    # -- Thin delegation: screen routes mouse events to active draggable --

    def on_mouse_move(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_move(event.screen_x, event.screen_y)

    def on_mouse_up(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_finish(event.screen_x, event.screen_y)

    def action_cancel_drag(self) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_cancel()

    # -- Ticket and column requests --

    async def on_ticket_widget_move_requested(self, event: TicketWidget.MoveRequested) -> None:
        event.stop()
        await self._apply(move_ticket, event.ticket_id, event.column_id, event.index, focus_id=event.ticket_id)

    def on_ticket_widget_edit_requested(self, event: TicketWidget.EditRequested) -> None:
        event.stop()
        ticket = event.ticket

        async def edited(values: dict | None) -> None:
            if values is not None:
                await self._apply(update_ticket, ticket.id, focus_id=ticket.id, **values)

        self.app.push_screen(TicketEditScreen(ticket), edited)

    def on_ticket_widget_delete_requested(self, event: TicketWidget.DeleteRequested) -> None:
        event.stop()
        ticket = event.ticket

        async def confirmed(result: bool) -> None:
            if result:
                await self._apply(delete_ticket, ticket.id)

        self.app.push_screen(ConfirmScreen(f'Delete "{ticket.title}"?'), confirmed)

    def on_add_ticket_add_requested(self, event: AddTicket.AddRequested) -> None:
        event.stop()
        column_id = event.column_id

        async def named(title: str | None) -> None:
            if title is None:
                return
            before = self.board.ticket_ids()
            await self._apply(create_ticket, title, "", column_id)
            new_ids = self.board.ticket_ids() - before
            if new_ids:
                self._focus_ticket(new_ids.pop())

        self.app.push_screen(TextPromptScreen("New ticket title"), named)

    def on_column_widget_rename_requested(self, event: ColumnWidget.RenameRequested) -> None:
        event.stop()
        column = event.column

        async def named(name: str | None) -> None:
            if name is not None:
                await self._apply(rename_column, column.id, name)

        self.app.push_screen(TextPromptScreen("Column name", column.name), named)

    def action_save(self) -> None:
        try:
            self.session.save()
        except OSError as e:
            self.notify(str(e), severity="error")
            return
        self.notify("Saved")
