"""Modal dialogs: yes/no confirmation, single-line prompt, ticket editor."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static, TextArea

from taskboard.models import DEFAULT_COLUMN_NAMES, WORKING_STATUSES, Ticket

DIALOG_CSS = """
{name} {{
    align: center middle;
}}
{name} #dialog {{
    width: 70;
    height: auto;
    border: thick $primary;
    background: $surface;
    padding: 1 2;
}}
{name} #message {{
    text-align: center;
    margin-bottom: 1;
}}
{name} #buttons {{
    width: 100%;
    height: 3;
    align: center middle;
}}
{name} Button {{
    margin: 0 2;
}}
"""


class ConfirmScreen(ModalScreen[bool]):
    """Ask a yes/no question."""

    CSS = DIALOG_CSS.format(name="ConfirmScreen")
    BINDINGS = [Binding("escape", "cancel", show=False)]

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Static(self.message, id="message")
            with Horizontal(id="buttons"):
                yield Button("Yes", id="yes", variant="primary")
                yield Button("No", id="no")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "yes")

    def action_cancel(self) -> None:
        self.dismiss(False)


class TextPromptScreen(ModalScreen[str | None]):
    """Ask for one line of text. Dismisses with None on cancel or blank input."""

    CSS = DIALOG_CSS.format(name="TextPromptScreen")
    BINDINGS = [Binding("escape", "cancel", show=False)]

    def __init__(self, message: str, value: str = ""):
        super().__init__()
        self.message = message
        self.value = value

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Static(self.message, id="message")
            yield Input(self.value, id="prompt-input")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        text = event.value.strip()
        self.dismiss(text or None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class TicketEditScreen(ModalScreen[dict | None]):
    """Edit a ticket's title, description and status.

    Dismisses with a dict of the form's fields, or None when cancelled.
    """

    CSS = (
        DIALOG_CSS.format(name="TicketEditScreen")
        + """
    TicketEditScreen #description {
        height: 8;
    }
    TicketEditScreen Label {
        margin-top: 1;
    }
    """
    )
    BINDINGS = [
        Binding("escape", "cancel", show=False),
        Binding("ctrl+s", "submit", "Save"),
    ]

    def __init__(self, ticket: Ticket):
        super().__init__()
        self.ticket = ticket

    def compose(self) -> ComposeResult:
        statuses = [(DEFAULT_COLUMN_NAMES[s], s.value) for s in WORKING_STATUSES]
        with Vertical(id="dialog"):
            yield Label("Title")
            yield Input(self.ticket.title, id="title")
            yield Label("Description")
            yield TextArea(self.ticket.description, id="description")
            yield Label("Status")
            yield Select(statuses, value=self.ticket.status.value, allow_blank=False, id="status")
            with Horizontal(id="buttons"):
                yield Button("Save", id="save", variant="primary")
                yield Button("Cancel", id="cancel")

    def _values(self) -> dict:
        return {
            "title": self.query_one("#title", Input).value.strip(),
            "description": self.query_one("#description", TextArea).text,
            "status": self.query_one("#status", Select).value,
        }

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self.action_submit()
        else:
            self.dismiss(None)

    def action_submit(self) -> None:
        values = self._values()
        if not values["title"]:
            self.notify("Title can't be empty", severity="warning")
            return
        self.dismiss(values)

    def action_cancel(self) -> None:
        self.dismiss(None)
