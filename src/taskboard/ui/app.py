"""Main Textual application for taskboard."""

from pathlib import Path

from textual.app import App

from taskboard.errors import TaskboardError
from taskboard.session import BoardSession
from taskboard.state import State
from taskboard.ui.board import BoardScreen
from taskboard.ui.prompt import ConfirmScreen


class TaskboardApp(App):
    """File-backed kanban board TUI."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "taskboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, path: Path):
        super().__init__()
        self.path = Path(path)
        self.session: BoardSession | None = None

    def on_mount(self) -> None:
        try:
            self.session = BoardSession(self.path)
        except TaskboardError as e:
            self.notify(str(e), severity="error")
            self.exit(return_code=1)
            return

        if not self.session.exists():
            self.push_screen(ConfirmScreen(f"{self.path} does not exist. Create it?"), self._on_create_response)
        else:
            self._load_board()

    def _on_create_response(self, result: bool) -> None:
        if result:
            self.session.create()
            self._show_board()
        else:
            self.exit()

    def _load_board(self) -> None:
        try:
            self.session.open()
        except (TaskboardError, OSError, UnicodeDecodeError) as e:
            self.notify(f"Could not open {self.path}: {e}", severity="error")
            self.exit(return_code=1)
            return
        self._show_board()

    def _show_board(self) -> None:
        State().last_opened_file = str(self.session.path)
        self.push_screen(BoardScreen(self.session))

    def action_quit(self) -> None:
        """Release the board file and quit."""
        if self.session is not None:
            self.session.dispose()
        self.exit()
