"""Small Static variants shared by the board widgets."""

from textual.events import Click
from textual.widgets import Static

from taskboard.ui.constants import ICON_CLOSE


class TicketText(Static):
    """User-entered text (titles, names) shown literally.

    Markup is off so a title like "[x] fix" is not read as a style tag.
    """

    ALLOW_SELECT = False

    def __init__(self, text: str, **kwargs) -> None:
        super().__init__(text, markup=False, **kwargs)


class QuitButton(Static):
    """Header button that releases the board and quits the app."""

    DEFAULT_CSS = """
    QuitButton {
        width: auto;
        height: 1;
        padding: 0 1;
    }
    QuitButton:hover {
        background: $error;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(ICON_CLOSE, **kwargs)
        self.tooltip = "Quit (ctrl+q)"

    async def on_click(self, event: Click) -> None:
        event.stop()
        await self.app.run_action("quit")
