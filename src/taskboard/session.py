"""A caller-owned handle tying one board file to the in-memory board.

The session keeps the current Board, applies reconciler operations to it in
call order, persists changes, and notices when something else rewrote the
file. External edits win wholesale: there is no merge.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from taskboard.errors import TaskboardError
from taskboard.models import Board, new_board
from taskboard.storage import Fingerprint, fingerprint, format_for_path, read_board, write_board


class BoardSession:
    """Owns a board file and the Board decoded from it."""

    def __init__(self, path: str | Path, logger: logging.Logger | None = None):
        self.path = Path(path)
        self.format = format_for_path(self.path)
        self.board: Board | None = None
        self._logger = logger or logging.getLogger(__name__)
        self._fingerprint: Fingerprint | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError(f"Session for {self.path} has been disposed")

    def exists(self) -> bool:
        return self.path.exists()

    def open(self) -> Board:
        """Read and decode the file. On failure the current board is kept."""
        self._check_open()
        board, fp = read_board(self.path)
        self.board = board
        self._fingerprint = fp
        self._logger.info("loaded %s (%d tickets)", self.path, len(board.all_tickets()))
        return board

    def create(self, board: Board | None = None) -> Board:
        """Write a new board file, by default three empty working columns."""
        self._check_open()
        self.board = board if board is not None else new_board()
        self.save()
        self._logger.info("created %s", self.path)
        return self.board

    def save(self) -> None:
        self._check_open()
        if self.board is None:
            raise RuntimeError("No board to save; call open() or create() first")
        self._fingerprint = write_board(self.path, self.board)
        self._logger.debug("saved %s", self.path)

    def apply(self, operation: Callable[..., Board], *args, **kwargs) -> Board:
        """Run a reconciler operation on the current board.

        The result replaces the board and is written out if it differs.
        Exceptions from the operation propagate with the board unchanged.
        """
        self._check_open()
        if self.board is None:
            raise RuntimeError("No board loaded; call open() or create() first")
        result = operation(self.board, *args, **kwargs)
        if result is not self.board:
            self.board = result
            self.save()
        return self.board

    def poll(self) -> bool:
        """Reload the board if the file changed on disk since we last saw it.

        Returns True when the board was replaced. A file that fails to
        decode is logged and ignored, keeping the previous board.
        """
        self._check_open()
        current = fingerprint(self.path)
        if current is None:
            if self._fingerprint is not None:
                self._logger.warning("%s disappeared; keeping in-memory board", self.path)
                self._fingerprint = None
            return False
        if current == self._fingerprint:
            return False
        if self._fingerprint is not None and current.digest == self._fingerprint.digest:
            # Touched but not changed.
            self._fingerprint = current
            return False

        try:
            board, fp = read_board(self.path)
        except (TaskboardError, OSError, UnicodeDecodeError) as exc:
            self._logger.warning("could not reload %s: %s", self.path, exc)
            self._fingerprint = current
            return False

        self.board = board
        self._fingerprint = fp
        self._logger.info("reloaded %s after external change", self.path)
        return True

    def dispose(self) -> None:
        """Close the session; later apply/poll/save calls raise RuntimeError."""
        self._closed = True
        self.board = None
