"""Reading and writing board files on disk."""

import hashlib
import os
import tempfile
from pathlib import Path
from typing import NamedTuple

from taskboard.errors import FormatError
from taskboard.model.loader import DECODERS, decode
from taskboard.model.writer import encode
from taskboard.models import Board


class Fingerprint(NamedTuple):
    """What a file looked like when we last read or wrote it."""

    mtime_ns: int
    size: int
    digest: str


def format_for_path(path: str | Path) -> str:
    """Pick the board format from a file suffix.

    "board.json" → "json", "tasks.CSV" → "csv"
    """
    fmt = Path(path).suffix.lower().lstrip(".")
    if fmt not in DECODERS:
        raise FormatError(f"Unsupported board file type: {Path(path).name}")
    return fmt


def digest(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def fingerprint(path: str | Path) -> Fingerprint | None:
    """Fingerprint a file, or None if it doesn't exist."""
    path = Path(path)
    try:
        stat = path.stat()
        data = path.read_bytes()
    except FileNotFoundError:
        return None
    return Fingerprint(stat.st_mtime_ns, stat.st_size, digest(data))


def read_board(path: str | Path) -> tuple[Board, Fingerprint]:
    """Read and decode a board file along with its fingerprint."""
    path = Path(path)
    fmt = format_for_path(path)
    stat = path.stat()
    data = path.read_bytes()
    board = decode(data.decode("utf-8"), fmt)
    return board, Fingerprint(stat.st_mtime_ns, stat.st_size, digest(data))


def write_board(path: str | Path, board: Board) -> Fingerprint:
    """Encode and atomically replace the board file.

    Writes to a temp file in the same directory, then renames it over the
    target so readers never see a half-written file.
    """
    path = Path(path)
    data = encode(board, format_for_path(path)).encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise

    stat = path.stat()
    return Fingerprint(stat.st_mtime_ns, stat.st_size, digest(data))
