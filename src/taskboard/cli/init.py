"""Handler for 'taskboard init'."""

from pathlib import Path

from taskboard.cli._common import error, output_json, remember
from taskboard.errors import TaskboardError
from taskboard.session import BoardSession


def init_board(args) -> int:
    """Create a board file with the three empty working columns."""
    path = Path(args.path).resolve()

    try:
        session = BoardSession(path)
    except TaskboardError as e:
        error(str(e), args.json)

    if session.exists():
        if args.json:
            output_json({"path": str(path), "created": False})
        else:
            print(f"Board already exists at {path}")
        return 0

    board = session.create()
    remember(session)

    columns = [c.name for c in board.visible_columns()]
    if args.json:
        output_json({"path": str(path), "columns": columns, "created": True})
    else:
        print(f"Initialized board at {path}")
        print(f"Columns: {', '.join(columns)}")

    return 0
