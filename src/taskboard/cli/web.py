"""Handler for 'taskboard web' command."""

import shlex
import shutil

from textual_serve.server import Server

from taskboard.cli._common import board_path, error


def web(args) -> int:
    path = str(board_path(args))

    taskboard = shutil.which("taskboard")
    if taskboard is None:
        error("taskboard not found on PATH", args.json)

    server = Server(
        f"{shlex.quote(taskboard)} {shlex.quote(path)}",
        host=args.host,
        port=args.port,
        title="taskboard",
    )

    print(f"serving {path} at http://{args.host}:{args.port}")
    server.serve()
    return 0
