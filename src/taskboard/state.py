"""Small persistent preferences: last opened file, recents, column order.

Stored as YAML under ``$TASKBOARD_HOME`` (default ``~/.config/taskboard``).
"""

import logging
import os
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

STATE_FILE = "state.yaml"
MAX_RECENT = 5
DEFAULT_COLUMN_ORDER = ["todo", "in-progress", "done"]
DEFAULT_POLL_INTERVAL = 1.0


def state_dir() -> Path:
    home = os.environ.get("TASKBOARD_HOME")
    if home:
        return Path(home)
    return Path.home() / ".config" / "taskboard"


def poll_interval() -> float:
    """Seconds between board file checks, from TASKBOARD_POLL_INTERVAL."""
    raw = os.environ.get("TASKBOARD_POLL_INTERVAL")
    if raw is None:
        return DEFAULT_POLL_INTERVAL
    try:
        value = float(raw)
    except ValueError:
        logger.warning("ignoring invalid TASKBOARD_POLL_INTERVAL %r", raw)
        return DEFAULT_POLL_INTERVAL
    return value if value > 0 else DEFAULT_POLL_INTERVAL


class State:
    """Preferences backed by a YAML file, written on every change."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else state_dir() / STATE_FILE
        self._data = self._read()

    def _read(self) -> dict:
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("ignoring unreadable state file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = yaml.dump(self._data, default_flow_style=False, sort_keys=False)
        self.path.write_text(text, encoding="utf-8")

    @property
    def last_opened_file(self) -> str | None:
        value = self._data.get("last_opened_file")
        return value if isinstance(value, str) and value else None

    @last_opened_file.setter
    def last_opened_file(self, value: str | Path | None) -> None:
        if value is None:
            self._data.pop("last_opened_file", None)
        else:
            value = str(value)
            self._data["last_opened_file"] = value
            recents = [value] + [p for p in self.recent_files if p != value]
            self._data["recent_files"] = recents[:MAX_RECENT]
        self._write()

    @property
    def recent_files(self) -> list[str]:
        """Most recently opened first."""
        value = self._data.get("recent_files")
        if not isinstance(value, list):
            return []
        return [p for p in value if isinstance(p, str)][:MAX_RECENT]

    @property
    def column_order(self) -> list[str]:
        value = self._data.get("column_order")
        if not isinstance(value, list) or not all(isinstance(c, str) for c in value):
            return list(DEFAULT_COLUMN_ORDER)
        return list(value)

    @column_order.setter
    def column_order(self, value: list[str]) -> None:
        self._data["column_order"] = [str(c) for c in value]
        self._write()

    def clear(self) -> None:
        """Forget everything."""
        self._data = {}
        self._write()
