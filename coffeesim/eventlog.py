"""In-memory history of machine events and errors."""

from __future__ import annotations

import sys
from typing import TextIO

from .signals import Signal

EVENT_PREFIX = "[EVENT] "
ERROR_PREFIX = "[ERROR] "


class LoggerModel:
    """Keeps log entries in order; ``new_log_entry(entry)`` fires for each one."""

    def __init__(self) -> None:
        self._logs: list[str] = []
        self.new_log_entry = Signal()

    def _append(self, entry: str) -> None:
        self._logs.append(entry)
        self.new_log_entry.emit(entry)

    def log_event(self, msg: str) -> None:
        self._append(EVENT_PREFIX + msg)

    def log_error(self, err: str) -> None:
        self._append(ERROR_PREFIX + err)

    def show_logs(self, stream: TextIO | None = None) -> None:
        """Write the whole history to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        print("\n---- Log History ----", file=out)
        for entry in self._logs:
            print(entry, file=out)
        print("---------------------", file=out)

    @property
    def logs(self) -> list[str]:
        """A copy of the entries, oldest first."""
        return list(self._logs)