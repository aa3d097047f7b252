"""
User-facing notifications raised by the data layer.

The data layer never talks to Streamlit directly. Loaders run off the script
thread, so notifications are collected here and the view flushes them as
toasts once the widget result is back on the script thread.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Notification:
    level: str  # "error" | "warning"
    message: str


class NotificationLog:
    """Append-only notification buffer owned by a single widget."""

    def __init__(self) -> None:
        self._items: List[Notification] = []
        self._lock = threading.Lock()

    def emit(self, level: str, message: str) -> None:
        with self._lock:
            self._items.append(Notification(level=level, message=message))

    def error(self, message: str) -> None:
        self.emit("error", message)

    def warning(self, message: str) -> None:
        self.emit("warning", message)

    def drain(self) -> List[Notification]:
        with self._lock:
            items, self._items = self._items, []
        return items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
