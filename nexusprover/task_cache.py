"""Bounded, expiring cache of recently seen task IDs."""

from __future__ import annotations

import threading
import time
from collections import deque


class TaskCache:
    """Thread-safe queue of the most recent task IDs.

    ``expiration`` is the lifetime of an entry in seconds.
    """

    def __init__(self, capacity: int, expiration: float) -> None:
        self.capacity = capacity
        self.expiration = expiration
        self._entries: deque[tuple[str, float]] = deque()
        self._lock = threading.Lock()

    def _prune_expired(self) -> None:
        now = time.monotonic()
        self._entries = deque(
            (task_id, stamp)
            for task_id, stamp in self._entries
            if now - stamp < self.expiration
        )

    def _holds(self, task_id: str) -> bool:
        return any(existing == task_id for existing, _ in self._entries)

    def contains(self, task_id: str) -> bool:
        """Return True if the task ID is cached and not yet expired."""
        with self._lock:
            self._prune_expired()
            return self._holds(task_id)

    def insert(self, task_id: str) -> None:
        """Add a task ID, evicting the oldest entry when full."""
        with self._lock:
            self._prune_expired()
            if self._holds(task_id):
                return
            if len(self._entries) == self.capacity and self._entries:
                self._entries.popleft()
            self._entries.append((task_id, time.monotonic()))