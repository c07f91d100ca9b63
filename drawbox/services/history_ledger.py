"""Bounded in-memory log of past draws, newest first."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from threading import Lock

DEFAULT_CAPACITY = 10


class Actor(str, Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class HistoryEntry:
    value: str
    actor: Actor
    timestamp: str


def render_values(values: Sequence[int]) -> str:
    return ", ".join(str(int(v)) for v in values)


class HistoryLedger:
    """Capped, newest-first history.

    ``record`` evicts the oldest entry once capacity is exceeded and
    ``list`` hands out a copy, so callers never see later writes or affect
    the ledger by mutating what they got.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = int(capacity)
        self._entries: deque[HistoryEntry] = deque(maxlen=self._capacity)
        self._lock = Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, entry: HistoryEntry) -> None:
        with self._lock:
            self._entries.appendleft(entry)

    def list(self) -> list[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def hydrate(self, entries: Iterable[HistoryEntry]) -> None:
        """Replace contents with ``entries`` (already newest first)."""

        with self._lock:
            self._entries = deque(list(entries)[: self._capacity], maxlen=self._capacity)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
