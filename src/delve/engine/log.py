from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogEntry:
    """One human-readable line in the event log.

    Attributes:
        tick: Simulation tick the entry was recorded in.
        message: Text shown to the player.
        tags: Semantic tags, e.g. ("combat",), ("inventory", "error").
    """

    tick: int
    message: str
    tags: Tuple[str, ...] = field(default_factory=tuple)


class EventLog:
    """Bounded, ordered log of player-facing messages; oldest entries drop first."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._entries: List[LogEntry] = []
        logger.debug("EventLog initialized with capacity=%d", capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, message: str, *, tick: int = 0, tags: Optional[Sequence[str]] = None) -> LogEntry:
        entry = LogEntry(tick=tick, message=message, tags=tuple(tags or ()))
        self._entries.append(entry)
        if len(self._entries) > self._capacity:
            del self._entries[0 : len(self._entries) - self._capacity]
        logger.debug("Log: %s", message)
        return entry

    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def lines(self) -> List[str]:
        return [e.message for e in self._entries]

    def get_recent(self, n: int) -> List[LogEntry]:
        if n <= 0:
            return []
        return self._entries[-n:]

    def clear(self) -> None:
        self._entries.clear()

    def to_dict(self) -> dict:
        return {"capacity": self._capacity, "entries": [asdict(e) for e in self._entries]}

    @classmethod
    def from_dict(cls, data: dict) -> "EventLog":
        log = cls(capacity=int(data.get("capacity", 5)))
        for item in data.get("entries", []):
            log._entries.append(
                LogEntry(tick=int(item["tick"]), message=item["message"], tags=tuple(item.get("tags", ())))
            )
        return log
