"""Simulation event log.

The engine records a structured entry for everything it does — requests
queued or ignored, steps taken, resets, policy and geometry changes — so
a teaching front end can replay *why* the head went where it did.

This mirrors a kernel log buffer (``dmesg``):

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — one structured record (level, message, source, step).
- **Logger** — an append-only buffer with filtering, optionally bounded.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records should be immutable.
    - **Bounded buffer** — with ``max_entries`` set the oldest entries
      fall off the front, like a ring buffer.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "engine").
        step: How many head movements had been applied when it was logged.

    """

    level: LogLevel
    message: str
    source: str
    step: int = 0

    def __str__(self) -> str:
        """Format as ``[LEVEL] #step source: message``."""
        return f"[{self.level.name}] #{self.step} {self.source}: {self.message}"


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self, *, max_entries: int | None = None) -> None:
        """Create an empty logger.

        Args:
            max_entries: Keep at most this many entries (None = unbounded).

        Raises:
            ValueError: If *max_entries* is not positive.

        """
        if max_entries is not None and max_entries <= 0:
            msg = f"max_entries must be positive, got {max_entries}"
            raise ValueError(msg)
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)

    @property
    def max_entries(self) -> int | None:
        """Return the buffer bound, or None if unbounded."""
        return self._entries.maxlen

    @property
    def entries(self) -> list[LogEntry]:
        """Return all retained entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        step: int = 0,
    ) -> None:
        """Append a new entry to the log."""
        self._entries.append(LogEntry(level=level, message=message, source=source, step=step))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of retained entries."""
        return len(self._entries)
