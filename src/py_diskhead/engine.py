"""Simulation engine — one disk head, one queue, one pluggable policy.

The engine owns the simulation state and is the only thing allowed to
change it.  Callers queue cylinder requests, pick a policy, and call
``step()``; each step asks the active policy for a target, moves the
head there, charges the seek distance, and removes one matching request
from the queue.

Observers (a drawing surface, a statistics panel) never touch the state
directly.  They read frozen snapshots via ``state`` / ``stats`` and
subscribe to two channels:

- ``state_changed`` — fired after any change to geometry, head, queue,
  or policy, with the new ``SimulationState``.
- ``stats_changed`` — fired when a request is actually serviced (and on
  reset), with the new ``SimulationStats``.

Error model:
    - Bad geometry raises ``InvalidConfigurationError`` and changes nothing.
    - Out-of-range requests are silently ignored (logged at DEBUG).
    - ``step()`` on an empty queue returns False and fires nothing.
    - Anything after ``dispose()`` raises ``UseAfterDisposeError``.
    - A change handler that calls back into a mutating method raises
      ``ReentrantCallError`` before any mutation happens.

Design: Strategy pattern
    The engine is the *context*; ``DiskPolicy`` is the *strategy*.
    Swapping the policy mid-run takes effect on the very next step.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from py_diskhead.algorithms import apply_move, policy_for
from py_diskhead.config import DEFAULT_DISK_SIZE, SimulationConfig
from py_diskhead.events import EventChannel
from py_diskhead.logging import Logger, LogLevel
from py_diskhead.state import (
    Direction,
    InvalidConfigurationError,
    ReentrantCallError,
    SchedulingAlgorithm,
    SimulationState,
    SimulationStats,
    StepRecord,
    UseAfterDisposeError,
    clamp_head,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from py_diskhead.algorithms import DiskPolicy, SimulationResult

_SOURCE = "engine"


def _check_disk_size(disk_size: int) -> None:
    if disk_size <= 0:
        msg = f"disk_size must be positive, got {disk_size}"
        raise InvalidConfigurationError(msg)


class SimulationEngine:
    """Drive a simulated disk head with a swappable scheduling policy."""

    def __init__(
        self,
        disk_size: int = DEFAULT_DISK_SIZE,
        initial_head: int = 0,
        algorithm: SchedulingAlgorithm = SchedulingAlgorithm.FCFS,
        *,
        logger: Logger | None = None,
    ) -> None:
        """Create an engine with an empty queue and zeroed statistics.

        Args:
            disk_size: Number of cylinders (must be positive).
            initial_head: Starting head position, clamped onto the disk.
            algorithm: Policy active at start-up.
            logger: Optional event log to record engine activity.

        Raises:
            InvalidConfigurationError: If *disk_size* is not positive.

        """
        _check_disk_size(disk_size)
        self._state = SimulationState(
            disk_size=disk_size,
            head=clamp_head(initial_head, disk_size),
            direction=Direction.UP,
            algorithm=algorithm,
        )
        self._policy: DiskPolicy = policy_for(algorithm)
        self._stats = SimulationStats()
        self._history: list[StepRecord] = []
        self._last_served: int | None = None
        self._logger = logger
        self._disposed = False
        self._notifying = False
        self._state_changed: EventChannel[SimulationState] = EventChannel("state_changed")
        self._stats_changed: EventChannel[SimulationStats] = EventChannel("stats_changed")
        self._log(
            LogLevel.INFO,
            f"engine created: {disk_size} cylinders, head at {self._state.head}, {algorithm.name}",
        )

    @classmethod
    def from_config(
        cls,
        config: SimulationConfig,
        *,
        logger: Logger | None = None,
    ) -> SimulationEngine:
        """Create an engine from a validated config.

        A bounded logger is created from ``config.log_limit`` when no
        logger is supplied.
        """
        config.validate()
        if logger is None:
            logger = Logger(max_entries=config.log_limit)
        return cls(
            config.disk_size,
            config.initial_head,
            config.algorithm,
            logger=logger,
        )

    # -- Read accessors ---------------------------------------------------

    @property
    def disposed(self) -> bool:
        """Return True once ``dispose()`` has been called."""
        return self._disposed

    @property
    def state(self) -> SimulationState:
        """Return a read-only snapshot of the current state."""
        self._check_alive()
        return self._state

    @property
    def stats(self) -> SimulationStats:
        """Return a read-only snapshot of the seek statistics."""
        self._check_alive()
        return self._stats

    @property
    def policy(self) -> DiskPolicy:
        """Return the active scheduling policy."""
        self._check_alive()
        return self._policy

    @property
    def logger(self) -> Logger | None:
        """Return the attached event log, if any."""
        return self._logger

    @property
    def next_request(self) -> int | None:
        """Peek at the cylinder the next ``step()`` would move to.

        May be a physical edge with no request on it (SCAN, C-SCAN).
        Returns None when the queue is empty.
        """
        self._check_alive()
        if not self._state.pending:
            return None
        return self._policy.choose_next(self._state)

    @property
    def last_served(self) -> int | None:
        """Return the most recently serviced cylinder, or None."""
        self._check_alive()
        return self._last_served

    @property
    def history(self) -> tuple[StepRecord, ...]:
        """Return every head movement since construction or the last reset."""
        self._check_alive()
        return tuple(self._history)

    @property
    def state_changed(self) -> EventChannel[SimulationState]:
        """Return the channel fired after any state mutation."""
        self._check_alive()
        return self._state_changed

    @property
    def stats_changed(self) -> EventChannel[SimulationStats]:
        """Return the channel fired when statistics change."""
        self._check_alive()
        return self._stats_changed

    def preview(self) -> SimulationResult:
        """Project servicing the whole queue under the active policy."""
        self._check_alive()
        return self._policy.simulate(self._state)

    # -- Mutations ----------------------------------------------------------

    def enqueue_request(self, position: int) -> None:
        """Append a request for *position*; out-of-range values are ignored."""
        self._check_mutable()
        if not self._state.in_range(position):
            self._log(LogLevel.DEBUG, f"ignored out-of-range request {position}")
            return
        self._state = replace(self._state, pending=(*self._state.pending, position))
        self._log(LogLevel.DEBUG, f"queued request {position}")
        self._emit()

    def enqueue_requests(self, positions: Iterable[int]) -> None:
        """Queue each position in iteration order."""
        for position in positions:
            self.enqueue_request(position)

    def clear_requests(self) -> None:
        """Drop every pending request."""
        self._check_mutable()
        self._state = replace(self._state, pending=())
        self._log(LogLevel.INFO, "cleared pending requests")
        self._emit()

    def step(self) -> bool:
        """Move the head to the next target chosen by the active policy.

        Returns:
            True if a request was serviced (removed from the queue); False
            if the queue was empty or the head only travelled to an edge.

        """
        self._check_mutable()
        if not self._state.pending:
            return False

        record, self._state = apply_move(self._policy, self._state)
        self._history.append(record)
        served = self._stats.requests_served
        if record.serviced:
            served += 1
            self._last_served = record.target
        self._stats = SimulationStats(
            total_seek_distance=self._stats.total_seek_distance + record.distance,
            requests_served=served,
        )

        if record.serviced:
            self._log(
                LogLevel.INFO,
                f"{self._policy.algorithm.name} serviced {record.target} "
                f"(from {record.origin}, seek {record.distance})",
            )
        else:
            self._log(
                LogLevel.INFO,
                f"{self._policy.algorithm.name} travelled to edge {record.target} "
                f"(from {record.origin}, seek {record.distance})",
            )
        self._emit(stats=record.serviced)
        return record.serviced

    def run_to_completion(self, max_steps: int | None = None) -> list[int]:
        """Step until the queue is empty (or *max_steps* moves were made).

        Returns:
            The serviced cylinders in service order.

        """
        self._check_mutable()
        serviced: list[int] = []
        steps = 0
        while self._state.pending and (max_steps is None or steps < max_steps):
            if self.step() and self._last_served is not None:
                serviced.append(self._last_served)
            steps += 1
        return serviced

    def reset(self, head: int | None = None) -> None:
        """Empty the queue, zero the statistics, and park the head.

        Args:
            head: New head position (clamped), or None for cylinder 0.

        """
        self._check_mutable()
        disk_size = self._state.disk_size
        self._state = replace(
            self._state,
            head=0 if head is None else clamp_head(head, disk_size),
            direction=Direction.UP,
            pending=(),
        )
        self._stats = SimulationStats()
        self._history.clear()
        self._last_served = None
        self._log(LogLevel.INFO, f"reset: head at {self._state.head}")
        self._emit(stats=True)

    def change_algorithm(self, algorithm: SchedulingAlgorithm) -> None:
        """Swap the active policy, leaving queue and head untouched."""
        self._check_mutable()
        self._policy = policy_for(algorithm)
        self._state = replace(self._state, algorithm=algorithm)
        self._log(LogLevel.INFO, f"algorithm changed to {algorithm.name}")
        self._emit()

    def change_disk_size(self, disk_size: int) -> None:
        """Resize the disk, dropping requests that no longer fit.

        Requests at or beyond the new size are discarded silently and the
        head is clamped onto the new range.

        Raises:
            InvalidConfigurationError: If *disk_size* is not positive.

        """
        self._check_mutable()
        _check_disk_size(disk_size)
        kept = tuple(r for r in self._state.pending if 0 <= r < disk_size)
        dropped = len(self._state.pending) - len(kept)
        self._state = replace(
            self._state,
            disk_size=disk_size,
            head=clamp_head(self._state.head, disk_size),
            pending=kept,
        )
        if dropped:
            self._log(LogLevel.WARNING, f"resize to {disk_size} dropped {dropped} request(s)")
        self._log(LogLevel.INFO, f"disk resized to {disk_size} cylinders")
        self._emit()

    def dispose(self) -> None:
        """Tear the engine down and drop every subscriber.

        Calling it again is harmless.
        """
        if self._disposed:
            return
        self._disposed = True
        self._state_changed.clear()
        self._stats_changed.clear()
        self._log(LogLevel.INFO, "engine disposed")

    # -- Internals ----------------------------------------------------------

    def _check_alive(self) -> None:
        if self._disposed:
            msg = "SimulationEngine has been disposed"
            raise UseAfterDisposeError(msg)

    def _check_mutable(self) -> None:
        self._check_alive()
        if self._notifying:
            msg = "Cannot mutate the engine from inside a change handler"
            raise ReentrantCallError(msg)

    def _emit(self, *, stats: bool = False) -> None:
        """Fire ``stats_changed`` (when asked) then ``state_changed``."""
        self._notifying = True
        try:
            if stats:
                self._stats_changed.emit(self._stats)
            self._state_changed.emit(self._state)
        finally:
            self._notifying = False

    def _log(self, level: LogLevel, message: str) -> None:
        if self._logger is not None:
            self._logger.log(level, message, source=_SOURCE, step=len(self._history))
