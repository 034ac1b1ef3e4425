"""Simulation state — the data a disk-head scheduler works on.

A disk is a row of numbered **cylinders** ``0 .. disk_size - 1``.  A single
read/write **head** sits over one of them and moves left or right to reach
the cylinders that processes have asked for.  Everything the scheduler needs
to make a decision fits in one small record:

- **SimulationState** — disk size, head position, sweep direction, the
  pending-request queue, and which algorithm is active.
- **SimulationStats** — how far the head has travelled and how many
  requests it has serviced.
- **StepRecord** — what a single step did (where from, where to, how far).

Design choices:
    - **Frozen dataclasses** — observers receive snapshots they cannot
      corrupt.  The engine replaces its snapshot on every mutation.
    - **Tuple for the queue** — duplicates allowed, arrival order kept,
      and it is read-only for free.
    - **IntEnum for direction** so ``head + direction`` just works.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum


class SimulationError(Exception):
    """Base class for every error the simulator raises."""


class InvalidConfigurationError(SimulationError, ValueError):
    """Raise when a disk size, head or algorithm setting is unusable.

    The call that raised it leaves the simulation untouched.
    """


class UseAfterDisposeError(SimulationError, RuntimeError):
    """Raise when an engine is used after ``dispose()``."""


class ReentrantCallError(SimulationError, RuntimeError):
    """Raise when a change handler tries to mutate the engine it observes."""


class Direction(IntEnum):
    """Sweep direction of the head across the cylinders."""

    UP = 1
    DOWN = -1

    @classmethod
    def toward(cls, origin: int, target: int) -> Direction | None:
        """Return the direction of a move, or None if the head stays put."""
        if target > origin:
            return cls.UP
        if target < origin:
            return cls.DOWN
        return None

    def reversed(self) -> Direction:
        """Return the opposite direction."""
        return Direction.DOWN if self is Direction.UP else Direction.UP


class SchedulingAlgorithm(StrEnum):
    """The closed set of disk-scheduling policies the engine can run."""

    FCFS = "fcfs"
    SSTF = "sstf"
    SCAN = "scan"
    CSCAN = "cscan"
    LOOK = "look"
    CLOOK = "clook"

    @classmethod
    def parse(cls, name: str) -> SchedulingAlgorithm:
        """Look up an algorithm by name, ignoring case and hyphens.

        ``"C-SCAN"``, ``"cscan"`` and ``"CScan"`` all name the same policy.

        Raises:
            InvalidConfigurationError: If *name* is not a known policy.

        """
        key = name.strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(key)
        except ValueError:
            msg = f"Unknown scheduling algorithm: {name!r}"
            raise InvalidConfigurationError(msg) from None


def clamp_head(position: int, disk_size: int) -> int:
    """Clamp a head position into ``[0, disk_size - 1]``."""
    return max(0, min(position, disk_size - 1))


@dataclass(frozen=True)
class SimulationState:
    """An immutable snapshot of the disk, the head, and the request queue.

    Attributes:
        disk_size: Number of cylinders on the disk (at least 1).
        head: Cylinder the head is currently over.
        direction: Current sweep direction.
        pending: Requested cylinders in arrival order (duplicates allowed).
        algorithm: The policy that picks the next request.

    """

    disk_size: int
    head: int
    direction: Direction = Direction.UP
    pending: tuple[int, ...] = ()
    algorithm: SchedulingAlgorithm = SchedulingAlgorithm.FCFS

    @property
    def last_cylinder(self) -> int:
        """Return the highest cylinder number on the disk."""
        return self.disk_size - 1

    def in_range(self, cylinder: int) -> bool:
        """Return True if *cylinder* exists on this disk."""
        return 0 <= cylinder < self.disk_size

    def is_edge(self, cylinder: int) -> bool:
        """Return True if *cylinder* is the first or last cylinder."""
        return cylinder in (0, self.last_cylinder)

    def edge_ahead(self) -> int:
        """Return the physical edge the head is currently sweeping toward."""
        return self.last_cylinder if self.direction is Direction.UP else 0

    def ahead(self) -> list[int]:
        """Return pending values at or past the head in the sweep direction."""
        if self.direction is Direction.UP:
            return [r for r in self.pending if r >= self.head]
        return [r for r in self.pending if r <= self.head]

    def behind(self) -> list[int]:
        """Return pending values strictly behind the head."""
        if self.direction is Direction.UP:
            return [r for r in self.pending if r < self.head]
        return [r for r in self.pending if r > self.head]

    def without_one(self, value: int) -> tuple[tuple[int, ...], bool]:
        """Return the queue with the first *value* removed, and whether one was.

        Only the earliest matching entry goes, so arrival order among the
        remaining duplicates is preserved.
        """
        try:
            index = self.pending.index(value)
        except ValueError:
            return self.pending, False
        return self.pending[:index] + self.pending[index + 1 :], True


@dataclass(frozen=True)
class SimulationStats:
    """Cumulative seek statistics.

    Attributes:
        total_seek_distance: Sum of every head movement, in cylinders.
        requests_served: Number of requests actually removed from the queue.

    """

    total_seek_distance: int = 0
    requests_served: int = 0

    @property
    def average_seek(self) -> float:
        """Return the mean distance per serviced request (0.0 if none)."""
        if self.requests_served == 0:
            return 0.0
        return self.total_seek_distance / self.requests_served


@dataclass(frozen=True)
class StepRecord:
    """One applied head movement.

    A step that travels to a physical edge with no request there still
    moves the head (and costs distance) but has ``serviced=False``.
    """

    origin: int
    target: int
    direction: Direction
    serviced: bool
    distance: int = field(init=False)

    def __post_init__(self) -> None:
        """Derive the seek distance from the two endpoints."""
        object.__setattr__(self, "distance", abs(self.target - self.origin))
