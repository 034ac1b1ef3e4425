"""Shared machinery for the disk-scheduling policies.

Every policy answers one question — *which cylinder next?* — and the
rest of a step (moving the head, charging seek distance, removing the
serviced request) is the same for all of them.  That shared part lives
here as a single pure function, ``apply_move``, so that stepping the
engine one request at a time and projecting a whole run ahead of time
can never disagree.

Design: Strategy pattern, same as the CPU scheduler.
    ``DiskPolicy`` is the protocol; each algorithm module provides one
    class that satisfies it.  Policies hold no state of their own — the
    sweep direction travels inside ``SimulationState``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

from py_diskhead.state import (
    Direction,
    SchedulingAlgorithm,
    SimulationState,
    StepRecord,
)


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of servicing a whole queue ahead of time.

    Attributes:
        total_distance: Total head movement, edge trips included.
        visit_order: Serviced request values in the order they are reached.

    """

    total_distance: int = 0
    visit_order: tuple[int, ...] = ()


class DiskPolicy(Protocol):
    """Interface every disk-scheduling algorithm must satisfy."""

    algorithm: SchedulingAlgorithm

    def choose_next(self, state: SimulationState) -> int:
        """Return the cylinder the head should move to next."""
        ...  # pragma: no cover

    def direction_after(
        self,
        state: SimulationState,
        target: int,
        remaining: tuple[int, ...],
    ) -> Direction:
        """Return the sweep direction once the head has reached *target*."""
        ...  # pragma: no cover

    def simulate(self, state: SimulationState) -> SimulationResult:
        """Project servicing every pending request without touching *state*."""
        ...  # pragma: no cover


def require_pending(state: SimulationState) -> None:
    """Raise ValueError if there is nothing to choose from."""
    if not state.pending:
        msg = "No pending requests to choose from"
        raise ValueError(msg)


def nearest_ahead(state: SimulationState) -> int | None:
    """Return the closest pending value in the sweep direction, if any."""
    ahead = state.ahead()
    if not ahead:
        return None
    return min(ahead) if state.direction is Direction.UP else max(ahead)


def follow_move(state: SimulationState, target: int) -> Direction:
    """Return the direction of the move to *target* (unchanged if zero-length)."""
    moved = Direction.toward(state.head, target)
    return state.direction if moved is None else moved


def apply_move(policy: DiskPolicy, state: SimulationState) -> tuple[StepRecord, SimulationState]:
    """Perform one step of *policy* on *state* without mutating it.

    Returns:
        The record of the move and the state after it.

    """
    require_pending(state)
    target = policy.choose_next(state)
    remaining, serviced = state.without_one(target)
    direction = policy.direction_after(state, target, remaining)
    record = StepRecord(
        origin=state.head,
        target=target,
        direction=direction,
        serviced=serviced,
    )
    return record, replace(state, head=target, direction=direction, pending=remaining)


def drain(policy: DiskPolicy, state: SimulationState) -> SimulationResult:
    """Step *policy* over a copy of *state* until the queue is empty.

    Edge trips add to the distance but not to the visit order.
    """
    total = 0
    visits: list[int] = []
    while state.pending:
        record, state = apply_move(policy, state)
        total += record.distance
        if record.serviced:
            visits.append(record.target)
    return SimulationResult(total_distance=total, visit_order=tuple(visits))
