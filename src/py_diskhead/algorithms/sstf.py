"""SSTF — Shortest Seek Time First.

A greedy policy: always go to the pending request nearest the head.
Total movement is usually far lower than FCFS, but requests far from
a busy region can **starve** while new nearby requests keep arriving.

Ties are broken by arrival order: of two equidistant requests, the one
that has waited longer wins.
"""

from py_diskhead.algorithms.base import SimulationResult, follow_move, require_pending
from py_diskhead.state import Direction, SchedulingAlgorithm, SimulationState


def _nearest(requests: list[int] | tuple[int, ...], head: int) -> int:
    # min() keeps the first of equal keys, so earlier arrivals win ties
    return min(requests, key=lambda r: abs(r - head))


class SSTFPolicy:
    """Service whichever pending request is closest to the head."""

    algorithm = SchedulingAlgorithm.SSTF

    def choose_next(self, state: SimulationState) -> int:
        """Return the nearest pending request."""
        require_pending(state)
        return _nearest(state.pending, state.head)

    def direction_after(
        self,
        state: SimulationState,
        target: int,
        remaining: tuple[int, ...],  # noqa: ARG002
    ) -> Direction:
        """Point the head the way it just moved."""
        return follow_move(state, target)

    def simulate(self, state: SimulationState) -> SimulationResult:
        """Repeatedly take the nearest request from a working copy."""
        remaining = list(state.pending)
        order: list[int] = []
        total = 0
        current = state.head
        while remaining:
            nearest = _nearest(remaining, current)
            total += abs(nearest - current)
            order.append(nearest)
            remaining.remove(nearest)
            current = nearest
        return SimulationResult(total_distance=total, visit_order=tuple(order))
