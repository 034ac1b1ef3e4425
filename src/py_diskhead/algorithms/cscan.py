"""C-SCAN — Circular SCAN.

Like SCAN, the head sweeps toward the edge of the disk.  Instead of
reversing there, it jumps back to the opposite extreme of the pending
requests and sweeps the same way again.  Requests at both ends of the
disk then wait about equally long.

The return jump is charged as ordinary seek distance, exactly like any
other head movement.  Textbook cost models that treat the return as
free report smaller totals than this one.
"""

from py_diskhead.algorithms.base import (
    SimulationResult,
    drain,
    nearest_ahead,
    require_pending,
)
from py_diskhead.state import Direction, SchedulingAlgorithm, SimulationState


class CSCANPolicy:
    """Sweep to the edge, then wrap to the far end of the queue."""

    algorithm = SchedulingAlgorithm.CSCAN

    def choose_next(self, state: SimulationState) -> int:
        """Return the next request ahead, the edge, or the wrap target."""
        require_pending(state)
        ahead = nearest_ahead(state)
        if ahead is not None:
            return ahead
        edge = state.edge_ahead()
        if state.head != edge:
            return edge
        return min(state.pending) if state.direction is Direction.UP else max(state.pending)

    def direction_after(
        self,
        state: SimulationState,
        target: int,  # noqa: ARG002
        remaining: tuple[int, ...],  # noqa: ARG002
    ) -> Direction:
        """Keep sweeping the same way; the wrap jump is not a reversal."""
        return state.direction

    def simulate(self, state: SimulationState) -> SimulationResult:
        """Project the circular sweep, wrap jump charged at face value."""
        return drain(self, state)
