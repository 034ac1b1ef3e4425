"""FCFS — First Come, First Served.

The simplest policy: service requests in the order they arrived.  Fair
(nobody waits behind a later arrival) but the head zigzags wildly
across the disk, so total seek distance is usually the worst of the
six.

Real-world analogy: an elevator that visits floors in the order the
buttons were pressed, regardless of direction.
"""

from py_diskhead.algorithms.base import SimulationResult, follow_move, require_pending
from py_diskhead.state import Direction, SchedulingAlgorithm, SimulationState


class FCFSPolicy:
    """Service the oldest pending request first."""

    algorithm = SchedulingAlgorithm.FCFS

    def choose_next(self, state: SimulationState) -> int:
        """Return the front of the queue."""
        require_pending(state)
        return state.pending[0]

    def direction_after(
        self,
        state: SimulationState,
        target: int,
        remaining: tuple[int, ...],  # noqa: ARG002
    ) -> Direction:
        """Point the head the way it just moved."""
        return follow_move(state, target)

    def simulate(self, state: SimulationState) -> SimulationResult:
        """Walk the queue in arrival order, summing each hop."""
        total = 0
        head = state.head
        for request in state.pending:
            total += abs(head - request)
            head = request
        return SimulationResult(total_distance=total, visit_order=tuple(state.pending))
