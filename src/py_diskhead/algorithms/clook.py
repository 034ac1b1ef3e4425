"""C-LOOK — Circular LOOK.

Sweep in one direction as far as the last request, then jump to the
opposite extreme of the queue and sweep the same way again.  The
physical edges are never touched.
"""

from py_diskhead.algorithms.base import (
    SimulationResult,
    drain,
    nearest_ahead,
    require_pending,
)
from py_diskhead.state import Direction, SchedulingAlgorithm, SimulationState


class CLOOKPolicy:
    """Sweep as far as the last request, then wrap."""

    algorithm = SchedulingAlgorithm.CLOOK

    def choose_next(self, state: SimulationState) -> int:
        """Return the next request ahead, else the far end of the queue."""
        require_pending(state)
        ahead = nearest_ahead(state)
        if ahead is not None:
            return ahead
        return min(state.pending) if state.direction is Direction.UP else max(state.pending)

    def direction_after(
        self,
        state: SimulationState,
        target: int,  # noqa: ARG002
        remaining: tuple[int, ...],  # noqa: ARG002
    ) -> Direction:
        """Keep sweeping the same way across the wrap."""
        return state.direction

    def simulate(self, state: SimulationState) -> SimulationResult:
        """Project the circular sweep."""
        return drain(self, state)
