"""LOOK — SCAN without the trip to the edge.

The head sweeps in one direction only as far as the last request that
way, then reverses immediately.  It never visits cylinder ``0`` or the
last cylinder unless somebody actually asked for it.
"""

from py_diskhead.algorithms.base import (
    SimulationResult,
    drain,
    follow_move,
    nearest_ahead,
    require_pending,
)
from py_diskhead.state import Direction, SchedulingAlgorithm, SimulationState


class LOOKPolicy:
    """Sweep as far as the last request, then reverse."""

    algorithm = SchedulingAlgorithm.LOOK

    def choose_next(self, state: SimulationState) -> int:
        """Return the next request ahead, else the first one on the way back."""
        require_pending(state)
        ahead = nearest_ahead(state)
        if ahead is not None:
            return ahead
        behind = state.behind()
        return max(behind) if state.direction is Direction.UP else min(behind)

    def direction_after(
        self,
        state: SimulationState,
        target: int,
        remaining: tuple[int, ...],  # noqa: ARG002
    ) -> Direction:
        """Point the head the way it just moved."""
        return follow_move(state, target)

    def simulate(self, state: SimulationState) -> SimulationResult:
        """Project the back-and-forth sweep."""
        return drain(self, state)
