"""SCAN — the elevator algorithm.

The head sweeps in one direction servicing every request it passes.
When a sweep *starts* with nothing ahead of the head, the arm still
travels all the way to the physical edge of the disk before turning
round, even though no request waits there.  Once a sweep has serviced
its last request ahead, the head turns round on the spot and works
back the other way.

Landing exactly on an edge (cylinder ``0`` or ``disk_size - 1``) always
points the head back inward, so a peek made right after an edge trip
already shows the reversal.
"""

from dataclasses import replace

from py_diskhead.algorithms.base import (
    SimulationResult,
    drain,
    follow_move,
    nearest_ahead,
    require_pending,
)
from py_diskhead.state import Direction, SchedulingAlgorithm, SimulationState


class SCANPolicy:
    """Sweep to the edge, then reverse."""

    algorithm = SchedulingAlgorithm.SCAN

    def choose_next(self, state: SimulationState) -> int:
        """Return the next request ahead, the edge, or the first one back."""
        require_pending(state)
        ahead = nearest_ahead(state)
        if ahead is not None:
            return ahead
        edge = state.edge_ahead()
        if state.head != edge:
            return edge
        # Parked on the edge with nothing ahead: everything pending is behind
        behind = state.behind()
        return max(behind) if state.direction is Direction.UP else min(behind)

    def direction_after(
        self,
        state: SimulationState,
        target: int,
        remaining: tuple[int, ...],
    ) -> Direction:
        """Turn inward at an edge, or round once the sweep runs dry."""
        if target == state.last_cylinder:
            return Direction.DOWN
        if target == 0:
            return Direction.UP
        direction = follow_move(state, target)
        moved = replace(state, head=target, direction=direction, pending=remaining)
        if remaining and not moved.ahead():
            return direction.reversed()
        return direction

    def simulate(self, state: SimulationState) -> SimulationResult:
        """Project the full sweep, edge trip included."""
        return drain(self, state)
