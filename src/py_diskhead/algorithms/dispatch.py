"""Map the closed ``SchedulingAlgorithm`` enum onto policy objects."""

from py_diskhead.algorithms.base import DiskPolicy, SimulationResult
from py_diskhead.algorithms.clook import CLOOKPolicy
from py_diskhead.algorithms.cscan import CSCANPolicy
from py_diskhead.algorithms.fcfs import FCFSPolicy
from py_diskhead.algorithms.look import LOOKPolicy
from py_diskhead.algorithms.scan import SCANPolicy
from py_diskhead.algorithms.sstf import SSTFPolicy
from py_diskhead.state import SchedulingAlgorithm, SimulationState


def policy_for(algorithm: SchedulingAlgorithm) -> DiskPolicy:
    """Return the policy that implements *algorithm*."""
    match algorithm:
        case SchedulingAlgorithm.FCFS:
            return FCFSPolicy()
        case SchedulingAlgorithm.SSTF:
            return SSTFPolicy()
        case SchedulingAlgorithm.SCAN:
            return SCANPolicy()
        case SchedulingAlgorithm.CSCAN:
            return CSCANPolicy()
        case SchedulingAlgorithm.LOOK:
            return LOOKPolicy()
        case SchedulingAlgorithm.CLOOK:
            return CLOOKPolicy()


def compare_algorithms(state: SimulationState) -> dict[SchedulingAlgorithm, SimulationResult]:
    """Project the same queue under every policy.

    The snapshot's own ``algorithm`` field is ignored; each policy starts
    from the same head, direction, and queue.
    """
    return {algorithm: policy_for(algorithm).simulate(state) for algorithm in SchedulingAlgorithm}
