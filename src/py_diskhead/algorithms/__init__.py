"""Disk-scheduling policies — one module per algorithm.

Re-exports public symbols so callers can write::

    from py_diskhead.algorithms import SCANPolicy, policy_for
"""

from py_diskhead.algorithms.base import (
    DiskPolicy,
    SimulationResult,
    apply_move,
    drain,
)
from py_diskhead.algorithms.clook import CLOOKPolicy
from py_diskhead.algorithms.cscan import CSCANPolicy
from py_diskhead.algorithms.dispatch import compare_algorithms, policy_for
from py_diskhead.algorithms.fcfs import FCFSPolicy
from py_diskhead.algorithms.look import LOOKPolicy
from py_diskhead.algorithms.scan import SCANPolicy
from py_diskhead.algorithms.sstf import SSTFPolicy

__all__ = [
    "CLOOKPolicy",
    "CSCANPolicy",
    "DiskPolicy",
    "FCFSPolicy",
    "LOOKPolicy",
    "SCANPolicy",
    "SSTFPolicy",
    "SimulationResult",
    "apply_move",
    "compare_algorithms",
    "drain",
    "policy_for",
]
