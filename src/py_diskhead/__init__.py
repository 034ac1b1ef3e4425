"""py_diskhead — a teaching simulator for disk-head scheduling.

Re-exports public symbols so callers can write::

    from py_diskhead import SchedulingAlgorithm, SimulationEngine
"""

from py_diskhead.algorithms import (
    CLOOKPolicy,
    CSCANPolicy,
    DiskPolicy,
    FCFSPolicy,
    LOOKPolicy,
    SCANPolicy,
    SimulationResult,
    SSTFPolicy,
    compare_algorithms,
    policy_for,
)
from py_diskhead.config import DEFAULT_DISK_SIZE, SimulationConfig
from py_diskhead.engine import SimulationEngine
from py_diskhead.events import EventChannel
from py_diskhead.logging import LogEntry, Logger, LogLevel
from py_diskhead.state import (
    Direction,
    InvalidConfigurationError,
    ReentrantCallError,
    SchedulingAlgorithm,
    SimulationError,
    SimulationState,
    SimulationStats,
    StepRecord,
    UseAfterDisposeError,
)

__all__ = [
    "DEFAULT_DISK_SIZE",
    "CLOOKPolicy",
    "CSCANPolicy",
    "Direction",
    "DiskPolicy",
    "EventChannel",
    "FCFSPolicy",
    "InvalidConfigurationError",
    "LOOKPolicy",
    "LogEntry",
    "LogLevel",
    "Logger",
    "ReentrantCallError",
    "SCANPolicy",
    "SSTFPolicy",
    "SchedulingAlgorithm",
    "SimulationConfig",
    "SimulationEngine",
    "SimulationError",
    "SimulationResult",
    "SimulationState",
    "SimulationStats",
    "StepRecord",
    "UseAfterDisposeError",
    "compare_algorithms",
    "policy_for",
]
