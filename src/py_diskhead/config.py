"""Simulation configuration.

A ``SimulationConfig`` carries everything needed to build an engine:
disk geometry, where the head starts, which policy runs first, and how
much of the event log to keep.  Front ends usually hold settings as
strings (form fields, command-line flags, boot-style ``key=value``
arguments), so ``from_args`` turns such a mapping into a validated config.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from py_diskhead.state import InvalidConfigurationError, SchedulingAlgorithm

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_DISK_SIZE = 200


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        msg = f"{key} must be an integer, got {raw!r}"
        raise InvalidConfigurationError(msg) from None


@dataclass(frozen=True)
class SimulationConfig:
    """Settings for a new simulation engine.

    Attributes:
        disk_size: Number of cylinders (must be positive).
        initial_head: Starting head position (clamped by the engine).
        algorithm: Policy active at start-up.
        log_limit: Event-log bound, or None to keep everything.

    """

    disk_size: int = DEFAULT_DISK_SIZE
    initial_head: int = 0
    algorithm: SchedulingAlgorithm = SchedulingAlgorithm.FCFS
    log_limit: int | None = None

    def validate(self) -> SimulationConfig:
        """Return self if every field is usable.

        Raises:
            InvalidConfigurationError: On a non-positive disk size or log limit.

        """
        if self.disk_size <= 0:
            msg = f"disk_size must be positive, got {self.disk_size}"
            raise InvalidConfigurationError(msg)
        if self.log_limit is not None and self.log_limit <= 0:
            msg = f"log_limit must be positive, got {self.log_limit}"
            raise InvalidConfigurationError(msg)
        return self

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> SimulationConfig:
        """Build a config from string ``key -> value`` arguments.

        Recognised keys: ``disk_size``, ``head``, ``algorithm``,
        ``log_limit``.  Unknown keys are ignored so callers can pass a
        wider settings map straight through.

        Raises:
            InvalidConfigurationError: If a value cannot be parsed or fails
                validation.

        """
        disk_size = DEFAULT_DISK_SIZE
        initial_head = 0
        algorithm = SchedulingAlgorithm.FCFS
        log_limit: int | None = None
        if "disk_size" in args:
            disk_size = _parse_int("disk_size", args["disk_size"])
        if "head" in args:
            initial_head = _parse_int("head", args["head"])
        if "algorithm" in args:
            algorithm = SchedulingAlgorithm.parse(args["algorithm"])
        if args.get("log_limit", "").strip():
            log_limit = _parse_int("log_limit", args["log_limit"])
        return cls(
            disk_size=disk_size,
            initial_head=initial_head,
            algorithm=algorithm,
            log_limit=log_limit,
        ).validate()
