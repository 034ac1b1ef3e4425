"""Tests for the simulation data types."""

import dataclasses

import pytest

from py_diskhead.state import (
    Direction,
    InvalidConfigurationError,
    SchedulingAlgorithm,
    SimulationState,
    SimulationStats,
    StepRecord,
    clamp_head,
)


class TestDirection:
    """Verify direction helpers."""

    def test_values(self) -> None:
        """UP is +1 and DOWN is -1."""
        assert int(Direction.UP) == 1
        assert int(Direction.DOWN) == -1

    def test_toward(self) -> None:
        """The direction of a move follows the sign of the difference."""
        assert Direction.toward(10, 20) is Direction.UP
        assert Direction.toward(20, 10) is Direction.DOWN
        assert Direction.toward(5, 5) is None

    def test_reversed(self) -> None:
        """Reversing swaps UP and DOWN."""
        assert Direction.UP.reversed() is Direction.DOWN
        assert Direction.DOWN.reversed() is Direction.UP


class TestSchedulingAlgorithm:
    """Verify algorithm name parsing."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("fcfs", SchedulingAlgorithm.FCFS),
            ("SSTF", SchedulingAlgorithm.SSTF),
            ("C-SCAN", SchedulingAlgorithm.CSCAN),
            ("c_look", SchedulingAlgorithm.CLOOK),
            (" Look ", SchedulingAlgorithm.LOOK),
        ],
    )
    def test_parse(self, name: str, expected: SchedulingAlgorithm) -> None:
        """Names are matched ignoring case, hyphens and underscores."""
        assert SchedulingAlgorithm.parse(name) is expected

    def test_parse_unknown_raises(self) -> None:
        """Unknown names are a configuration error."""
        with pytest.raises(InvalidConfigurationError, match="Unknown scheduling algorithm"):
            SchedulingAlgorithm.parse("elevator")

    def test_exactly_six(self) -> None:
        """The policy set is closed."""
        expected = 6
        assert len(SchedulingAlgorithm) == expected


class TestSimulationState:
    """Verify state snapshot helpers."""

    def test_is_frozen(self) -> None:
        """Snapshots cannot be modified."""
        state = SimulationState(disk_size=10, head=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.head = 5  # type: ignore[misc]

    def test_ahead_and_behind_up(self) -> None:
        """Moving up, ahead is at-or-above the head."""
        state = SimulationState(disk_size=100, head=50, pending=(10, 50, 70))
        assert state.ahead() == [50, 70]
        assert state.behind() == [10]

    def test_ahead_and_behind_down(self) -> None:
        """Moving down, ahead is at-or-below the head."""
        state = SimulationState(
            disk_size=100, head=50, direction=Direction.DOWN, pending=(10, 50, 70)
        )
        assert state.ahead() == [10, 50]
        assert state.behind() == [70]

    def test_without_one_removes_first_match(self) -> None:
        """Only the earliest duplicate is removed."""
        state = SimulationState(disk_size=100, head=0, pending=(30, 10, 30))
        assert state.without_one(30) == ((10, 30), True)
        assert state.without_one(99) == ((30, 10, 30), False)

    def test_edges(self) -> None:
        """Cylinder 0 and the last cylinder are edges."""
        state = SimulationState(disk_size=100, head=0)
        assert state.is_edge(0)
        assert state.is_edge(99)
        assert not state.is_edge(50)
        assert state.edge_ahead() == 99  # noqa: PLR2004


class TestSimulationStats:
    """Verify derived statistics."""

    def test_average_with_nothing_served(self) -> None:
        """The average is 0.0 before anything is serviced."""
        assert SimulationStats(total_seek_distance=149).average_seek == 0.0

    def test_average(self) -> None:
        """The average is total distance over requests served."""
        stats = SimulationStats(total_seek_distance=380, requests_served=3)
        assert stats.average_seek == 380 / 3


class TestHelpers:
    """Verify small helpers."""

    def test_clamp_head(self) -> None:
        """Heads are clamped into [0, disk_size - 1]."""
        assert clamp_head(-4, 10) == 0
        assert clamp_head(4, 10) == 4  # noqa: PLR2004
        assert clamp_head(40, 10) == 9  # noqa: PLR2004

    def test_step_record_distance(self) -> None:
        """A step record derives its distance."""
        record = StepRecord(origin=50, target=10, direction=Direction.DOWN, serviced=True)
        assert record.distance == 40  # noqa: PLR2004
