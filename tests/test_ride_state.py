"""Unit tests for ride entity state transitions (State Pattern)."""

import pytest

from src.domain.entities import Location, Ride
from src.domain.enums import RideStatus
from src.domain.exceptions import InvalidStateTransition


def make_ride(status: RideStatus = RideStatus.REQUESTED) -> Ride:
    return Ride(
        id="ride-1",
        driver_id="d1",
        rider_id="r1",
        start_location=Location(0, 0),
        end_location=Location(1, 1),
        status=status,
    )


class TestRideStateMachine:
    def test_initial_status_is_requested(self):
        ride = Ride("x", "d1", "r1", Location(0, 0), Location(1, 1))
        assert ride.status == RideStatus.REQUESTED

    # ── Valid transitions ─────────────────────────────────────────

    def test_requested_to_accepted(self):
        ride = make_ride(RideStatus.REQUESTED)
        ride.transition_to(RideStatus.ACCEPTED)
        assert ride.status == RideStatus.ACCEPTED

    def test_requested_to_in_progress(self):
        ride = make_ride(RideStatus.REQUESTED)
        ride.transition_to(RideStatus.IN_PROGRESS)
        assert ride.status == RideStatus.IN_PROGRESS

    def test_accepted_to_in_progress(self):
        ride = make_ride(RideStatus.ACCEPTED)
        ride.transition_to(RideStatus.IN_PROGRESS)
        assert ride.status == RideStatus.IN_PROGRESS

    def test_in_progress_to_completed(self):
        ride = make_ride(RideStatus.IN_PROGRESS)
        ride.transition_to(RideStatus.COMPLETED)
        assert ride.status == RideStatus.COMPLETED

    @pytest.mark.parametrize(
        "status",
        [RideStatus.REQUESTED, RideStatus.ACCEPTED, RideStatus.IN_PROGRESS],
    )
    def test_any_non_terminal_can_be_cancelled(self, status):
        ride = make_ride(status)
        ride.transition_to(RideStatus.CANCELLED)
        assert ride.status == RideStatus.CANCELLED

    # ── Invalid transitions ───────────────────────────────────────

    def test_requested_to_completed_fails(self):
        ride = make_ride(RideStatus.REQUESTED)
        with pytest.raises(InvalidStateTransition):
            ride.transition_to(RideStatus.COMPLETED)
        assert ride.status == RideStatus.REQUESTED

    def test_in_progress_cannot_go_back(self):
        ride = make_ride(RideStatus.IN_PROGRESS)
        with pytest.raises(InvalidStateTransition):
            ride.transition_to(RideStatus.REQUESTED)

    @pytest.mark.parametrize("terminal", [RideStatus.COMPLETED, RideStatus.CANCELLED])
    @pytest.mark.parametrize("target", list(RideStatus))
    def test_terminal_statuses_have_no_exit(self, terminal, target):
        ride = make_ride(terminal)
        assert ride.is_terminal
        with pytest.raises(InvalidStateTransition):
            ride.transition_to(target)
        assert ride.status == terminal
