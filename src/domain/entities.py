"""
Domain entities with business logic.

Patterns used
-------------
- **State Pattern** on ``Ride``: enforces valid lifecycle transitions
  (REQUESTED -> [ACCEPTED] -> IN_PROGRESS -> COMPLETED | CANCELLED).
- ``ParkingSlot`` guards its own occupancy; ``Level`` owns the first-fit
  scan over its slots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .enums import RIDE_TRANSITIONS, TERMINAL_STATUSES, RideStatus, VehicleType
from .exceptions import InvalidStateTransition, SlotOccupied


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Vehicle:
    vehicle_type: VehicleType
    license_plate: str


# ── Parking ───────────────────────────────────────────────────────────


@dataclass
class ParkingSlot:
    level: int
    slot_number: int
    vehicle: Optional[Vehicle] = None

    def is_available(self) -> bool:
        return self.vehicle is None

    def park_vehicle(self, vehicle: Vehicle) -> None:
        if not self.is_available():
            raise SlotOccupied(
                f"Slot {self.level}-{self.slot_number} is already occupied "
                f"by {self.vehicle.license_plate}"
            )
        self.vehicle = vehicle

    def remove_vehicle(self) -> Optional[Vehicle]:
        vehicle = self.vehicle
        self.vehicle = None
        return vehicle


@dataclass
class Level:
    level_number: int
    slots: list[ParkingSlot] = field(default_factory=list)

    @classmethod
    def with_slots(cls, level_number: int, num_slots: int) -> Level:
        """Build a level whose slots are numbered 1..num_slots."""
        return cls(
            level_number,
            [ParkingSlot(level_number, i + 1) for i in range(num_slots)],
        )

    def find_available_slot(self) -> Optional[ParkingSlot]:
        for slot in self.slots:
            if slot.is_available():
                return slot
        return None

    def find_slot(self, license_plate: str) -> Optional[ParkingSlot]:
        for slot in self.slots:
            if slot.vehicle and slot.vehicle.license_plate == license_plate:
                return slot
        return None

    def park_vehicle(self, vehicle: Vehicle) -> Optional[ParkingSlot]:
        slot = self.find_available_slot()
        if slot:
            slot.park_vehicle(vehicle)
        return slot

    def unpark_vehicle(self, license_plate: str) -> Optional[Vehicle]:
        slot = self.find_slot(license_plate)
        if slot:
            return slot.remove_vehicle()
        return None

    def available_count(self) -> int:
        return sum(1 for slot in self.slots if slot.is_available())


# ── Ride sharing ──────────────────────────────────────────────────────


@dataclass
class Driver:
    id: str
    name: str
    location: Location
    is_available: bool = True


@dataclass(frozen=True)
class Rider:
    id: str
    name: str
    location: Location


@dataclass
class Ride:
    id: str
    driver_id: str
    rider_id: str
    start_location: Location
    end_location: Location
    status: RideStatus = RideStatus.REQUESTED

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def can_transition_to(self, new_status: RideStatus) -> bool:
        return new_status in RIDE_TRANSITIONS.get(self.status, set())

    def transition_to(self, new_status: RideStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        if not self.can_transition_to(new_status):
            raise InvalidStateTransition(
                f"Cannot transition ride {self.id} from "
                f"{self.status.value} to {new_status.value}"
            )
        self.status = new_status
