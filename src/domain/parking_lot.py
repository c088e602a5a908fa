"""
First-Fit Parking Allocation
============================

Levels are scanned in construction order and, within a level, slots are
scanned in construction order.  The first free slot receives the vehicle.

* A full lot is not an error: ``park_vehicle`` returns ``None`` and
  nothing is mutated.
* Unknown plates on release are not an error either: ``unpark_vehicle``
  returns ``None``.
* A plate that is already parked is rejected with
  ``VehicleAlreadyParked`` so the same vehicle can never hold two slots.

Complexity: O(levels x slots) per operation.

All public methods run under one re-entrant lock per lot, so a single
``ParkingLot`` may be shared between request-handling threads.
"""

from __future__ import annotations

import logging
import threading
from typing import NamedTuple, Optional

from .entities import Level, ParkingSlot, Vehicle
from .exceptions import NotFound, VehicleAlreadyParked

logger = logging.getLogger(__name__)


class LevelSummary(NamedTuple):
    level_number: int
    total: int
    available: int


class ParkingLot:
    def __init__(self, num_levels: int, slots_per_level: int):
        if num_levels < 0 or slots_per_level < 0:
            raise ValueError("Level and slot counts must be non-negative")
        self.levels: list[Level] = [
            Level.with_slots(i + 1, slots_per_level) for i in range(num_levels)
        ]
        self._lock = threading.RLock()

    # ── Allocation ────────────────────────────────────────────────────

    def park_vehicle(self, vehicle: Vehicle) -> Optional[ParkingSlot]:
        """Place *vehicle* in the first free slot; ``None`` when full."""
        with self._lock:
            if self._locate(vehicle.license_plate):
                raise VehicleAlreadyParked(
                    f"Vehicle {vehicle.license_plate} is already parked"
                )
            for level in self.levels:
                slot = level.park_vehicle(vehicle)
                if slot:
                    logger.info(
                        "Vehicle %s parked at level %d slot %d",
                        vehicle.license_plate,
                        level.level_number,
                        slot.slot_number,
                    )
                    return slot
            logger.info("Parking lot is full; %s turned away", vehicle.license_plate)
            return None

    def unpark_vehicle(self, license_plate: str) -> Optional[Vehicle]:
        """Free the slot holding *license_plate*; ``None`` if not parked."""
        with self._lock:
            for level in self.levels:
                vehicle = level.unpark_vehicle(license_plate)
                if vehicle:
                    logger.info(
                        "Vehicle %s unparked from level %d",
                        license_plate,
                        level.level_number,
                    )
                    return vehicle
            logger.info("Vehicle %s not found in the parking lot", license_plate)
            return None

    # ── Queries ───────────────────────────────────────────────────────

    def find_vehicle(self, license_plate: str) -> ParkingSlot:
        with self._lock:
            slot = self._locate(license_plate)
            if slot is None:
                raise NotFound("Vehicle", license_plate)
            return slot

    def available_slots(self) -> int:
        with self._lock:
            return sum(level.available_count() for level in self.levels)

    def total_slots(self) -> int:
        return sum(len(level.slots) for level in self.levels)

    def occupied_slots(self) -> int:
        with self._lock:
            return self.total_slots() - self.available_slots()

    def level_summary(self) -> list[LevelSummary]:
        with self._lock:
            return [
                LevelSummary(
                    level.level_number, len(level.slots), level.available_count()
                )
                for level in self.levels
            ]

    def _locate(self, license_plate: str) -> Optional[ParkingSlot]:
        for level in self.levels:
            slot = level.find_slot(license_plate)
            if slot:
                return slot
        return None
