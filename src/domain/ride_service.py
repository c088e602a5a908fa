"""
Ride Sharing Coordinator
========================

Owns three registries (drivers, riders, rides) and drives every ride
through the lifecycle defined in ``enums.RIDE_TRANSITIONS``.

Side effects on drivers
-----------------------
* request            -> driver.is_available = False
* complete / cancel  -> driver.is_available = True

Nothing else outside the ride itself is touched by a transition.  Rides
are never removed from the registry, terminal ones included.

Concurrency
-----------
One re-entrant lock per service guards all registry reads and writes, so
matching and the availability flip happen atomically.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Optional

from .entities import Driver, Location, Ride, Rider
from .enums import RideStatus
from .exceptions import AlreadyExists, NotFound
from .matching import find_nearest_driver

logger = logging.getLogger(__name__)


class RideSharingService:
    def __init__(self) -> None:
        self._drivers: dict[str, Driver] = {}
        self._riders: dict[str, Rider] = {}
        self._rides: dict[str, Ride] = {}
        self._lock = threading.RLock()

    # ── Registration ──────────────────────────────────────────────────

    def add_driver(self, driver: Driver) -> Driver:
        with self._lock:
            if driver.id in self._drivers:
                raise AlreadyExists("Driver", driver.id)
            self._drivers[driver.id] = driver
            return driver

    def add_rider(self, rider: Rider) -> Rider:
        with self._lock:
            if rider.id in self._riders:
                raise AlreadyExists("Rider", rider.id)
            self._riders[rider.id] = rider
            return rider

    # ── Lookups ───────────────────────────────────────────────────────

    def get_driver(self, driver_id: str) -> Driver:
        with self._lock:
            return self._lookup(self._drivers, "Driver", driver_id)

    def get_rider(self, rider_id: str) -> Rider:
        with self._lock:
            return self._lookup(self._riders, "Rider", rider_id)

    def get_ride(self, ride_id: str) -> Ride:
        with self._lock:
            return self._lookup(self._rides, "Ride", ride_id)

    def list_drivers(self, available_only: bool = False) -> list[Driver]:
        with self._lock:
            return [
                d
                for d in self._drivers.values()
                if d.is_available or not available_only
            ]

    def list_rides(self, status: Optional[RideStatus] = None) -> list[Ride]:
        with self._lock:
            return [
                r for r in self._rides.values() if status is None or r.status == status
            ]

    def available_driver_count(self) -> int:
        with self._lock:
            return sum(1 for d in self._drivers.values() if d.is_available)

    # ── Lifecycle ─────────────────────────────────────────────────────

    def request_ride(self, rider_id: str, end_location: Location) -> Optional[Ride]:
        """Match *rider_id* with the nearest free driver.

        Returns ``None`` when no driver is available.
        """
        with self._lock:
            rider = self.get_rider(rider_id)
            driver = find_nearest_driver(rider.location, self._drivers.values())
            if driver is None:
                logger.info("No drivers available for rider %s", rider_id)
                return None

            ride = Ride(
                id=uuid.uuid4().hex,
                driver_id=driver.id,
                rider_id=rider.id,
                start_location=rider.location,
                end_location=end_location,
            )
            self._rides[ride.id] = ride
            driver.is_available = False
            logger.info(
                "Ride %s requested: rider %s matched with driver %s",
                ride.id,
                rider.id,
                driver.id,
            )
            return ride

    def accept_ride(self, ride_id: str) -> Ride:
        with self._lock:
            ride = self.get_ride(ride_id)
            ride.transition_to(RideStatus.ACCEPTED)
            logger.info("Ride %s accepted by driver %s", ride.id, ride.driver_id)
            return ride

    def start_ride(self, ride_id: str) -> Ride:
        with self._lock:
            ride = self.get_ride(ride_id)
            ride.transition_to(RideStatus.IN_PROGRESS)
            logger.info("Ride %s started", ride.id)
            return ride

    def complete_ride(self, ride_id: str) -> Ride:
        with self._lock:
            ride = self.get_ride(ride_id)
            ride.transition_to(RideStatus.COMPLETED)
            self._release_driver(ride)
            logger.info("Ride %s completed", ride.id)
            return ride

    def cancel_ride(self, ride_id: str) -> Ride:
        with self._lock:
            ride = self.get_ride(ride_id)
            ride.transition_to(RideStatus.CANCELLED)
            self._release_driver(ride)
            logger.info("Ride %s cancelled", ride.id)
            return ride

    # ── Internals ─────────────────────────────────────────────────────

    def _release_driver(self, ride: Ride) -> None:
        driver = self._drivers.get(ride.driver_id)
        if driver:
            driver.is_available = True

    @staticmethod
    def _lookup(registry: dict, kind: str, key: str):
        try:
            return registry[key]
        except KeyError:
            raise NotFound(kind, key) from None
