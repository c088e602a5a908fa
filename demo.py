"""
Demo script -- replays a fixed parking and ride-sharing scenario in memory.

Run:
    python demo.py

Parking:
  - 3 levels x 10 slots
  - park a car (ABC123) and a bike (XYZ789), report free slots
  - unpark ABC123, report free slots again

Ride sharing:
  - 2 drivers and 1 rider a few metres apart in lower Manhattan
  - request a ride, start it, complete it
"""

import logging

from src.config import settings
from src.domain.entities import Driver, Location, Rider, Vehicle
from src.domain.enums import VehicleType
from src.domain.parking_lot import ParkingLot
from src.domain.ride_service import RideSharingService

logger = logging.getLogger("demo")


DRIVERS = [
    {"id": "d1", "name": "Driver 1", "lat": 40.7128, "lng": -74.0060},
    {"id": "d2", "name": "Driver 2", "lat": 40.7127, "lng": -74.0059},
]

RIDERS = [
    {"id": "r1", "name": "Rider 1", "lat": 40.7126, "lng": -74.0061},
]

DESTINATION = Location(40.7125, -74.0062)


def run_parking() -> None:
    lot = ParkingLot(num_levels=3, slots_per_level=10)

    lot.park_vehicle(Vehicle(VehicleType.CAR, "ABC123"))
    lot.park_vehicle(Vehicle(VehicleType.BIKE, "XYZ789"))
    logger.info("Available slots: %d", lot.available_slots())

    lot.unpark_vehicle("ABC123")
    logger.info("Available slots: %d", lot.available_slots())


def run_rides() -> None:
    service = RideSharingService()
    for d in DRIVERS:
        service.add_driver(Driver(d["id"], d["name"], Location(d["lat"], d["lng"])))
    for r in RIDERS:
        service.add_rider(Rider(r["id"], r["name"], Location(r["lat"], r["lng"])))

    ride = service.request_ride("r1", DESTINATION)
    if ride is None:
        logger.info("No drivers available")
        return

    logger.info("Ride requested: %s", ride)
    service.start_ride(ride.id)
    logger.info("Ride started: %s", ride)
    service.complete_ride(ride.id)
    logger.info("Ride completed: %s", ride)


def main():
    logging.basicConfig(level=settings.log_level, format="%(name)s: %(message)s")
    run_parking()
    run_rides()


if __name__ == "__main__":
    main()
