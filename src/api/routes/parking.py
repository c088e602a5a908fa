"""
Parking endpoints
=================

POST   /api/v1/parking/vehicles          -- park a vehicle in the first free slot
GET    /api/v1/parking/vehicles/{plate}  -- where is this vehicle parked
DELETE /api/v1/parking/vehicles/{plate}  -- unpark a vehicle
GET    /api/v1/parking/availability      -- free / occupied counts per level
"""

from fastapi import APIRouter, Depends, HTTPException

from src.api.dependencies import get_parking_lot
from src.api.schemas import (
    ErrorResponse,
    LevelAvailability,
    ParkingAvailabilityResponse,
    SlotResponse,
    VehicleParkRequest,
    VehicleResponse,
)
from src.domain.entities import Vehicle
from src.domain.parking_lot import ParkingLot

router = APIRouter(prefix="/parking", tags=["parking"])


def availability_of(lot: ParkingLot) -> ParkingAvailabilityResponse:
    levels = [LevelAvailability(**s._asdict()) for s in lot.level_summary()]
    available = sum(level.available for level in levels)
    total = sum(level.total for level in levels)
    return ParkingAvailabilityResponse(
        total=total,
        available=available,
        occupied=total - available,
        levels=levels,
    )


@router.post(
    "/vehicles",
    status_code=201,
    response_model=SlotResponse,
    summary="Park a vehicle",
    responses={
        409: {
            "model": ErrorResponse,
            "description": "Lot is full or plate already parked.",
        },
    },
)
def park_vehicle(
    body: VehicleParkRequest,
    lot: ParkingLot = Depends(get_parking_lot),
):
    slot = lot.park_vehicle(Vehicle(body.vehicle_type, body.license_plate))
    if slot is None:
        raise HTTPException(status_code=409, detail="Parking lot is full")
    return slot


@router.get(
    "/vehicles/{license_plate}",
    response_model=SlotResponse,
    summary="Locate a parked vehicle",
)
def get_vehicle(
    license_plate: str,
    lot: ParkingLot = Depends(get_parking_lot),
):
    return lot.find_vehicle(license_plate)


@router.delete(
    "/vehicles/{license_plate}",
    response_model=VehicleResponse,
    summary="Unpark a vehicle",
)
def unpark_vehicle(
    license_plate: str,
    lot: ParkingLot = Depends(get_parking_lot),
):
    vehicle = lot.unpark_vehicle(license_plate)
    if vehicle is None:
        raise HTTPException(
            status_code=404, detail="Vehicle not found in the parking lot"
        )
    return vehicle


@router.get(
    "/availability",
    response_model=ParkingAvailabilityResponse,
    summary="Free and occupied slot counts",
)
def get_availability(
    lot: ParkingLot = Depends(get_parking_lot),
):
    return availability_of(lot)
