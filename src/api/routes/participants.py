"""
Driver / rider registration endpoints
=====================================

POST /api/v1/drivers            -- register a driver
GET  /api/v1/drivers            -- list drivers (``?available=true`` to filter)
GET  /api/v1/drivers/{driver_id}
POST /api/v1/riders             -- register a rider
GET  /api/v1/riders/{rider_id}
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_ride_service
from src.api.schemas import (
    DriverCreateRequest,
    DriverResponse,
    RiderCreateRequest,
    RiderResponse,
)
from src.domain.entities import Driver, Location, Rider
from src.domain.ride_service import RideSharingService

router = APIRouter(tags=["participants"])


@router.post(
    "/drivers",
    status_code=201,
    response_model=DriverResponse,
    summary="Register a driver",
)
def create_driver(
    body: DriverCreateRequest,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.add_driver(
        Driver(
            id=body.id,
            name=body.name,
            location=Location(body.location.latitude, body.location.longitude),
            is_available=body.is_available,
        )
    )


@router.get("/drivers", response_model=list[DriverResponse], summary="List drivers")
def list_drivers(
    available: bool = False,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.list_drivers(available_only=available)


@router.get("/drivers/{driver_id}", response_model=DriverResponse, summary="Get a driver")
def get_driver(
    driver_id: str,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.get_driver(driver_id)


@router.post(
    "/riders",
    status_code=201,
    response_model=RiderResponse,
    summary="Register a rider",
)
def create_rider(
    body: RiderCreateRequest,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.add_rider(
        Rider(
            id=body.id,
            name=body.name,
            location=Location(body.location.latitude, body.location.longitude),
        )
    )


@router.get("/riders/{rider_id}", response_model=RiderResponse, summary="Get a rider")
def get_rider(
    rider_id: str,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.get_rider(rider_id)
