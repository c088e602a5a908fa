"""
Ride endpoints
==============

POST  /api/v1/rides                      -- request a ride (matched immediately)
GET   /api/v1/rides                      -- list rides, optionally by ``?status=``
GET   /api/v1/rides/{ride_id}            -- current status of a ride
PATCH /api/v1/rides/{ride_id}/accept     -- requested   -> accepted
PATCH /api/v1/rides/{ride_id}/start      -- requested | accepted -> in_progress
PATCH /api/v1/rides/{ride_id}/complete   -- in_progress -> completed
PATCH /api/v1/rides/{ride_id}/cancel     -- any non-terminal -> cancelled

Illegal transitions answer 409, unknown ids 404 (see ``app.py``).
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from src.api.dependencies import get_ride_service
from src.api.schemas import ErrorResponse, RideCreateRequest, RideResponse
from src.domain.entities import Location
from src.domain.enums import RideStatus
from src.domain.ride_service import RideSharingService

router = APIRouter(prefix="/rides", tags=["rides"])


@router.post(
    "",
    status_code=201,
    response_model=RideResponse,
    summary="Request a ride",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown rider."},
        409: {
            "model": ErrorResponse,
            "description": "No driver is currently available.",
        },
    },
)
def create_ride(
    body: RideCreateRequest,
    service: RideSharingService = Depends(get_ride_service),
):
    ride = service.request_ride(
        body.rider_id,
        Location(body.end_location.latitude, body.end_location.longitude),
    )
    if ride is None:
        raise HTTPException(status_code=409, detail="No drivers available")
    return ride


@router.get("", response_model=list[RideResponse], summary="List rides")
def list_rides(
    status: Optional[RideStatus] = None,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.list_rides(status=status)


@router.get("/{ride_id}", response_model=RideResponse, summary="Get ride status")
def get_ride(
    ride_id: str,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.get_ride(ride_id)


@router.patch("/{ride_id}/accept", response_model=RideResponse, summary="Accept a ride")
def accept_ride(
    ride_id: str,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.accept_ride(ride_id)


@router.patch("/{ride_id}/start", response_model=RideResponse, summary="Start a ride")
def start_ride(
    ride_id: str,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.start_ride(ride_id)


@router.patch(
    "/{ride_id}/complete",
    response_model=RideResponse,
    summary="Complete a ride",
    description="Transitions an IN_PROGRESS ride to COMPLETED and frees the driver.",
)
def complete_ride(
    ride_id: str,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.complete_ride(ride_id)


@router.patch(
    "/{ride_id}/cancel",
    response_model=RideResponse,
    summary="Cancel a ride",
    description=(
        "Transitions any non-terminal ride to CANCELLED and frees the driver. "
        "Completed or already cancelled rides answer 409."
    ),
)
def cancel_ride(
    ride_id: str,
    service: RideSharingService = Depends(get_ride_service),
):
    return service.cancel_ride(ride_id)
