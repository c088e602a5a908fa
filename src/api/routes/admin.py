"""
Admin / observability endpoints
===============================

GET /api/v1/admin/stats  -- parking occupancy and fleet counters
GET /api/v1/admin/health -- simple health check
"""

from collections import Counter

from fastapi import APIRouter, Depends

from src.api.dependencies import get_parking_lot, get_ride_service
from src.api.routes.parking import availability_of
from src.api.schemas import HealthResponse, StatsResponse
from src.domain.enums import RideStatus
from src.domain.parking_lot import ParkingLot
from src.domain.ride_service import RideSharingService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Parking occupancy and fleet counters",
)
def get_stats(
    lot: ParkingLot = Depends(get_parking_lot),
    service: RideSharingService = Depends(get_ride_service),
):
    counts = Counter(ride.status for ride in service.list_rides())
    return StatsResponse(
        parking=availability_of(lot),
        drivers_total=len(service.list_drivers()),
        drivers_available=service.available_driver_count(),
        rides_by_status={status.value: counts[status] for status in RideStatus},
    )


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
