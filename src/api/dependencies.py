"""FastAPI dependency injection helpers."""

from fastapi import Request

from src.domain.parking_lot import ParkingLot
from src.domain.ride_service import RideSharingService


def get_parking_lot(request: Request) -> ParkingLot:
    """Return the lot built by ``create_app`` for this application."""
    return request.app.state.parking_lot


def get_ride_service(request: Request) -> RideSharingService:
    return request.app.state.ride_service
