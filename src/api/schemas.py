"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from src.domain.enums import RideStatus, VehicleType


# ── Requests ──────────────────────────────────────────────────────────


class VehicleParkRequest(BaseModel):
    vehicle_type: VehicleType
    license_plate: str = Field(..., min_length=1, max_length=20)


class LocationSchema(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    model_config = {"from_attributes": True}


class DriverCreateRequest(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=120)
    location: LocationSchema
    is_available: bool = True


class RiderCreateRequest(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=120)
    location: LocationSchema


class RideCreateRequest(BaseModel):
    rider_id: str
    end_location: LocationSchema


# ── Responses ─────────────────────────────────────────────────────────


class VehicleResponse(BaseModel):
    vehicle_type: VehicleType
    license_plate: str

    model_config = {"from_attributes": True}


class SlotResponse(BaseModel):
    level: int
    slot_number: int
    vehicle: VehicleResponse

    model_config = {"from_attributes": True}


class LevelAvailability(BaseModel):
    level_number: int
    total: int
    available: int


class ParkingAvailabilityResponse(BaseModel):
    total: int
    available: int
    occupied: int
    levels: list[LevelAvailability] = []


class DriverResponse(BaseModel):
    id: str
    name: str
    location: LocationSchema
    is_available: bool

    model_config = {"from_attributes": True}


class RiderResponse(BaseModel):
    id: str
    name: str
    location: LocationSchema

    model_config = {"from_attributes": True}


class RideResponse(BaseModel):
    id: str
    driver_id: str
    rider_id: str
    start_location: LocationSchema
    end_location: LocationSchema
    status: RideStatus

    model_config = {"from_attributes": True}


class StatsResponse(BaseModel):
    parking: ParkingAvailabilityResponse
    drivers_total: int
    drivers_available: int
    rides_by_status: dict[str, int]


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
