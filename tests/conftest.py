"""
Shared test fixtures.

Everything lives in memory, so each test gets a freshly built lot,
service or application and nothing leaks between tests.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.config import Settings
from src.domain.entities import Driver, Location, Rider
from src.domain.parking_lot import ParkingLot
from src.domain.ride_service import RideSharingService


# ── Domain fixtures ───────────────────────────────────────────────────


@pytest.fixture
def lot() -> ParkingLot:
    return ParkingLot(num_levels=2, slots_per_level=3)


@pytest.fixture
def service() -> RideSharingService:
    """Two drivers 0.0002 and 0.0003 away from rider ``r1``."""
    svc = RideSharingService()
    svc.add_driver(Driver("near", "Near Driver", Location(40.7128, -74.0060)))
    svc.add_driver(Driver("far", "Far Driver", Location(40.7129, -74.0060)))
    svc.add_rider(Rider("r1", "Rider 1", Location(40.7126, -74.0060)))
    return svc


# ── API fixtures ──────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient bound to a fresh app with a 1 level x 2 slot lot."""
    from src.api.app import create_app

    app = create_app(Settings(parking_levels=1, slots_per_level=2))

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
