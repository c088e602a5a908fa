"""
FastAPI application factory.

* Builds one ``ParkingLot`` and one ``RideSharingService`` per app and
  keeps them on ``app.state`` (no module-level instances).
* Registers routes for parking, participants, rides and admin.
* Maps domain errors to HTTP status codes.
* Applies rate-limiting middleware with the app's ``rate_limit``.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from src.api.middleware import create_limiter
from src.api.routes import admin, parking, participants, rides
from src.config import Settings, settings as default_settings
from src.domain.exceptions import DomainError, NotFound
from src.domain.parking_lot import ParkingLot
from src.domain.ride_service import RideSharingService

logger = logging.getLogger(__name__)


async def _not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _conflict_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=409, content={"detail": str(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Parking & Ride Dispatch API",
        description=(
            "First-fit parking slot allocation across levels and "
            "nearest-driver ride matching with an enforced ride lifecycle."
        ),
        version="1.0.0",
    )

    app.state.parking_lot = ParkingLot(
        settings.parking_levels, settings.slots_per_level
    )
    app.state.ride_service = RideSharingService()

    # Rate limiter
    app.state.settings = settings
    app.state.limiter = create_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Domain errors; NotFound is more specific so it wins over DomainError
    app.add_exception_handler(NotFound, _not_found_handler)
    app.add_exception_handler(DomainError, _conflict_handler)

    # Routers
    app.include_router(parking.router, prefix="/api/v1")
    app.include_router(participants.router, prefix="/api/v1")
    app.include_router(rides.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
