"""
Domain errors.

Structural violations are raised.  Running out of capacity (no free slot,
no available driver) is an expected outcome and is reported as ``None``
by the coordinators instead.
"""


class DomainError(Exception):
    """Base class for every error raised by the domain layer."""


class NotFound(DomainError):
    """Lookup of a driver, rider, ride or parked vehicle failed."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key}")


class AlreadyExists(DomainError):
    """An entity with the same id is already registered."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} already registered: {key}")


class SlotOccupied(DomainError):
    """Direct assignment to a parking slot that already holds a vehicle."""


class VehicleAlreadyParked(DomainError):
    """The license plate is already parked somewhere in the lot."""


class InvalidStateTransition(DomainError):
    """Raised when a ride status change violates the state machine."""
