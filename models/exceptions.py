"""
Domain exceptions for reservations and food orders.

Every exception carries the HTTP status the API answers with. Only
StoreUnavailable is worth retrying; the rest are permanent for the request.
"""


class ReservationError(Exception):
    """Base class for all domain errors surfaced to the caller."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ReservationError):
    """Malformed or out-of-range request."""

    status_code = 400


class CapacityExceeded(ReservationError):
    """A room category has no room left on one of the requested nights."""

    status_code = 409

    def __init__(self, category: str, night: str, remaining: int):
        super().__init__(
            f'Disponibilidad excedida para el {category} el {night}. '
            f'Solo quedan {remaining} habitaciones de ese tipo.'
        )
        self.category = category
        self.night = night
        self.remaining = remaining


class NotFound(ReservationError):
    """Unknown reservation or order id."""

    status_code = 404


class Forbidden(ReservationError):
    """Role or ownership mismatch."""

    status_code = 403


class InvalidTransition(ReservationError):
    """Status change not allowed from the current state."""

    status_code = 409


class StoreUnavailable(ReservationError):
    """The document store could not be read or written."""

    status_code = 503
