"""
Status values for reservations and food orders.

Admins may move a record between any of its statuses. Members may only
self-cancel, and only from the initial status.
"""

from models.exceptions import ValidationError, InvalidTransition


# =============================================================================
# CONSTANTS
# =============================================================================

RESERVATION_PENDING = 'pendiente'
RESERVATION_CONFIRMED = 'confirmado'
RESERVATION_CANCELLED = 'cancelado'

RESERVATION_STATES = (
    RESERVATION_PENDING,
    RESERVATION_CONFIRMED,
    RESERVATION_CANCELLED,
)

ORDER_RECEIVED = 'recibido'
ORDER_PREPARING = 'en_preparacion'
ORDER_READY = 'listo'
ORDER_DELIVERED = 'entregado'
ORDER_CANCELLED = 'cancelado'

FOOD_ORDER_STATES = (
    ORDER_RECEIVED,
    ORDER_PREPARING,
    ORDER_READY,
    ORDER_DELIVERED,
    ORDER_CANCELLED,
)


# =============================================================================
# VALIDATION
# =============================================================================

def validate_admin_status(new_status, allowed: tuple) -> str:
    """
    Validate a status chosen by an administrator.

    Args:
        new_status: Requested status
        allowed: Statuses valid for the record type

    Returns:
        The status

    Raises:
        ValidationError: If the status is not in allowed
    """
    if new_status not in allowed:
        raise ValidationError('Estado no válido.')
    return new_status


def validate_self_cancel(current_status: str, cancellable_from: str, noun: str) -> None:
    """
    Validate that a member may cancel a record in its current status.

    Args:
        current_status: Status stored on the record
        cancellable_from: Only status a member may cancel from
        noun: 'una reserva' / 'un pedido', used in the message

    Raises:
        InvalidTransition: If the record is not in cancellable_from
    """
    if current_status != cancellable_from:
        raise InvalidTransition(
            f"No se puede cancelar {noun} con estado '{current_status}'."
        )
