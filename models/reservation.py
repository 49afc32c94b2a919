"""
Reservation lifecycle.
Creation with availability check, listings, admin status changes and
member self-cancellation.
"""

import logging
import uuid
from datetime import datetime, timezone

from flask import current_app

from database import get_store
from models.availability import (
    validate_reservation_request, check_availability, evaluate_request
)
from models.date_range import parse_date
from models.exceptions import NotFound, Forbidden, InvalidTransition
from models.inventory import ROOM_INVENTORY
from models.occupied_dates import get_occupied_dates
from models.state import (
    RESERVATION_PENDING, RESERVATION_CANCELLED, RESERVATION_STATES,
    validate_admin_status, validate_self_cancel
)
from models.user import ROLE_ADMIN, get_user_names
from utils.datetime_helpers import get_now, get_timezone, get_cancellation_deadline

logger = logging.getLogger(__name__)

UNKNOWN_USER_NAME = 'Usuario no encontrado'


def _count_cancelled() -> bool:
    return current_app.config.get('COUNT_CANCELLED_RESERVATIONS', True)


def _require_admin(user, message: str) -> None:
    if getattr(user, 'role', None) != ROLE_ADMIN:
        raise Forbidden(message)


def _find_reservation(reservations: list, reservation_id: str) -> dict:
    for reservation in reservations:
        if reservation.get('id') == reservation_id:
            return reservation
    raise NotFound('Reserva no encontrada.')


# =============================================================================
# CREATION
# =============================================================================

def create_reservation(user, data: dict, inventory=ROOM_INVENTORY) -> dict:
    """
    Create a pending reservation if every requested room is available.

    The availability check and the write happen inside one store
    transaction, so two concurrent requests can never both take the last
    rooms.

    Args:
        user: Authenticated user (needs .id)
        data: {'reservation_date', 'number_of_days', 'room_selections'}
        inventory: Room inventory table

    Returns:
        The new reservation dict

    Raises:
        ValidationError: If the request is malformed
        CapacityExceeded: If a category is full on one of the nights
        StoreUnavailable: If the store cannot be read or written
    """
    request = validate_reservation_request(data, inventory)

    with get_store().transaction() as state:
        check_availability(state['reservations'], request, inventory, _count_cancelled())

        reservation = {
            'id': str(uuid.uuid4()),
            'user_id': user.id,
            'reservation_date': request['reservation_date'],
            'number_of_days': request['number_of_days'],
            'room_selections': request['room_selections'],
            'status': RESERVATION_PENDING,
            'created_at': datetime.now(timezone.utc).isoformat(),
        }
        state['reservations'].append(reservation)

    logger.info(
        f"[Reservations] Created {reservation['id']} for user {user.id}: "
        f"{reservation['reservation_date']} x{reservation['number_of_days']} nights"
    )
    return reservation


# =============================================================================
# QUERIES
# =============================================================================

def get_user_reservations(user) -> list:
    """
    Get the reservations of a user, latest check-in first.

    Args:
        user: Authenticated user (needs .id)

    Returns:
        List of reservation dicts
    """
    reservations = get_store().snapshot()['reservations']
    mine = [r for r in reservations if r.get('user_id') == user.id]
    mine.sort(key=lambda r: parse_date(r['reservation_date']), reverse=True)
    return mine


def get_all_reservations(user) -> list:
    """
    Get every reservation annotated with its owner's name (admin only).

    Args:
        user: Authenticated user (must be admin)

    Returns:
        List of reservation dicts with 'user_name'

    Raises:
        Forbidden: If the user is not an admin
    """
    _require_admin(user, 'No tienes permisos para acceder a esta información.')

    state = get_store().snapshot()
    names = get_user_names(state['users'])
    return [
        {**reservation, 'user_name': names.get(reservation.get('user_id')) or UNKNOWN_USER_NAME}
        for reservation in state['reservations']
    ]


def preview_reservation(data: dict, inventory=ROOM_INVENTORY) -> dict:
    """
    Tell whether a request would be accepted right now, without booking.

    Returns:
        dict: {'accepted': bool, 'message': str}
    """
    reservations = get_store().snapshot()['reservations']
    return evaluate_request(reservations, data, inventory, _count_cancelled())


def get_occupied_dates_report(inventory=ROOM_INVENTORY) -> list:
    """Dates with every room category fully booked (for the date picker)."""
    reservations = get_store().snapshot()['reservations']
    return get_occupied_dates(reservations, inventory, _count_cancelled())


# =============================================================================
# STATUS CHANGES
# =============================================================================

def set_reservation_status(user, reservation_id: str, status: str,
                           inventory=ROOM_INVENTORY) -> dict:
    """
    Set the status of any reservation (admin only).

    Args:
        user: Authenticated user (must be admin)
        reservation_id: Reservation ID
        status: 'pendiente', 'confirmado' or 'cancelado'
        inventory: Room inventory table

    Returns:
        Updated reservation dict

    Raises:
        Forbidden: If the user is not an admin
        ValidationError: If the status is not valid
        NotFound: If the reservation does not exist
        CapacityExceeded: If reactivating a cancelled reservation that no
            longer holds rooms would overbook a category
    """
    _require_admin(user, 'No tienes permisos para realizar esta acción.')
    validate_admin_status(status, RESERVATION_STATES)
    count_cancelled = _count_cancelled()

    with get_store().transaction() as state:
        reservation = _find_reservation(state['reservations'], reservation_id)
        previous = reservation.get('status')

        # Its rooms were released on cancellation, so they must be free again
        if (not count_cancelled and previous == RESERVATION_CANCELLED
                and status != RESERVATION_CANCELLED):
            others = [r for r in state['reservations'] if r is not reservation]
            check_availability(others, reservation, inventory, count_cancelled)

        reservation['status'] = status

    logger.info(f"[Reservations] {reservation_id}: {previous} -> {status} by admin {user.id}")
    return reservation


def cancel_own_reservation(user, reservation_id: str, now: datetime = None) -> dict:
    """
    Cancel a member's own pending reservation.

    Members may cancel only while the reservation is pending and strictly
    before the cutoff (noon of the day before check-in).

    Args:
        user: Authenticated user (needs .id)
        reservation_id: Reservation ID
        now: Current time (defaults to now in the configured timezone)

    Returns:
        Updated reservation dict

    Raises:
        NotFound: If the reservation does not exist
        Forbidden: If the reservation belongs to someone else
        InvalidTransition: If it is not pending or the cutoff has passed
    """
    if now is None:
        now = get_now()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=get_timezone())

    with get_store().transaction() as state:
        reservation = _find_reservation(state['reservations'], reservation_id)

        if reservation.get('user_id') != user.id:
            raise Forbidden('No tienes permiso para cancelar esta reserva.')

        validate_self_cancel(reservation.get('status'), RESERVATION_PENDING, 'una reserva')

        deadline = get_cancellation_deadline(parse_date(reservation['reservation_date']))
        if now >= deadline:
            raise InvalidTransition(
                'El plazo para cancelar esta reserva venció el '
                f"{deadline.strftime('%Y-%m-%d %H:%M')}."
            )

        reservation['status'] = RESERVATION_CANCELLED

    logger.info(f"[Reservations] {reservation_id} cancelled by owner {user.id}")
    return reservation
