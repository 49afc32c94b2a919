"""
Room availability checking.

Validates the shape of a reservation request and decides admission against a
snapshot of the existing reservations. Pure functions: nothing is written.
"""

import logging

from models.date_range import nights_of, parse_date
from models.exceptions import ValidationError, CapacityExceeded
from models.inventory import ROOM_INVENTORY, is_known_category
from models.occupancy import booked_rooms
from utils.validators import parse_integer

logger = logging.getLogger(__name__)

MIN_DAYS = 1
MAX_DAYS = 7
MIN_ROOMS_PER_CATEGORY = 1
MAX_ROOMS_PER_CATEGORY = 5


# =============================================================================
# REQUEST VALIDATION
# =============================================================================

def validate_reservation_request(data: dict, inventory=ROOM_INVENTORY) -> dict:
    """
    Validate and normalize a reservation request.

    Repeated categories are merged into one selection (first position wins),
    and the merged quantity must still be within limits.

    Args:
        data: {'reservation_date': str, 'number_of_days': int,
               'room_selections': [{'type': str, 'quantity': int}]}
        inventory: Room inventory table

    Returns:
        dict: Normalized request with an ISO date, int days and merged selections

    Raises:
        ValidationError: If any field is missing or out of range
    """
    if not isinstance(data, dict):
        raise ValidationError('Todos los campos son obligatorios.')

    reservation_date = data.get('reservation_date')
    number_of_days = data.get('number_of_days')
    selections = data.get('room_selections')

    if (not reservation_date or number_of_days in (None, '')
            or not isinstance(selections, list) or not selections):
        raise ValidationError('Todos los campos son obligatorios.')

    try:
        start = parse_date(reservation_date)
    except ValueError:
        raise ValidationError(f'Fecha no válida: {reservation_date}.')

    days = parse_integer(number_of_days)
    if days is None or not MIN_DAYS <= days <= MAX_DAYS:
        raise ValidationError(
            f'La cantidad de días debe ser entre {MIN_DAYS} y {MAX_DAYS}.'
        )

    merged = {}
    for selection in selections:
        if not isinstance(selection, dict):
            raise ValidationError('Selección de habitaciones no válida.')
        room_type = selection.get('type')
        quantity = parse_integer(selection.get('quantity'))
        if quantity is None or not MIN_ROOMS_PER_CATEGORY <= quantity <= MAX_ROOMS_PER_CATEGORY:
            raise ValidationError(
                f'Cantidad de habitaciones no válida para {room_type}. '
                f'Debe ser entre {MIN_ROOMS_PER_CATEGORY} y {MAX_ROOMS_PER_CATEGORY}.'
            )
        if not is_known_category(room_type, inventory):
            raise ValidationError(f'Tipo de habitación no válido: {room_type}.')
        merged[room_type] = merged.get(room_type, 0) + quantity

    for room_type, quantity in merged.items():
        if quantity > MAX_ROOMS_PER_CATEGORY:
            raise ValidationError(
                f'Cantidad de habitaciones no válida para {room_type}. '
                f'Debe ser entre {MIN_ROOMS_PER_CATEGORY} y {MAX_ROOMS_PER_CATEGORY}.'
            )

    return {
        'reservation_date': start.isoformat(),
        'number_of_days': days,
        'room_selections': [
            {'type': room_type, 'quantity': quantity}
            for room_type, quantity in merged.items()
        ],
    }


# =============================================================================
# ADMISSION
# =============================================================================

def check_availability(
    reservations: list,
    request: dict,
    inventory=ROOM_INVENTORY,
    count_cancelled: bool = True
) -> None:
    """
    Check that a validated request fits in the remaining inventory.

    Categories are scanned in request order and nights in date order; the
    first shortage stops the check.

    Args:
        reservations: Snapshot of existing reservations
        request: Output of validate_reservation_request()
        inventory: Room inventory table
        count_cancelled: Whether cancelled reservations still hold rooms

    Raises:
        CapacityExceeded: On the first (category, night) without enough rooms
    """
    stay = nights_of(request['reservation_date'], request['number_of_days'])

    for selection in request['room_selections']:
        room_type = selection['type']
        requested = selection['quantity']
        total = inventory[room_type]

        for night in stay:
            already_booked = booked_rooms(reservations, night, room_type, count_cancelled)
            if already_booked + requested > total:
                logger.info(
                    f"[Availability] Rejected {requested}x {room_type} on "
                    f"{night.isoformat()}: {already_booked}/{total} booked"
                )
                raise CapacityExceeded(room_type, night.isoformat(), total - already_booked)


def evaluate_request(
    reservations: list,
    data: dict,
    inventory=ROOM_INVENTORY,
    count_cancelled: bool = True
) -> dict:
    """
    Validate and check a raw request without raising.

    Backs the reservation preview; nothing is written.

    Returns:
        dict: {'accepted': bool, 'message': str}
    """
    try:
        request = validate_reservation_request(data, inventory)
        check_availability(reservations, request, inventory, count_cancelled)
    except (ValidationError, CapacityExceeded) as e:
        return {'accepted': False, 'message': e.message}

    return {'accepted': True, 'message': 'Habitaciones disponibles.'}
