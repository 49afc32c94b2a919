"""
Room occupancy aggregation.

Counts how many rooms of each category are committed per night. Everything is
recomputed from the full reservation list on each call; there is no index.
"""

from collections import defaultdict

from models.date_range import nights_of, overlaps, parse_date
from models.state import RESERVATION_CANCELLED


def _holds_rooms(reservation: dict, count_cancelled: bool) -> bool:
    if count_cancelled:
        return True
    return reservation.get('status') != RESERVATION_CANCELLED


def _selection_quantity(reservation: dict, category: str) -> int:
    """Rooms of category in one reservation (0 if absent)."""
    total = 0
    for selection in reservation.get('room_selections') or []:
        if selection.get('type') == category:
            total += int(selection.get('quantity') or 0)
    return total


def booked_rooms(reservations: list, night, category: str,
                 count_cancelled: bool = True) -> int:
    """
    Count rooms of a category already committed on a night.

    Args:
        reservations: Full reservation list
        night: Date to check
        category: Room category
        count_cancelled: Whether cancelled reservations still hold rooms

    Returns:
        Total quantity committed
    """
    night = parse_date(night)
    total = 0
    for reservation in reservations:
        if not _holds_rooms(reservation, count_cancelled):
            continue
        if overlaps((night,), reservation['reservation_date'], reservation['number_of_days']):
            total += _selection_quantity(reservation, category)
    return total


def build_occupancy(reservations: list, count_cancelled: bool = True) -> dict:
    """
    Build the per-night, per-category occupancy table.

    Args:
        reservations: Full reservation list
        count_cancelled: Whether cancelled reservations still hold rooms

    Returns:
        dict: {date: {category: rooms}} for every night covered by a reservation
    """
    occupancy = defaultdict(lambda: defaultdict(int))
    for reservation in reservations:
        if not _holds_rooms(reservation, count_cancelled):
            continue
        stay = nights_of(reservation['reservation_date'], reservation['number_of_days'])
        for selection in reservation.get('room_selections') or []:
            quantity = int(selection.get('quantity') or 0)
            for night in stay:
                occupancy[night][selection.get('type')] += quantity

    return {night: dict(counts) for night, counts in occupancy.items()}
