"""
Occupied date report.
Dates on which no room of any category is left, used to disable them in the
reservation date picker.
"""

from models.inventory import ROOM_INVENTORY
from models.occupancy import build_occupancy


def get_occupied_dates(reservations: list, inventory=ROOM_INVENTORY,
                       count_cancelled: bool = True) -> list:
    """
    Get the dates on which every category is fully booked.

    A date with a free room in even one category stays selectable.

    Args:
        reservations: Full reservation list
        inventory: Room inventory table
        count_cancelled: Whether cancelled reservations still hold rooms

    Returns:
        Sorted list of ISO date strings
    """
    occupancy = build_occupancy(reservations, count_cancelled)

    occupied = []
    for night, booked in occupancy.items():
        if all(booked.get(category, 0) >= total for category, total in inventory.items()):
            occupied.append(night)

    return [night.isoformat() for night in sorted(occupied)]
