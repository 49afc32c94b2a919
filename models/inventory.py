"""
Room inventory table.
Fixed number of rooms per category, loaded once per process.
"""

from types import MappingProxyType


# =============================================================================
# ROOM CATEGORIES
# =============================================================================

HABITACION_1_PERSONA = 'habitacion_1_persona'
HABITACION_2_PERSONAS = 'habitacion_2_personas'
HABITACION_3_PERSONAS = 'habitacion_3_personas'
HABITACION_4_PERSONAS = 'habitacion_4_personas'
HABITACION_5_PERSONAS = 'habitacion_5_personas'

ROOM_INVENTORY = MappingProxyType({
    HABITACION_1_PERSONA: 10,
    HABITACION_2_PERSONAS: 15,
    HABITACION_3_PERSONAS: 5,
    HABITACION_4_PERSONAS: 5,
    HABITACION_5_PERSONAS: 5,
})


def get_room_categories(inventory=ROOM_INVENTORY) -> list:
    """
    Get room categories with their total count.

    Returns:
        List of dicts: [{'type': str, 'total': int}, ...] in table order
    """
    return [{'type': category, 'total': total} for category, total in inventory.items()]


def is_known_category(category, inventory=ROOM_INVENTORY) -> bool:
    """Check whether the category exists in the inventory table."""
    return isinstance(category, str) and category in inventory
