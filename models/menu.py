"""
Restaurant menu.
Static catalog shared by the menu listing and food order totals.
"""

from collections import namedtuple

MEMBER_DISCOUNT = 0.85  # members pay 85% of the list price

MenuItem = namedtuple('MenuItem', ['id', 'name', 'price'])

MENU = (
    MenuItem('ceviche', 'Ceviche Clásico', 35.00),
    MenuItem('lomo_saltado', 'Lomo Saltado', 45.00),
    MenuItem('aji_gallina', 'Ají de Gallina', 38.00),
    MenuItem('causa', 'Causa Limeña', 25.00),
    MenuItem('picarones', 'Picarones', 18.00),
    MenuItem('rocoto_relleno', 'Rocoto Relleno', 42.00),
    MenuItem('pachamanca', 'Pachamanca a la Olla', 55.00),
    MenuItem('patasca', 'Patasca', 30.00),
    MenuItem('cuy_chactado', 'Cuy Chactado', 60.00),
    MenuItem('caldo_gallina', 'Caldo de Gallina', 28.00),
    MenuItem('chairo', 'Chairo', 32.00),
)

MENU_BY_ID = {item.id: item for item in MENU}


def member_price(price: float) -> float:
    """Discounted member price, rounded to cents."""
    return round(price * MEMBER_DISCOUNT, 2)


def get_menu() -> list:
    """
    Get the menu with list and member prices.

    Returns:
        List of dicts: [{'id', 'name', 'price', 'member_price'}, ...]
    """
    return [
        {
            'id': item.id,
            'name': item.name,
            'price': item.price,
            'member_price': member_price(item.price),
        }
        for item in MENU
    ]


def get_menu_item(item_id: str):
    """Get a menu item by ID, or None."""
    return MENU_BY_ID.get(item_id)
