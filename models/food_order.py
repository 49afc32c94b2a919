"""
Food order lifecycle.
Members order from the menu; the kitchen (admin) moves orders through any
status; members may cancel only orders not yet being prepared.
"""

import logging
import uuid
from datetime import datetime, timezone

from database import get_store
from models.exceptions import ValidationError, NotFound, Forbidden
from models.menu import get_menu_item, member_price
from models.state import (
    ORDER_RECEIVED, ORDER_CANCELLED, FOOD_ORDER_STATES,
    validate_admin_status, validate_self_cancel
)
from models.user import ROLE_ADMIN, get_user_names
from utils.validators import parse_integer

logger = logging.getLogger(__name__)

UNKNOWN_ITEM_NAME = 'Plato no encontrado'
UNKNOWN_USER_NAME = 'Usuario Desconocido'


def _find_order(orders: list, order_id: str) -> dict:
    for order in orders:
        if order.get('id') == order_id:
            return order
    raise NotFound('Pedido no encontrado.')


def validate_order_items(items) -> list:
    """
    Validate the items of a food order.

    Args:
        items: [{'item_id': str, 'quantity': int}, ...]

    Returns:
        Normalized list of items

    Raises:
        ValidationError: If the list is empty, an item is unknown or a
            quantity is not a positive integer
    """
    if not isinstance(items, list) or not items:
        raise ValidationError('El pedido no puede estar vacío.')

    normalized = []
    for item in items:
        if not isinstance(item, dict):
            raise ValidationError('Plato no válido.')
        item_id = item.get('item_id')
        if get_menu_item(item_id) is None:
            raise ValidationError(f'Plato no válido: {item_id}.')
        quantity = parse_integer(item.get('quantity'))
        if quantity is None or quantity < 1:
            raise ValidationError(f'Cantidad no válida para {item_id}.')
        normalized.append({'item_id': item_id, 'quantity': quantity})

    return normalized


def with_details(order: dict) -> dict:
    """
    Annotate an order with dish names and totals.

    Totals are computed from the current menu on every read; 'total' uses
    list prices and 'member_total' the member discount.
    """
    total = 0.0
    member_total = 0.0
    items = []
    for item in order.get('items', []):
        menu_item = get_menu_item(item.get('item_id'))
        if menu_item:
            total += menu_item.price * item['quantity']
            member_total += member_price(menu_item.price) * item['quantity']
        items.append({**item, 'name': menu_item.name if menu_item else UNKNOWN_ITEM_NAME})

    return {
        **order,
        'items': items,
        'total': round(total, 2),
        'member_total': round(member_total, 2),
    }


# =============================================================================
# CRUD
# =============================================================================

def create_food_order(user, items) -> dict:
    """
    Create a food order in 'recibido' status.

    Args:
        user: Authenticated user (needs .id)
        items: [{'item_id': str, 'quantity': int}, ...]

    Returns:
        The new order dict

    Raises:
        ValidationError: If the items are not valid
    """
    items = validate_order_items(items)

    order = {
        'id': str(uuid.uuid4()),
        'user_id': user.id,
        'order_date': datetime.now(timezone.utc).isoformat(),
        'status': ORDER_RECEIVED,
        'items': items,
    }
    with get_store().transaction() as state:
        state['food_orders'].append(order)

    logger.info(f"[Orders] Created {order['id']} for user {user.id} ({len(items)} dishes)")
    return order


def get_user_food_orders(user) -> list:
    """Get a member's orders with details, newest first."""
    orders = get_store().snapshot()['food_orders']
    mine = [with_details(o) for o in orders if o.get('user_id') == user.id]
    mine.sort(key=lambda o: o.get('order_date') or '', reverse=True)
    return mine


def get_all_food_orders(user) -> list:
    """
    Get every order with details and owner name, newest first (admin only).

    Raises:
        Forbidden: If the user is not an admin
    """
    if getattr(user, 'role', None) != ROLE_ADMIN:
        raise Forbidden('Acceso denegado.')

    state = get_store().snapshot()
    names = get_user_names(state['users'])
    orders = [
        {**with_details(order), 'user_name': names.get(order.get('user_id')) or UNKNOWN_USER_NAME}
        for order in state['food_orders']
    ]
    orders.sort(key=lambda o: o.get('order_date') or '', reverse=True)
    return orders


def set_food_order_status(user, order_id: str, status: str) -> dict:
    """
    Set the status of any order (admin only). No order is enforced between
    statuses.

    Raises:
        Forbidden: If the user is not an admin
        ValidationError: If the status is not valid
        NotFound: If the order does not exist
    """
    if getattr(user, 'role', None) != ROLE_ADMIN:
        raise Forbidden('Acceso denegado.')
    validate_admin_status(status, FOOD_ORDER_STATES)

    with get_store().transaction() as state:
        order = _find_order(state['food_orders'], order_id)
        previous = order.get('status')
        order['status'] = status

    logger.info(f"[Orders] {order_id}: {previous} -> {status} by admin {user.id}")
    return order


def cancel_own_food_order(user, order_id: str) -> dict:
    """
    Cancel a member's own order while it is still 'recibido'.

    Raises:
        NotFound: If the order does not exist
        Forbidden: If the order belongs to someone else
        InvalidTransition: If the kitchen already moved it on
    """
    with get_store().transaction() as state:
        order = _find_order(state['food_orders'], order_id)

        if order.get('user_id') != user.id:
            raise Forbidden('No tienes permiso para cancelar este pedido.')

        validate_self_cancel(order.get('status'), ORDER_RECEIVED, 'un pedido')
        order['status'] = ORDER_CANCELLED

    logger.info(f"[Orders] {order_id} cancelled by owner {user.id}")
    return order
