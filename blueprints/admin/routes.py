"""
Admin routes for reservation and food order management.
Role checks happen in the model layer; these routes only translate HTTP.
"""

from flask import request, Blueprint
from flask_login import login_required, current_user

from models.food_order import get_all_food_orders, set_food_order_status
from models.reservation import get_all_reservations, set_reservation_status
from utils.api_response import api_success
from utils.messages import MESSAGES

admin_bp = Blueprint('admin', __name__)


def _requested_status():
    data = request.get_json(silent=True)
    return data.get('status') if isinstance(data, dict) else None


@admin_bp.route('/reservations')
@login_required
def reservations():
    """All reservations with the member's name."""
    return api_success(data=get_all_reservations(current_user))


@admin_bp.route('/reservations/<reservation_id>', methods=['PATCH'])
@login_required
def reservation_status(reservation_id):
    """
    Change a reservation's status.

    Request body:
        status: 'pendiente', 'confirmado' or 'cancelado'
    """
    reservation = set_reservation_status(current_user, reservation_id, _requested_status())
    return api_success(data=reservation, message=MESSAGES['reservation_status_updated'])


@admin_bp.route('/food-orders')
@login_required
def food_orders():
    """All food orders with totals and member names, newest first."""
    return api_success(data=get_all_food_orders(current_user))


@admin_bp.route('/food-orders/<order_id>', methods=['PATCH'])
@login_required
def food_order_status(order_id):
    """
    Change a food order's status.

    Request body:
        status: 'recibido', 'en_preparacion', 'listo', 'entregado' or 'cancelado'
    """
    order = set_food_order_status(current_user, order_id, _requested_status())
    return api_success(data=order, message=MESSAGES['order_status_updated'])
