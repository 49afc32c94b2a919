"""
API routes for JSON endpoints.
Provides member access to availability, reservations, menu and food orders.
"""

from flask import request, Blueprint, current_app, jsonify
from flask_login import login_required, current_user
from flask_wtf.csrf import generate_csrf

from models.food_order import create_food_order, get_user_food_orders, cancel_own_food_order
from models.inventory import get_room_categories
from models.menu import get_menu
from models.reservation import (
    create_reservation, get_user_reservations, cancel_own_reservation,
    get_occupied_dates_report, preview_reservation
)
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES

api_bp = Blueprint('api', __name__)


@api_bp.route('/health')
def health_check():
    """
    Health check endpoint (no authentication required).

    Returns:
        JSON with status and version
    """
    return jsonify({
        'status': 'ok',
        'version': current_app.config.get('APP_VERSION', '1.0.0'),
        'app': current_app.config.get('APP_NAME', 'HotelClub')
    })


@api_bp.route('/csrf-token')
def csrf_token():
    """CSRF token for JSON clients (send back as X-CSRFToken header)."""
    return api_success(data={'csrf_token': generate_csrf()})


# ============================================================================
# AVAILABILITY
# ============================================================================

@api_bp.route('/room-types')
def room_types():
    """Room categories with their total room count."""
    return api_success(data=get_room_categories())


@api_bp.route('/occupied-dates')
def occupied_dates():
    """
    Dates on which every room category is fully booked.

    Returns:
        JSON list of ISO dates (sorted)
    """
    return api_success(data=get_occupied_dates_report())


# ============================================================================
# RESERVATIONS
# ============================================================================

@api_bp.route('/reservations/check', methods=['POST'])
@login_required
def reservations_check():
    """
    Check a reservation request without booking it.

    Request body:
        Same as POST /reservations

    Returns:
        {'accepted': bool, 'message': str}
    """
    return api_success(data=preview_reservation(request.get_json(silent=True)))


@api_bp.route('/reservations', methods=['POST'])
@login_required
def reservations_create():
    """
    Create a reservation for the current member.

    Request body:
        reservation_date: Check-in date YYYY-MM-DD
        number_of_days: Nights (1-7)
        room_selections: [{'type': category, 'quantity': 1-5}]

    Returns:
        201 with the pending reservation, or the availability rejection
    """
    data = request.get_json(silent=True)
    if not data:
        return api_error(MESSAGES['data_required'], 400)

    reservation = create_reservation(current_user, data)
    return api_success(data=reservation, message=MESSAGES['reservation_created'], status=201)


@api_bp.route('/my-reservations')
@login_required
def my_reservations():
    """Current member's reservations, latest check-in first."""
    return api_success(data=get_user_reservations(current_user))


@api_bp.route('/my-reservations/<reservation_id>/cancel', methods=['PATCH'])
@login_required
def my_reservation_cancel(reservation_id):
    """Cancel one of the current member's pending reservations."""
    reservation = cancel_own_reservation(current_user, reservation_id)
    return api_success(data=reservation, message=MESSAGES['reservation_cancelled'])


# ============================================================================
# MENU & FOOD ORDERS
# ============================================================================

@api_bp.route('/menu')
def menu():
    """Restaurant menu with list and member prices."""
    return api_success(data=get_menu())


@api_bp.route('/orders', methods=['POST'])
@login_required
def orders_create():
    """
    Create a food order for the current member.

    Request body:
        items: [{'item_id': str, 'quantity': int}]
    """
    data = request.get_json(silent=True)
    items = data.get('items') if isinstance(data, dict) else None
    order = create_food_order(current_user, items)
    return api_success(data=order, message=MESSAGES['order_created'], status=201)


@api_bp.route('/my-food-orders')
@login_required
def my_food_orders():
    """Current member's food orders with totals, newest first."""
    return api_success(data=get_user_food_orders(current_user))


@api_bp.route('/my-food-orders/<order_id>/cancel', methods=['PATCH'])
@login_required
def my_food_order_cancel(order_id):
    """Cancel one of the current member's orders while still received."""
    order = cancel_own_food_order(current_user, order_id)
    return api_success(data=order, message=MESSAGES['order_cancelled'])
