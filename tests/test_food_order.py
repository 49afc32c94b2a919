"""
Tests for the menu and the food order lifecycle.
"""

import pytest

from models.exceptions import ValidationError, NotFound, Forbidden, InvalidTransition
from models.menu import get_menu, member_price


class TestMenu:
    """Tests for the static menu."""

    def test_member_price_is_computed(self):
        """Members pay 85% of the list price."""
        menu = {item['id']: item for item in get_menu()}
        assert menu['ceviche']['price'] == 35.00
        assert menu['ceviche']['member_price'] == 29.75
        assert member_price(18.00) == 15.30

    def test_menu_is_complete(self):
        assert len(get_menu()) == 11


class TestCreateFoodOrder:
    """Tests for create_food_order."""

    def test_creates_received_order(self, app, member):
        from models.food_order import create_food_order, get_user_food_orders

        order = create_food_order(member, [
            {'item_id': 'ceviche', 'quantity': 2},
            {'item_id': 'picarones', 'quantity': '1'},
        ])
        assert order['status'] == 'recibido'

        orders = get_user_food_orders(member)
        assert len(orders) == 1
        assert orders[0]['total'] == 88.00
        assert orders[0]['member_total'] == 74.80
        assert [i['name'] for i in orders[0]['items']] == ['Ceviche Clásico', 'Picarones']

    def test_empty_order(self, app, member):
        from models.food_order import create_food_order

        with pytest.raises(ValidationError, match='vacío'):
            create_food_order(member, [])
        with pytest.raises(ValidationError):
            create_food_order(member, None)

    def test_unknown_dish(self, app, member):
        from models.food_order import create_food_order

        with pytest.raises(ValidationError, match='Plato no válido'):
            create_food_order(member, [{'item_id': 'pizza', 'quantity': 1}])

    def test_bad_quantity(self, app, member):
        from models.food_order import create_food_order

        with pytest.raises(ValidationError, match='Cantidad'):
            create_food_order(member, [{'item_id': 'causa', 'quantity': 0}])


class TestFoodOrderDetails:
    """Tests for order annotation."""

    def test_unknown_stored_dish(self):
        """Dishes removed from the menu keep the order readable."""
        from models.food_order import with_details

        order = with_details({'id': 'o', 'items': [{'item_id': 'viejo', 'quantity': 1}]})
        assert order['items'][0]['name'] == 'Plato no encontrado'
        assert order['total'] == 0


class TestFoodOrderStatus:
    """Tests for admin status changes and self-cancellation."""

    def test_admin_any_order_of_statuses(self, app, admin, member):
        from models.food_order import create_food_order, set_food_order_status

        order = create_food_order(member, [{'item_id': 'chairo', 'quantity': 1}])
        for status in ('listo', 'en_preparacion', 'entregado', 'recibido', 'cancelado'):
            assert set_food_order_status(admin, order['id'], status)['status'] == status

    def test_admin_invalid_status(self, app, admin, member):
        from models.food_order import create_food_order, set_food_order_status

        order = create_food_order(member, [{'item_id': 'chairo', 'quantity': 1}])
        with pytest.raises(ValidationError):
            set_food_order_status(admin, order['id'], 'confirmado')

    def test_member_cannot_set_status(self, app, member):
        from models.food_order import create_food_order, set_food_order_status

        order = create_food_order(member, [{'item_id': 'chairo', 'quantity': 1}])
        with pytest.raises(Forbidden):
            set_food_order_status(member, order['id'], 'listo')

    def test_admin_listing(self, app, admin, member):
        from models.food_order import create_food_order, get_all_food_orders

        create_food_order(member, [{'item_id': 'patasca', 'quantity': 2}])
        orders = get_all_food_orders(admin)
        assert orders[0]['user_name'] == 'Rosa Quispe'
        assert orders[0]['total'] == 60.00

        with pytest.raises(Forbidden):
            get_all_food_orders(member)

    def test_self_cancel_received(self, app, member):
        from models.food_order import create_food_order, cancel_own_food_order

        order = create_food_order(member, [{'item_id': 'causa', 'quantity': 1}])
        assert cancel_own_food_order(member, order['id'])['status'] == 'cancelado'

    def test_self_cancel_after_preparation_started(self, app, admin, member):
        from models.food_order import (
            create_food_order, cancel_own_food_order, set_food_order_status
        )

        order = create_food_order(member, [{'item_id': 'causa', 'quantity': 1}])
        set_food_order_status(admin, order['id'], 'en_preparacion')
        with pytest.raises(InvalidTransition):
            cancel_own_food_order(member, order['id'])

    def test_self_cancel_other_member(self, app, member, other_member):
        from models.food_order import create_food_order, cancel_own_food_order

        order = create_food_order(member, [{'item_id': 'causa', 'quantity': 1}])
        with pytest.raises(Forbidden):
            cancel_own_food_order(other_member, order['id'])

    def test_self_cancel_unknown(self, app, member):
        from models.food_order import cancel_own_food_order

        with pytest.raises(NotFound):
            cancel_own_food_order(member, 'no-existe')
