import asyncio

import pytest

from dietitian.core.exceptions import EmptyCartError, InvalidStatusTransitionError, ValidationError
from dietitian.services.cart_service import CartService
from dietitian.services.order_service import OrderService, describe_payment


class TestOrderService:
    """订单服务测试"""

    def _checkout(self, db, user, **kwargs):
        return asyncio.run(OrderService(db).checkout(
            user, shipping_address="12 Oxford St, Osu", payment_method="MTN MoMo (0241234567)",
            payment_delay=0, **kwargs))

    def test_checkout_creates_processing_order(self, test_db, demo_user, jollof):
        CartService(test_db).add_item(demo_user.id, jollof, "Standard", "One-time", [])
        CartService(test_db).add_item(demo_user.id, jollof, "Standard", "One-time", [])

        order = self._checkout(test_db, demo_user)

        assert order.status == "Processing"
        assert order.total == pytest.approx(24.0)
        assert order.customer_name == "Kwame Mensah"
        assert order.currency == "GHS"
        assert order.is_subscription is False
        assert len(order.items) == 1
        assert len(order.history) == 1
        assert order.history[0].status == "Processing"
        # 结账后购物车清空
        assert CartService(test_db).get_cart(demo_user.id).items == []

    def test_subscription_flag(self, test_db, demo_user, jollof):
        CartService(test_db).add_item(demo_user.id, jollof, "Standard", "Monthly", [])
        order = self._checkout(test_db, demo_user, currency="USD")
        assert order.is_subscription is True
        assert order.currency == "USD"

    def test_empty_cart_rejected(self, test_db, demo_user):
        with pytest.raises(EmptyCartError):
            self._checkout(test_db, demo_user)

    def test_status_change_appends_one_entry(self, test_db, demo_user, jollof):
        CartService(test_db).add_item(demo_user.id, jollof, "Standard", "One-time", [])
        order = self._checkout(test_db, demo_user)
        placed = order.history[0]

        updated = OrderService(test_db).update_status(order.id, "Preparing", "Kitchen started")
        assert updated.status == "Preparing"
        assert [h.status for h in updated.history] == ["Processing", "Preparing"]
        assert updated.history[-1].note == "Kitchen started"
        # 已有记录不被修改
        assert updated.history[0] == placed
        assert updated.history[0].timestamp == placed.timestamp
        assert updated.history[0].note == "Order placed"

    def test_terminal_and_same_status_rejected(self, test_db, demo_user, jollof):
        CartService(test_db).add_item(demo_user.id, jollof, "Standard", "One-time", [])
        order = self._checkout(test_db, demo_user)
        orders = OrderService(test_db)

        with pytest.raises(InvalidStatusTransitionError):
            orders.update_status(order.id, "Processing")

        orders.update_status(order.id, "Delivered")
        with pytest.raises(InvalidStatusTransitionError):
            orders.update_status(order.id, "Cancelled")
        assert len(orders.get_order(order.id).history) == 2

    def test_list_orders_newest_first(self, test_db, demo_user, jollof):
        carts = CartService(test_db)
        carts.add_item(demo_user.id, jollof, "Standard", "One-time", [])
        first = self._checkout(test_db, demo_user)
        carts.add_item(demo_user.id, jollof, "Large", "One-time", [])
        second = self._checkout(test_db, demo_user)

        ids = [o.id for o in OrderService(test_db).list_orders(demo_user.id)]
        assert ids == [second.id, first.id]
        assert OrderService(test_db).total_revenue() == pytest.approx(12.0 + 18.0)


class TestDescribePayment:
    """支付描述"""

    def test_momo(self):
        assert describe_payment("momo", momo_network="MTN", momo_number="024 123 4567") == "MTN MoMo (0241234567)"

    def test_card_last_four(self):
        assert describe_payment("card", card_number="4111 1111 1111 1234") == "Card ending 1234"

    def test_missing_details(self):
        with pytest.raises(ValidationError):
            describe_payment("momo", momo_network="MTN")
        with pytest.raises(ValidationError):
            describe_payment("card")
