"""Unit tests for the Celery order placement task."""

from __future__ import annotations

from uuid import uuid4

import pytest

from modules.orders.models import Order
from modules.orders.tasks import place_order_task

pytestmark = pytest.mark.unit


class TestPlaceOrderTask:
    def test_success_returns_json_result(self, customer, mango):
        result = place_order_task.delay(
            str(customer.id), str(mango.id), 5, delivery_fee="30.00"
        ).get()

        assert result["error"] is None
        order = Order.objects.get(id=result["order_id"])
        assert str(order.order_amount) == "1035.00"
        assert str(order.delivery_fee) == "30.00"

    def test_failure_kind_is_returned_not_raised(self, customer, low_stock_product):
        result = place_order_task(str(customer.id), str(low_stock_product.id), 5)

        assert result["order_id"] is None
        assert result["error"] == "INSUFFICIENT_STOCK"

    def test_unknown_product(self, customer):
        result = place_order_task(str(customer.id), str(uuid4()), 1)
        assert result["error"] == "PRODUCT_NOT_FOUND"
