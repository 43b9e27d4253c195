"""Unit tests for the ``seed_data`` management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.customers.models import Customer
from modules.orders.models import Order, OrderLine
from modules.products.models import Category, Product, Review

pytestmark = pytest.mark.unit


def _seed(orders: int = 10) -> str:
    out = StringIO()
    call_command("seed_data", orders=orders, stdout=out)
    return out.getvalue()


class TestSeedData:
    def test_creates_catalog_and_customers(self):
        _seed()

        assert Category.objects.count() == 3
        assert Product.objects.count() == 12
        assert Customer.objects.count() == 6
        assert Review.objects.count() == 12

    def test_places_orders_through_service(self):
        output = _seed(orders=10)

        assert "Seed completed" in output
        assert Order.objects.count() == OrderLine.objects.count()
        assert Order.objects.count() <= 10
        assert all(p.stock_quantity >= 0 for p in Product.objects.all())

    def test_is_idempotent_for_reference_data(self):
        _seed(orders=0)
        _seed(orders=0)

        assert Product.objects.count() == 12
        assert Customer.objects.count() == 6
