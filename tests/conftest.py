from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.customers.models import Customer
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderPlacementService
from modules.products.models import Category, Product, Subcategory
from modules.products.repositories.django_repository import ProductDjangoRepository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username="orders-user", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def customer():
    return Customer.objects.create(
        name="Aarav Sharma",
        email="aarav@example.com",
        age=29,
        city="Bangalore",
        state="Karnataka",
        country="India",
        prime_member=True,
    )


@pytest.fixture()
def subcategory():
    category = Category.objects.create(name="Fruits")
    return Subcategory.objects.create(category=category, name="Fresh Fruits")


@pytest.fixture()
def mango(subcategory):
    """stock=10, price=207, the canonical placement example."""
    return Product.objects.create(
        name="Alphonso Mango (1 kg)",
        subcategory=subcategory,
        price_per_unit=Decimal("207.00"),
        stock_quantity=10,
    )


@pytest.fixture()
def low_stock_product(subcategory):
    return Product.objects.create(
        name="Dragon Fruit (1 pc)",
        subcategory=subcategory,
        price_per_unit=Decimal("119.00"),
        stock_quantity=3,
    )


@pytest.fixture()
def unpriced_product(subcategory):
    return Product.objects.create(
        name="Seasonal Jamun (500 g)",
        subcategory=subcategory,
        price_per_unit=None,
        stock_quantity=40,
    )


@pytest.fixture()
def service():
    return OrderPlacementService(
        order_repository=OrderDjangoRepository(),
        product_repository=ProductDjangoRepository(),
    )


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttle counters live in the cache; start every test from zero."""
    cache.clear()
